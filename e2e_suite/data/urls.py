from enum import Enum
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

AUTOMATION_EXERCISE_URL = "https://automationexercise.com"
PLAYWRIGHT_URL = "https://playwright.dev/"
TODOMVC_URL = "https://demo.playwright.dev/todomvc"

# Keyed by `e2e_suite.config.Environment` value.
BASE_URLS: dict[str, str] = {
    "local": "http://localhost:3000",
    "dev": "https://dev.automationexercise.com",
    "staging": "https://staging.automationexercise.com",
    "prod": AUTOMATION_EXERCISE_URL,
}

DEMO_URLS = {
    "playwright": PLAYWRIGHT_URL,
    "todomvc": TODOMVC_URL,
    "automation_exercise": AUTOMATION_EXERCISE_URL,
    "file_upload": "https://the-internet.herokuapp.com/upload",
    "file_download": "https://the-internet.herokuapp.com/download",
    "login": "https://the-internet.herokuapp.com/login",
    "drag_and_drop": "https://the-internet.herokuapp.com/drag_and_drop",
    "dropdown": "https://the-internet.herokuapp.com/dropdown",
    "checkboxes": "https://the-internet.herokuapp.com/checkboxes",
    "frames": "https://the-internet.herokuapp.com/frames",
    "tables": "https://the-internet.herokuapp.com/tables",
}

API_URLS = {
    "json_placeholder": {
        "base": "https://jsonplaceholder.typicode.com",
        "posts": "https://jsonplaceholder.typicode.com/posts",
        "users": "https://jsonplaceholder.typicode.com/users",
        "comments": "https://jsonplaceholder.typicode.com/comments",
    },
    "rest_countries": {
        "base": "https://restcountries.com/v3.1",
        "all": "https://restcountries.com/v3.1/all",
        "by_name": "https://restcountries.com/v3.1/name",
    },
}

ECOMMERCE_PATHS = {
    "home": "/",
    "products": "/products",
    "product_detail": "/product_details/:id",
    "cart": "/view_cart",
    "checkout": "/checkout",
    "contact_us": "/contact_us",
    "search": "/products?search=:query",
}

AUTH_PATHS = {
    "login": "/login",
    "signup": "/signup",
    "logout": "/logout",
    "delete_account": "/delete_account",
}

ADMIN_PATHS = {
    "dashboard": "/admin/dashboard",
    "users": "/admin/users",
    "products": "/admin/products",
    "orders": "/admin/orders",
    "reports": "/admin/reports",
}

_CATEGORIES: dict[str, dict[str, str]] = {
    "demo": DEMO_URLS,
    "ecommerce": ECOMMERCE_PATHS,
    "auth": AUTH_PATHS,
    "admin": ADMIN_PATHS,
}


def _base_url(environment: str | Enum) -> str:
    try:
        return BASE_URLS[environment.value if isinstance(environment, Enum) else environment]
    except KeyError:
        raise LookupError(f"Unknown environment: {environment}") from None


def get_url(environment: str | Enum, path: str = "") -> str:
    return f"{_base_url(environment)}{path}"


def get_demo_url(page: str) -> str:
    try:
        return DEMO_URLS[page]
    except KeyError:
        raise LookupError(f"Unknown demo page: {page}") from None


def get_api_url(service: str, endpoint: str = "") -> str:
    try:
        base = API_URLS[service]["base"]
    except KeyError:
        raise LookupError(f"Unknown API service: {service}") from None
    return f"{base}{endpoint}"


def build_url(template: str, params: dict[str, str | int] | None = None) -> str:
    """Replace ``:name`` placeholders in ``template`` with URL-encoded values from ``params``."""
    url = template
    for key, value in (params or {}).items():
        url = url.replace(f":{key}", quote(str(value), safe=""))
    return url


def add_query_params(url: str, params: dict[str, str | int]) -> str:
    parts = urlsplit(url)
    query = dict(parse_qsl(parts.query))
    query.update({key: str(value) for key, value in params.items()})
    return urlunsplit(parts._replace(query=urlencode(query)))


def is_valid_url(url: str) -> bool:
    parts = urlsplit(url)
    return bool(parts.scheme and parts.netloc)


def get_category(category: str) -> dict[str, str]:
    try:
        return dict(_CATEGORIES[category])
    except KeyError:
        raise LookupError(f"Unknown URL category: {category}") from None


def get_environment_urls(environment: str | Enum) -> dict[str, str | dict[str, str]]:
    base_url = _base_url(environment)
    urls: dict[str, str | dict[str, str]] = {"base": base_url}
    for category in ("ecommerce", "auth", "admin"):
        urls[category] = {key: f"{base_url}{path}" for key, path in _CATEGORIES[category].items()}
    return urls
