from dataclasses import dataclass, field
from typing import Any

from e2e_suite.helpers.generators import (
    generate_fake_product,
    generate_fake_user,
    generate_random_email,
    generate_random_phone,
    generate_random_string,
)


@dataclass(frozen=True)
class User:
    email: str
    password: str
    name: str
    phone: str | None = None
    role: str = "customer"
    permissions: tuple[str, ...] = ("read",)


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    category: str
    brand: str
    price: float
    original_price: float
    quantity: int
    in_stock: bool
    rating: float
    description: str = ""
    sizes: tuple[str, ...] = ()
    colors: tuple[str, ...] = ()


@dataclass(frozen=True)
class CartItem:
    product_id: int
    name: str
    price: float
    quantity: int

    @property
    def total(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True)
class Cart:
    items: tuple[CartItem, ...] = ()
    tax_rate: float = 0.1
    shipping: float = 20

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def subtotal(self) -> float:
        return sum(item.total for item in self.items)

    @property
    def tax(self) -> float:
        return round(self.subtotal * self.tax_rate, 2)

    @property
    def total(self) -> float:
        if self.is_empty:
            return 0
        return self.subtotal + self.tax + self.shipping


@dataclass(frozen=True)
class Address:
    street: str
    district: str
    city: str
    zip_code: str
    country: str


@dataclass(frozen=True)
class Payment:
    method: str
    card_number: str
    expiry_date: str
    cvv: str
    card_holder: str


@dataclass(frozen=True)
class Order:
    customer_name: str
    customer_email: str
    customer_phone: str
    address: Address
    payment: Payment
    cart: Cart
    shipping_method: str = "standard"


@dataclass(frozen=True)
class FileFixture:
    name: str
    mime_type: str
    size: int
    content: str = ""


@dataclass(frozen=True)
class PerformanceThresholds:
    page_load_time: int = 3000
    api_response_time: int = 1000
    render_time: int = 500
    interaction_time: int = 100


@dataclass(frozen=True)
class LoadScenario:
    users: int
    duration: int
    ramp_up: int


USERS = {
    "valid": User(
        email="valid.user@example.com",
        password="ValidPassword123!",
        name="Nguyen Van A",
        phone="+84901234567",
    ),
    "invalid": User(email="invalid@example.com", password="wrongpass", name="User Invalid"),
    "admin": User(
        email="admin@example.com",
        password="AdminPass123!",
        name="Admin User",
        role="admin",
        permissions=("read", "write", "delete"),
    ),
    "guest": User(email="guest@example.com", password="GuestPass123!", name="Guest User", role="guest"),
}

PRODUCTS = {
    "electronics": (
        Product(1, "iPhone 15 Pro", "Electronics", "Apple", 1000, 1200, 2, True, 4.8, "Latest iPhone"),
        Product(2, "Samsung Galaxy S24", "Electronics", "Samsung", 800, 900, 1, True, 4.6, "Flagship smartphone"),
        Product(3, "MacBook Pro M3", "Electronics", "Apple", 2000, 2200, 1, False, 4.9, "Laptop with M3 chip"),
    ),
    "clothing": (
        Product(
            id=4,
            name="Nike Air Force 1",
            category="Clothing",
            brand="Nike",
            price=120,
            original_price=150,
            quantity=1,
            in_stock=True,
            rating=4.5,
            sizes=("US 8", "US 9", "US 10"),
            colors=("White", "Black", "Red"),
        ),
        Product(
            id=5,
            name="Adidas Hoodie",
            category="Clothing",
            brand="Adidas",
            price=80,
            original_price=100,
            quantity=2,
            in_stock=True,
            rating=4.3,
            sizes=("S", "M", "L", "XL"),
            colors=("Black", "Grey", "Navy"),
        ),
    ),
}

CARTS = {
    "empty": Cart(),
    "single_item": Cart(items=(CartItem(1, "iPhone 15 Pro", 1000, 1),)),
    "multiple_items": Cart(items=(CartItem(1, "iPhone 15 Pro", 1000, 2), CartItem(2, "Samsung Galaxy S24", 800, 1))),
}

ORDERS = {
    "valid": Order(
        customer_name="Nguyen Van A",
        customer_email="customer@example.com",
        customer_phone="+84901234567",
        address=Address("123 ABC Street", "District 1", "Ho Chi Minh City", "70000", "Vietnam"),
        payment=Payment("credit_card", "4111111111111111", "12/30", "123", "NGUYEN VAN A"),
        cart=CARTS["single_item"],
    ),
    "invalid": Order(
        customer_name="",
        customer_email="invalid-email",
        customer_phone="123",
        address=Address("", "", "", "", ""),
        payment=Payment("credit_card", "1234", "13/99", "12", ""),
        cart=CARTS["empty"],
    ),
}

FORM_VALIDATION: dict[str, dict[str, Any]] = {
    "valid_inputs": {
        "email": "test@example.com",
        "password": "SecurePass123!",
        "confirm_password": "SecurePass123!",
        "name": "Nguyen Van A",
        "phone": "+84901234567",
        "website": "https://example.com",
    },
    "invalid_inputs": {
        "email": ("invalid-email", "test@", "@example.com", "test.example.com", ""),
        "password": ("123", "password", "PASSWORD", "12345678", ""),
        "phone": ("123", "not-a-phone", "+84-invalid", ""),
        "website": ("not-a-url", "http://", "example", ""),
    },
}

SEARCH = {
    "valid_queries": ("iPhone", "Samsung", "laptop", "phone", "electronics"),
    "invalid_queries": ("", "   ", "xyznotfound", "!@#$%^&*()", "a" * 1000),
    "special_queries": ("iPhone 15", "price:100-500", '"exact phrase"', "brand:Apple", "Samsung OR iPhone"),
}

API_ENDPOINTS = {
    "auth": {"login": "/api/auth/login", "logout": "/api/auth/logout", "refresh": "/api/auth/refresh"},
    "users": {"list": "/api/users", "get": "/api/users/:id"},
    "products": {"list": "/api/products", "get": "/api/products/:id", "search": "/api/products/search"},
}

FILES = {
    "text": FileFixture("test.txt", "text/plain", 27, "This is a test file content"),
    "image": FileFixture("test.jpg", "image/jpeg", 1024, "fake-image-data"),
    "document": FileFixture("test.pdf", "application/pdf", 2048, "fake-pdf-data"),
    "too_large": FileFixture("large.txt", "text/plain", 10_000_000),
    "invalid_type": FileFixture("malware.exe", "application/x-executable", 1024, "fake-executable-data"),
    "empty": FileFixture("empty.txt", "text/plain", 0),
}

PERFORMANCE = {
    "thresholds": PerformanceThresholds(),
    "light": LoadScenario(users=10, duration=60, ramp_up=10),
    "medium": LoadScenario(users=50, duration=300, ramp_up=30),
    "heavy": LoadScenario(users=200, duration=600, ramp_up=60),
}

_CATALOGUE: dict[str, dict[str, Any]] = {
    "users": USERS,
    "products": PRODUCTS,
    "shopping_cart": CARTS,
    "orders": ORDERS,
    "form_validation": FORM_VALIDATION,
    "search": SEARCH,
    "api": API_ENDPOINTS,
    "files": FILES,
    "performance": PERFORMANCE,
}


def get_data(category: str, key: str | None = None) -> Any:
    try:
        category_data = _CATALOGUE[category]
    except KeyError:
        raise LookupError(f"Test data category '{category}' not found") from None

    if key is None:
        return category_data

    try:
        return category_data[key]
    except KeyError:
        raise LookupError(f"Test data key '{key}' not found in category '{category}'") from None


def generate_data(kind: str, **options: Any) -> Any:
    match kind:
        case "user":
            return generate_fake_user()
        case "product":
            return generate_fake_product()
        case "email":
            return generate_random_email(**options)
        case "phone":
            return generate_random_phone(**options)
        case "string":
            return generate_random_string(**options)

    raise ValueError(f"Unknown data type: {kind}")
