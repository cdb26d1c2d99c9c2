"""Lookup tables that let the English and Japanese step definitions share one implementation.

Gherkin sentences differ per language, so each language keeps its own step module, but the vocabulary those
sentences carry (field labels, page names and data placeholders) is translated here into the names the page objects
understand.
"""

from e2e_suite.helpers.generators import ContactDetails
from e2e_suite.types import Language

CONTACT_FIELDS: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "name": "name",
        "email": "email",
        "subject": "subject",
        "message": "message",
    },
    Language.JAPANESE: {
        "名前": "name",
        "メール": "email",
        "件名": "subject",
        "メッセージ": "message",
    },
}

PLACEHOLDERS: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "{generated_name}": "name",
        "{generated_email}": "email",
        "{generated_subject}": "subject",
        "{generated_message}": "message",
    },
    Language.JAPANESE: {
        "{生成された名前}": "name",
        "{生成されたメール}": "email",
        "{生成された件名}": "subject",
        "{生成されたメッセージ}": "message",
    },
}

PAGE_PATHS: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "homepage": "/",
        "contact us": "/contact_us",
        "login": "/login",
        "signup": "/signup",
        "products": "/products",
        "cart": "/view_cart",
    },
    Language.JAPANESE: {
        "ホームページ": "/",
        "お問い合わせ": "/contact_us",
        "ログイン": "/login",
        "サインアップ": "/signup",
        "商品": "/products",
        "カート": "/view_cart",
    },
}


def resolve_field(language: Language, label: str) -> str:
    fields = CONTACT_FIELDS[language]
    key = label.strip() if language == Language.JAPANESE else label.strip().lower()
    try:
        return fields[key]
    except KeyError:
        raise LookupError(f"Unknown contact form field: {label}") from None


def page_url(language: Language, base_url: str, page_name: str) -> str:
    paths = PAGE_PATHS[language]
    key = page_name.strip() if language == Language.JAPANESE else page_name.strip().lower()
    try:
        path = paths[key]
    except KeyError:
        raise LookupError(f"Unknown page: {page_name}") from None
    return f"{base_url.rstrip('/')}{path}"


def fill_placeholders(language: Language, value: str, details: ContactDetails | None) -> str:
    for placeholder, attribute in PLACEHOLDERS[language].items():
        if placeholder in value:
            if details is None:
                raise LookupError(f"{placeholder} used before any test data was generated")
            value = value.replace(placeholder, getattr(details, attribute))
    return value


def contact_details_from_table(
    language: Language, datatable: list[list[str]], generated: ContactDetails | None = None
) -> ContactDetails:
    """Build form values from a two-column `| field | value |` table, substituting generated placeholders.

    Fields missing from the table are left blank.
    """
    values = {"name": "", "email": "", "subject": "", "message": ""}
    for row in datatable:
        label, value = row[0], row[1] if len(row) > 1 else ""
        values[resolve_field(language, label)] = fill_placeholders(language, value, generated)
    return ContactDetails(**values)
