import itertools
import random
import string
import time
from dataclasses import dataclass, field
from typing import Any

from faker import Faker

from e2e_suite.types import Language

_sequence = itertools.count(1)


@dataclass(frozen=True)
class ContactDetails:
    name: str
    email: str
    subject: str
    message: str


@dataclass(frozen=True)
class FakeUser:
    first_name: str
    last_name: str
    email: str
    phone: str
    password: str
    address: dict[str, str] = field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class FakeProduct:
    name: str
    price: float
    description: str
    category: str
    sku: str
    in_stock: bool


def _unique_suffix() -> str:
    # The random component separates parallel workers that start in the same millisecond.
    return f"{int(time.time() * 1000)}{next(_sequence)}.{random.randint(0, 999)}"


class TestDataGenerator:
    """Generates values that are unique per call, so that repeated runs against a shared site never collide."""

    __test__ = False

    def __init__(self, language: Language = Language.ENGLISH, faker: Faker | None = None) -> None:
        self.language = language
        self.faker = faker or Faker("ja_JP" if language == Language.JAPANESE else "en_GB")

    def generate_unique_name(self, base_name: str | None = None) -> str:
        return f"{base_name or self.faker.name()} {_unique_suffix()}"

    def generate_unique_email(self, base_email: str = "john.doe", domain: str = "example.com") -> str:
        return f"{base_email}.{_unique_suffix()}@{domain}"

    def generate_unique_subject(self, base_subject: str | None = None) -> str:
        if base_subject is None:
            base_subject = "日本語テスト" if self.language == Language.JAPANESE else "Test Subject"
        return f"{base_subject} - {_unique_suffix()}"

    def generate_unique_message(self, base_message: str | None = None) -> str:
        if base_message is None:
            base_message = (
                "日本語でのテストメッセージです。"
                if self.language == Language.JAPANESE
                else "This is an automated test message."
            )
        return f"{base_message} Reference: {_unique_suffix()}"

    def generate_unique_phone(self, prefix: str = "+84") -> str:
        return f"{prefix}{int(time.time() * 1000) % 1_000_000:06d}{random.randint(100, 999)}"

    def generate_unique_username(self, base_username: str = "user") -> str:
        return f"{base_username}_{_unique_suffix().replace('.', '_')}"

    def generate_unique_password(self, length: int = 12) -> str:
        if length < 4:
            raise ValueError("Password length must be at least 4")

        # One of each character class, the rest from the whole alphabet.
        chars = [
            random.choice(string.ascii_uppercase),
            random.choice(string.ascii_lowercase),
            random.choice(string.digits),
            random.choice("!@#$%^&*"),
        ]
        chars += random.choices(string.ascii_letters + string.digits + "!@#$%^&*", k=length - len(chars))
        random.shuffle(chars)
        return "".join(chars)

    def generate_unique_company(self, base_company: str | None = None) -> str:
        return f"{base_company or self.faker.company()} {_unique_suffix()}"

    def generate_unique_address(self) -> str:
        return f"{self.faker.street_address()} (ref {_unique_suffix()})"

    def generate_unique_city(self) -> str:
        return f"{self.faker.city()} {random.randint(0, 999)}"

    def generate_contact_details(self) -> ContactDetails:
        return ContactDetails(
            name=self.generate_unique_name(),
            email=self.generate_unique_email(),
            subject=self.generate_unique_subject(),
            message=self.generate_unique_message(),
        )


def generate_random_string(length: int = 10, alphabet: str = string.ascii_letters + string.digits) -> str:
    return "".join(random.choices(alphabet, k=length))


def generate_random_email(domain: str = "test.com") -> str:
    return f"test_{generate_random_string(8).lower()}@{domain}"


def generate_random_phone(country_code: str = "+84") -> str:
    return f"{country_code}{random.randint(100_000_000, 999_999_999)}"


def generate_fake_user(faker: Faker | None = None) -> FakeUser:
    faker = faker or Faker("en_GB")
    first_name = faker.first_name()
    last_name = faker.last_name()
    return FakeUser(
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name}.{last_name}.{generate_random_string(4)}@test.com".lower(),
        phone=generate_random_phone(),
        password=TestDataGenerator(faker=faker).generate_unique_password(),
        address={
            "street": faker.street_address(),
            "city": faker.city(),
            "postcode": faker.postcode(),
            "country": faker.country(),
        },
    )


def generate_fake_product(faker: Faker | None = None) -> FakeProduct:
    faker = faker or Faker("en_GB")
    return FakeProduct(
        name=faker.catch_phrase(),
        price=round(random.uniform(1, 1000), 2),
        description=faker.sentence(),
        category=random.choice(["electronics", "clothing", "books", "home"]),
        sku=f"SKU-{generate_random_string(8).upper()}",
        in_stock=random.random() > 0.2,
    )


def generate_test_data(scenario: str) -> dict[str, Any]:
    """Canned login/registration inputs for a named validation scenario."""
    match scenario:
        case "valid_user":
            user = generate_fake_user()
            return {
                "name": user.full_name,
                "email": user.email,
                "password": user.password,
                "phone": user.phone,
            }
        case "invalid_email":
            return {"name": "Test User", "email": "invalid-email", "password": "Password123!"}
        case "weak_password":
            return {"name": "Test User", "email": generate_random_email(), "password": "123"}
        case "empty_data":
            return {"name": "", "email": "", "password": ""}

    raise ValueError(f"Unknown test data scenario: {scenario}")
