import os
import platform
import re
import sys
import time
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any, TypeVar

from e2e_suite.logging import logger

T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]{10,}$")
PRICE_PATTERN = re.compile(r"\d[\d.,]*")


def parse_price(price_text: str | None) -> float:
    """Turn displayed prices such as ``"$1,234.56"``, ``"Rs. 500"`` or ``"12,50 €"`` into a float.

    Only the first run of digits and separators is read, so the dot in a prefix like ``"Rs."`` is ignored. When both
    separators are present commas are treated as thousands separators; a lone comma followed by one or two digits is
    treated as the decimal separator. Anything unparseable is 0.
    """
    if not price_text:
        return 0

    match = PRICE_PATTERN.search(price_text)
    if match is None:
        return 0

    cleaned = match.group().rstrip(".,")
    if "," in cleaned and "." in cleaned:
        cleaned = cleaned.replace(",", "")
    elif re.fullmatch(r"\d+,\d{1,2}", cleaned):
        cleaned = cleaned.replace(",", ".")
    else:
        cleaned = cleaned.replace(",", "")

    try:
        return float(cleaned)
    except ValueError:
        return 0


def format_currency(amount: float, currency: str = "USD") -> str:
    symbols = {"USD": "$", "GBP": "£", "EUR": "€", "JPY": "¥", "VND": "₫", "INR": "Rs. "}
    if currency in {"JPY", "VND"}:
        return f"{symbols[currency]}{amount:,.0f}"
    return f"{symbols.get(currency, currency + ' ')}{amount:,.2f}"


def retry(fn: Callable[[], T], max_attempts: int = 3, delay: float = 1.0) -> T:
    """Call ``fn`` until it succeeds, sleeping ``delay`` seconds between attempts; re-raises the last failure."""
    for attempt in range(1, max_attempts + 1):
        try:
            return fn()
        except Exception as e:
            if attempt == max_attempts:
                raise
            logger.warning(
                "Attempt %(attempt)s/%(max_attempts)s failed: %(error)s",
                {"attempt": attempt, "max_attempts": max_attempts, "error": str(e)},
            )
            time.sleep(delay)

    raise ValueError("max_attempts must be at least 1")


def get_timestamp(now: datetime | None = None) -> str:
    return (now or datetime.now()).strftime("%Y-%m-%d_%H-%M-%S")


def compare_objects(
    actual: Mapping[str, Any], expected: Mapping[str, Any], ignore_keys: Iterable[str] = ()
) -> list[str]:
    """Return a human readable line for every key whose value differs, or an empty list if they match."""
    ignored = set(ignore_keys)
    differences = []
    for key in sorted((set(actual) | set(expected)) - ignored):
        if key not in actual:
            differences.append(f"{key}: missing from actual")
        elif key not in expected:
            differences.append(f"{key}: unexpected in actual")
        elif actual[key] != expected[key]:
            differences.append(f"{key}: expected {expected[key]!r}, got {actual[key]!r}")
    return differences


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def is_valid_phone(phone: str) -> bool:
    return bool(PHONE_PATTERN.match(phone))


def slugify(text: str) -> str:
    return re.sub(r"\W+", "-", text.lower()).strip("-")


def create_screenshot_filename(test_name: str, browser: str, status: str, now: datetime | None = None) -> str:
    return f"{slugify(test_name)}-{browser}-{status}-{get_timestamp(now)}.png"


def create_environment_info() -> dict[str, str | int]:
    return {
        "platform": platform.system(),
        "platform_release": platform.release(),
        "architecture": platform.machine(),
        "python_version": sys.version.split()[0],
        "cpu_count": os.cpu_count() or 1,
        "ci": "yes" if os.getenv("CI") else "no",
        "timestamp": datetime.now().isoformat(timespec="seconds"),
    }
