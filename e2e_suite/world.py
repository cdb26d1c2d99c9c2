import random
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any

from playwright.sync_api import Page, ViewportSize

from e2e_suite.config import _SharedConfig
from e2e_suite.helpers.generators import ContactDetails, TestDataGenerator
from e2e_suite.helpers.utils import slugify
from e2e_suite.logging import logger
from e2e_suite.pages.automation_exercise import ContactPage, HomePage
from e2e_suite.pages.base import MAXIMIZED_VIEWPORT, BasePage
from e2e_suite.types import Language

JAPANESE_LOCALE = "ja-JP"
JAPANESE_TIMEZONE = "Asia/Tokyo"
JAPANESE_ACCEPT_LANGUAGE = "ja-JP,ja;q=0.9,en;q=0.8"

JAPANESE_NAMES = (
    "田中太郎",
    "佐藤花子",
    "鈴木一郎",
    "高橋美穂",
    "伊藤健太",
    "渡辺さくら",
    "山本直樹",
    "中村愛",
    "小林大輔",
    "加藤みどり",
)
JAPANESE_WEEKDAYS = ("月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日", "日曜日")

_JAPANESE_CHARACTERS = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]")

# Era name and the first day of that era, newest first.
_JAPANESE_ERAS = (
    ("令和", date(2019, 5, 1)),
    ("平成", date(1989, 1, 8)),
    ("昭和", date(1926, 12, 25)),
)


def browser_context_options(language: Language) -> dict[str, Any]:
    """Keyword arguments for `Browser.new_context` for scenarios written in `language`."""
    options: dict[str, Any] = {"ignore_https_errors": True, "accept_downloads": True}
    if language == Language.JAPANESE:
        options |= {
            "locale": JAPANESE_LOCALE,
            "timezone_id": JAPANESE_TIMEZONE,
            "extra_http_headers": {"Accept-Language": JAPANESE_ACCEPT_LANGUAGE},
        }
    return options


def apply_browser_settings(option: Any, settings: _SharedConfig) -> None:
    """Fill in pytest-playwright's command line options from `settings`, leaving anything given explicitly alone."""
    if not option.browser:
        option.browser = [settings.BROWSER.engine]
        option.browser_channel = option.browser_channel or settings.BROWSER.channel
    if settings.HEADED:
        option.headed = True
    if settings.VIDEOS and option.video == "off":
        option.video = "retain-on-failure"
    if settings.TRACE and option.tracing == "off":
        option.tracing = "retain-on-failure"


def contains_japanese(text: str) -> bool:
    return bool(_JAPANESE_CHARACTERS.search(text))


def format_japanese_date(value: date) -> str:
    """e.g. 令和6年10月19日土曜日; the first year of an era is written 元年."""
    for era, start in _JAPANESE_ERAS:
        if value >= start:
            year = value.year - start.year + 1
            year_text = "元" if year == 1 else str(year)
            return f"{era}{year_text}年{value.month}月{value.day}日{JAPANESE_WEEKDAYS[value.weekday()]}"
    raise ValueError(f"Dates before {_JAPANESE_ERAS[-1][1]} are not supported")


@dataclass
class ScenarioWorld:
    """Everything a single scenario's steps share. Created per test by the `world` fixture and discarded after."""

    page: Page
    settings: _SharedConfig
    language: Language = Language.ENGLISH
    scenario_name: str = ""
    viewport: ViewportSize = field(default_factory=lambda: ViewportSize(**MAXIMIZED_VIEWPORT))
    element_timeout: int | None = None
    test_data: ContactDetails | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        self.timeout = self.element_timeout or self.settings.ELEMENT_TIMEOUT
        self.base_page = BasePage(self.page, self.base_url, self.timeout, self.viewport)
        self.home_page = HomePage(self.page, self.base_url, self.timeout, self.viewport)
        self.contact_page = ContactPage(self.page, self.base_url, self.timeout, self.viewport)
        self.generator = TestDataGenerator(self.language)
        self.page.set_default_timeout(self.settings.TIMEOUT)
        self.page.set_default_navigation_timeout(self.settings.TIMEOUT)

    @property
    def base_url(self) -> str:
        return self.settings.BASE_URL.rstrip("/")

    def generate_test_data(self) -> ContactDetails:
        self.test_data = self.generator.generate_contact_details()
        return self.test_data

    def navigate(self, url: str) -> None:
        self.base_page.goto(url).wait_for_page_load()

    def wait_for_page_load(self) -> None:
        self.base_page.wait_for_page_load()

    def screenshot_path(self, name: str) -> Path:
        timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
        return Path(self.settings.SCREENSHOTS_DIR) / f"cucumber-{slugify(name)}-{timestamp}.png"

    def take_screenshot(self, name: str = "screenshot") -> Path:
        path = self.screenshot_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=path, full_page=True)
        logger.info("Screenshot saved: %(path)s", {"path": str(path)})
        return path

    def record_error(self, message: str) -> None:
        logger.error("%(scenario)s: %(message)s", {"scenario": self.scenario_name, "message": message})
        self.errors.append(message)

    def record_warning(self, message: str) -> None:
        logger.warning("%(scenario)s: %(message)s", {"scenario": self.scenario_name, "message": message})
        self.warnings.append(message)


@dataclass
class JapaneseScenarioWorld(ScenarioWorld):
    language: Language = Language.JAPANESE

    def generate_test_data(self) -> ContactDetails:
        self.test_data = ContactDetails(
            name=self.generator.generate_unique_name(random.choice(JAPANESE_NAMES)),
            email=self.generator.generate_unique_email(),
            subject=self.generator.generate_unique_subject("日本語テスト"),
            message=self.generator.generate_unique_message("日本語でのテストメッセージです。"),
        )
        return self.test_data

    def screenshot_path(self, name: str) -> Path:
        timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
        return Path(self.settings.SCREENSHOTS_DIR) / f"cucumber-jp-{slugify(name)}-{timestamp}.png"

    def set_japanese_input(self, selector: str, text: str) -> None:
        """Type text key by key so that input handlers see the same events an IME commit produces."""
        locator = self.page.locator(selector).first
        locator.clear(timeout=self.timeout)
        locator.press_sequentially(text, timeout=self.timeout)


def build_world(page: Page, settings: _SharedConfig, language: Language, **kwargs: Any) -> ScenarioWorld:
    world_class = JapaneseScenarioWorld if language == Language.JAPANESE else ScenarioWorld
    return world_class(page=page, settings=settings, language=language, **kwargs)
