from dataclasses import dataclass
from typing import ClassVar

from playwright.sync_api import Page, ViewportSize

from e2e_suite.data.urls import PLAYWRIGHT_URL
from e2e_suite.pages.base import DEFAULT_TIMEOUT, MAXIMIZED_VIEWPORT, BasePage


@dataclass(frozen=True)
class Feature:
    title: str
    description: str


@dataclass(frozen=True)
class MainSections:
    hero: bool
    features: bool


class PlaywrightHomePage(BasePage):
    selectors: ClassVar[dict[str, str]] = {
        "get_started_button": "text=Get started",
        "docs_menu": "nav >> text=Docs",
        "api_menu": "nav >> text=API",
        "installation_heading": 'role=heading[name="Installation"]',
        "search_input": '[placeholder*="Search"]',
        "navigation_menu": "nav",
        "hero_section": ".hero",
        "features_list": ".features",
    }

    def __init__(
        self,
        page: Page,
        domain: str = PLAYWRIGHT_URL,
        timeout: int = DEFAULT_TIMEOUT,
        viewport: ViewportSize = MAXIMIZED_VIEWPORT,
    ) -> None:
        super().__init__(page, domain, timeout, viewport)

    def navigate(self) -> "PlaywrightHomePage":
        self.goto(self.domain)
        self.wait_for_page_load()
        return self

    def click_get_started(self) -> None:
        self.click_element("get_started_button")

    def is_get_started_visible(self) -> bool:
        return self.is_element_visible("get_started_button")

    def click_docs_menu(self) -> None:
        self.click_element("docs_menu")

    def is_docs_menu_visible(self) -> bool:
        return self.is_element_visible("docs_menu")

    def click_api_menu(self) -> None:
        self.click_element("api_menu")

    def is_api_menu_visible(self) -> bool:
        return self.is_element_visible("api_menu")

    def is_installation_heading_visible(self) -> bool:
        return self.is_element_visible("installation_heading")

    def get_title(self) -> str:
        return self.get_page_title()

    def search(self, term: str) -> None:
        if self.is_element_visible("search_input"):
            self.fill_input("search_input", term)
            self.press_key("Enter", "search_input")

    def get_navigation_menu_items(self) -> list[str]:
        texts = (item.text_content() or "" for item in self.page.locator(f"{self.selectors['navigation_menu']} a").all())
        return [text.strip() for text in texts if text.strip()]

    def check_main_sections(self) -> MainSections:
        return MainSections(
            hero=self.is_element_visible("hero_section"),
            features=self.is_element_visible("features_list"),
        )

    def scroll_to_features(self) -> None:
        if self.is_element_visible("features_list"):
            self.scroll_to_element("features_list")

    def get_features_list(self) -> list[Feature]:
        if not self.is_element_visible("features_list"):
            return []

        features = []
        for feature in self.page.locator(f"{self.selectors['features_list']} .feature").all():
            title = feature.locator("h3, .title").first.text_content() or ""
            description = feature.locator("p, .description").first.text_content() or ""
            features.append(Feature(title=title.strip(), description=description.strip()))
        return features
