from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Self

from playwright.sync_api import Dialog, Error, Locator, Page, ViewportSize

from e2e_suite.logging import logger

DEFAULT_TIMEOUT = 30_000
MAXIMIZED_VIEWPORT = ViewportSize(width=1920, height=1080)


@dataclass
class DialogRecord:
    """Filled in when a dialog registered through `BasePage.accept_dialog` is shown and accepted."""

    expected_message: str | None = None
    message: str | None = None

    @property
    def appeared(self) -> bool:
        return self.message is not None

    def verify(self) -> str:
        if self.message is None:
            raise AssertionError("Expected a dialog to appear, but none did")
        if self.expected_message and self.expected_message not in self.message:
            raise AssertionError(
                f'Expected dialog message to contain "{self.expected_message}", but got "{self.message}"'
            )
        return self.message


class BasePage:
    """Wait-then-act wrappers over a Playwright page.

    Every interaction first waits for its selector to satisfy the required state within `timeout` milliseconds. A
    selector that never gets there raises `playwright.sync_api.TimeoutError`; nothing is retried here.
    """

    selectors: ClassVar[dict[str, str]] = {}

    domain: str
    page: Page

    def __init__(
        self,
        page: Page,
        domain: str = "",
        timeout: int = DEFAULT_TIMEOUT,
        viewport: ViewportSize = MAXIMIZED_VIEWPORT,
    ) -> None:
        self.page = page
        self.domain = domain
        self.timeout = timeout
        self.viewport = viewport

    def locator(self, selector: str) -> Locator:
        return self.page.locator(self.selectors.get(selector, selector))

    def goto(self, url: str) -> Self:
        self.maximize_window()
        logger.info("Navigating to %(url)s", {"url": url})
        self.page.goto(url, timeout=self.timeout * 2)
        return self

    def maximize_window(self) -> Self:
        if self.page.viewport_size != self.viewport:
            self.page.set_viewport_size(self.viewport)
        return self

    def wait_for_element(self, selector: str, timeout: int | None = None) -> Locator:
        locator = self.locator(selector).first
        locator.wait_for(state="attached", timeout=timeout or self.timeout)
        return locator

    def wait_for_element_visible(self, selector: str, timeout: int | None = None) -> Locator:
        locator = self.locator(selector).first
        locator.wait_for(state="visible", timeout=timeout or self.timeout)
        return locator

    def wait_for_element_hidden(self, selector: str, timeout: int | None = None) -> None:
        self.locator(selector).first.wait_for(state="hidden", timeout=timeout or self.timeout)

    def wait_for_text(self, text: str, timeout: int | None = None) -> Locator:
        locator = self.page.get_by_text(text).first
        locator.wait_for(state="visible", timeout=timeout or self.timeout)
        return locator

    def wait_for_page_load(self) -> Self:
        self.page.wait_for_load_state("load", timeout=self.timeout)
        self.page.wait_for_load_state("domcontentloaded", timeout=self.timeout)
        try:
            self.page.wait_for_load_state("networkidle", timeout=self.timeout)
        except Error:
            # Third-party ads on the demo sites can keep the network busy indefinitely.
            logger.warning("Network did not go idle on %(url)s", {"url": self.page.url})
        return self

    def get_element_text(self, selector: str) -> str:
        return (self.wait_for_element_visible(selector).text_content() or "").strip()

    def get_element_tooltip(self, selector: str) -> str:
        """The browser's HTML5 constraint-validation message for a form control, empty if it is valid."""
        return str(self.wait_for_element(selector).evaluate("element => element.validationMessage"))

    def get_element_attribute(self, selector: str, name: str) -> str | None:
        return self.wait_for_element(selector).get_attribute(name)

    def click_element(self, selector: str) -> Self:
        self.wait_for_element_visible(selector).click(timeout=self.timeout)
        return self

    def click_element_with_position(self, selector: str, x: float, y: float) -> Self:
        self.wait_for_element_visible(selector).click(position={"x": x, "y": y}, timeout=self.timeout)
        return self

    def fill_input(self, selector: str, value: str) -> Self:
        self.wait_for_element_visible(selector).fill(value, timeout=self.timeout)
        return self

    def clear_input(self, selector: str) -> Self:
        self.wait_for_element_visible(selector).clear(timeout=self.timeout)
        return self

    def press_key(self, key: str, selector: str | None = None) -> Self:
        if selector:
            self.wait_for_element_visible(selector).press(key, timeout=self.timeout)
        else:
            self.page.keyboard.press(key)
        return self

    def is_element_visible(self, selector: str) -> bool:
        return self.locator(selector).first.is_visible()

    def get_page_title(self) -> str:
        return self.page.title()

    def get_current_url(self) -> str:
        return self.page.url

    def take_screenshot(self, path: str | Path, full_page: bool = False) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=path, full_page=full_page)
        logger.info("Screenshot saved to %(path)s", {"path": str(path)})
        return path

    def scroll_to_element(self, selector: str) -> Self:
        self.wait_for_element(selector).scroll_into_view_if_needed(timeout=self.timeout)
        return self

    def get_element_count(self, selector: str) -> int:
        return self.locator(selector).count()

    def hover_element(self, selector: str) -> Self:
        self.wait_for_element_visible(selector).hover(timeout=self.timeout)
        return self

    def double_click_element(self, selector: str) -> Self:
        self.wait_for_element_visible(selector).dblclick(timeout=self.timeout)
        return self

    def right_click_element(self, selector: str) -> Self:
        self.wait_for_element_visible(selector).click(button="right", timeout=self.timeout)
        return self

    def accept_dialog(self, expected_message: str | None = None) -> DialogRecord:
        """Accept the next dialog the page shows. Call this before the action that opens it."""
        record = DialogRecord(expected_message=expected_message)

        def handle(dialog: Dialog) -> None:
            record.message = dialog.message
            logger.info("Accepting %(type)s dialog: %(message)s", {"type": dialog.type, "message": dialog.message})
            dialog.accept()

        self.page.once("dialog", handle)
        return record

    def wait_for_dialog(
        self, trigger: Callable[[], object], expected_message: str | None = None, timeout: int = 5000
    ) -> DialogRecord:
        """Run `trigger`, wait for the dialog it opens and accept it."""
        record = self.accept_dialog(expected_message)
        with self.page.expect_event("dialog", timeout=timeout):
            trigger()
        record.verify()
        return record

    def upload_file(self, selector: str, file_path: str | Path) -> Self:
        path = Path(file_path)
        if not path.is_absolute():
            path = Path.cwd() / path
        if not path.is_file():
            raise FileNotFoundError(f"Upload file not found: {path}")

        self.wait_for_element(selector).set_input_files(path, timeout=self.timeout)
        return self
