"""Actions and assertions behind the Gherkin step definitions.

Each language binds its own sentences to these functions in `tests/e2e/<language>/conftest.py`; anything that differs
between languages (field labels, page names, placeholders) is resolved through `e2e_suite.localization`.
"""

import re

from playwright.sync_api import ConsoleMessage, Locator, expect

from e2e_suite.localization import contact_details_from_table, page_url, resolve_field
from e2e_suite.logging import logger
from e2e_suite.world import ScenarioWorld

ERROR_MESSAGE_SELECTOR = ".error, .alert-danger, .text-danger"
NAVIGATION_SELECTOR = "nav, .navbar, .menu"
CONTACT_FORM_INPUTS = {
    "name": 'input[name="name"]',
    "email": 'input[name="email"]',
    "subject": 'input[name="subject"]',
    "message": 'textarea[name="message"]',
}


def _field(world: ScenarioWorld, label: str) -> Locator:
    """The first field labelled, captioned or named `label`, once visible; raises a Playwright `TimeoutError` if it
    does not appear within the world's element timeout."""
    page = world.page
    locator = (
        page.locator(f'[aria-label="{label}"]')
        .or_(page.locator(f'[placeholder="{label}"]'))
        .or_(page.locator(f'[name="{label}"]'))
        .first
    )
    locator.wait_for(state="visible", timeout=world.timeout)
    return locator


def navigate_to(world: ScenarioWorld, url: str) -> None:
    world.navigate(url)


def open_named_page(world: ScenarioWorld, page_name: str) -> None:
    world.navigate(page_url(world.language, world.base_url, page_name))


def click_text(world: ScenarioWorld, text: str) -> None:
    world.base_page.click_element(f"text={text}")


def click_selector(world: ScenarioWorld, selector: str) -> None:
    world.base_page.click_element(selector)


def type_into_field(world: ScenarioWorld, label: str, text: str) -> None:
    _field(world, label).fill(text, timeout=world.timeout)


def type_into_selector(world: ScenarioWorld, selector: str, text: str) -> None:
    world.base_page.fill_input(selector, text)


def clear_field(world: ScenarioWorld, label: str) -> None:
    _field(world, label).fill("", timeout=world.timeout)


def press_key(world: ScenarioWorld, key: str) -> None:
    world.base_page.press_key(key)


def wait_seconds(world: ScenarioWorld, seconds: int) -> None:
    world.page.wait_for_timeout(seconds * 1000)


def wait_for_visible(world: ScenarioWorld, selector: str) -> None:
    world.base_page.wait_for_element_visible(selector)


def wait_for_hidden(world: ScenarioWorld, selector: str) -> None:
    world.base_page.wait_for_element_hidden(selector)


def wait_for_text(world: ScenarioWorld, text: str) -> None:
    world.base_page.wait_for_text(text)


def assert_text_visible(world: ScenarioWorld, text: str) -> None:
    expect(world.page.get_by_text(text).first).to_be_visible(timeout=world.timeout)


def assert_text_not_visible(world: ScenarioWorld, text: str) -> None:
    expect(world.page.get_by_text(text)).to_have_count(0, timeout=world.timeout)


def assert_element_visible(world: ScenarioWorld, selector: str) -> None:
    expect(world.page.locator(selector).first).to_be_visible(timeout=world.timeout)


def assert_element_not_visible(world: ScenarioWorld, selector: str) -> None:
    expect(world.page.locator(selector).first).to_be_hidden(timeout=world.timeout)


def assert_element_contains_text(world: ScenarioWorld, selector: str, text: str) -> None:
    expect(world.page.locator(selector).first).to_contain_text(text, timeout=world.timeout)


def assert_url_contains(world: ScenarioWorld, fragment: str) -> None:
    expect(world.page).to_have_url(re.compile(re.escape(fragment)), timeout=world.timeout)


def assert_url_is(world: ScenarioWorld, url: str) -> None:
    expect(world.page).to_have_url(url, timeout=world.timeout)


def assert_title_is(world: ScenarioWorld, title: str) -> None:
    expect(world.page).to_have_title(title, timeout=world.timeout)


def assert_title_contains(world: ScenarioWorld, fragment: str) -> None:
    expect(world.page).to_have_title(re.compile(re.escape(fragment)), timeout=world.timeout)


def take_screenshot(world: ScenarioWorld, name: str = "screenshot") -> None:
    world.take_screenshot(name)


def refresh(world: ScenarioWorld) -> None:
    world.page.reload()
    world.wait_for_page_load()


def go_back(world: ScenarioWorld) -> None:
    world.page.go_back()
    world.wait_for_page_load()


def scroll_to(world: ScenarioWorld, selector: str) -> None:
    world.base_page.scroll_to_element(selector)


def hover(world: ScenarioWorld, selector: str) -> None:
    world.base_page.hover_element(selector)


def pause(world: ScenarioWorld) -> None:
    world.page.pause()


def log_page_title(world: ScenarioWorld) -> None:
    logger.info("Page title: %(title)s", {"title": world.page.title()})


def log_current_url(world: ScenarioWorld) -> None:
    logger.info("Current URL: %(url)s", {"url": world.page.url})


def log_message(world: ScenarioWorld, message: str) -> None:
    logger.info("%(scenario)s: %(message)s", {"scenario": world.scenario_name, "message": message})


def assert_navigation_visible(world: ScenarioWorld) -> None:
    assert_element_visible(world, NAVIGATION_SELECTOR)


def maximize(world: ScenarioWorld) -> None:
    world.base_page.maximize_window()


def assert_page_loaded(world: ScenarioWorld) -> None:
    world.wait_for_page_load()
    assert world.page.evaluate("document.readyState") == "complete"


def focus(world: ScenarioWorld, selector: str) -> None:
    world.page.locator(selector).first.focus(timeout=world.timeout)


def assert_focused(world: ScenarioWorld, selector: str) -> None:
    expect(world.page.locator(selector).first).to_be_focused(timeout=world.timeout)


def assert_no_page_errors(world: ScenarioWorld) -> None:
    errors = world.page.evaluate("window.errors || []")
    assert errors == [], f"Page reported errors: {errors}"


def watch_console_errors(world: ScenarioWorld) -> None:
    def on_console(message: ConsoleMessage) -> None:
        if message.type == "error":
            world.record_warning(f"Console error: {message.text}")

    world.page.on("console", on_console)


# Contact us


def open_homepage(world: ScenarioWorld) -> None:
    world.home_page.open()
    expect(world.page).to_have_title(re.compile("Automation Exercise"), timeout=world.timeout)


def generate_test_data(world: ScenarioWorld) -> None:
    details = world.generate_test_data()
    logger.info("Generated test data for %(email)s", {"email": details.email})


def open_contact_page(world: ScenarioWorld) -> None:
    world.contact_page = world.home_page.click_contact_us()
    world.wait_for_page_load()


def fill_contact_form(world: ScenarioWorld, datatable: list[list[str]]) -> None:
    details = contact_details_from_table(world.language, datatable, world.test_data)
    world.contact_page.fill_contact_form(details.name, details.email, details.subject, details.message)


def upload_file(world: ScenarioWorld, file_path: str) -> None:
    world.contact_page.set_input_file(file_path)


def submit_contact_form(world: ScenarioWorld) -> None:
    world.contact_page.click_submit()


def accept_confirmation_dialog(world: ScenarioWorld) -> None:
    world.contact_page.verify_and_confirm_alert()


def assert_contact_title(world: ScenarioWorld) -> None:
    assert_title_contains(world, "Contact Us")


def assert_contact_form_visible(world: ScenarioWorld) -> None:
    assert world.contact_page.is_contact_form_visible()


def assert_email_validation_message(world: ScenarioWorld, expected_message: str) -> None:
    validation_message = world.contact_page.get_email_validation_message()
    assert expected_message in validation_message, f"{expected_message!r} not in {validation_message!r}"


def assert_success_message(world: ScenarioWorld, expected_message: str) -> None:
    expect(world.contact_page.locator("success_message")).to_contain_text(expected_message, timeout=world.timeout)


def assert_field_has_validation_error(world: ScenarioWorld, label: str) -> None:
    assert world.contact_page.has_validation_error(resolve_field(world.language, label))


def clear_contact_form(world: ScenarioWorld) -> None:
    for selector in CONTACT_FORM_INPUTS.values():
        world.base_page.clear_input(selector)


def assert_contact_form_empty(world: ScenarioWorld) -> None:
    for selector in CONTACT_FORM_INPUTS.values():
        expect(world.page.locator(selector)).to_have_value("", timeout=world.timeout)


def assert_no_error_messages(world: ScenarioWorld) -> None:
    expect(world.page.locator(ERROR_MESSAGE_SELECTOR)).to_have_count(0, timeout=world.timeout)
