import pytest
from pytest_bdd import given, parsers, then, when

from e2e_suite import steps
from e2e_suite.types import Language
from e2e_suite.world import ScenarioWorld


@pytest.fixture
def language() -> Language:
    return Language.ENGLISH


# Navigation


@given(parsers.parse('I navigate to "{url}"'))
@when(parsers.parse('I navigate to "{url}"'))
def i_navigate_to(world: ScenarioWorld, url: str) -> None:
    steps.navigate_to(world, url)


@given(parsers.parse('I am on "{page_name}" page'))
def i_am_on_page(world: ScenarioWorld, page_name: str) -> None:
    steps.open_named_page(world, page_name)


@when(parsers.parse('I click on "{text}"'))
def i_click_on(world: ScenarioWorld, text: str) -> None:
    steps.click_text(world, text)


@when(parsers.parse('I click the element with selector "{selector}"'))
def i_click_the_element_with_selector(world: ScenarioWorld, selector: str) -> None:
    steps.click_selector(world, selector)


# Input


@when(parsers.parse('I type "{text}" into "{label}"'))
def i_type_into(world: ScenarioWorld, text: str, label: str) -> None:
    steps.type_into_field(world, label, text)


@when(parsers.parse('I type "{text}" into the field with selector "{selector}"'))
def i_type_into_the_field_with_selector(world: ScenarioWorld, text: str, selector: str) -> None:
    steps.type_into_selector(world, selector, text)


@when(parsers.parse('I clear the field "{label}"'))
def i_clear_the_field(world: ScenarioWorld, label: str) -> None:
    steps.clear_field(world, label)


@when(parsers.parse('I press "{key}"'))
def i_press(world: ScenarioWorld, key: str) -> None:
    steps.press_key(world, key)


# Waiting


@when(parsers.parse("I wait for {seconds:d} seconds"))
def i_wait_for_seconds(world: ScenarioWorld, seconds: int) -> None:
    steps.wait_seconds(world, seconds)


@when(parsers.parse('I wait for the element "{selector}" to be visible'))
def i_wait_for_the_element_to_be_visible(world: ScenarioWorld, selector: str) -> None:
    steps.wait_for_visible(world, selector)


@when(parsers.parse('I wait for the element "{selector}" to be hidden'))
def i_wait_for_the_element_to_be_hidden(world: ScenarioWorld, selector: str) -> None:
    steps.wait_for_hidden(world, selector)


@when(parsers.parse('I wait for the text "{text}" to appear'))
def i_wait_for_the_text_to_appear(world: ScenarioWorld, text: str) -> None:
    steps.wait_for_text(world, text)


# Verification


@then(parsers.parse('I should see the text "{text}"'))
def i_should_see_the_text(world: ScenarioWorld, text: str) -> None:
    steps.assert_text_visible(world, text)


@then(parsers.parse('I should not see the text "{text}"'))
def i_should_not_see_the_text(world: ScenarioWorld, text: str) -> None:
    steps.assert_text_not_visible(world, text)


@then(parsers.parse('the element "{selector}" should be visible'))
def the_element_should_be_visible(world: ScenarioWorld, selector: str) -> None:
    steps.assert_element_visible(world, selector)


@then(parsers.parse('the element "{selector}" should not be visible'))
def the_element_should_not_be_visible(world: ScenarioWorld, selector: str) -> None:
    steps.assert_element_not_visible(world, selector)


@then(parsers.parse('the element "{selector}" should contain the text "{text}"'))
def the_element_should_contain_the_text(world: ScenarioWorld, selector: str, text: str) -> None:
    steps.assert_element_contains_text(world, selector, text)


@then(parsers.parse('the page URL should contain "{fragment}"'))
def the_page_url_should_contain(world: ScenarioWorld, fragment: str) -> None:
    steps.assert_url_contains(world, fragment)


@then(parsers.parse('the page URL should be "{url}"'))
def the_page_url_should_be(world: ScenarioWorld, url: str) -> None:
    steps.assert_url_is(world, url)


@then(parsers.parse('the page title should be "{title}"'))
def the_page_title_should_be(world: ScenarioWorld, title: str) -> None:
    steps.assert_title_is(world, title)


@then(parsers.parse('the page title should contain "{fragment}"'))
def the_page_title_should_contain(world: ScenarioWorld, fragment: str) -> None:
    steps.assert_title_contains(world, fragment)


# Utilities


@when("I take a screenshot")
def i_take_a_screenshot(world: ScenarioWorld) -> None:
    steps.take_screenshot(world)


@when(parsers.parse('I take a screenshot named "{name}"'))
@when(parsers.parse('I take a screenshot with name "{name}"'))
def i_take_a_screenshot_named(world: ScenarioWorld, name: str) -> None:
    steps.take_screenshot(world, name)


@when("I refresh the page")
def i_refresh_the_page(world: ScenarioWorld) -> None:
    steps.refresh(world)


@when("I go back to the previous page")
def i_go_back_to_the_previous_page(world: ScenarioWorld) -> None:
    steps.go_back(world)


@when(parsers.parse('I scroll to the element "{selector}"'))
def i_scroll_to_the_element(world: ScenarioWorld, selector: str) -> None:
    steps.scroll_to(world, selector)


@when(parsers.parse('I hover over the element "{selector}"'))
def i_hover_over_the_element(world: ScenarioWorld, selector: str) -> None:
    steps.hover(world, selector)


@when("I debug and pause")
def i_debug_and_pause(world: ScenarioWorld) -> None:
    steps.pause(world)


@when("I print the page title")
def i_print_the_page_title(world: ScenarioWorld) -> None:
    steps.log_page_title(world)


@when("I print the current URL")
def i_print_the_current_url(world: ScenarioWorld) -> None:
    steps.log_current_url(world)


@then(parsers.parse('I log the message "{message}"'))
def i_log_the_message(world: ScenarioWorld, message: str) -> None:
    steps.log_message(world, message)


@when("I watch for console errors")
def i_watch_for_console_errors(world: ScenarioWorld) -> None:
    steps.watch_console_errors(world)


# Contact us


@given("I am on the Automation Exercise homepage")
def i_am_on_the_automation_exercise_homepage(world: ScenarioWorld) -> None:
    steps.open_homepage(world)


@given("I have generated unique test data")
def i_have_generated_unique_test_data(world: ScenarioWorld) -> None:
    steps.generate_test_data(world)


@when("I navigate to the Contact Us page")
def i_navigate_to_the_contact_us_page(world: ScenarioWorld) -> None:
    steps.open_contact_page(world)


@when("I fill the contact form with blank email:")
@when("I fill the contact form with valid data:")
@when("I fill the contact form with invalid data:")
@when("I fill the contact form with the following data:")
def i_fill_the_contact_form(world: ScenarioWorld, datatable: list[list[str]]) -> None:
    steps.fill_contact_form(world, datatable)


@when(parsers.parse('I upload a test file "{file_path}"'))
def i_upload_a_test_file(world: ScenarioWorld, file_path: str) -> None:
    steps.upload_file(world, file_path)


@when("I click the Submit button")
def i_click_the_submit_button(world: ScenarioWorld) -> None:
    steps.submit_contact_form(world)


@when("I handle the confirmation dialog")
def i_handle_the_confirmation_dialog(world: ScenarioWorld) -> None:
    steps.accept_confirmation_dialog(world)


@then("I should see the Contact Us page title")
def i_should_see_the_contact_us_page_title(world: ScenarioWorld) -> None:
    steps.assert_contact_title(world)


@then("I should see the contact form")
def i_should_see_the_contact_form(world: ScenarioWorld) -> None:
    steps.assert_contact_form_visible(world)


@then(parsers.parse('I should see the email validation message "{expected_message}"'))
def i_should_see_the_email_validation_message(world: ScenarioWorld, expected_message: str) -> None:
    steps.assert_email_validation_message(world, expected_message)


@then(parsers.parse('I should see the success message "{expected_message}"'))
def i_should_see_the_success_message(world: ScenarioWorld, expected_message: str) -> None:
    steps.assert_success_message(world, expected_message)


@then(parsers.parse('I should see validation error for "{field}" field'))
def i_should_see_validation_error_for_field(world: ScenarioWorld, field: str) -> None:
    steps.assert_field_has_validation_error(world, field)
