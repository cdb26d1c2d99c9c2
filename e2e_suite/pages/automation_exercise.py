from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from playwright.sync_api import Page, ViewportSize

from e2e_suite.data.urls import AUTOMATION_EXERCISE_URL
from e2e_suite.logging import logger
from e2e_suite.pages.base import DEFAULT_TIMEOUT, MAXIMIZED_VIEWPORT, BasePage, DialogRecord

SUCCESS_MESSAGE = "Success! Your details have been submitted successfully."
CONTACT_FORM_FIELDS = ("name", "email", "subject", "message")


class AutomationExercisePage(BasePage):
    def __init__(
        self,
        page: Page,
        domain: str = AUTOMATION_EXERCISE_URL,
        timeout: int = DEFAULT_TIMEOUT,
        viewport: ViewportSize = MAXIMIZED_VIEWPORT,
    ) -> None:
        super().__init__(page, domain.rstrip("/"), timeout, viewport)


class HomePage(AutomationExercisePage):
    selectors: ClassVar[dict[str, str]] = {
        "nav_contact_us": 'a[href="/contact_us"]',
        "nav_products": 'a[href="/products"]',
        "nav_cart": 'a[href="/view_cart"]',
        "nav_login": 'a[href="/login"]',
    }

    def open(self) -> HomePage:
        self.goto(f"{self.domain}/")
        self.wait_for_page_load()
        return self

    def click_contact_us(self) -> ContactPage:
        self.click_element("nav_contact_us")
        contact_page = ContactPage(self.page, self.domain, self.timeout, self.viewport)
        contact_page.wait_for_element_visible("input_name")
        return contact_page


class ContactPage(AutomationExercisePage):
    selectors: ClassVar[dict[str, str]] = {
        "input_name": 'input[name="name"]',
        "input_email": 'input[name="email"]',
        "input_subject": 'input[name="subject"]',
        "input_message": 'textarea[name="message"]',
        "button_submit": 'input[name="submit"]',
        "success_message": 'div[class="status alert alert-success"]',
        "button_home": 'a[href="/"]',
        "input_upload_file": 'input[name="upload_file"]',
        "contact_form": "#contact-us-form",
        "heading": "h2.title:has-text('Get In Touch')",
    }

    def navigate(self) -> ContactPage:
        self.goto(f"{self.domain}/contact_us")
        self.wait_for_page_load()
        return self

    def fill_contact_form(self, name: str, email: str, subject: str, message: str) -> ContactPage:
        self.wait_for_page_load()
        self.fill_input("input_name", name)
        self.fill_input("input_email", email)
        self.fill_input("input_subject", subject)
        self.fill_input("input_message", message)
        return self

    def click_submit(self) -> ContactPage:
        self.click_element("button_submit")
        return self

    def get_success_message(self) -> str:
        return self.get_element_text("success_message")

    def is_contact_form_visible(self) -> bool:
        return all(self.is_element_visible(f"input_{field}") for field in CONTACT_FORM_FIELDS)

    def get_email_validation_message(self) -> str:
        return self.get_element_tooltip("input_email")

    def verify_blank_email_message(self, expected_message: str) -> bool:
        self.fill_input("input_email", "")
        self.click_submit()

        validation_message = self.get_email_validation_message()
        logger.info("Validation message: %(message)s", {"message": validation_message})
        return expected_message in validation_message

    def has_validation_error(self, field: str) -> bool:
        if field not in CONTACT_FORM_FIELDS:
            raise ValueError(f"Unknown contact form field: {field}")
        return bool(self.get_element_tooltip(f"input_{field}"))

    def verify_and_confirm_alert(self, expected_message: str | None = None) -> DialogRecord:
        return self.accept_dialog(expected_message)

    def wait_for_alert(self, expected_message: str | None = None, timeout: int = 5000) -> DialogRecord:
        """Submit the form and accept the confirmation it raises."""
        return self.wait_for_dialog(self.click_submit, expected_message, timeout)

    def set_input_file(self, file_path: str | Path) -> ContactPage:
        self.upload_file("input_upload_file", file_path)
        return self

    def click_home(self) -> HomePage:
        self.click_element("button_home")
        return HomePage(self.page, self.domain, self.timeout, self.viewport)
