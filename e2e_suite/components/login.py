from dataclasses import dataclass, field
from typing import ClassVar

from e2e_suite.pages.base import BasePage

MIN_PASSWORD_LENGTH = 6
LOGIN_SPINNER_TIMEOUT = 10_000


@dataclass(frozen=True)
class FormValidation:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class LoginFormData:
    email: str
    password: str
    remember_me: bool


def validate_login_input(email: str, password: str) -> FormValidation:
    errors = []
    if "@" not in email:
        errors.append("Email address is not valid")
    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return FormValidation(is_valid=not errors, errors=errors)


class LoginComponent(BasePage):
    """A login form, found through a list of fallback selectors so it works across the sites under test."""

    selectors: ClassVar[dict[str, str]] = {
        "login_form": '.login-form, #login-form, form[name="login"], form[action="/login"]',
        "email_input": 'input[name="email"], input[type="email"], #email',
        "password_input": 'input[name="password"], input[type="password"], #password',
        "login_button": 'button[type="submit"], .login-button, #login-btn',
        "remember_me_checkbox": 'input[name="remember"], #remember-me',
        "forgot_password_link": '.forgot-password, a[href*="forgot"]',
        "error_message": ".error-message, .alert-error, .login-error",
        "success_message": ".success-message, .alert-success",
        "loading_spinner": ".loading, .spinner, .login-loading",
    }

    def login(self, email: str, password: str, remember_me: bool = False) -> None:
        self.fill_email(email)
        self.fill_password(password)
        if remember_me:
            self.check_remember_me()
        self.click_login_button()

    def fill_email(self, email: str) -> None:
        self.fill_input("email_input", email)

    def fill_password(self, password: str) -> None:
        self.fill_input("password_input", password)

    def click_login_button(self) -> None:
        self.click_element("login_button")

    def check_remember_me(self) -> None:
        if self.is_element_visible("remember_me_checkbox"):
            self.click_element("remember_me_checkbox")

    def click_forgot_password(self) -> None:
        if self.is_element_visible("forgot_password_link"):
            self.click_element("forgot_password_link")

    def is_login_form_visible(self) -> bool:
        return self.is_element_visible("login_form")

    def has_error_message(self) -> bool:
        return self.is_element_visible("error_message")

    def get_error_message(self) -> str:
        return self.get_element_text("error_message") if self.has_error_message() else ""

    def has_success_message(self) -> bool:
        return self.is_element_visible("success_message")

    def get_success_message(self) -> str:
        return self.get_element_text("success_message") if self.has_success_message() else ""

    def is_loading(self) -> bool:
        return self.is_element_visible("loading_spinner")

    def wait_for_login_complete(self) -> None:
        if self.is_loading():
            self.wait_for_element_hidden("loading_spinner", timeout=LOGIN_SPINNER_TIMEOUT)

    def validate_form(self) -> FormValidation:
        return validate_login_input(
            self.locator("email_input").first.input_value(timeout=self.timeout),
            self.locator("password_input").first.input_value(timeout=self.timeout),
        )

    def clear_form(self) -> None:
        self.fill_email("")
        self.fill_password("")

    def get_form_data(self) -> LoginFormData:
        remember_me = self.is_element_visible("remember_me_checkbox") and self.locator(
            "remember_me_checkbox"
        ).first.is_checked(timeout=self.timeout)
        return LoginFormData(
            email=self.locator("email_input").first.input_value(timeout=self.timeout),
            password=self.locator("password_input").first.input_value(timeout=self.timeout),
            remember_me=remember_me,
        )
