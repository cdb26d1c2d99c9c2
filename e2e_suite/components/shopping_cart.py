import re
from dataclasses import dataclass, field
from typing import ClassVar

from playwright.sync_api import Locator

from e2e_suite.components.login import FormValidation
from e2e_suite.helpers.utils import parse_price
from e2e_suite.pages.base import BasePage


@dataclass(frozen=True)
class CartLine:
    index: int
    name: str
    price: float
    quantity: int
    total: float


@dataclass(frozen=True)
class CartSummary:
    item_count: int
    subtotal: float
    tax: float
    shipping: float
    total: float
    is_empty: bool
    items: list[CartLine] = field(default_factory=list)


def parse_count(text: str, default: int = 0) -> int:
    """Leading integer of `text` (ignoring whitespace), or `default` when there isn't one."""
    match = re.match(r"\s*(-?\d+)", text)
    return int(match.group(1)) if match else default


def validate_cart_contents(lines: list[CartLine], total: float, is_empty: bool) -> FormValidation:
    errors = []
    if is_empty:
        errors.append("Cart is empty")
    if total <= 0:
        errors.append("Cart total is not valid")
    for line in lines:
        if line.quantity <= 0:
            errors.append(f'Quantity for "{line.name}" is not valid')
    return FormValidation(is_valid=not errors, errors=errors)


class ShoppingCartComponent(BasePage):
    selectors: ClassVar[dict[str, str]] = {
        "cart_container": ".cart, #shopping-cart, .shopping-cart, #cart_info",
        "cart_items": ".cart-item, .item, #cart_info_table tbody tr",
        "cart_item_name": ".item-name, .product-name, .cart_description h4",
        "cart_item_price": ".item-price, .product-price, .cart_price",
        "cart_item_quantity": ".item-quantity, .quantity, .cart_quantity",
        "cart_item_total": ".item-total, .line-total, .cart_total_price",
        "increase_quantity_button": ".quantity-increase, .qty-plus, .increase",
        "decrease_quantity_button": ".quantity-decrease, .qty-minus, .decrease",
        "remove_item_button": ".remove-item, .delete-item, .remove, .cart_quantity_delete",
        "cart_total": ".cart-total, .total-amount",
        "cart_subtotal": ".cart-subtotal, .subtotal",
        "cart_tax": ".cart-tax, .tax",
        "cart_shipping": ".cart-shipping, .shipping",
        "cart_item_count": ".cart-count, .item-count",
        "empty_cart_message": ".empty-cart, .cart-empty, #empty_cart",
        "checkout_button": ".checkout-btn, .proceed-checkout, .check_out",
        "continue_shopping_button": ".continue-shopping, .close-modal",
        "cart_icon": '.cart-icon, .shopping-cart-icon, a[href="/view_cart"]',
        "cart_badge": ".cart-badge, .cart-count-badge",
    }

    def _line(self, index: int) -> Locator:
        return self.locator("cart_items").nth(index)

    def _click_in_line_if_visible(self, index: int, selector: str) -> None:
        button = self._line(index).locator(self.selectors[selector]).first
        if button.is_visible():
            button.click(timeout=self.timeout)

    def _line_text(self, line: Locator, selector: str) -> str:
        element = line.locator(self.selectors[selector]).first
        if element.is_visible():
            return element.text_content(timeout=self.timeout) or ""
        return ""

    def _amount(self, selector: str) -> float:
        if self.is_element_visible(selector):
            return parse_price(self.get_element_text(selector))
        return 0

    def open_cart(self) -> None:
        if self.is_element_visible("cart_icon"):
            self.click_element("cart_icon")

    def close_cart(self) -> None:
        self.page.keyboard.press("Escape")

    def get_cart_item_count(self) -> int:
        if self.is_element_visible("cart_item_count"):
            return parse_count(self.get_element_text("cart_item_count"))
        return self.get_element_count("cart_items")

    def get_cart_badge_count(self) -> int:
        if self.is_element_visible("cart_badge"):
            return parse_count(self.get_element_text("cart_badge"))
        return 0

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0 or self.is_element_visible("empty_cart_message")

    def get_cart_items(self) -> list[CartLine]:
        lines = []
        for index, line in enumerate(self.locator("cart_items").all()):
            lines.append(
                CartLine(
                    index=index,
                    name=self._line_text(line, "cart_item_name").strip(),
                    price=parse_price(self._line_text(line, "cart_item_price")),
                    quantity=parse_count(self._line_text(line, "cart_item_quantity"), default=1),
                    total=parse_price(self._line_text(line, "cart_item_total")),
                )
            )
        return lines

    def increase_quantity(self, index: int) -> None:
        self._click_in_line_if_visible(index, "increase_quantity_button")

    def decrease_quantity(self, index: int) -> None:
        self._click_in_line_if_visible(index, "decrease_quantity_button")

    def remove_item(self, index: int) -> None:
        self._click_in_line_if_visible(index, "remove_item_button")

    def remove_item_by_name(self, name: str) -> bool:
        for line in self.get_cart_items():
            if name in line.name:
                self.remove_item(line.index)
                return True
        return False

    def get_cart_total(self) -> float:
        return self._amount("cart_total")

    def get_cart_subtotal(self) -> float:
        return self._amount("cart_subtotal")

    def get_cart_tax(self) -> float:
        return self._amount("cart_tax")

    def get_cart_shipping(self) -> float:
        return self._amount("cart_shipping")

    def proceed_to_checkout(self) -> None:
        if self.is_element_visible("checkout_button"):
            self.click_element("checkout_button")

    def continue_shopping(self) -> None:
        if self.is_element_visible("continue_shopping_button"):
            self.click_element("continue_shopping_button")

    def validate_cart(self) -> FormValidation:
        return validate_cart_contents(self.get_cart_items(), self.get_cart_total(), self.is_cart_empty())

    def get_cart_summary(self) -> CartSummary:
        return CartSummary(
            item_count=self.get_cart_item_count(),
            items=self.get_cart_items(),
            subtotal=self.get_cart_subtotal(),
            tax=self.get_cart_tax(),
            shipping=self.get_cart_shipping(),
            total=self.get_cart_total(),
            is_empty=self.is_cart_empty(),
        )
