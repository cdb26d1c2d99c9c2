from dataclasses import dataclass, field
from typing import ClassVar

from playwright.sync_api import Locator, Page, ViewportSize

from e2e_suite.data.urls import TODOMVC_URL
from e2e_suite.pages.base import DEFAULT_TIMEOUT, MAXIMIZED_VIEWPORT, BasePage

_TODO_ITEMS_SCRIPT = """
() => Array.from(document.querySelectorAll('.todo-list li')).map((todo, index) => ({
    index: index + 1,
    text: (todo.querySelector('label')?.textContent || '').trim(),
    is_completed: !!todo.querySelector('input[type="checkbox"]')?.checked,
    element_classes: todo.className,
}))
"""


@dataclass(frozen=True)
class TodoItem:
    index: int
    text: str
    is_completed: bool
    element_classes: str = ""


@dataclass(frozen=True)
class TodoAnalytics:
    total_items: int
    items: list[TodoItem] = field(default_factory=list)
    completed_count: int = 0
    pending_count: int = 0
    completion_rate: str = "0%"

    @classmethod
    def from_items(cls, items: list[TodoItem]) -> "TodoAnalytics":
        completed = sum(1 for item in items if item.is_completed)
        return cls(
            total_items=len(items),
            items=items,
            completed_count=completed,
            pending_count=len(items) - completed,
            completion_rate=f"{completed / len(items) * 100:.2f}%" if items else "0%",
        )


class TodoMVCPage(BasePage):
    selectors: ClassVar[dict[str, str]] = {
        "todo_input": '[placeholder="What needs to be done?"]',
        "todo_list": ".todo-list",
        "todo_item": ".todo-list li",
        "todo_label": ".todo-list li label",
        "todo_checkbox": '.todo-list li input[type="checkbox"]',
        "edit_input": "input.edit",
        "delete_button": ".destroy",
        "toggle_all": 'label[for="toggle-all"]',
        "clear_completed": ".clear-completed",
        "todo_count": ".todo-count",
        "filter_all": '.filters a[href="#/"]',
        "filter_active": '.filters a[href="#/active"]',
        "filter_completed": '.filters a[href="#/completed"]',
        "footer": ".footer",
    }

    def __init__(
        self,
        page: Page,
        domain: str = TODOMVC_URL,
        timeout: int = DEFAULT_TIMEOUT,
        viewport: ViewportSize = MAXIMIZED_VIEWPORT,
    ) -> None:
        super().__init__(page, domain, timeout, viewport)

    def navigate(self) -> "TodoMVCPage":
        self.goto(self.domain)
        self.wait_for_page_load()
        return self

    def _row(self, index: int) -> Locator:
        return self.locator("todo_item").nth(index)

    def _checkbox(self, index: int) -> Locator:
        return self.locator("todo_checkbox").nth(index)

    def add_todo(self, text: str) -> None:
        self.fill_input("todo_input", text)
        self.press_key("Enter", "todo_input")

    def add_multiple_todos(self, texts: list[str]) -> None:
        for text in texts:
            self.add_todo(text)

    def get_todo_count(self) -> int:
        return self.get_element_count("todo_item")

    def get_todo_texts(self) -> list[str]:
        return [(label.text_content() or "").strip() for label in self.locator("todo_label").all()]

    def complete_todo(self, index: int) -> None:
        self._checkbox(index).check(timeout=self.timeout)

    def uncomplete_todo(self, index: int) -> None:
        self._checkbox(index).uncheck(timeout=self.timeout)

    def is_todo_completed(self, index: int) -> bool:
        return self._checkbox(index).is_checked(timeout=self.timeout)

    def delete_todo(self, index: int) -> None:
        row = self._row(index)
        row.hover(timeout=self.timeout)
        row.locator(self.selectors["delete_button"]).click(timeout=self.timeout)

    def edit_todo(self, index: int, text: str) -> None:
        row = self._row(index)
        row.dblclick(timeout=self.timeout)
        edit_input = row.locator(self.selectors["edit_input"])
        edit_input.fill(text, timeout=self.timeout)
        edit_input.press("Enter", timeout=self.timeout)

    def toggle_all_todos(self) -> None:
        self.click_element("toggle_all")

    def clear_completed(self) -> None:
        if self.is_element_visible("clear_completed"):
            self.click_element("clear_completed")

    def get_todo_count_text(self) -> str:
        if self.is_element_visible("todo_count"):
            return self.get_element_text("todo_count")
        return ""

    def filter_all(self) -> None:
        self.click_element("filter_all")

    def filter_active(self) -> None:
        self.click_element("filter_active")

    def filter_completed(self) -> None:
        self.click_element("filter_completed")

    def get_visible_todo_count(self) -> int:
        return self.page.locator(f"{self.selectors['todo_item']}:visible").count()

    def is_footer_visible(self) -> bool:
        return self.is_element_visible("footer")

    def get_todo_analytics(self) -> TodoAnalytics:
        items = [TodoItem(**item) for item in self.page.evaluate(_TODO_ITEMS_SCRIPT)]
        return TodoAnalytics.from_items(items)

    def has_todo_with_text(self, text: str) -> bool:
        return text in self.get_todo_texts()

    def get_todo_index_by_text(self, text: str) -> int:
        texts = self.get_todo_texts()
        return texts.index(text) if text in texts else -1
