import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from playwright.sync_api import Page, Request, Response, Route

from e2e_suite.logging import logger

DEFAULT_API_MOCKS: dict[str, tuple[int, Any]] = {
    "**/api/login": (200, {"success": True, "token": "mock-jwt-token", "user": {"id": 1, "name": "Test User"}}),
    "**/api/users": (
        200,
        {
            "users": [
                {"id": 1, "name": "John Doe", "email": "john@example.com"},
                {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
            ]
        },
    ),
    "**/api/products": (
        200,
        {
            "products": [
                {"id": 1, "name": "Laptop", "price": 999.99},
                {"id": 2, "name": "Smartphone", "price": 699.99},
            ]
        },
    ),
    "**/api/orders": (201, {"success": True, "orderId": "ORD-12345", "status": "pending"}),
}


def _fulfill_json(route: Route, status: int, body: Any) -> None:
    route.fulfill(status=status, content_type="application/json", body=json.dumps(body))


def mock_api_response(page: Page, url_pattern: str, body: Any, status: int = 200) -> None:
    def handle(route: Route) -> None:
        _fulfill_json(route, status, body)

    page.route(url_pattern, handle)


def setup_api_mocks(page: Page, mocks: dict[str, tuple[int, Any]] | None = None) -> None:
    for url_pattern, (status, body) in (mocks or DEFAULT_API_MOCKS).items():
        mock_api_response(page, url_pattern, body, status=status)


def setup_auth_mock(page: Page, valid_email: str = "test@example.com", valid_password: str = "password123") -> None:
    def handle(route: Route) -> None:
        credentials = route.request.post_data_json or {}
        if credentials.get("email") == valid_email and credentials.get("password") == valid_password:
            _fulfill_json(route, 200, {"success": True, "token": "valid-jwt-token", "user": {"email": valid_email}})
        else:
            _fulfill_json(route, 401, {"success": False, "error": "Invalid credentials"})

    page.route("**/api/auth/login", handle)


def setup_file_upload_mock(page: Page) -> None:
    def handle(route: Route) -> None:
        _fulfill_json(
            route,
            200,
            {"success": True, "fileId": "file-12345", "url": "https://example.com/uploads/file-12345"},
        )

    page.route("**/api/upload", handle)


def setup_file_download_mock(page: Page, filename: str, content: str | bytes) -> None:
    def handle(route: Route) -> None:
        route.fulfill(
            status=200,
            headers={"Content-Disposition": f'attachment; filename="{Path(filename).name}"'},
            content_type="application/octet-stream",
            body=content,
        )

    page.route(f"**/download/{Path(filename).name}", handle)


@dataclass
class NetworkMonitor:
    """Records every request, response and failed request a page makes once attached."""

    requests: list[dict[str, str]] = field(default_factory=list)
    responses: list[dict[str, str | int]] = field(default_factory=list)
    failed_requests: list[dict[str, str]] = field(default_factory=list)

    def attach(self, page: Page) -> "NetworkMonitor":
        page.on("request", self._on_request)
        page.on("response", self._on_response)
        page.on("requestfailed", self._on_request_failed)
        return self

    def _on_request(self, request: Request) -> None:
        self.requests.append({"url": request.url, "method": request.method, "resource_type": request.resource_type})

    def _on_response(self, response: Response) -> None:
        self.responses.append({"url": response.url, "status": response.status})

    def _on_request_failed(self, request: Request) -> None:
        failure = request.failure or "unknown"
        logger.warning("Request failed: %(url)s (%(failure)s)", {"url": request.url, "failure": failure})
        self.failed_requests.append({"url": request.url, "failure": failure})

    def error_responses(self) -> list[dict[str, str | int]]:
        return [response for response in self.responses if int(response["status"]) >= 400]
