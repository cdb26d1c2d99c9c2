import os
import time
from pathlib import Path
from typing import Any, Callable, Generator
from unittest.mock import patch

import pytest
from playwright.sync_api import Browser, BrowserContext, Error, Page, ViewportSize
from pytest import FixtureRequest
from pytest_bdd.parser import Feature, Scenario, Step
from pytest_playwright import CreateContextCallback

from e2e_suite.config import _SharedConfig, get_settings
from e2e_suite.helpers.utils import slugify
from e2e_suite.logging import clear_scenario_context, init_logging, logger, set_scenario_context
from e2e_suite.types import Language, ScreenshotMode
from e2e_suite.world import ScenarioWorld, apply_browser_settings, browser_context_options, build_world

_scenario_started_at = pytest.StashKey[float]()


def _load_settings(config: pytest.Config) -> _SharedConfig:
    environment = config.getoption("e2e_env") or os.getenv("ENVIRONMENT")
    if environment:
        with patch.dict(os.environ, {"ENVIRONMENT": environment}):
            return get_settings()
    return get_settings()


def pytest_configure(config: pytest.Config) -> None:
    if config.getoption("e2e"):
        apply_browser_settings(config.option, _load_settings(config))


@pytest.fixture(scope="session")
def settings(request: FixtureRequest) -> _SharedConfig:
    settings = _load_settings(request.config)
    init_logging(settings)
    return settings


@pytest.fixture(scope="session", autouse=True)
def _artifact_directories(settings: _SharedConfig) -> Generator[None, None, None]:
    for directory in (settings.REPORTS_DIR, settings.SCREENSHOTS_DIR):
        Path(directory).mkdir(parents=True, exist_ok=True)
    logger.info(
        "Starting e2e run against %(base_url)s (%(environment)s) with %(parallel)s worker(s)",
        {"base_url": settings.BASE_URL, "environment": settings.ENVIRONMENT.value, "parallel": settings.PARALLEL},
    )
    started = time.perf_counter()

    yield

    logger.info("Finished e2e run in %(duration).2fs", {"duration": time.perf_counter() - started})


@pytest.fixture
def viewport(request: FixtureRequest) -> ViewportSize:
    width, height = request.config.getoption("viewport").split("x")
    return ViewportSize(width=int(width), height=int(height))


@pytest.fixture(autouse=True)
def _viewport(page: Page, viewport: ViewportSize) -> None:
    page.set_viewport_size(viewport)


@pytest.fixture()
def domain(settings: _SharedConfig) -> str:
    return settings.BASE_URL.rstrip("/")


@pytest.fixture
def language(settings: _SharedConfig) -> Language:
    return settings.LANGUAGE


def _forced_headless(request: FixtureRequest) -> bool | None:
    if request.node.get_closest_marker("headed") is not None:
        return False
    if request.node.get_closest_marker("headless") is not None:
        return True
    return None


@pytest.fixture(autouse=True)
def context(
    new_context: CreateContextCallback,
    launch_browser: Callable[..., Browser],
    browser_context_args: dict[str, Any],
    request: FixtureRequest,
    language: Language,
) -> Generator[BrowserContext, None, None]:
    options = browser_context_options(language)
    headless = _forced_headless(request)

    # @headed and @headless scenarios that disagree with --headed get a browser of their own.
    if headless is None or headless == (not request.config.getoption("headed")):
        yield new_context(**options)
        return

    browser = launch_browser(headless=headless)
    context = browser.new_context(**{**browser_context_args, **options})
    yield context
    context.close()
    browser.close()


@pytest.fixture
def world(
    page: Page, settings: _SharedConfig, language: Language, viewport: ViewportSize, request: FixtureRequest
) -> Generator[ScenarioWorld, None, None]:
    slow = request.node.get_closest_marker("slow") is not None
    world = build_world(
        page,
        settings,
        language,
        scenario_name=request.node.name,
        viewport=viewport,
        element_timeout=settings.SLOW_TIMEOUT if slow else None,
    )
    if slow:
        page.set_default_timeout(settings.SLOW_TIMEOUT)
        page.set_default_navigation_timeout(settings.SLOW_TIMEOUT)

    yield world

    for warning in world.warnings:
        logger.warning("Warning during %(scenario)s: %(warning)s", {"scenario": world.scenario_name, "warning": warning})
    for error in world.errors:
        logger.error("Error during %(scenario)s: %(error)s", {"scenario": world.scenario_name, "error": error})


def _attach_screenshot(request: FixtureRequest, world: ScenarioWorld, name: str) -> None:
    try:
        path = world.take_screenshot(name)
    except Error as e:
        logger.warning("Could not capture screenshot %(name)s: %(error)s", {"name": name, "error": str(e)})
        return
    request.node.user_properties.append((f"attachment:{path.stem}", str(path)))


def pytest_bdd_before_scenario(request: FixtureRequest, feature: Feature, scenario: Scenario) -> None:
    set_scenario_context(feature=feature.name, scenario=scenario.name)
    request.node.stash[_scenario_started_at] = time.perf_counter()
    logger.info("Starting scenario: %(scenario)s", {"scenario": scenario.name})


def pytest_bdd_after_scenario(request: FixtureRequest, feature: Feature, scenario: Scenario) -> None:
    duration = time.perf_counter() - request.node.stash.get(_scenario_started_at, time.perf_counter())
    logger.info(
        "Finished scenario: %(scenario)s in %(duration).2fs",
        {"scenario": scenario.name, "duration": duration},
    )

    world = request.getfixturevalue("world")
    always = world.settings.SCREENSHOTS == ScreenshotMode.ALWAYS
    if always or request.node.get_closest_marker("screenshot") is not None:
        _attach_screenshot(request, world, f"{scenario.name}-final")

    clear_scenario_context()


def pytest_bdd_step_error(
    request: FixtureRequest,
    feature: Feature,
    scenario: Scenario,
    step: Step,
    step_func: Callable[..., Any],
    step_func_args: dict[str, Any],
    exception: Exception,
) -> None:
    world = request.getfixturevalue("world")
    world.record_error(f"{step.keyword} {step.name}: {exception}")
    if world.settings.SCREENSHOTS != ScreenshotMode.NEVER:
        _attach_screenshot(request, world, f"failed-{slugify(scenario.name)}")
    clear_scenario_context()

