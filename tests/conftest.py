import os
from pathlib import Path
from typing import Any, Generator
from unittest.mock import patch

import pytest
from _pytest.config import Config
from _pytest.config.argparsing import Parser

from e2e_suite.config import Environment, _SharedConfig, get_settings


def pytest_addoption(parser: Parser) -> None:
    parser.addoption("--e2e", action="store_true", default=False, help="run e2e (browser) tests")
    parser.addoption(
        "--e2e-env",
        default=None,
        choices=[env.value for env in Environment if env != Environment.UNIT_TEST],
        action="store",
        help="choose the environment that e2e tests will target (default: $ENVIRONMENT, or prod)",
    )

    parser.addoption(
        "--viewport",
        default="1920x1080",
        type=str,
        help="Change the viewport size of the browser window used for playwright tests (default: 1920x1080)",
    )

    parser.addoption(
        "--feature-file",
        action="store",
        default=None,
        help="only run scenarios whose feature file path ends with this value",
    )


def _feature_path(item: Any) -> str | None:
    scenario = getattr(getattr(item, "function", None), "__scenario__", None)
    if scenario is None:
        return None
    return Path(scenario.feature.filename).as_posix()


def pytest_collection_modifyitems(config: Config, items: list[Any]) -> None:
    # Determines whether e2e tests have been requested. If not, skips anything marked as e2e.
    # If e2e tests are requested, skips everything not marked as e2e
    skip_e2e = pytest.mark.skip(reason="only running non-e2e tests")
    skip_non_e2e = pytest.mark.skip(reason="only running e2e tests")
    skip_e2e_environment = pytest.mark.skip(reason="test is configured not to run in this e2e environment")

    e2e_run = config.getoption("--e2e")
    e2e_env = config.getoption("--e2e-env") or os.getenv("ENVIRONMENT", Environment.PROD.value)

    if feature := config.getoption("--feature-file"):
        feature = Path(feature).as_posix()
        selected, deselected = [], []
        for item in items:
            path = _feature_path(item)
            (selected if path is None or path.endswith(feature) else deselected).append(item)
        if deselected:
            config.hook.pytest_deselected(items=deselected)
            items[:] = selected

    if e2e_run:
        for item in items:
            if "e2e" in item.keywords:
                if (
                    item.get_closest_marker("skip_in_environments") is not None
                    and e2e_env in item.get_closest_marker("skip_in_environments").args[0]
                ):
                    item.add_marker(skip_e2e_environment)
            if "e2e" not in item.keywords:
                item.add_marker(skip_non_e2e)
    else:
        for item in items:
            if "e2e" in item.keywords:
                item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def unit_test_settings() -> Generator[_SharedConfig, None, None]:
    with patch.dict(os.environ, {"ENVIRONMENT": Environment.UNIT_TEST.value}):
        yield get_settings()
