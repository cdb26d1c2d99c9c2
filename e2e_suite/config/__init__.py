import os
from enum import Enum
from typing import Tuple, Type

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from e2e_suite.data.urls import BASE_URLS
from e2e_suite.types import Browser, Language, LogFormats, LogLevels, ScreenshotMode


class Environment(str, Enum):
    UNIT_TEST = "unit_test"
    LOCAL = "local"
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class _BaseConfig(BaseSettings):
    """
    Stop pydantic-settings from reading configuration from anywhere other than the environment.
    """

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (env_settings,)


class _SharedConfig(_BaseConfig):
    """Shared configuration that is acceptable to be present in all environments (but we'd never expect to instantiate
    this class directly).

    These values are read back by the browser fixtures and step definitions. The CLI runner writes them into the
    environment of the pytest process it spawns, so anything settable from the command line must live here.

    Default configuration values, if provided, should be:
    1. valid and sensible when pointed at the public demo sites
    2. acceptable public values, considering they will be in source control
    """

    ENVIRONMENT: Environment
    BASE_URL: str

    # Browser
    BROWSER: Browser = Browser.CHROMIUM
    HEADED: bool = False

    # Timeouts, in milliseconds unless stated otherwise
    TIMEOUT: int = 60_000
    ELEMENT_TIMEOUT: int = 30_000
    SLOW_TIMEOUT: int = 120_000

    # Artifacts
    SCREENSHOTS: ScreenshotMode = ScreenshotMode.ON_FAILURE
    VIDEOS: bool = False
    TRACE: bool = False
    SCREENSHOTS_DIR: str = "screenshots"
    REPORTS_DIR: str = "reports"
    PLAYWRIGHT_REPORT_DIR: str = "playwright-report"

    # Runner
    LANGUAGE: Language = Language.ENGLISH
    PARALLEL: int = 1

    # Logging
    LOG_LEVEL: LogLevels = "INFO"
    LOG_FORMATTER: LogFormats = "json"


class LocalConfig(_SharedConfig):
    """
    Overrides / default configuration for running against an application on a developer's machine.
    """

    ENVIRONMENT: Environment = Environment.LOCAL
    BASE_URL: str = BASE_URLS["local"]
    HEADED: bool = True

    # Logging
    LOG_FORMATTER: LogFormats = "plaintext"


class UnitTestConfig(LocalConfig):
    """
    Overrides / default configuration for running unit tests.
    """

    ENVIRONMENT: Environment = Environment.UNIT_TEST
    HEADED: bool = False


class DevConfig(_SharedConfig):
    """
    Overrides / default configuration for the 'dev' target
    """

    ENVIRONMENT: Environment = Environment.DEV
    BASE_URL: str = BASE_URLS["dev"]


class StagingConfig(_SharedConfig):
    """
    Overrides / default configuration for the 'staging' target
    """

    ENVIRONMENT: Environment = Environment.STAGING
    BASE_URL: str = BASE_URLS["staging"]


class ProdConfig(_SharedConfig):
    """
    Overrides / default configuration for the 'prod' target
    """

    ENVIRONMENT: Environment = Environment.PROD
    BASE_URL: str = BASE_URLS["prod"]


def get_settings() -> _SharedConfig:
    environment = os.getenv("ENVIRONMENT", Environment.PROD.value)
    match Environment(environment):
        case Environment.UNIT_TEST:
            return UnitTestConfig()  # type: ignore[call-arg]
        case Environment.LOCAL:
            return LocalConfig()  # type: ignore[call-arg]
        case Environment.DEV:
            return DevConfig()  # type: ignore[call-arg]
        case Environment.STAGING:
            return StagingConfig()  # type: ignore[call-arg]
        case Environment.PROD:
            return ProdConfig()  # type: ignore[call-arg]

    raise ValueError(f"Unknown environment: {environment}")
