from enum import StrEnum
from typing import Literal

LogFormats = Literal["plaintext", "json"]
LogLevels = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Language(StrEnum):
    ENGLISH = "en"
    JAPANESE = "jp"


class Browser(StrEnum):
    CHROMIUM = "chromium"
    CHROME = "chrome"
    FIREFOX = "firefox"
    WEBKIT = "webkit"
    EDGE = "edge"

    @property
    def engine(self) -> str:
        """The Playwright browser type that drives this browser."""
        match self:
            case Browser.FIREFOX:
                return "firefox"
            case Browser.WEBKIT:
                return "webkit"
        return "chromium"

    @property
    def channel(self) -> str | None:
        """The branded Chromium channel, if this browser is one."""
        match self:
            case Browser.CHROME:
                return "chrome"
            case Browser.EDGE:
                return "msedge"
        return None


class ScreenshotMode(StrEnum):
    ALWAYS = "always"
    ON_FAILURE = "on-failure"
    NEVER = "never"


class TestStatus(StrEnum):
    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    TIMED_OUT = "timedOut"
