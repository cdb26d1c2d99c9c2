import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from e2e_suite.config import Environment
from e2e_suite.data.urls import BASE_URLS
from e2e_suite.types import Browser, Language, ScreenshotMode

VERSION = "2.0.0"

MAX_PARALLEL = 8
MAX_RETRIES = 3

SCENARIO_DIRECTORIES = {
    Language.ENGLISH: "tests/e2e/en",
    Language.JAPANESE: "tests/e2e/jp",
}

_PLAYWRIGHT_SCREENSHOT_MODES = {
    ScreenshotMode.ALWAYS: "on",
    ScreenshotMode.ON_FAILURE: "only-on-failure",
    ScreenshotMode.NEVER: "off",
}


@dataclass(frozen=True)
class Suite:
    key: str
    names: dict[Language, str]
    tags: dict[Language, str]
    descriptions: dict[Language, str]
    priority: int
    estimated_time: str

    def name(self, language: Language) -> str:
        return self.names[language]

    def tag(self, language: Language) -> str:
        return self.tags[language]

    def description(self, language: Language) -> str:
        return self.descriptions[language]


SUITES: dict[str, Suite] = {
    suite.key: suite
    for suite in (
        Suite(
            key="smoke",
            names={Language.ENGLISH: "Smoke Tests", Language.JAPANESE: "スモークテスト"},
            tags={Language.ENGLISH: "@smoke", Language.JAPANESE: "@スモーク"},
            descriptions={Language.ENGLISH: "Basic functionality tests", Language.JAPANESE: "基本的な機能をテストする"},
            priority=1,
            estimated_time="2-5 minutes",
        ),
        Suite(
            key="regression",
            names={Language.ENGLISH: "Regression Tests", Language.JAPANESE: "回帰テスト"},
            tags={Language.ENGLISH: "@regression", Language.JAPANESE: "@回帰テスト"},
            descriptions={Language.ENGLISH: "Full regression testing", Language.JAPANESE: "全機能の回帰テスト"},
            priority=2,
            estimated_time="10-20 minutes",
        ),
        Suite(
            key="e2e",
            names={Language.ENGLISH: "E2E Tests", Language.JAPANESE: "E2Eテスト"},
            tags={Language.ENGLISH: "@e2e", Language.JAPANESE: "@E2E"},
            descriptions={Language.ENGLISH: "End-to-end testing", Language.JAPANESE: "エンドツーエンドテスト"},
            priority=3,
            estimated_time="15-30 minutes",
        ),
        Suite(
            key="contact",
            names={Language.ENGLISH: "Contact Tests", Language.JAPANESE: "お問い合わせテスト"},
            tags={Language.ENGLISH: "@contact", Language.JAPANESE: "@お問い合わせ"},
            descriptions={Language.ENGLISH: "Contact form testing", Language.JAPANESE: "お問い合わせ機能のテスト"},
            priority=2,
            estimated_time="5-10 minutes",
        ),
        Suite(
            key="performance",
            names={Language.ENGLISH: "Performance Tests", Language.JAPANESE: "パフォーマンステスト"},
            tags={Language.ENGLISH: "@performance", Language.JAPANESE: "@パフォーマンス"},
            descriptions={Language.ENGLISH: "Performance testing", Language.JAPANESE: "パフォーマンステスト"},
            priority=3,
            estimated_time="10-15 minutes",
        ),
        Suite(
            key="visual",
            names={Language.ENGLISH: "Visual Tests", Language.JAPANESE: "ビジュアルテスト"},
            tags={Language.ENGLISH: "@visual", Language.JAPANESE: "@ビジュアル"},
            descriptions={Language.ENGLISH: "Visual regression testing", Language.JAPANESE: "ビジュアル回帰テスト"},
            priority=3,
            estimated_time="5-10 minutes",
        ),
    )
}


def total_memory_gb() -> float:
    try:
        return os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES") / 1024**3
    except (AttributeError, ValueError, OSError):
        # Not available on Windows; fall back to the most conservative worker count.
        return 0


def optimal_parallel_count(cpu_count: int | None = None, memory_gb: float | None = None) -> int:
    cpu_count = cpu_count if cpu_count is not None else os.cpu_count() or 1
    memory_gb = memory_gb if memory_gb is not None else total_memory_gb()

    if memory_gb >= 16 and cpu_count >= 8:
        return 4
    if memory_gb >= 8 and cpu_count >= 4:
        return 2
    return 1


def to_marker_expression(tag_expression: str) -> str:
    """Translate a Cucumber tag expression (``@smoke and not @slow``) into a pytest ``-m`` expression."""
    return re.sub(r"@(?=\S)", "", tag_expression).strip()


def format_duration(seconds: float) -> str:
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}h {minutes}m {secs}s"
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


@dataclass(frozen=True)
class RunOptions:
    language: Language = Language.ENGLISH
    browser: Browser = Browser.CHROMIUM
    environment: Environment = Environment.PROD
    suite: str | None = None
    tags: str | None = None
    feature: str | None = None
    headed: bool = False
    parallel: int = field(default_factory=optimal_parallel_count)
    timeout: int = 120
    retries: int = 1
    screenshots: ScreenshotMode = ScreenshotMode.ON_FAILURE
    videos: bool = False
    trace: bool = False
    generate_report: bool = True
    reports_dir: str = "reports"
    playwright_report_dir: str = "playwright-report"

    def __post_init__(self) -> None:
        if not 1 <= self.parallel <= MAX_PARALLEL:
            raise ValueError(f"parallel must be between 1 and {MAX_PARALLEL}")
        if not 0 <= self.retries <= MAX_RETRIES:
            raise ValueError(f"retries must be between 0 and {MAX_RETRIES}")
        if self.suite is not None and self.suite not in SUITES:
            raise ValueError(f"Unknown suite: {self.suite}. Available: {', '.join(SUITES)}")

    @property
    def base_url(self) -> str:
        return BASE_URLS[self.environment.value]

    @property
    def marker_expression(self) -> str | None:
        """Tags take precedence over the suite's tag when both are given."""
        if self.tags:
            return to_marker_expression(self.tags)
        if self.suite:
            return to_marker_expression(SUITES[self.suite].tag(self.language))
        return None


def build_pytest_args(options: RunOptions, timestamp: str) -> list[str]:
    args = [
        SCENARIO_DIRECTORIES[options.language],
        "--e2e",
        "--e2e-env",
        options.environment.value,
        "--browser",
        options.browser.engine,
        "--screenshot",
        _PLAYWRIGHT_SCREENSHOT_MODES[options.screenshots],
        "--video",
        "retain-on-failure" if options.videos else "off",
        "--tracing",
        "retain-on-failure" if options.trace else "off",
    ]

    if options.browser.channel:
        args += ["--browser-channel", options.browser.channel]
    if options.headed:
        args.append("--headed")
    if options.feature:
        args += ["--feature-file", options.feature]
    if (marker_expression := options.marker_expression) is not None:
        args += ["-m", marker_expression]
    if options.parallel > 1:
        args += ["-n", str(options.parallel)]
    if options.retries:
        args += ["--reruns", str(options.retries)]

    if options.generate_report:
        cucumber_json = Path(options.reports_dir) / f"cucumber-report-{options.language.value}-{timestamp}.json"
        args += [
            f"--cucumberjson={cucumber_json}",
            f"--timestamp-report-dir={options.playwright_report_dir}",
        ]
    else:
        args.append("--no-timestamp-report")

    return args


def build_environment(options: RunOptions, base: dict[str, str] | None = None) -> dict[str, str]:
    environment = dict(os.environ if base is None else base)
    environment |= {
        "HEADED": str(options.headed).lower(),
        "BROWSER": options.browser.value,
        "ENVIRONMENT": options.environment.value,
        "BASE_URL": options.base_url,
        "TIMEOUT": str(options.timeout * 1000),
        "SCREENSHOTS": options.screenshots.value,
        "VIDEOS": str(options.videos).lower(),
        "TRACE": str(options.trace).lower(),
        "PARALLEL": str(options.parallel),
        "LANGUAGE": options.language.value,
    }
    return environment
