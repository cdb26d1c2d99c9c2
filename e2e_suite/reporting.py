import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from _pytest.config import Config
from _pytest.config.argparsing import Parser
from _pytest.main import Session
from _pytest.reports import TestReport
from jinja2 import Environment, PackageLoader, select_autoescape

from e2e_suite.helpers.utils import get_timestamp
from e2e_suite.logging import logger
from e2e_suite.types import TestStatus

REPORT_TEMPLATE = "timestamp_report.html"

_jinja_env = Environment(loader=PackageLoader("e2e_suite", "templates"), autoescape=select_autoescape())


@dataclass
class TestRecord:
    __test__ = False

    nodeid: str
    title: str
    file: str
    line: int | None
    status: TestStatus = TestStatus.PASSED
    duration: float = 0.0
    error: str | None = None
    retries: int = 0
    attachments: list[dict[str, str]] = field(default_factory=list)


@dataclass
class RunSummary:
    timestamp: str
    start_time: str
    end_time: str
    duration: float
    total: int
    passed: int
    failed: int
    skipped: int
    timed_out: int
    tests: list[TestRecord]

    @property
    def pass_rate(self) -> str:
        return f"{self.passed / self.total * 100:.2f}" if self.total else "0"

    @property
    def status(self) -> str:
        if self.failed or self.timed_out:
            return "failed"
        return "passed"

    @property
    def status_colour(self) -> str:
        if self.passed == self.total:
            return "green"
        return "red" if self.failed or self.timed_out else "orange"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data |= {"pass_rate": self.pass_rate, "status": self.status}
        return data


def _status_for(report: TestReport) -> TestStatus:
    if report.skipped:
        return TestStatus.SKIPPED
    if report.failed:
        if "TimeoutError" in report.longreprtext:
            return TestStatus.TIMED_OUT
        return TestStatus.FAILED
    return TestStatus.PASSED


class TimestampReporter:
    """Writes an HTML and JSON summary of the run to `<output_dir>/<YYYY-MM-DD>/<timestamp>_test-results.*`.

    Runs on the xdist controller only; worker reports arrive through `pytest_runtest_logreport` as usual.
    """

    def __init__(self, output_dir: str | Path, now: datetime | None = None) -> None:
        self.started_at = now or datetime.now()
        self.timestamp = get_timestamp(self.started_at)
        self.output_dir = Path(output_dir) / self.started_at.strftime("%Y-%m-%d")
        self.records: dict[str, TestRecord] = {}

    def _record_for(self, report: TestReport) -> TestRecord:
        if report.nodeid not in self.records:
            file, line, title = report.location
            self.records[report.nodeid] = TestRecord(
                nodeid=report.nodeid,
                title=title,
                file=file,
                line=line + 1 if line is not None else None,
            )
        return self.records[report.nodeid]

    def pytest_sessionstart(self, session: Session) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def pytest_runtest_logreport(self, report: TestReport) -> None:
        record = self._record_for(report)
        record.duration += report.duration

        if report.outcome == "rerun":
            record.retries += 1
            return

        for name, value in report.user_properties:
            if name.startswith("attachment:"):
                attachment = {"name": name.removeprefix("attachment:"), "path": str(value)}
                # user_properties are copied onto every phase report
                if attachment not in record.attachments:
                    record.attachments.append(attachment)

        if report.when == "call" or report.failed or report.skipped:
            # A failing teardown must not turn a reported failure back into a pass.
            if record.status in {TestStatus.FAILED, TestStatus.TIMED_OUT} and not report.failed:
                return
            record.status = _status_for(report)
            if report.failed:
                record.error = report.longreprtext.splitlines()[-1] if report.longreprtext else None

    def build_summary(self, now: datetime | None = None) -> RunSummary:
        ended_at = now or datetime.now()
        tests = list(self.records.values())
        return RunSummary(
            timestamp=self.timestamp,
            start_time=self.started_at.isoformat(timespec="seconds"),
            end_time=ended_at.isoformat(timespec="seconds"),
            duration=round((ended_at - self.started_at).total_seconds(), 3),
            total=len(tests),
            passed=sum(1 for test in tests if test.status == TestStatus.PASSED),
            failed=sum(1 for test in tests if test.status == TestStatus.FAILED),
            skipped=sum(1 for test in tests if test.status == TestStatus.SKIPPED),
            timed_out=sum(1 for test in tests if test.status == TestStatus.TIMED_OUT),
            tests=tests,
        )

    def write(self, summary: RunSummary) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        html_path = self.output_dir / f"{self.timestamp}_test-results.html"
        html_path.write_text(_jinja_env.get_template(REPORT_TEMPLATE).render(summary=summary), encoding="utf-8")

        json_path = html_path.with_suffix(".json")
        json_path.write_text(json.dumps(summary.to_dict(), indent=2, default=str), encoding="utf-8")
        return html_path

    def pytest_sessionfinish(self, session: Session, exitstatus: int) -> None:
        summary = self.build_summary()
        html_path = self.write(summary)
        logger.info(
            "Report written to %(path)s: %(passed)s/%(total)s passed",
            {"path": str(html_path), "passed": summary.passed, "total": summary.total},
        )


def pytest_addoption(parser: Parser) -> None:
    group = parser.getgroup("e2e-suite reporting")
    group.addoption(
        "--timestamp-report-dir",
        default="playwright-report",
        help="directory that receives the dated HTML/JSON run report (default: playwright-report)",
    )
    group.addoption(
        "--no-timestamp-report",
        action="store_true",
        default=False,
        help="do not write the dated HTML/JSON run report",
    )


def pytest_configure(config: Config) -> None:
    # Unit test runs and xdist workers never write a report.
    if not config.getoption("e2e", default=False) or hasattr(config, "workerinput"):
        return
    if config.getoption("no_timestamp_report"):
        return
    config.pluginmanager.register(TimestampReporter(config.getoption("timestamp_report_dir")), "timestamp-reporter")


def latest_report(output_dir: str | Path) -> Path | None:
    reports = sorted(Path(output_dir).glob("*/*_test-results.html"))
    return reports[-1] if reports else None
