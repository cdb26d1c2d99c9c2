import os
import platform
import subprocess
import sys
from datetime import datetime
from pathlib import Path

import click

from e2e_suite.config import Environment
from e2e_suite.helpers.utils import get_timestamp
from e2e_suite.reporting import latest_report
from e2e_suite.runner.suites import (
    MAX_PARALLEL,
    MAX_RETRIES,
    SUITES,
    VERSION,
    RunOptions,
    build_environment,
    build_pytest_args,
    format_duration,
    optimal_parallel_count,
    total_memory_gb,
)
from e2e_suite.types import Browser, Language, ScreenshotMode

_RUNNABLE_ENVIRONMENTS = [env.value for env in Environment if env != Environment.UNIT_TEST]


def show_execution_plan(options: RunOptions, command: list[str]) -> None:
    click.secho("Execution plan", fg="cyan", bold=True)
    if options.suite:
        suite = SUITES[options.suite]
        click.echo(f"  Suite:        {suite.name(options.language)} ({suite.description(options.language)})")
        click.echo(f"  Estimate:     {suite.estimated_time}")
    click.echo(f"  Language:     {options.language.value}")
    click.echo(f"  Browser:      {options.browser.value} ({'headed' if options.headed else 'headless'})")
    click.echo(f"  Environment:  {options.environment.value} ({options.base_url})")
    click.echo(f"  Workers:      {options.parallel}")
    click.echo(f"  Retries:      {options.retries}")
    click.echo(f"  Timeout:      {options.timeout}s")
    click.echo(f"  Screenshots:  {options.screenshots.value}")
    click.echo(f"  Videos/trace: {'on' if options.videos else 'off'}/{'on' if options.trace else 'off'}")
    if options.marker_expression:
        click.echo(f"  Markers:      {options.marker_expression}")
    click.echo(f"  Command:      {' '.join(command)}")


def show_results(exit_code: int, elapsed: float) -> None:
    if exit_code == 0:
        click.secho(f"All tests passed in {format_duration(elapsed)}", fg="green")
    else:
        click.secho(f"Tests failed (exit code {exit_code}) after {format_duration(elapsed)}", fg="red")


def prompt_for_options(options: RunOptions) -> RunOptions:
    language = Language(
        click.prompt("Language", type=click.Choice([lang.value for lang in Language]), default=options.language.value)
    )
    suite = click.prompt("Suite", type=click.Choice(list(SUITES)), default=options.suite or "smoke")
    browser = Browser(
        click.prompt("Browser", type=click.Choice([b.value for b in Browser]), default=options.browser.value)
    )
    environment = Environment(
        click.prompt("Environment", type=click.Choice(_RUNNABLE_ENVIRONMENTS), default=options.environment.value)
    )
    headed = click.confirm("Run headed?", default=options.headed)
    parallel = click.prompt("Workers", type=click.IntRange(1, MAX_PARALLEL), default=options.parallel)
    return RunOptions(
        language=language,
        suite=suite,
        browser=browser,
        environment=environment,
        headed=headed,
        parallel=parallel,
        tags=options.tags,
        feature=options.feature,
        timeout=options.timeout,
        retries=options.retries,
        screenshots=options.screenshots,
        videos=options.videos,
        trace=options.trace,
        generate_report=options.generate_report,
    )


@click.group(help="Run the browser test suites through pytest")
@click.version_option(VERSION, prog_name="e2e-suite")
def cli() -> None:
    pass


@cli.command("run", help="Run scenarios against one of the target environments")
@click.option("-l", "--language", type=click.Choice([lang.value for lang in Language]), default=Language.ENGLISH.value)
@click.option("-s", "--suite", type=click.Choice(list(SUITES)), default=None)
@click.option("-b", "--browser", type=click.Choice([b.value for b in Browser]), default=Browser.CHROMIUM.value)
@click.option("-e", "--environment", type=click.Choice(_RUNNABLE_ENVIRONMENTS), default=Environment.PROD.value)
@click.option("-t", "--tags", default=None, help="Cucumber style tag expression, e.g. '@smoke and not @slow'")
@click.option("-f", "--feature", default=None, help="only run scenarios from this feature file")
@click.option("--headed", is_flag=True, default=False)
@click.option("-p", "--parallel", type=click.IntRange(1, MAX_PARALLEL), default=None, help="worker processes")
@click.option("--timeout", type=click.IntRange(min=1), default=120, help="page and navigation timeout in seconds")
@click.option("--retries", type=click.IntRange(0, MAX_RETRIES), default=1)
@click.option(
    "--screenshots",
    type=click.Choice([mode.value for mode in ScreenshotMode]),
    default=ScreenshotMode.ON_FAILURE.value,
)
@click.option("--videos", is_flag=True, default=False)
@click.option("--trace", is_flag=True, default=False)
@click.option("--dry-run", is_flag=True, default=False, help="show the execution plan without running anything")
@click.option("--no-report", is_flag=True, default=False)
@click.option("--open-report", is_flag=True, default=False)
@click.option("-i", "--interactive", is_flag=True, default=False)
def run(
    language: str,
    suite: str | None,
    browser: str,
    environment: str,
    tags: str | None,
    feature: str | None,
    headed: bool,
    parallel: int | None,
    timeout: int,
    retries: int,
    screenshots: str,
    videos: bool,
    trace: bool,
    dry_run: bool,
    no_report: bool,
    open_report: bool,
    interactive: bool,
) -> None:
    options = RunOptions(
        language=Language(language),
        suite=suite,
        browser=Browser(browser),
        environment=Environment(environment),
        tags=tags,
        feature=feature,
        headed=headed,
        parallel=parallel or optimal_parallel_count(),
        timeout=timeout,
        retries=retries,
        screenshots=ScreenshotMode(screenshots),
        videos=videos,
        trace=trace,
        generate_report=not no_report,
    )
    if interactive:
        options = prompt_for_options(options)

    if options.generate_report:
        Path(options.reports_dir).mkdir(parents=True, exist_ok=True)

    command = [sys.executable, "-m", "pytest", *build_pytest_args(options, get_timestamp())]
    show_execution_plan(options, command)
    if dry_run:
        click.secho("Dry run: nothing was executed", fg="yellow")
        return

    started = datetime.now()
    result = subprocess.run(command, env=build_environment(options), check=False)
    show_results(result.returncode, (datetime.now() - started).total_seconds())

    if open_report and options.generate_report:
        if report := latest_report(options.playwright_report_dir):
            click.launch(str(report))
        else:
            click.secho("No report found to open", fg="yellow")

    sys.exit(result.returncode)


@cli.command("list", help="List the available suites")
@click.option("-l", "--language", type=click.Choice([lang.value for lang in Language]), default=Language.ENGLISH.value)
def list_suites(language: str) -> None:
    lang = Language(language)
    for suite in sorted(SUITES.values(), key=lambda s: (s.priority, s.key)):
        click.echo(f"{suite.key:<12} {suite.tag(lang):<16} {suite.name(lang)} - {suite.description(lang)}")
        click.echo(f"{'':<12} priority {suite.priority}, about {suite.estimated_time}")


@cli.command("system-info", help="Show details of this machine relevant to test execution")
def system_info() -> None:
    click.echo(f"Platform:          {platform.system()} {platform.release()} ({platform.machine()})")
    click.echo(f"Python:            {platform.python_version()}")
    click.echo(f"CPUs:              {os.cpu_count() or 1}")
    click.echo(f"Memory:            {total_memory_gb():.1f} GB")
    click.echo(f"Optimal workers:   {optimal_parallel_count()}")


@cli.command("version", help="Show the runner version")
def version() -> None:
    click.echo(f"e2e-suite {VERSION}")


if __name__ == "__main__":
    cli()
