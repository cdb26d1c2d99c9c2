import datetime
import logging
import time
from collections.abc import Iterable, Mapping
from contextvars import ContextVar
from logging import LogRecord
from logging.config import dictConfig
from typing import Any

from pythonjsonlogger.core import LogData
from pythonjsonlogger.json import JsonFormatter as BaseJSONFormatter

from e2e_suite.config import _SharedConfig

LOGGER_NAME = "e2e_suite"

logger = logging.getLogger(LOGGER_NAME)

_scenario_context: ContextVar[dict[str, str] | None] = ContextVar("scenario_context", default=None)


def get_default_logging_config(settings: _SharedConfig) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "scenario_extra_context": {
                "()": "e2e_suite.logging.ScenarioExtraContextFilter",
            },
            "reject_mutable_data_structures": {
                "()": "e2e_suite.logging.RejectMutableDataStructuresFilter",
            },
        },
        "formatters": {
            "plaintext": {
                "()": "logging.Formatter",
                "fmt": "%(asctime)s %(levelname)s - %(message)s - from %(funcName)s() in %(filename)s:%(lineno)d",
            },
            "json": {
                "()": "e2e_suite.logging.JSONFormatter",
                "fmt": "%(asctime)s %(name)s %(levelname)s - %(message)s - from %(funcName)s in %(pathname)s:%(lineno)d",
            },
        },
        "handlers": {
            "null": {
                "class": "logging.NullHandler",
            },
            "default": {
                "filters": ["scenario_extra_context", "reject_mutable_data_structures"],
                "formatter": settings.LOG_FORMATTER,
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {
                "handlers": ["null"],
            },
            LOGGER_NAME: {
                "handlers": ["default"],
                "level": settings.LOG_LEVEL,
            },
        },
    }


def init_logging(settings: _SharedConfig, log_config: dict[str, Any] | None = None) -> None:
    log_config = log_config or get_default_logging_config(settings)
    dictConfig(log_config)


def set_scenario_context(**context: str) -> None:
    _scenario_context.set(dict(context))


def clear_scenario_context() -> None:
    _scenario_context.set(None)


class ScenarioExtraContextFilter(logging.Filter):
    """
    Filter which copies the feature and scenario currently being executed (if any)
    onto log records, so that interleaved output from parallel workers can be untangled
    """

    def filter(self, record: LogRecord) -> LogRecord:
        context = _scenario_context.get()
        if context:
            for key, value in context.items():
                setattr(record, key, value)

        return record


class RejectMutableDataStructuresFilter(logging.Filter):
    def filter(self, record: LogRecord) -> LogRecord:
        logging_msg_args: Iterable[Any]
        if isinstance(record.args, Mapping):
            logging_msg_args = record.args.values()
        else:
            logging_msg_args = record.args or ()

        for v in logging_msg_args:
            if not isinstance(v, str | int | float | bool | None | datetime.date):
                # Only basic data types may be logged. Test data is generated to look like real personal data, and
                # dumping whole records makes it easy to end up with form contents and credentials in CI logs.
                raise ValueError(f"Attempt to log data type `{type(v)}` rejected by security policy.")
        return record


class JSONFormatter(BaseJSONFormatter):
    def formatTime(self, record: LogRecord, datefmt: str | None = None) -> str:
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt, ct)
        else:
            s = (
                datetime.datetime.fromtimestamp(record.created, datetime.timezone.utc)
                .astimezone()
                .isoformat(sep=" ", timespec="milliseconds")
            )
        return s

    def process_log_record(self, log_record: LogData) -> LogData:
        for key, newkey in (
            ("asctime", "time"),
            ("scenario", "scenarioName"),
        ):
            try:
                log_record[newkey] = log_record.pop(key)
            except KeyError:
                pass

        log_record["logType"] = "e2e"

        return log_record
