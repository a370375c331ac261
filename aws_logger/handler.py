"""
Standard library logging integration.

Usage:
    from aws_logger import CloudWatchSink, setup_logging

    setup_logging(CloudWatchSink({"groupName": "app", "streamName": "web-1"}))

    import logging
    logger = logging.getLogger(__name__)
    logger.error("disk {pct}% full", extra={"pct": 91})
"""

import json
import logging

from .base import BaseSink

# Records from these loggers are never shipped; the sinks log through them
# while shipping.
IGNORED_LOGGERS = ("aws_logger", "boto3", "botocore", "urllib3", "s3transfer")

# Attributes every LogRecord carries; anything else came in through ``extra``.
RESERVED_ATTRS = frozenset(
    (
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
        "asctime",
    )
)


def _is_ignored(logger_name: str) -> bool:
    return any(logger_name == name or logger_name.startswith(f"{name}.") for name in IGNORED_LOGGERS)


def extract_context(record: logging.LogRecord) -> dict:
    """Collect the serializable ``extra`` attributes of a record."""
    context = {}
    for key, value in record.__dict__.items():
        if key in RESERVED_ATTRS:
            continue
        if isinstance(value, str | int | float | bool | type(None)):
            context[key] = value
        elif isinstance(value, list | dict):
            try:
                json.dumps(value)
                context[key] = value
            except (TypeError, ValueError):
                pass
    return context


class LogSinkHandler(logging.Handler):
    """
    Python logging handler that forwards records to a sink.

    The sink's ``levels`` / ``scopes`` settings decide which records are
    shipped; ``scope`` is read from the record's ``extra``. Tracebacks go to
    the ``exception`` context key so the shipped line stays flat.
    """

    def __init__(self, sink: BaseSink, level: int = logging.NOTSET):
        super().__init__(level=level)
        self.sink = sink

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_ignored(record.name):
            return False
        return super().filter(record)

    def emit(self, record: logging.LogRecord):
        try:
            context = extract_context(record)
            level = record.levelname.lower()
            if not self.sink.accepts(level, context):
                return
            if record.exc_info:
                formatter = self.formatter or logging.Formatter()
                context["exception"] = formatter.formatException(record.exc_info)
            self.sink.log(level, record.getMessage(), context)
        except Exception:
            self.handleError(record)


def setup_logging(
    *sinks: BaseSink,
    level: int = logging.INFO,
    also_console: bool = True,
) -> list[LogSinkHandler]:
    """
    Attach one LogSinkHandler per sink to the root logger.

    Args:
        *sinks: Sinks to ship to
        level: Minimum level handled (default: INFO)
        also_console: Also log to console (default: True)

    Returns:
        The installed handlers
    """
    root_logger = logging.getLogger()
    handlers = []

    for sink in sinks:
        handler = LogSinkHandler(sink, level=level)
        root_logger.addHandler(handler)
        handlers.append(handler)

    if also_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(console_handler)

    if root_logger.level in (logging.NOTSET, logging.WARNING):
        root_logger.setLevel(level)

    return handlers
