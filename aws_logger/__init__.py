"""
aws-logger - ship application logs to AWS CloudWatch Logs and Kinesis.

This package provides:
- CloudWatchSink: one log event per call, with sequence token renewal
- KinesisSink: one data record per call
- LogSinkHandler / setup_logging: standard library logging integration

Usage:
    from aws_logger import CloudWatchSink, KinesisSink

    sink = CloudWatchSink({"groupName": "app", "streamName": "web-1"})
    sink.log("error", "disk {pct}% full", {"pct": 91})

Example:
    # Route standard logging through a sink
    from aws_logger import setup_logging, sinks_from_env

    setup_logging(*sinks_from_env())

    import logging
    logger = logging.getLogger(__name__)
    logger.warning("Cache miss rate {rate}", extra={"rate": 0.4})
"""

from .base import BaseSink
from .clients import create_client
from .cloudwatch import CloudWatchSink
from .config import CloudWatchConfig, Credentials, KinesisConfig, SinkConfig
from .errors import ConfigurationError, RemoteRejected, SinkError, TransportFailure
from .formatter import LineFormatter, LogRecord, interpolate
from .handler import LogSinkHandler, setup_logging
from .kinesis import KinesisSink
from .registry import create_sink, register_sink, sinks_from_env

__all__ = [
    # Sinks
    "BaseSink",
    "CloudWatchSink",
    "KinesisSink",
    "create_sink",
    "register_sink",
    "sinks_from_env",
    # Configuration
    "SinkConfig",
    "CloudWatchConfig",
    "KinesisConfig",
    "Credentials",
    "create_client",
    # Formatting
    "LineFormatter",
    "LogRecord",
    "interpolate",
    # Logging integration
    "LogSinkHandler",
    "setup_logging",
    # Errors
    "SinkError",
    "ConfigurationError",
    "RemoteRejected",
    "TransportFailure",
]

__version__ = "1.0.0"
