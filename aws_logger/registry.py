"""
Sink registry.

Maps engine names to sink classes so that sinks can be built from
configuration alone:

    create_sink("cloudwatch", {"groupName": "app", "streamName": "web-1"})

Configure from the environment with AWS_LOGGER_SINKS:
    AWS_LOGGER_SINKS=cloudwatch           # CloudWatch only
    AWS_LOGGER_SINKS=cloudwatch,kinesis   # both, each read from
                                          # AWS_LOGGER_CLOUDWATCH_* / AWS_LOGGER_KINESIS_*
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from .base import BaseSink
from .cloudwatch import CloudWatchSink
from .errors import ConfigurationError
from .kinesis import KinesisSink

logger = logging.getLogger(__name__)

ENV_PREFIX = "AWS_LOGGER_"

_SINK_REGISTRY: dict[str, type[BaseSink]] = {
    "cloudwatch": CloudWatchSink,
    "kinesis": KinesisSink,
}


def register_sink(name: str, sink_class: type[BaseSink]) -> None:
    """Register a sink class under an engine name."""
    _SINK_REGISTRY[name.lower()] = sink_class


def available_sinks() -> list[str]:
    return sorted(_SINK_REGISTRY)


def create_sink(engine: str, config: Mapping[str, Any] | None = None, **kwargs: Any) -> BaseSink:
    """
    Build a sink for engine from a framework config dictionary.

    Extra keyword arguments (formatter, client_factory, clock) are passed to
    the sink constructor.
    """
    sink_class = _SINK_REGISTRY.get(engine.lower())
    if sink_class is None:
        raise ConfigurationError(f"Unknown sink engine '{engine}'. Available: {', '.join(available_sinks())}")
    return sink_class(config, **kwargs)


def sinks_from_env(environ: Mapping[str, str] | None = None) -> list[BaseSink]:
    """Build every sink listed in AWS_LOGGER_SINKS."""
    environ = os.environ if environ is None else environ
    names = [name.strip().lower() for name in environ.get(f"{ENV_PREFIX}SINKS", "").split(",") if name.strip()]

    sinks = []
    for name in names:
        sink_class = _SINK_REGISTRY.get(name)
        if sink_class is None:
            raise ConfigurationError(f"Unknown sink engine '{name}'. Available: {', '.join(available_sinks())}")
        config = sink_class.config_class.from_env(f"{ENV_PREFIX}{name.upper()}_", environ)
        sinks.append(sink_class(config))
        logger.info(f"Initialized {name} sink")

    return sinks
