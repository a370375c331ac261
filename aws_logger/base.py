"""Shared plumbing for sinks."""

import time
from collections.abc import Callable, Mapping
from typing import Any

from .clients import ClientFactory, create_client
from .config import SinkConfig
from .formatter import LineFormatter, LogRecord


class BaseSink:
    """
    A destination that formats log calls and forwards them to an AWS service.

    Subclasses set ``config_class`` and ``service_name`` and implement
    ``_write``. A sink is built once per logging channel and lives for the
    process; every ``log`` call is independent of the previous ones.
    """

    config_class: type[SinkConfig] = SinkConfig
    service_name: str = ""

    def __init__(
        self,
        config: SinkConfig | Mapping[str, Any] | None = None,
        formatter: LineFormatter | None = None,
        client_factory: ClientFactory = create_client,
        clock: Callable[[], float] = time.time,
    ):
        if not isinstance(config, self.config_class):
            config = self.config_class.from_mapping(config)
        self.config = config
        self.clock = clock
        self.client_factory = client_factory
        self.formatter = formatter or self._default_formatter()

    def _default_formatter(self) -> LineFormatter:
        return LineFormatter(
            field_separator=self.config.field_separator,
            host_address=self.config.host_address,
            clock=self.clock,
        )

    def accepts(self, level: str, context: Mapping[str, Any] | None = None) -> bool:
        """Level and scope filtering as configured by ``levels`` / ``scopes``."""
        return self.config.accepts(level, LogRecord(level, "", context or {}).scope)

    def log(self, level: str, message: str, context: Mapping[str, Any] | None = None) -> None:
        """Format one log call and submit it. Raises SinkError on failure."""
        line = self.formatter.format(LogRecord(level, message, context or {}))
        self._write(line)

    def _write(self, line: str) -> None:
        raise NotImplementedError

    def _client(self) -> Any:
        return self.client_factory(self.service_name, self.config)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(region={self.config.region!r})"
