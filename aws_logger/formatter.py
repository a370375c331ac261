"""
Line formatting shared by the CloudWatch and Kinesis sinks.

A log call is turned into one flat, separator-delimited line:

    [timestamp<sep>]host<sep>Level<sep>message\\n

The message may carry ``{name}`` placeholders that are resolved against the
call's context mapping. Placeholders without a matching context key are left
untouched, and a backslash in front of the brace disables interpolation.

Usage:
    formatter = LineFormatter(field_separator="\\t", host_address="10.0.0.5")
    formatter.format(LogRecord("error", "disk {pct}% full", {"pct": 91}))
    # '10.0.0.5\\tError\\tdisk 91% full\\n'
"""

import json
import os
import re
import socket
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

DEFAULT_FIELD_SEPARATOR = "\t"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FALLBACK_HOST_ADDRESS = "127.0.0.1"

PLACEHOLDER_PATTERN = re.compile(r"(?<!\\)\{([a-z0-9_-]+)\}", re.IGNORECASE)


@dataclass(frozen=True)
class LogRecord:
    """One log call as handed over by the host framework."""

    level: str
    message: str
    context: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "context", MappingProxyType(dict(self.context or {})))

    @property
    def scope(self) -> list[str]:
        """Scopes attached to the record through its ``scope`` context key."""
        scope = self.context.get("scope")
        if not scope:
            return []
        if isinstance(scope, str):
            return [scope]
        return [str(s) for s in scope]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str | int | float):
        return str(value)
    if isinstance(value, Mapping | list | tuple):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    if hasattr(value, "__json__"):
        return json.dumps(value.__json__(), ensure_ascii=False, separators=(",", ":"), default=str)
    return str(value)


def interpolate(message: str, context: Mapping[str, Any] | None) -> str:
    """Replace ``{name}`` placeholders in message with values from context."""
    if not context or "{" not in message:
        return message

    def replace(match: re.Match) -> str:
        key = match.group(1)
        if key not in context:
            return match.group(0)
        return _render(context[key])

    return PLACEHOLDER_PATTERN.sub(replace, message)


def capitalize_level(level: str) -> str:
    """Upper-case the first character of a level name, keep the rest."""
    level = str(level)
    return level[:1].upper() + level[1:]


def resolve_host_address() -> str:
    """
    Network address of the local server.

    ``SERVER_ADDR`` wins when the environment provides it (web servers do),
    otherwise the address the local hostname resolves to.
    """
    addr = os.environ.get("SERVER_ADDR")
    if addr:
        return addr
    try:
        return socket.gethostbyname(socket.gethostname())
    except OSError:
        return FALLBACK_HOST_ADDRESS


class LineFormatter:
    """Turns a LogRecord into a single delimited line."""

    def __init__(
        self,
        field_separator: str = DEFAULT_FIELD_SEPARATOR,
        host_address: str | Callable[[], str] | None = None,
        date_format: str | None = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            field_separator: Separator placed between fields
            host_address: Fixed address, a callable returning one, or None to
                resolve it from the environment on every call
            date_format: strftime pattern; when set, the line starts with the
                formatted local time
            clock: Returns the current time as epoch seconds
        """
        self.field_separator = field_separator
        self.host_address = host_address
        self.date_format = date_format
        self.clock = clock

    def _host(self) -> str:
        if self.host_address is None:
            return resolve_host_address()
        if callable(self.host_address):
            return self.host_address()
        return self.host_address

    def prefix_fields(self) -> list[str]:
        fields = []
        if self.date_format:
            fields.append(datetime.fromtimestamp(self.clock()).strftime(self.date_format))
        fields.append(self._host())
        return fields

    def format(self, record: LogRecord) -> str:
        fields = self.prefix_fields()
        fields.append(capitalize_level(record.level))
        fields.append(interpolate(record.message, record.context))
        return self.field_separator.join(fields) + "\n"
