"""
Sink configuration.

Configuration arrives from the host framework as a plain dictionary using
camelCase keys (``groupName``, ``fieldSeparator``, ...). It is merged over the
defaults below and validated once, when the sink is built.

Usage:
    config = CloudWatchConfig.from_mapping({
        "groupName": "app",
        "streamName": "web-1",
        "levels": ["error", "critical"],
    })

    # or from AWS_LOGGER_CLOUDWATCH_GROUP_NAME, AWS_LOGGER_CLOUDWATCH_STREAM_NAME, ...
    config = CloudWatchConfig.from_env("AWS_LOGGER_CLOUDWATCH_")
"""

import logging
import os
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .formatter import DEFAULT_DATE_FORMAT, DEFAULT_FIELD_SEPARATOR

logger = logging.getLogger(__name__)


def _split(value: Any) -> Any:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


class Credentials(BaseModel):
    """Static credentials or a named profile used to sign requests."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str | None = None
    secret: str | None = None
    token: str | None = None
    profile: str | None = None

    @property
    def is_static(self) -> bool:
        return bool(self.key and self.secret)


class SinkConfig(BaseModel):
    """Settings shared by every sink."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    levels: list[str] = Field(default_factory=list)
    scopes: list[str] | Literal[False] = Field(default_factory=list)
    field_separator: str = Field(
        DEFAULT_FIELD_SEPARATOR,
        validation_alias=AliasChoices("field_separator", "fieldSeparator"),
    )
    region: str = "us-east-1"
    api_version: str = Field(
        "latest",
        validation_alias=AliasChoices("api_version", "apiVersion", "version"),
    )
    credentials: Credentials | Literal[False] | None = Field(default_factory=Credentials)
    host_address: str | None = Field(
        None,
        validation_alias=AliasChoices("host_address", "hostAddress"),
    )

    @field_validator("levels", mode="before")
    @classmethod
    def _normalize_levels(cls, value: Any) -> Any:
        value = _split(value)
        if isinstance(value, Iterable):
            return [str(level).lower() for level in value]
        return value

    @field_validator("scopes", mode="before")
    @classmethod
    def _normalize_scopes(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip().lower() == "false":
            return False
        return _split(value)

    @classmethod
    def known_keys(cls) -> set[str]:
        """Field names plus every accepted alias."""
        keys = set()
        for name, field in cls.model_fields.items():
            keys.add(name)
            if isinstance(field.validation_alias, AliasChoices):
                keys.update(c for c in field.validation_alias.choices if isinstance(c, str))
        return keys

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None = None, **overrides: Any):
        """
        Validate a framework config dictionary merged over the defaults.

        Keys the sink does not use (``className``, ``engine``, ...) are
        ignored.
        """
        data = {**(mapping or {}), **overrides}
        ignored = sorted(set(data) - cls.known_keys())
        if ignored:
            logger.debug(f"{cls.__name__} ignoring unused keys: {ignored}")
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid {cls.__name__}: {exc}") from exc

    @classmethod
    def from_env(cls, prefix: str, environ: Mapping[str, str] | None = None):
        """
        Build a config from ``{prefix}{FIELD}`` environment variables.

        Field names are upper snake case (``GROUP_NAME``, ``FIELD_SEPARATOR``).
        ``LEVELS`` and ``SCOPES`` are comma separated. Credentials are left to
        the SDK's default chain unless ``{prefix}PROFILE`` is set.
        """
        environ = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        for name in cls.model_fields:
            if name == "credentials":
                continue
            value = environ.get(f"{prefix}{name.upper()}")
            if value is not None:
                data[name] = value
        profile = environ.get(f"{prefix}PROFILE")
        data["credentials"] = Credentials(profile=profile) if profile else None
        logger.debug(f"Loaded {cls.__name__} from environment prefix {prefix!r}: {sorted(data)}")
        return cls.from_mapping(data)

    def accepts(self, level: str, scope: str | Iterable[str] | None = None) -> bool:
        """Whether a record with this level and scope belongs to the sink."""
        if self.levels and str(level).lower() not in self.levels:
            return False

        if isinstance(scope, str):
            scope = [scope]
        record_scopes = set(scope or [])

        if self.scopes is False:
            return not record_scopes
        if not self.scopes:
            return True
        return bool(record_scopes & set(self.scopes))


class CloudWatchConfig(SinkConfig):
    """CloudWatch Logs target: a log stream inside a log group."""

    group_name: str | None = Field(None, validation_alias=AliasChoices("group_name", "groupName"))
    stream_name: str | None = Field(None, validation_alias=AliasChoices("stream_name", "streamName"))


class KinesisConfig(SinkConfig):
    """
    Kinesis Data Streams target.

    All records of one sink share ``partition_key`` and therefore land on the
    same shard.
    """

    partition_key: str | None = Field(None, validation_alias=AliasChoices("partition_key", "partitionKey"))
    stream_name: str | None = Field(None, validation_alias=AliasChoices("stream_name", "streamName"))
    date_format: str = Field(DEFAULT_DATE_FORMAT, validation_alias=AliasChoices("date_format", "dateFormat"))
