"""
Error types raised by aws-logger sinks.

Every failure of a sink's ``log`` call surfaces as a ``SinkError``:

- RemoteRejected: the AWS service refused the submission (throttling,
  missing stream, stale sequence token, ...)
- TransportFailure: the request never got a service answer (DNS, connection
  refused, timeouts, ...)
- ConfigurationError: the sink configuration could not be validated, or the
  SDK refused to build the request (missing parameters, no credentials)

The botocore exception is always kept as ``__cause__``.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError as BotoConnectionError,
    HTTPClientError,
    NoCredentialsError,
    NoRegionError,
    ParamValidationError,
    PartialCredentialsError,
)

# Raised by botocore before anything is sent.
LOCAL_SETUP_ERRORS = (ParamValidationError, NoCredentialsError, PartialCredentialsError, NoRegionError)


class SinkError(Exception):
    """Base class for every error raised by a sink."""


class ConfigurationError(SinkError):
    """Sink configuration is missing or invalid."""


class RemoteRejected(SinkError):
    """The remote service rejected a submission."""

    def __init__(self, kind: str, details: Mapping[str, Any] | None = None, operation: str | None = None):
        self.kind = kind
        self.details = dict(details or {})
        self.operation = operation
        message = self.details.get("Error", {}).get("Message") or kind
        super().__init__(f"{operation or 'request'} rejected ({kind}): {message}")

    def get(self, field: str, default: Any = None) -> Any:
        """Read a modeled field carried on the error response."""
        if field in self.details:
            return self.details[field]
        return self.details.get("Error", {}).get(field, default)

    @classmethod
    def from_client_error(cls, exc: ClientError) -> "RemoteRejected":
        error = exc.response.get("Error", {})
        return cls(
            kind=error.get("Code", "Unknown"),
            details=exc.response,
            operation=exc.operation_name,
        )


class TransportFailure(SinkError):
    """The request did not reach the service or got no answer."""


@contextmanager
def remote_call(operation: str) -> Iterator[None]:
    """Translate botocore failures raised inside the block into sink errors."""
    try:
        yield
    except ClientError as exc:
        raise RemoteRejected.from_client_error(exc) from exc
    except (BotoConnectionError, HTTPClientError) as exc:
        raise TransportFailure(f"{operation} failed: {exc}") from exc
    except LOCAL_SETUP_ERRORS as exc:
        raise ConfigurationError(f"{operation} not sent: {exc}") from exc
    except BotoCoreError as exc:
        raise SinkError(f"{operation} failed: {exc}") from exc
