"""
CloudWatch Logs sink.

Writes each log call as one event to a log stream. Service limits that apply
to every event (not checked locally, violations come back as errors):

- The maximum event size is 1,048,576 bytes.
- There is a quota of 5 requests per second per log stream. Additional
  requests are throttled.

CloudWatch orders writes to a stream with a sequence token. A freshly built
client does not know the current token, so a write may be rejected with
``InvalidSequenceTokenException``. The rejection carries the expected token
and the event is resubmitted once with it. Nothing is remembered between
calls.

Usage:
    sink = CloudWatchSink({"groupName": "app", "streamName": "web-1"})
    sink.log("error", "disk {pct}% full", {"pct": 91})
"""

import logging
from typing import Any

from .base import BaseSink
from .config import CloudWatchConfig
from .errors import RemoteRejected, remote_call

logger = logging.getLogger(__name__)

MAX_EVENT_BYTES = 1_048_576
MAX_REQUESTS_PER_SECOND = 5

INVALID_SEQUENCE_TOKEN = "InvalidSequenceTokenException"


class CloudWatchSink(BaseSink):
    """Sends log lines to a CloudWatch Logs stream."""

    config_class = CloudWatchConfig
    service_name = "logs"

    def _write(self, line: str) -> None:
        client = self._client()
        request: dict[str, Any] = {
            "logGroupName": self.config.group_name,
            "logStreamName": self.config.stream_name,
            "logEvents": [
                {
                    "timestamp": round(self.clock() * 1000),
                    "message": line,
                },
            ],
        }

        try:
            self._put_log_events(client, request)
        except RemoteRejected as exc:
            if exc.kind != INVALID_SEQUENCE_TOKEN:
                raise
            token = exc.get("expectedSequenceToken")
            if token is None:
                raise
            logger.info(
                f"Sequence token rejected for {self.config.group_name}/{self.config.stream_name}, "
                "retrying with expected token"
            )
            self._put_log_events(client, {**request, "sequenceToken": token})

    def _put_log_events(self, client: Any, request: dict[str, Any]) -> Any:
        logger.debug(
            f"PutLogEvents {request['logGroupName']}/{request['logStreamName']} "
            f"sequence_token={'yes' if 'sequenceToken' in request else 'no'}"
        )
        with remote_call("PutLogEvents"):
            return client.put_log_events(**request)
