"""
Kinesis Data Streams sink.

Each log call becomes one data record. Lines start with a timestamp so that
consumers can order records that arrive out of sequence.

The partition key is fixed per sink, so one sink always writes to the same
shard. That is fine for low-volume logging; spread high-volume channels over
several sinks with distinct keys.

Usage:
    sink = KinesisSink({"streamName": "logs", "partitionKey": "web"})
    sink.log("info", "worker {id} started", {"id": 3})
"""

import logging

from .base import BaseSink
from .config import KinesisConfig
from .errors import remote_call
from .formatter import LineFormatter

logger = logging.getLogger(__name__)


class KinesisSink(BaseSink):
    """Sends log lines to a Kinesis data stream."""

    config_class = KinesisConfig
    service_name = "kinesis"

    def _default_formatter(self) -> LineFormatter:
        return LineFormatter(
            field_separator=self.config.field_separator,
            host_address=self.config.host_address,
            date_format=self.config.date_format,
            clock=self.clock,
        )

    def _write(self, line: str) -> None:
        client = self._client()
        logger.debug(f"PutRecord {self.config.stream_name} partition_key={self.config.partition_key}")
        with remote_call("PutRecord"):
            client.put_record(
                Data=line,
                PartitionKey=self.config.partition_key,
                StreamName=self.config.stream_name,
            )
