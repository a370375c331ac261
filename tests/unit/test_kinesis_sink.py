"""Unit tests for KinesisSink."""

from datetime import datetime

import pytest
from hypothesis import given, settings

from aws_logger.config import KinesisConfig
from aws_logger.errors import RemoteRejected, TransportFailure
from aws_logger.kinesis import KinesisSink
from mocks import FIXED_TIME, FakeClientFactory, connection_error, throttled
from strategies import partition_keys, resource_names

EXPECTED_DATE = datetime.fromtimestamp(FIXED_TIME).strftime("%Y-%m-%d %H:%M:%S")


@pytest.fixture
def sink(kinesis_config, client_factory, fixed_clock) -> KinesisSink:
    return KinesisSink(kinesis_config, client_factory=client_factory, clock=fixed_clock)


class TestKinesisSink:
    """Tests for writing records."""

    def test_submits_one_record(self, sink, client_factory):
        """One put_record call with the formatted, timestamped line."""
        sink.log("error", "disk {pct}% full", {"pct": 91})

        client_factory.client.put_record.assert_called_once_with(
            Data=f"{EXPECTED_DATE}\t10.0.0.5\tError\tdisk 91% full\n",
            PartitionKey="web",
            StreamName="log-stream",
        )

    def test_client_scoped_to_config(self, sink, client_factory, kinesis_config):
        """The client is built for the kinesis service from the sink config."""
        sink.log("info", "started")
        assert client_factory.calls == [("kinesis", kinesis_config)]

    def test_custom_date_format(self, client_factory, fixed_clock):
        """dateFormat controls the leading timestamp field."""
        sink = KinesisSink(
            {"streamName": "s", "partitionKey": "p", "hostAddress": "h", "dateFormat": "%H:%M", "fieldSeparator": "|"},
            client_factory=client_factory,
            clock=fixed_clock,
        )
        sink.log("info", "x")

        expected = datetime.fromtimestamp(FIXED_TIME).strftime("%H:%M")
        assert client_factory.client.put_record.call_args.kwargs["Data"] == f"{expected}|h|Info|x\n"

    def test_rejection_not_retried(self, kinesis_config, fixed_clock):
        """Rejections propagate after a single attempt."""
        factory = FakeClientFactory(side_effects={"put_record": [throttled("PutRecord"), {}]})
        sink = KinesisSink(kinesis_config, client_factory=factory, clock=fixed_clock)

        with pytest.raises(RemoteRejected) as exc_info:
            sink.log("info", "x")

        assert exc_info.value.kind == "ThrottlingException"
        assert exc_info.value.operation == "PutRecord"
        assert factory.client.put_record.call_count == 1

    def test_transport_failure_not_retried(self, kinesis_config, fixed_clock):
        """Connectivity errors propagate after a single attempt."""
        factory = FakeClientFactory(side_effects={"put_record": [connection_error(), {}]})
        sink = KinesisSink(kinesis_config, client_factory=factory, clock=fixed_clock)

        with pytest.raises(TransportFailure):
            sink.log("info", "x")

        assert factory.client.put_record.call_count == 1

    def test_each_call_builds_its_own_client(self, sink, client_factory):
        sink.log("info", "one")
        sink.log("info", "two")
        assert len(client_factory.clients) == 2

    @given(partition_key=partition_keys, stream_name=resource_names)
    @settings(max_examples=50)
    def test_partition_key_and_stream_fixed(self, partition_key, stream_name):
        """Property: every record uses the configured partition key and stream."""
        config = KinesisConfig.from_mapping({"partitionKey": partition_key, "streamName": stream_name, "hostAddress": "h"})
        factory = FakeClientFactory()
        sink = KinesisSink(config, client_factory=factory, clock=lambda: FIXED_TIME)

        for i in range(3):
            sink.log("info", f"line {i}")

        for client in factory.clients:
            kwargs = client.put_record.call_args.kwargs
            assert kwargs["PartitionKey"] == partition_key
            assert kwargs["StreamName"] == stream_name
