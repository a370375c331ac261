"""Pytest configuration and shared fixtures for aws-logger tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from aws_logger import CloudWatchConfig, KinesisConfig

from mocks import FIXED_TIME, FakeClientFactory



@pytest.fixture(autouse=True)
def no_server_addr(monkeypatch):
    """Keep the host address independent of the machine running the tests."""
    monkeypatch.delenv("SERVER_ADDR", raising=False)


@pytest.fixture
def fixed_clock():
    """Clock frozen at FIXED_TIME (epoch seconds)."""
    return lambda: FIXED_TIME


@pytest.fixture
def client_factory() -> FakeClientFactory:
    """Client factory returning a fresh MagicMock client on every call."""
    return FakeClientFactory()


@pytest.fixture
def cloudwatch_config() -> CloudWatchConfig:
    """A CloudWatch config as a framework would hand it over."""
    return CloudWatchConfig.from_mapping({
        "groupName": "app-logs",
        "streamName": "web-1",
        "region": "eu-west-1",
        "hostAddress": "10.0.0.5",
        "credentials": {"key": "AKIDEXAMPLE", "secret": "secret"},
    })


@pytest.fixture
def kinesis_config() -> KinesisConfig:
    """A Kinesis config as a framework would hand it over."""
    return KinesisConfig.from_mapping({
        "streamName": "log-stream",
        "partitionKey": "web",
        "region": "eu-west-1",
        "hostAddress": "10.0.0.5",
        "dateFormat": "%Y-%m-%d %H:%M:%S",
    })


@pytest.fixture
def root_logger() -> Generator[logging.Logger, None, None]:
    """Root logger restored to its original handlers and level afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
