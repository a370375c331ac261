"""
AWS client construction.

Sinks build a new client for every log call, scoped to the config's region,
API version and credentials. Nothing is pooled or cached between calls.
"""

import logging
from collections.abc import Callable
from typing import Any

import boto3
from botocore import UNSIGNED
from botocore.config import Config

from .config import SinkConfig

logger = logging.getLogger(__name__)

LATEST_API_VERSION = "latest"

ClientFactory = Callable[[str, SinkConfig], Any]


def client_kwargs(config: SinkConfig) -> dict[str, Any]:
    """Project a sink config onto boto3 client keyword arguments."""
    kwargs: dict[str, Any] = {"region_name": config.region}

    if config.api_version and config.api_version != LATEST_API_VERSION:
        kwargs["api_version"] = config.api_version

    credentials = config.credentials
    if credentials is False:
        kwargs["config"] = Config(signature_version=UNSIGNED)
    elif credentials is not None and credentials.is_static:
        kwargs["aws_access_key_id"] = credentials.key
        kwargs["aws_secret_access_key"] = credentials.secret
        if credentials.token:
            kwargs["aws_session_token"] = credentials.token

    return kwargs


def create_client(service_name: str, config: SinkConfig) -> Any:
    """Create a boto3 client for service_name ("logs", "kinesis", ...)."""
    kwargs = client_kwargs(config)
    credentials = config.credentials

    if credentials and not credentials.is_static and credentials.profile:
        session = boto3.session.Session(profile_name=credentials.profile)
        logger.debug(f"Creating {service_name} client in {config.region} from profile {credentials.profile!r}")
        return session.client(service_name, **kwargs)

    logger.debug(f"Creating {service_name} client in {config.region}")
    return boto3.client(service_name, **kwargs)
