"""boto3 session and client construction."""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError

from envdump.config import ExportConfig
from envdump.errors import SessionError

logger = logging.getLogger(__name__)


def make_session(config: ExportConfig) -> boto3.Session:
    """Create a session from the configured shared-config profile."""
    try:
        session = boto3.Session(profile_name=config.profile, region_name=config.region)
    except BotoCoreError as e:
        # ProfileNotFound and friends
        raise SessionError(f"session error, not created: {e}") from e
    logger.debug(f"Using AWS profile {config.profile!r}, region {session.region_name!r}")
    return session


def make_client(session: boto3.Session, service_name: str) -> Any:
    try:
        return session.client(service_name)
    except BotoCoreError as e:
        raise SessionError(f"failed to create {service_name} client: {e}") from e
