"""S3 client configuration and management.

The S3ClientManager builds a boto3 client from an S3ClientConfig. The same
client is shared by the key enumerator and the object streamer; boto3
clients are safe to use from several threads.

Authentication Methods Supported:
    1. Explicit credentials (access_key_id, secret_access_key)
    2. AWS CLI profiles (aws_profile)
    3. IAM roles / environment variables (no explicit credentials)
    4. Temporary credentials (session_token)

S3-Compatible Services:
    Custom endpoints (MinIO, Ceph RGW and similar) are reached through
    endpoint_url.
"""

from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError
from pydantic import BaseModel, ConfigDict, Field

from cats3.core import get_logger
from cats3.core.exceptions import ConfigurationError

logger = get_logger(__name__)


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    Authentication Priority:
        1. If aws_profile is provided, use profile-based authentication
        2. If explicit credentials are provided, use them
        3. Otherwise, fall back to default AWS credential chain

    When region_name is left unset, boto3 resolves it the usual way
    (environment, profile, instance metadata).
    """

    model_config = ConfigDict(extra="forbid")

    access_key_id: Optional[str] = Field(None, description="AWS access key ID")
    secret_access_key: Optional[str] = Field(None, description="AWS secret access key")
    session_token: Optional[str] = Field(
        None, description="AWS session token for temporary credentials"
    )
    region_name: Optional[str] = Field(None, description="AWS region name")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )


class S3ClientManager:
    """Manages the S3 client connection for one invocation."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._client = None
        logger.debug("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create S3 client instance.

        Raises:
            ConfigurationError: If the client cannot be built (unknown
                profile, malformed endpoint, ...)
        """
        if self._client is None:
            try:
                self._client = self._create_client()
            except (BotoCoreError, ValueError) as e:
                raise ConfigurationError(f"Failed to create S3 client: {e}") from e
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        cfg = self.config
        kwargs: Dict[str, Any] = {
            name: value
            for name, value in (
                ("region_name", cfg.region_name),
                ("endpoint_url", cfg.endpoint_url),
            )
            if value
        }

        if cfg.aws_profile:
            logger.debug("Using AWS profile", profile=cfg.aws_profile)
            return boto3.Session(profile_name=cfg.aws_profile).client("s3", **kwargs)

        if cfg.access_key_id and cfg.secret_access_key:
            kwargs["aws_access_key_id"] = cfg.access_key_id
            kwargs["aws_secret_access_key"] = cfg.secret_access_key
            if cfg.session_token:
                kwargs["aws_session_token"] = cfg.session_token

        logger.debug(
            "Using boto3 client",
            explicit_credentials="aws_access_key_id" in kwargs,
        )
        return boto3.client("s3", **kwargs)
