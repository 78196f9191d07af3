from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import boto3
from botocore.client import BaseClient
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from src.domain.exceptions import StorageUnavailable

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBClient
else:
    DynamoDBClient = BaseClient  # type: ignore[misc,assignment]

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class AwsRuntimeConfig:
    use_localstack: bool
    region: str
    endpoint_url: str | None
    timeout_s: float = 5.0
    max_attempts: int = 2

    @staticmethod
    def from_env() -> "AwsRuntimeConfig":
        endpoint_url = os.getenv("ENDPOINT_URL")
        if endpoint_url is not None:
            endpoint_url = endpoint_url.strip() or None

        return AwsRuntimeConfig(
            use_localstack=_env_bool("USE_LOCALSTACK", False),
            region=os.getenv("AWS_REGION", "ap-south-1"),
            endpoint_url=endpoint_url,
            timeout_s=float(os.getenv("AWS_TIMEOUT_S", "5")),
            max_attempts=int(os.getenv("AWS_MAX_ATTEMPTS", "2")),
        )

    def resolved_endpoint_url(self) -> str | None:
        """Return the endpoint URL to use for boto3.

        Priority:
          1) ENDPOINT_URL (explicit override; preferred for LocalStack)
          2) LOCALSTACK_ENDPOINT_URL if USE_LOCALSTACK is enabled
          3) None (AWS real)
        """

        if self.endpoint_url:
            return self.endpoint_url
        if self.use_localstack:
            return os.getenv("LOCALSTACK_ENDPOINT_URL", "http://localhost:4566")
        return None

    def botocore_config(self) -> Config:
        return Config(
            connect_timeout=self.timeout_s,
            read_timeout=self.timeout_s,
            retries={"max_attempts": self.max_attempts, "mode": "standard"},
        )


def dynamodb_client() -> DynamoDBClient:
    cfg = AwsRuntimeConfig.from_env()
    session = boto3.session.Session(region_name=cfg.region)
    return session.client(
        "dynamodb",
        endpoint_url=cfg.resolved_endpoint_url(),
        config=cfg.botocore_config(),
    )


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate botocore failures (including timeouts) into StorageUnavailable."""

    try:
        yield
    except (ClientError, BotoCoreError) as exc:
        logger.warning("DynamoDB %s failed", operation, exc_info=True)
        raise StorageUnavailable(f"{operation} failed: {exc}") from exc
