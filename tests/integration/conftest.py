from __future__ import annotations

import os
import urllib.request

import pytest

DEFAULT_ENDPOINT = "http://localhost:4566"


def _localstack_up(endpoint_url: str) -> bool:
    try:
        with urllib.request.urlopen(  # nosec B310
            f"{endpoint_url.rstrip('/')}/_localstack/health", timeout=1.5
        ) as resp:
            return resp.status == 200
    except OSError:
        return False


@pytest.fixture(scope="session", autouse=True)
def localstack_env() -> None:
    """Point the DynamoDB adapters at LocalStack unless the env says otherwise."""

    os.environ.setdefault("USE_LOCALSTACK", "true")
    os.environ.setdefault("ENDPOINT_URL", DEFAULT_ENDPOINT)
    os.environ.setdefault("AWS_REGION", "ap-south-1")
    # LocalStack accepts any credentials, but boto3 refuses to sign without some.
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")


@pytest.fixture(scope="session")
def require_localstack(localstack_env: None) -> str:
    endpoint_url = os.environ.get("ENDPOINT_URL") or DEFAULT_ENDPOINT
    if _localstack_up(endpoint_url):
        return endpoint_url

    msg = f"LocalStack not reachable at {endpoint_url}"
    # CI starts LocalStack, so a missing one there is a broken pipeline.
    if os.getenv("CI") or os.getenv("REQUIRE_LOCALSTACK"):
        pytest.fail(msg, pytrace=False)
    pytest.skip(msg)
