"""Test configuration and fixtures for cats3."""

import io

import pytest
from botocore.response import StreamingBody

from cats3.core import create_log_context


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Keep tests away from real AWS credentials and config."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def log_context():
    """Info/error logger pair with info lines enabled."""
    return create_log_context(quiet=False)


@pytest.fixture
def quiet_log_context():
    """Info/error logger pair with info lines suppressed."""
    return create_log_context(quiet=True)


@pytest.fixture
def make_body():
    """Factory for GetObject response bodies around in-memory bytes."""

    def _make_body(data: bytes) -> StreamingBody:
        return StreamingBody(io.BytesIO(data), len(data))

    return _make_body
