"""Shared pytest fixtures for all tests."""

import json
from pathlib import Path

import pytest
import pytest_asyncio

from discogs_sdk.common.config import HTTPConfig
from discogs_sdk.connection import (
    AuthVerifier,
    DiscogsConnection,
    TokenAuthInfo,
    TokenAuthManager,
    UnauthenticatedAuthManager,
)

USER_AGENT = "DiscogsSdkTests/1.0 +https://example.com"


@pytest.fixture(autouse=True)
def clear_discogs_env_vars(monkeypatch):
    """Clear Discogs environment variables so real credentials never leak into tests."""
    monkeypatch.delenv("DISCOGS_API_KEY", raising=False)
    monkeypatch.delenv("DISCOGS_API_SECRET", raising=False)
    monkeypatch.delenv("DISCOGS_TOKEN", raising=False)


@pytest.fixture
def http_config() -> HTTPConfig:
    """Provide a sample HTTP configuration for tests."""
    return HTTPConfig(
        timeout=10,
        max_redirects=3,
        verify_ssl=True,
        chunk_size=1024,
    )


@pytest.fixture
def examples_dir() -> Path:
    """Get path to examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def load_fixture(examples_dir):
    """Load a Discogs response fixture by short name, e.g. ``load_fixture("release")``."""

    def _load(name: str) -> dict:
        with open(examples_dir / f"discogs_{name}_response.json") as f:
            return json.load(f)

    return _load


@pytest_asyncio.fixture
async def connection(http_config: HTTPConfig) -> DiscogsConnection:
    """Provide an open, token-authenticated connection with auth checks enabled."""
    auth = TokenAuthManager(TokenAuthInfo(token="test-token"))
    async with DiscogsConnection(
        auth_manager=auth,
        user_agent=USER_AGENT,
        http_config=http_config,
        auth_verifier=AuthVerifier(),
    ) as conn:
        yield conn


@pytest_asyncio.fixture
async def anonymous_connection(http_config: HTTPConfig) -> DiscogsConnection:
    """Provide an open, unauthenticated connection with auth checks enabled."""
    async with DiscogsConnection(
        auth_manager=UnauthenticatedAuthManager(),
        user_agent=USER_AGENT,
        http_config=http_config,
        auth_verifier=AuthVerifier(),
    ) as conn:
        yield conn
