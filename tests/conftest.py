"""Shared pytest fixtures, launch-code factories, and test markers.

Test tiers
----------
  unit        Fast, fully offline. Always run.

  integration Full launch flows against mocked token and FHIR endpoints.
              Always run, no real network calls.

  quality     Property-based (Hypothesis) checks of EMR detection and
              launch-code handling. Always run offline.

  live        Real network calls against public SMART sandboxes. Skipped
              unless SMART_EMR_LIVE is set. See tests/live/conftest.py.

Run specific tiers:
  pytest tests/unit tests/integration tests/quality   # offline only
  pytest tests/live -m live                           # live only
  pytest tests/ -v                                    # everything
"""

from __future__ import annotations

from unittest.mock import MagicMock

import jwt
import pytest

from smart_emr.config.settings import Settings

EPIC_CALLBACK_BASE = "https://app.example.org/launch/callback"
LAUNCH_CODE_SECRET = "test-signing-secret-that-is-not-verified"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast offline unit tests")
    config.addinivalue_line("markers", "integration: mock-based launch flow tests")
    config.addinivalue_line("markers", "quality: property-based tests")
    config.addinivalue_line("markers", "live: requires network access (skipped by default)")


# ---------------------------------------------------------------------------
# Launch codes
# ---------------------------------------------------------------------------

def make_launch_code(claims: dict) -> str:
    """Mint a JWT-shaped authorization code carrying the given claims."""
    return jwt.encode(claims, LAUNCH_CODE_SECRET, algorithm="HS256")


@pytest.fixture
def epic_launch_code() -> str:
    return make_launch_code({"client_id": "epic-client-id", "epic.eci": "eci-1234"})


@pytest.fixture
def anonymous_launch_code() -> str:
    """Decodable code with a client_id but no vendor claim."""
    return make_launch_code({"client_id": "some-client-id"})


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, emr_client_id=None, emr_type=None, redirect_uri=None)


@pytest.fixture
def cerner_fallback_settings() -> Settings:
    return Settings(
        _env_file=None,
        emr_client_id="cerner-env-client",
        emr_type="cerner",
        redirect_uri=None,
    )


# ---------------------------------------------------------------------------
# HTTP session mocks
# ---------------------------------------------------------------------------

def make_token_session(body: dict | None = None) -> MagicMock:
    """A session whose post() returns a token endpoint response."""
    session = MagicMock()
    token_resp = MagicMock()
    token_resp.json.return_value = body if body is not None else {
        "access_token": "smart-test-token",
        "token_type": "Bearer",
        "expires_in": 3600,
        "scope": "launch/patient patient/*.read",
        "patient": "p-123",
    }
    token_resp.raise_for_status = MagicMock()
    session.post.return_value = token_resp
    return session


@pytest.fixture
def mock_token_session() -> MagicMock:
    return make_token_session()
