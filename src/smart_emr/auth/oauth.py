"""SMART on FHIR authorization-code exchange for standalone launches.

A standalone launch ends with the EMR redirecting the browser back to the
app with ``?code=...``. Epic issues that code as a JWT whose claims carry
``client_id`` and ``epic.eci``, which is enough to pick the vendor without
any other configuration. The JWT is read, never verified: it identifies
the vendor, it does not authenticate anyone.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs, urlsplit

import jwt
import requests
from pydantic import ValidationError

from ..config.logging import get_logger
from ..errors import MissingAuthorizationCodeError, TokenExchangeError
from ..fhir.models import TokenResponse

logger = get_logger(__name__)


def get_code_from_url(url: str) -> str:
    """Return the ``code`` query parameter of a redirect URL.

    An empty ``code=`` counts as missing, so it fails here rather than at decode time.
    """
    codes = parse_qs(urlsplit(url).query).get("code")
    if not codes:
        raise MissingAuthorizationCodeError()
    return codes[0]


def origin_of(url: str) -> str:
    """Return ``scheme://host[:port]`` of a URL."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}"


def decode_launch_code(code: str) -> dict[str, Any]:
    """Decode an authorization code as an unverified JWT.

    Raises:
        jwt.InvalidTokenError: the code is not a JWT.
    """
    return jwt.decode(code, options={"verify_signature": False})


def is_launch_claims(obj: object) -> bool:
    """True for decoded launch-code claims, i.e. a mapping with a string client_id."""
    return isinstance(obj, Mapping) and isinstance(obj.get("client_id"), str)


def get_access_token(
    token_endpoint: str,
    code: str,
    client_id: str,
    redirect_uri: str,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> TokenResponse:
    """Exchange an authorization code for an access token.

    Args:
        token_endpoint: The EMR's OAuth2 token URL.
        code: Authorization code from the redirect.
        client_id: Public client ID registered with the EMR.
        redirect_uri: Must match the redirect URI used when authorizing.
        session: Optional requests session.
        timeout: Request timeout in seconds.

    Returns:
        The parsed token response.
    """
    session = session or requests.Session()
    response = session.post(
        token_endpoint,
        data={
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": redirect_uri,
            "client_id": client_id,
        },
        headers={
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        },
        timeout=timeout,
    )
    response.raise_for_status()
    body = response.json()
    if not isinstance(body, dict) or not body.get("access_token"):
        raise TokenExchangeError(token_endpoint=token_endpoint)

    try:
        token_response = TokenResponse.model_validate(body)
    except ValidationError as exc:
        raise TokenExchangeError(
            "Malformed token response from the oauth endpoint",
            token_endpoint=token_endpoint,
            errors=[error["loc"] for error in exc.errors()],
        ) from exc

    logger.info(
        "access_token_obtained",
        token_endpoint=token_endpoint,
        client_id=client_id,
        scope=token_response.scope,
    )
    return token_response
