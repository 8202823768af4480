"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import jwt

from smart_emr.errors import (
    InvalidLaunchCodeError,
    LaunchError,
    MissingAuthorizationCodeError,
    SmartEMRError,
    TokenExchangeError,
    UnsupportedEMRError,
)


def test_all_errors_share_base() -> None:
    for error_cls in (
        InvalidLaunchCodeError,
        LaunchError,
        MissingAuthorizationCodeError,
        TokenExchangeError,
        UnsupportedEMRError,
    ):
        assert issubclass(error_cls, SmartEMRError)


def test_to_dict() -> None:
    error = UnsupportedEMRError("EMR type not defined.", emr="SMART")
    assert error.to_dict() == {
        "error": "UnsupportedEMRError",
        "message": "EMR type not defined.",
        "details": {"emr": "SMART"},
    }


def test_default_messages() -> None:
    assert str(MissingAuthorizationCodeError()) == "Could not find any JWT token."
    assert "provide the client_id and emr_type explicitly" in str(InvalidLaunchCodeError())
    assert "Could not find any access token" in str(TokenExchangeError())


def test_invalid_launch_code_is_also_a_jwt_error() -> None:
    assert issubclass(InvalidLaunchCodeError, jwt.InvalidTokenError)


def test_token_exchange_error_carries_validation_locations() -> None:
    error = TokenExchangeError("Malformed", token_endpoint="https://t", errors=[("access_token",)])
    assert error.details == {"token_endpoint": "https://t", "errors": [("access_token",)]}
