"""
Exception types raised by smart_emr.

HTTP status failures from requests propagate unwrapped. Undecodable launch
codes surface as InvalidLaunchCodeError, which is also a PyJWT InvalidTokenError.
"""

from __future__ import annotations

from typing import Any

import jwt


class SmartEMRError(Exception):
    """Base exception for all smart_emr errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidEMRTypeError(SmartEMRError):
    """Raised when a value does not name a known EMR."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown EMR type: {value!r}", details={"value": repr(value)})


class UnsupportedEMRError(SmartEMRError):
    """Raised when the detected EMR has no vendor client or endpoints."""

    def __init__(self, message: str, emr: str | None = None) -> None:
        self.emr = emr
        super().__init__(message, details={"emr": emr})


class LaunchError(SmartEMRError):
    """Raised when a FHIR client cannot be obtained for the launch type."""


class MissingAuthorizationCodeError(SmartEMRError):
    """Raised when the callback URL carries no ``code`` parameter."""

    def __init__(self, message: str = "Could not find any JWT token.") -> None:
        super().__init__(message)


class InvalidLaunchCodeError(SmartEMRError, jwt.InvalidTokenError):
    """Raised when the code is not a JWT and no explicit fallback is configured.

    Also a PyJWT InvalidTokenError, so callers catching that still see it.
    """

    def __init__(
        self,
        message: str = (
            "Cannot decode the Code for the EMR type. "
            "You must provide the client_id and emr_type explicitly"
        ),
    ) -> None:
        super().__init__(message)


class TokenExchangeError(SmartEMRError):
    """Raised when the token endpoint answers without a usable access token."""

    def __init__(
        self,
        message: str = "Could not find any access token from the oauth endpoint's response",
        token_endpoint: str | None = None,
        errors: list | None = None,
    ) -> None:
        details: dict[str, Any] = {"token_endpoint": token_endpoint}
        if errors:
            details["errors"] = errors
        super().__init__(message, details=details)
