"""Pydantic models for OAuth2 token responses and FHIR client state."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Body returned by a SMART on FHIR token endpoint."""

    model_config = ConfigDict(extra="allow")

    access_token: str = Field(..., description="Bearer token for FHIR API calls")
    token_type: str | None = Field(default="Bearer")
    expires_in: int | float | None = Field(default=None, description="Lifetime in seconds")
    scope: str | None = None
    refresh_token: str | None = None
    id_token: str | None = None
    patient: str | None = Field(default=None, description="Patient in launch context")
    encounter: str | None = Field(default=None, description="Encounter in launch context")


class ClientState(BaseModel):
    """Connection state of an authenticated FHIR client."""

    server_url: str
    client_id: str | None = None
    token_response: TokenResponse | None = None
