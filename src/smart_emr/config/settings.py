"""Library settings loaded from the environment.

Environment variables are prefixed with SMART_EMR_, e.g. SMART_EMR_EMR_CLIENT_ID.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings used when the launch code alone cannot identify the EMR."""

    model_config = SettingsConfigDict(
        env_prefix="SMART_EMR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Standalone launch fallback when the code is not a decodable vendor JWT
    emr_client_id: str | None = None
    emr_type: str | None = None

    # Defaults to the origin of the callback URL
    redirect_uri: str | None = None

    request_timeout: int = 30

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Vendor endpoint overrides
    epic_token_url: str = "https://fhir.epic.com/interconnect-fhir-oauth/oauth2/token"
    epic_r4_url: str = "https://fhir.epic.com/interconnect-fhir-oauth/api/FHIR/R4"
    cerner_token_url: str = (
        "https://authorization.cerner.com/tenants/ec2458f2-1e24-41c8-b71b-0e701af7583d"
        "/protocols/oauth2/profiles/smart-v1/token"
    )
    cerner_r4_url: str = "https://fhir-ehr-code.cerner.com/r4/ec2458f2-1e24-41c8-b71b-0e701af7583d"


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
