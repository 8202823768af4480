"""Cerner client for SMART on FHIR launches against Cerner (Oracle Health) Millennium."""

from __future__ import annotations

from ..config.settings import Settings, get_settings
from ..launcher.emr import EMR
from .base_client import BaseClient, Endpoints


class CernerClient(BaseClient):
    emr = EMR.CERNER

    @classmethod
    def get_endpoints(cls, settings: Settings | None = None) -> Endpoints:
        settings = settings or get_settings()
        return Endpoints(token=settings.cerner_token_url, r4=settings.cerner_r4_url)
