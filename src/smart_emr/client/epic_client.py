"""Epic client for SMART on FHIR launches against Epic on FHIR."""

from __future__ import annotations

from ..config.settings import Settings, get_settings
from ..launcher.emr import EMR
from .base_client import BaseClient, Endpoints


class EpicClient(BaseClient):
    emr = EMR.EPIC

    @classmethod
    def get_endpoints(cls, settings: Settings | None = None) -> Endpoints:
        settings = settings or get_settings()
        return Endpoints(token=settings.epic_token_url, r4=settings.epic_r4_url)
