"""Abstract base class for EMR-specific FHIR clients."""

from __future__ import annotations

from abc import ABC, abstractmethod

import requests
from pydantic import BaseModel

from ..config.settings import Settings
from ..fhir.fhir_client import FHIRClient
from ..launcher.emr import EMR


class Endpoints(BaseModel):
    """OAuth2 token URL and FHIR R4 base URL of one EMR."""

    token: str
    r4: str


class BaseClient(ABC):
    """Base for Epic, Cerner, and other EMR clients wrapping an authenticated FHIRClient."""

    emr: EMR = EMR.NONE

    def __init__(self, fhir_client: FHIRClient) -> None:
        self.fhir_client = fhir_client

    @property
    def server_url(self) -> str:
        return self.fhir_client.server_url

    @classmethod
    @abstractmethod
    def get_endpoints(cls, settings: Settings | None = None) -> Endpoints:
        """Return the vendor's token and FHIR R4 endpoints."""

    def read(self, resource_type: str, resource_id: str) -> dict:
        """GET a resource through the wrapped client and return its JSON body."""
        response: requests.Response = self.fhir_client.get_resource(resource_type, resource_id)
        response.raise_for_status()
        return response.json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(server_url={self.server_url!r})"
