"""SMART on FHIR launch helpers that hand back an EMR-specific client."""

from .client import BaseClient, CernerClient, ClientFactory, EpicClient, LaunchType
from .fhir import FHIRClient
from .launcher import EMR

__all__ = [
    "BaseClient",
    "CernerClient",
    "ClientFactory",
    "EMR",
    "EpicClient",
    "FHIRClient",
    "LaunchType",
]
