from .base_client import BaseClient, Endpoints
from .cerner_client import CernerClient
from .client_factory import ClientFactory, LaunchType
from .epic_client import EpicClient

__all__ = ["BaseClient", "CernerClient", "ClientFactory", "Endpoints", "EpicClient", "LaunchType"]
