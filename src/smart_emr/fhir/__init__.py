from .fhir_client import FHIRClient
from .models import ClientState, TokenResponse

__all__ = ["ClientState", "FHIRClient", "TokenResponse"]
