"""Build the EMR-specific client for a SMART on FHIR launch.

Two launch styles are supported:
  EMR         The host application already completed the EHR launch and
              hands its authenticated FHIRClient to the factory. The vendor
              is read off the client's server URL.
  STANDALONE  The app was redirected back with ``?code=...``. The vendor
              and client_id are read from the code's JWT claims (falling
              back to configured values), then the code is exchanged for
              an access token.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

import jwt
import requests

from ..auth.oauth import (
    decode_launch_code,
    get_access_token,
    get_code_from_url,
    is_launch_claims,
    origin_of,
)
from ..config.logging import get_logger
from ..config.settings import Settings, get_settings
from ..errors import InvalidLaunchCodeError, LaunchError, SmartEMRError, UnsupportedEMRError
from ..fhir.fhir_client import FHIRClient
from ..launcher.emr import EMR, instance_of_emr, to_emr
from .base_client import BaseClient, Endpoints
from .cerner_client import CernerClient
from .epic_client import EpicClient

logger = get_logger(__name__)

_EPIC_ECI_CLAIM = "epic.eci"


class LaunchType(Enum):
    EMR = "emr"
    STANDALONE = "standalone"
    BACKEND = "backend"


class ClientFactory:
    """Creates EpicClient or CernerClient instances for a SMART launch."""

    def __init__(
        self,
        fhir_client: FHIRClient | None = None,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._fhir_client = fhir_client
        self._settings = settings or get_settings()
        self._session = session or requests.Session()

    def get_emr_type(self, client_or_token: FHIRClient | Mapping[str, Any]) -> EMR:
        """Determine the EMR from a FHIR client's server URL or from launch-code claims."""
        if isinstance(client_or_token, FHIRClient):
            server_url = client_or_token.server_url.lower()
            if "cerner" in server_url:
                return EMR.CERNER
            if "smarthealthit" in server_url:
                return EMR.SMART
            if "epic" in server_url:
                return EMR.EPIC
            return EMR.NONE

        if not isinstance(client_or_token, Mapping):
            raise SmartEMRError(
                "Invalid object type.", details={"type": type(client_or_token).__name__}
            )
        if _EPIC_ECI_CLAIM in client_or_token:
            return EMR.EPIC
        return EMR.NONE

    def create_emr_client(
        self,
        launch_type: LaunchType = LaunchType.EMR,
        callback_url: str | None = None,
    ) -> BaseClient:
        """Create the EMR client for the given launch.

        Args:
            launch_type: How the app was launched.
            callback_url: Full redirect URL (with ``code``); required for STANDALONE.

        Returns:
            An EpicClient or CernerClient wrapping the authenticated FHIRClient.
        """
        default_fhir_client = self._create_default_fhir_client(launch_type, callback_url)
        emr_type = self.get_emr_type(default_fhir_client)
        logger.info(
            "emr_detected",
            emr=emr_type.value,
            launch_type=launch_type.value,
            server_url=default_fhir_client.server_url,
        )

        if emr_type is EMR.EPIC:
            return EpicClient(default_fhir_client)
        if emr_type is EMR.CERNER:
            return CernerClient(default_fhir_client)
        raise UnsupportedEMRError("Unsupported provider for EMR Client creation", emr=emr_type.value)

    def get_emr_endpoints(self, emr_or_claims: EMR | str | Mapping[str, Any]) -> Endpoints:
        """Return vendor endpoints for an EMR (or its name) or for launch-code claims."""
        emr_type = self._get_emr_type_from_object(emr_or_claims)
        if emr_type is EMR.EPIC:
            return EpicClient.get_endpoints(self._settings)
        if emr_type is EMR.CERNER:
            return CernerClient.get_endpoints(self._settings)
        raise UnsupportedEMRError("EMR type not defined.", emr=emr_type.value)

    def _get_emr_type_from_object(self, obj: object) -> EMR:
        if is_launch_claims(obj):
            return self.get_emr_type(obj)  # type: ignore[arg-type]
        if instance_of_emr(obj):
            return to_emr(obj)
        raise SmartEMRError("Invalid object type.", details={"type": type(obj).__name__})

    def _create_default_fhir_client(
        self, launch_type: LaunchType, callback_url: str | None
    ) -> FHIRClient:
        if launch_type is LaunchType.EMR:
            if self._fhir_client is None:
                raise LaunchError("No authenticated FHIR client was provided for the EMR launch")
            return self._fhir_client
        if launch_type is LaunchType.STANDALONE:
            if callback_url is None:
                raise LaunchError("A callback URL is required for a standalone launch")
            return self._build_standalone_fhir_client(callback_url)
        raise LaunchError(
            "Unsupported provider for standalone launch",
            details={"launch_type": launch_type.value},
        )

    def _build_standalone_fhir_client(self, callback_url: str) -> FHIRClient:
        code = get_code_from_url(callback_url)
        endpoints, client_id = self._get_required_token_parameters(code)
        redirect_uri = self._settings.redirect_uri or origin_of(callback_url)

        token_response = get_access_token(
            endpoints.token,
            code,
            client_id,
            redirect_uri,
            session=self._session,
            timeout=self._settings.request_timeout,
        )
        return FHIRClient(
            endpoints.r4,
            session=self._session,
            client_id=client_id,
            token_response=token_response,
        )

    def _get_required_token_parameters(self, code: str) -> tuple[Endpoints, str]:
        try:
            claims = decode_launch_code(code)
            return self.get_emr_endpoints(claims), claims["client_id"]
        except (jwt.InvalidTokenError, SmartEMRError) as reason:
            client_id = self._settings.emr_client_id
            emr_type = self._settings.emr_type
            if not (client_id and emr_type):
                if isinstance(reason, jwt.InvalidTokenError):
                    raise InvalidLaunchCodeError() from reason
                raise

            logger.info(
                "launch_code_fallback",
                reason=str(reason),
                emr=emr_type,
                client_id=client_id,
            )
            return self.get_emr_endpoints(emr_type), client_id
