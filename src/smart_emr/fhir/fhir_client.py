"""Generic FHIR R4 HTTP client."""

from __future__ import annotations

import requests

from .models import ClientState, TokenResponse


class FHIRClient:
    """Minimal FHIR R4 REST client carrying its SMART authorization state."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        client_id: str | None = None,
        token_response: TokenResponse | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self.state = ClientState(
            server_url=self.base_url,
            client_id=client_id,
            token_response=token_response,
        )

    @property
    def server_url(self) -> str:
        return self.state.server_url

    def authorization_headers(self) -> dict[str, str]:
        """Bearer header for the current token, or nothing when unauthenticated."""
        token_response = self.state.token_response
        if token_response is None:
            return {}
        return {"Authorization": f"Bearer {token_response.access_token}"}

    def post_resource(
        self,
        resource_type: str,
        resource: dict,
        headers: dict | None = None,
    ) -> requests.Response:
        """POST a FHIR resource and return the response."""
        url = f"{self.base_url}/{resource_type}"
        default_headers = {"Content-Type": "application/fhir+json", **self.authorization_headers()}
        if headers:
            default_headers.update(headers)
        return self._session.post(url, json=resource, headers=default_headers)

    def get_resource(
        self,
        resource_type: str,
        resource_id: str,
        headers: dict | None = None,
    ) -> requests.Response:
        """GET a FHIR resource by type and logical ID."""
        url = f"{self.base_url}/{resource_type}/{resource_id}"
        default_headers = {"Accept": "application/fhir+json", **self.authorization_headers()}
        if headers:
            default_headers.update(headers)
        return self._session.get(url, headers=default_headers)
