"""Example: finish a standalone SMART launch against a (mocked) Epic token endpoint.

Usage:
    python examples/standalone_launch.py
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import jwt

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from smart_emr import ClientFactory, LaunchType
from smart_emr.config import Settings, configure_logging


def main() -> None:
    configure_logging(level="INFO", json_format=False)
    print("=== Standalone SMART launch demo ===\n")

    # 1. Epic redirects back with a JWT-shaped authorization code
    code = jwt.encode({"client_id": "demo-client-id", "epic.eci": "demo-eci"}, "unused", algorithm="HS256")
    callback_url = f"http://localhost:3000/?code={code}&state=demo-state"
    print(f"Callback URL: {callback_url[:60]}...\n")

    # 2. Mock the token endpoint
    mock_token_response = MagicMock()
    mock_token_response.json.return_value = {
        "access_token": "mock-epic-token-xyz",
        "token_type": "Bearer",
        "expires_in": 3600,
        "patient": "eD3NT2C.bpwdHdPlWePHU5w3",
    }
    mock_token_response.raise_for_status = MagicMock()

    mock_session = MagicMock()
    mock_session.post.return_value = mock_token_response

    # 3. Let the factory pick the vendor and exchange the code
    factory = ClientFactory(settings=Settings(_env_file=None), session=mock_session)
    client = factory.create_emr_client(LaunchType.STANDALONE, callback_url=callback_url)

    state = client.fhir_client.state
    print(f"Client: {client!r}")
    print(f"EMR: {client.emr.value}")
    print(f"Client ID: {state.client_id}")
    print(f"Patient in context: {state.token_response.patient}")
    print("\nLaunch demo complete.")


if __name__ == "__main__":
    main()
