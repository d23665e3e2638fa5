"""
Shared fixtures for Vault login client tests.
"""

import json

import pytest
import requests

from vault_login import VaultClient

VAULT_ADDR = "http://localhost:8200"


def make_response(status_code=200, body=None, url=VAULT_ADDR + "/v1/"):
    """Build a real requests.Response carrying ``body`` as JSON."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body if isinstance(body, bytes) else body.encode('utf-8')
    else:
        response._content = json.dumps(body).encode('utf-8')
    return response


@pytest.fixture
def auth_body():
    """Body of a successful login response."""
    return {
        "request_id": "5c1f3b8e-2b1c-4a55-9d0a-7f1b6c2d9e11",
        "lease_id": "",
        "renewable": False,
        "lease_duration": 0,
        "data": None,
        "auth": {
            "client_token": "hvs.CAESIJ0xtest",
            "accessor": "0e9e354a-520f-df04-6867-ee81cae3d42d",
            "policies": ["default", "dev"],
            "token_policies": ["default", "dev"],
            "metadata": {"role": "my-role", "account_id": "123456789012"},
            "lease_duration": 2764800,
            "renewable": True,
            "entity_id": "8d2d9a5e-4f1e-4b3c-8c73-0d3a6b2c1e77",
            "token_type": "service",
            "orphan": True,
            "mfa_requirement": None,
            "num_uses": 0,
        },
    }


@pytest.fixture
def client():
    """Create test client."""
    with VaultClient(VAULT_ADDR) as vault_client:
        yield vault_client
