"""
Token auth backend endpoints.

Creating and renewing tokens returns :class:`AuthInfo`; lookups return
:class:`TokenLookupResponse`; revocations return nothing.
"""

import logging
from typing import Any, Dict, Optional

from ..models import AuthInfo, CreateTokenRequest, TokenLookupResponse
from .paths import auth_path

logger = logging.getLogger(__name__)

MOUNT = "token"


def _payload(request: Optional[CreateTokenRequest]) -> Dict[str, Any]:
    return request.to_payload() if request is not None else {}


def new(client, request: Optional[CreateTokenRequest] = None) -> AuthInfo:
    """Create a child token of the client's token."""
    return AuthInfo.from_response(client.post(auth_path(MOUNT, "create"), json=_payload(request)))


def new_orphan(client, request: Optional[CreateTokenRequest] = None) -> AuthInfo:
    """Create a token with no parent."""
    return AuthInfo.from_response(
        client.post(auth_path(MOUNT, "create-orphan"), json=_payload(request))
    )


def new_role(client, role: str, request: Optional[CreateTokenRequest] = None) -> AuthInfo:
    """Create a token against a token role."""
    return AuthInfo.from_response(
        client.post(auth_path(MOUNT, "create", role), json=_payload(request))
    )


def lookup(client, token: str) -> TokenLookupResponse:
    return TokenLookupResponse.from_response(
        client.post(auth_path(MOUNT, "lookup"), json={"token": token})
    )


def lookup_self(client) -> TokenLookupResponse:
    return TokenLookupResponse.from_response(client.get(auth_path(MOUNT, "lookup-self")))


def lookup_accessor(client, accessor: str) -> TokenLookupResponse:
    return TokenLookupResponse.from_response(
        client.post(auth_path(MOUNT, "lookup-accessor"), json={"accessor": accessor})
    )


def renew(client, token: str, increment: Optional[str] = None) -> AuthInfo:
    """
    Renew a token's lease.

    Args:
        client: VaultClient used for the call
        token: Token to renew
        increment: Requested lease extension, e.g. ``"20m"``
    """
    payload = {"token": token}
    if increment is not None:
        payload["increment"] = increment
    return AuthInfo.from_response(client.post(auth_path(MOUNT, "renew"), json=payload))


def renew_self(client, increment: Optional[str] = None) -> AuthInfo:
    payload = {"increment": increment} if increment is not None else {}
    return AuthInfo.from_response(client.post(auth_path(MOUNT, "renew-self"), json=payload))


def revoke(client, token: str):
    """Revoke a token and all of its children."""
    logger.debug("Revoking token")
    client.post(auth_path(MOUNT, "revoke"), json={"token": token})


def revoke_self(client):
    client.post(auth_path(MOUNT, "revoke-self"))


def revoke_accessor(client, accessor: str):
    logger.debug("Revoking token by accessor %s", accessor)
    client.post(auth_path(MOUNT, "revoke-accessor"), json={"accessor": accessor})
