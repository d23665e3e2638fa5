"""
Typed request and response models for the Vault HTTP API.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional

from .exceptions import ResponseParseError


def _known_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the keys of ``data`` that ``cls`` declares."""
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


def _section(response: Optional[Dict[str, Any]], name: str) -> Dict[str, Any]:
    if not isinstance(response, dict) or not isinstance(response.get(name), dict):
        raise ResponseParseError(f"Vault response has no '{name}' block")
    return response[name]


@dataclass(frozen=True)
class AuthInfo:
    """
    Session issued by Vault for any successful login or token operation.

    Built from the ``auth`` block of a response. Fields Vault may add in
    newer releases are ignored.
    """

    client_token: str
    accessor: str
    policies: List[str] = field(default_factory=list)
    token_policies: List[str] = field(default_factory=list)
    metadata: Optional[Dict[str, str]] = None
    lease_duration: int = 0
    renewable: bool = False
    entity_id: str = ""
    token_type: str = ""
    orphan: bool = False

    @classmethod
    def from_response(cls, response: Optional[Dict[str, Any]]) -> "AuthInfo":
        """
        Deserialize the ``auth`` block of a Vault response.

        Raises:
            ResponseParseError: If the block or its token is missing
        """
        auth = _section(response, "auth")
        if not auth.get("client_token"):
            raise ResponseParseError("Vault auth block has no client_token")

        values = _known_fields(cls, auth)
        # Vault sends null rather than [] for tokens without policies
        for name in ("policies", "token_policies"):
            if values.get(name) is None:
                values[name] = []
        values.setdefault("accessor", "")
        return cls(**values)


@dataclass(frozen=True)
class TokenLookupResponse:
    """Properties of a token as reported by the token lookup endpoints."""

    accessor: str = ""
    creation_time: int = 0
    creation_ttl: int = 0
    display_name: str = ""
    entity_id: str = ""
    expire_time: Optional[str] = None
    explicit_max_ttl: int = 0
    id: str = ""
    issue_time: Optional[str] = None
    meta: Optional[Dict[str, str]] = None
    num_uses: int = 0
    orphan: bool = False
    path: str = ""
    policies: List[str] = field(default_factory=list)
    renewable: bool = False
    ttl: int = 0
    type: str = ""

    @classmethod
    def from_response(cls, response: Optional[Dict[str, Any]]) -> "TokenLookupResponse":
        data = _section(response, "data")
        values = _known_fields(cls, data)
        if values.get("policies") is None:
            values["policies"] = []
        return cls(**values)


@dataclass(frozen=True)
class CreateTokenRequest:
    """
    Options for creating a token.

    Every field is optional; unset fields are left for Vault to default.
    """

    id: Optional[str] = None
    role_name: Optional[str] = None
    policies: Optional[List[str]] = None
    meta: Optional[Dict[str, str]] = None
    no_parent: Optional[bool] = None
    no_default_policy: Optional[bool] = None
    renewable: Optional[bool] = None
    ttl: Optional[str] = None
    type: Optional[str] = None
    explicit_max_ttl: Optional[str] = None
    display_name: Optional[str] = None
    num_uses: Optional[int] = None
    period: Optional[str] = None
    entity_alias: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}
