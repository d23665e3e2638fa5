"""
AppRole auth backend endpoints.
"""

from typing import Optional

from ..models import AuthInfo
from .paths import auth_path


def login(client, mount: str, role_id: str, secret_id: Optional[str] = None) -> AuthInfo:
    """Log in with an AppRole role ID and, when the role requires it, a secret ID."""
    payload = {"role_id": role_id}
    if secret_id is not None:
        payload["secret_id"] = secret_id
    return AuthInfo.from_response(client.post(auth_path(mount, "login"), json=payload))
