"""
AppRole login method.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..api import approle as approle_api
from ..models import AuthInfo
from .base import LoginMethod


@dataclass(frozen=True)
class AppRoleLogin(LoginMethod):
    """Log in with an AppRole role ID and optional secret ID."""

    role_id: str
    secret_id: Optional[str] = field(default=None, repr=False)

    def login(self, client, mount: str) -> AuthInfo:
        return approle_api.login(client, mount, self.role_id, secret_id=self.secret_id)
