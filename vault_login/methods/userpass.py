"""
Userpass login method.
"""

from dataclasses import dataclass, field

from ..api import userpass as userpass_api
from ..models import AuthInfo
from .base import LoginMethod


@dataclass(frozen=True)
class UserpassLogin(LoginMethod):
    """Log in with a username and password."""

    username: str
    password: str = field(repr=False)

    def login(self, client, mount: str) -> AuthInfo:
        return userpass_api.login(client, mount, self.username, self.password)
