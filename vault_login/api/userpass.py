"""
Userpass auth backend endpoints.
"""

from ..models import AuthInfo
from .paths import auth_path


def login(client, mount: str, username: str, password: str) -> AuthInfo:
    return AuthInfo.from_response(
        client.post(auth_path(mount, "login", username), json={"password": password})
    )
