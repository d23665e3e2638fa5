"""
Login methods: strategies that exchange credentials for a Vault token.

Example:
    from vault_login import VaultClient
    from vault_login.methods import AwsIamLogin

    client = VaultClient("https://vault.example.com:8200")
    method = AwsIamLogin(access_key="AKIA...", secret_key="...",
                         region="us-east-1", role="my-role")
    auth = client.login("aws", method)
"""

from .approle import AppRoleLogin
from .aws import AwsEc2Login, AwsIamLogin, encode_signed_request
from .base import LoginMethod
from .userpass import UserpassLogin

__all__ = [
    "LoginMethod",
    "AwsIamLogin",
    "AwsEc2Login",
    "AppRoleLogin",
    "UserpassLogin",
    "encode_signed_request",
]
