"""
Vault Login Client Library

A Python client for the Vault HTTP API focused on authentication: pluggable
login methods (AWS IAM with SigV4 signing, AWS EC2, AppRole, userpass) and
token issuance, lookup, renewal and revocation.

Example usage:
    from vault_login import VaultClient, AwsIamLogin

    client = VaultClient("https://vault.example.com:8200")
    auth = client.login("aws", AwsIamLogin(access_key="AKIA...", secret_key="...",
                                           region="us-east-1", role="my-role"))
    print(auth.accessor)
"""

from . import api
from .client import VaultClient
from .exceptions import (
    VaultClientError,
    ConfigurationError,
    SigningError,
    HTTPError,
    APIError,
    ResponseParseError
)
from .methods import (
    LoginMethod,
    AwsIamLogin,
    AwsEc2Login,
    AppRoleLogin,
    UserpassLogin
)
from .models import AuthInfo, CreateTokenRequest, TokenLookupResponse
from .signing import AwsIdentity, SignableRequest, Signer, SigV4Signer
from .constants import (
    HEADER_VAULT_TOKEN,
    HEADER_VAULT_NAMESPACE,
    HEADER_AWS_IAM_SERVER_ID,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "api",
    "VaultClient",
    "VaultClientError",
    "ConfigurationError",
    "SigningError",
    "HTTPError",
    "APIError",
    "ResponseParseError",
    "LoginMethod",
    "AwsIamLogin",
    "AwsEc2Login",
    "AppRoleLogin",
    "UserpassLogin",
    "AuthInfo",
    "CreateTokenRequest",
    "TokenLookupResponse",
    "AwsIdentity",
    "SignableRequest",
    "Signer",
    "SigV4Signer",
    "HEADER_VAULT_TOKEN",
    "HEADER_VAULT_NAMESPACE",
    "HEADER_AWS_IAM_SERVER_ID",
    "DEFAULT_CONFIG"
]
