"""
AWS auth backend endpoints.
"""

import logging
from typing import Optional

from ..models import AuthInfo
from .paths import auth_path

logger = logging.getLogger(__name__)


def iam_login(client, mount: str, iam_http_request_method: str, iam_request_url: str,
              iam_request_headers: str, iam_request_body: str,
              role: Optional[str] = None) -> AuthInfo:
    """
    Log in with a signed STS GetCallerIdentity request.

    Args:
        client: VaultClient used for the call
        mount: Mount path of the AWS auth backend
        iam_http_request_method: HTTP method of the signed request
        iam_request_url: Base64-encoded request URL
        iam_request_headers: Base64-encoded JSON object of the signed headers
        iam_request_body: Base64-encoded request body
        role: Vault role to log in against

    Returns:
        AuthInfo for the issued token
    """
    payload = {
        "iam_http_request_method": iam_http_request_method,
        "iam_request_url": iam_request_url,
        "iam_request_headers": iam_request_headers,
        "iam_request_body": iam_request_body,
    }
    if role is not None:
        payload["role"] = role

    logger.debug("AWS IAM login at %s (role=%s)", mount, role)
    return AuthInfo.from_response(client.post(auth_path(mount, "login"), json=payload))


def ec2_login(client, mount: str, pkcs7: str, nonce: Optional[str] = None,
              role: Optional[str] = None) -> AuthInfo:
    """
    Log in with a PKCS7-signed EC2 instance identity document.

    Args:
        client: VaultClient used for the call
        mount: Mount path of the AWS auth backend
        pkcs7: PKCS7 signature of the identity document, newlines removed
        nonce: Nonce used for re-authentication from the same instance
        role: Vault role to log in against

    Returns:
        AuthInfo for the issued token
    """
    payload = {"pkcs7": pkcs7}
    if nonce is not None:
        payload["nonce"] = nonce
    if role is not None:
        payload["role"] = role

    logger.debug("AWS EC2 login at %s (role=%s)", mount, role)
    return AuthInfo.from_response(client.post(auth_path(mount, "login"), json=payload))
