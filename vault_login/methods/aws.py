"""
AWS login methods.

:class:`AwsIamLogin` proves an AWS identity by signing an STS
``GetCallerIdentity`` request that Vault forwards to AWS on its own;
:class:`AwsEc2Login` forwards an EC2 instance identity document.
"""

import base64
import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import botocore.session
from botocore.exceptions import BotoCoreError

from ..api import aws as aws_api
from ..constants import (
    HEADER_AWS_IAM_SERVER_ID,
    STS_CONTENT_TYPE,
    STS_ENDPOINT,
    STS_REQUEST_BODY,
    STS_SERVICE_NAME,
)
from ..exceptions import SigningError
from ..models import AuthInfo
from ..signing import AwsIdentity, SignableRequest, Signer, SigV4Signer
from .base import LoginMethod

logger = logging.getLogger(__name__)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode('ascii')


def encode_signed_request(request: SignableRequest) -> Dict[str, str]:
    """
    Encode a signed request into the fields of Vault's IAM login payload.

    The method is sent as-is; the URL, body and JSON-encoded headers are base64.
    """
    try:
        headers = json.dumps(request.headers, ensure_ascii=False).encode('ascii')
        url = request.url.encode('ascii')
    except (TypeError, UnicodeEncodeError) as e:
        raise SigningError(f"signed request cannot be encoded: {e}") from e

    return {
        "iam_http_request_method": request.method,
        "iam_request_url": _b64(url),
        "iam_request_headers": _b64(headers),
        "iam_request_body": _b64(request.body),
    }


@dataclass(frozen=True)
class AwsIamLogin(LoginMethod):
    """
    Log in with AWS credentials through the IAM auth method.

    Positional order is ``access_key, secret_key, region``; pass the optional
    fields, ``session_token`` included, by keyword.

    Args:
        access_key: AWS access key ID
        secret_key: AWS secret access key
        region: Region the STS request is signed for
        session_token: Session token for temporary credentials
        role: Vault role to log in against
        header_value: Value of ``X-Vault-AWS-IAM-Server-ID``, when the
            backend is configured to require one
        signer: Signer used for the STS request
    """

    access_key: str
    secret_key: str = field(repr=False)
    region: str
    session_token: Optional[str] = field(default=None, repr=False)
    role: Optional[str] = None
    header_value: Optional[str] = None
    signer: Signer = field(default_factory=SigV4Signer, repr=False, compare=False)

    @classmethod
    def from_botocore_session(cls, session=None, region: Optional[str] = None,
                              role: Optional[str] = None,
                              header_value: Optional[str] = None) -> "AwsIamLogin":
        """
        Build a login from the standard AWS credential chain.

        Credentials come from ``session`` (a ``botocore.session.Session``) or a
        fresh default session: environment, shared config, instance profile...

        Raises:
            SigningError: If no credentials can be resolved or refreshed
        """
        session = session or botocore.session.get_session()
        try:
            credentials = session.get_credentials()
            if credentials is None:
                raise SigningError("no AWS credentials found in the botocore credential chain")
            frozen = credentials.get_frozen_credentials()
        except BotoCoreError as e:
            raise SigningError(f"could not resolve AWS credentials: {e}") from e

        region = region or session.get_config_variable('region') or "us-east-1"
        return cls(
            access_key=frozen.access_key,
            secret_key=frozen.secret_key,
            session_token=frozen.token,
            region=region,
            role=role,
            header_value=header_value,
        )

    def sts_request(self) -> SignableRequest:
        """The unsigned ``GetCallerIdentity`` request."""
        headers = {"Content-Type": STS_CONTENT_TYPE}
        if self.header_value is not None:
            headers[HEADER_AWS_IAM_SERVER_ID] = self.header_value
        return SignableRequest(
            method="POST",
            url=STS_ENDPOINT,
            headers=headers,
            body=STS_REQUEST_BODY.encode('utf-8'),
        )

    def signed_request(self) -> SignableRequest:
        """Sign a fresh ``GetCallerIdentity`` request at the current time."""
        identity = AwsIdentity(self.access_key, self.secret_key, self.session_token)
        return self.signer.sign(self.sts_request(), identity, self.region, STS_SERVICE_NAME)

    def login(self, client, mount: str) -> AuthInfo:
        encoded = encode_signed_request(self.signed_request())
        logger.debug("Logging in to %s as %s", mount, self.access_key)
        return aws_api.iam_login(client, mount, role=self.role, **encoded)


@dataclass(frozen=True)
class AwsEc2Login(LoginMethod):
    """
    Log in with the PKCS7 signature of an EC2 instance identity document.

    Args:
        pkcs7: PKCS7 signature, newlines removed
        nonce: Nonce for re-authentication; Vault generates one when omitted
        role: Vault role to log in against
    """

    pkcs7: str = field(repr=False)
    nonce: Optional[str] = field(default=None, repr=False)
    role: Optional[str] = None

    def login(self, client, mount: str) -> AuthInfo:
        return aws_api.ec2_login(client, mount, self.pkcs7, nonce=self.nonce, role=self.role)
