"""
Request signing for login methods that prove an external identity.

The AWS IAM login never sends its STS request; it only needs a signed copy
whose parts Vault can replay against AWS. Signing is behind the
:class:`Signer` interface so tests can swap in a fake.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional

from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from botocore.exceptions import BotoCoreError

from .exceptions import SigningError

logger = logging.getLogger(__name__)

REGION_PATTERN = re.compile(r"[a-z0-9-]+")


def _check_credential(name: str, value: Optional[str]):
    if value is None:
        return
    if not value.isascii() or any(char.isspace() for char in value):
        raise SigningError(f"AWS {name} must be ASCII without whitespace")


@dataclass(frozen=True)
class SignableRequest:
    """An HTTP request that is built only to be signed and encoded."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def check_encodable(self):
        """
        Make sure every header can go on the wire as-is.

        Raises:
            SigningError: If a header name or value is not ASCII
        """
        for name, value in self.headers.items():
            try:
                name.encode('ascii')
                value.encode('ascii')
            except (UnicodeEncodeError, AttributeError) as e:
                raise SigningError(f"header {name!r} is not a valid ASCII header") from e


@dataclass(frozen=True)
class AwsIdentity:
    """AWS credentials used for a single signing operation."""

    access_key: str
    secret_key: str
    session_token: Optional[str] = None

    def __repr__(self):
        return f"AwsIdentity(access_key={self.access_key!r})"


class Signer(ABC):
    """Produces a signed copy of a request."""

    @abstractmethod
    def sign(self, request: SignableRequest, identity: AwsIdentity,
             region: str, service: str) -> SignableRequest:
        """
        Sign ``request`` for ``service`` in ``region``.

        Returns:
            A new request carrying the signature headers

        Raises:
            SigningError: If the request cannot be signed
        """


class SigV4Signer(Signer):
    """AWS Signature Version 4 signer backed by botocore, timestamped at call time."""

    def sign(self, request: SignableRequest, identity: AwsIdentity,
             region: str, service: str) -> SignableRequest:
        if not identity.access_key or not identity.secret_key:
            raise SigningError("AWS access key and secret key are required for signing")
        if not region:
            raise SigningError("AWS region is required for signing")
        if not REGION_PATTERN.fullmatch(region):
            raise SigningError(f"invalid AWS region: {region!r}")
        _check_credential("access key", identity.access_key)
        _check_credential("secret key", identity.secret_key)
        _check_credential("session token", identity.session_token)
        request.check_encodable()

        credentials = Credentials(identity.access_key, identity.secret_key, identity.session_token)
        aws_request = AWSRequest(
            method=request.method,
            url=request.url,
            data=request.body,
            headers=dict(request.headers),
        )
        try:
            SigV4Auth(credentials, service, region).add_auth(aws_request)
        except (BotoCoreError, ValueError, TypeError) as e:
            raise SigningError(f"SigV4 signing failed: {e}") from e

        logger.debug("Signed %s %s for %s in %s", request.method, request.url, service, region)
        signed = SignableRequest(
            method=aws_request.method,
            url=aws_request.url,
            headers=dict(aws_request.headers.items()),
            body=request.body,
        )
        signed.check_encodable()
        return signed
