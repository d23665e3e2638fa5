"""
Base class for login methods.
"""

from abc import ABC, abstractmethod

from ..models import AuthInfo


class LoginMethod(ABC):
    """
    A strategy that turns credentials into a Vault token.

    Implementations own their credential material and never modify it, so a
    single instance can be used for any number of logins, from any thread.
    """

    @abstractmethod
    def login(self, client, mount: str) -> AuthInfo:
        """
        Log in against the auth backend mounted at ``mount``.

        Makes exactly one request to Vault through ``client``. Errors are
        not retried.

        Args:
            client: VaultClient used for the call
            mount: Mount path of the auth backend

        Returns:
            AuthInfo for the issued token

        Raises:
            SigningError: If the login request could not be built
            HTTPError: If Vault could not be reached
            APIError: If Vault rejected the login
        """
