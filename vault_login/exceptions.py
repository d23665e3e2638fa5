"""
Custom exceptions for the Vault login client library.
"""


class VaultClientError(Exception):
    """Base exception for Vault client errors."""
    pass


class ConfigurationError(VaultClientError):
    """Raised when client configuration is invalid."""
    pass


class SigningError(VaultClientError):
    """Raised when a login request cannot be built or signed locally."""
    pass


class HTTPError(VaultClientError):
    """Raised when the HTTP request itself fails (connection, timeout, TLS)."""
    pass


class ResponseParseError(VaultClientError):
    """Raised when a successful response has an unexpected body."""
    pass


class APIError(VaultClientError):
    """
    Raised when Vault answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by Vault
        errors: Messages from the ``errors`` array of the response body
        url: Request URL
    """

    def __init__(self, status_code, errors=None, url=None):
        self.status_code = status_code
        self.errors = list(errors or [])
        self.url = url
        detail = "; ".join(self.errors) if self.errors else "no error details"
        super().__init__(f"Vault returned {status_code}: {detail}")
