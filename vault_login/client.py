"""
HTTP client for the Vault API.

This module holds the connection configuration (address, token, namespace,
default headers) and turns Vault's JSON responses and error bodies into
Python values and typed exceptions.
"""

import logging
import os
from typing import Any, Dict, Optional

import requests

from .constants import (
    API_PREFIX,
    DEFAULT_CONFIG,
    ENV_VAULT_ADDR,
    ENV_VAULT_NAMESPACE,
    ENV_VAULT_TOKEN,
    HEADER_VAULT_NAMESPACE,
    HEADER_VAULT_REQUEST,
    HEADER_VAULT_TOKEN,
)
from .exceptions import APIError, ConfigurationError, HTTPError, ResponseParseError
from .models import AuthInfo

logger = logging.getLogger(__name__)


class VaultClient:
    """
    Client for making requests to a Vault server.

    Login methods (see :mod:`vault_login.methods`) and the endpoint helpers
    in :mod:`vault_login.api` use it as their transport.
    """

    def __init__(self, address: str, token: Optional[str] = None, **config):
        """
        Initialize Vault client.

        Args:
            address: Base URL of the Vault server, e.g. ``https://vault:8200``
            token: Vault token sent as ``X-Vault-Token``; may be set later by login()
            **config: Configuration options (timeout, verify, namespace, headers)
        """
        self.address = (address or '').rstrip('/')
        self.token = token

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.session = requests.Session()
        self.session.verify = self.config['verify']

    @classmethod
    def from_env(cls, **config) -> "VaultClient":
        """
        Create a client from ``VAULT_ADDR``, ``VAULT_TOKEN`` and ``VAULT_NAMESPACE``.

        Explicit ``config`` values win over the environment.
        """
        address = os.environ.get(ENV_VAULT_ADDR)
        if not address:
            raise ConfigurationError(f"{ENV_VAULT_ADDR} is not set")
        namespace = os.environ.get(ENV_VAULT_NAMESPACE)
        if namespace and 'namespace' not in config:
            config['namespace'] = namespace
        return cls(address, os.environ.get(ENV_VAULT_TOKEN) or None, **config)

    def _validate_config(self):
        """Validate client configuration."""
        if not self.address:
            raise ConfigurationError("address cannot be empty")

        if not self.address.startswith(('http://', 'https://')):
            raise ConfigurationError(f"address must be an http(s) URL: {self.address!r}")

        # None disables the timeout, as in requests
        timeout = self.config['timeout']
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                raise ConfigurationError(f"timeout must be a number or None: {timeout!r}")
            if timeout <= 0:
                raise ConfigurationError("timeout must be positive")

        if not isinstance(self.config['headers'], dict):
            raise ConfigurationError("headers must be a mapping")

    def set_token(self, token: Optional[str]):
        """Replace the token sent with subsequent requests."""
        self.token = token

    def login(self, mount: str, method) -> AuthInfo:
        """
        Log in with ``method`` and use the issued token from now on.

        Args:
            mount: Mount path of the auth backend, e.g. ``aws``
            method: A :class:`~vault_login.methods.base.LoginMethod`

        Returns:
            AuthInfo describing the new session
        """
        auth = method.login(self, mount)
        self.set_token(auth.client_token)
        logger.info("Logged in to %s with %s (accessor %s)",
                    mount, type(method).__name__, auth.accessor)
        return auth

    def _build_url(self, path: str) -> str:
        return f"{self.address}/{API_PREFIX}/{path.lstrip('/')}"

    def _build_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {HEADER_VAULT_REQUEST: 'true'}
        headers.update(self.config['headers'])
        if self.token:
            headers[HEADER_VAULT_TOKEN] = self.token
        if self.config['namespace']:
            headers[HEADER_VAULT_NAMESPACE] = self.config['namespace']
        if extra:
            headers.update(extra)
        return headers

    def _handle_response(self, response: requests.Response) -> Optional[Dict[str, Any]]:
        """
        Turn a Vault response into its decoded JSON body.

        Returns:
            The decoded body, or None for empty (204) responses

        Raises:
            APIError: If Vault returned a non-2xx status
            ResponseParseError: If a successful response is not JSON
        """
        if not 200 <= response.status_code < 300:
            errors = []
            try:
                body = response.json()
                if isinstance(body, dict):
                    errors = body.get('errors') or []
            except ValueError:
                if response.text:
                    errors = [response.text]
            logger.warning("Vault rejected %s %s: %s",
                           response.request.method if response.request else '?',
                           response.url, response.status_code)
            raise APIError(response.status_code, errors, url=response.url)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ResponseParseError(f"Vault returned invalid JSON from {response.url}") from e

    def _make_request(self, method: str, path: str, json=None, params=None, **kwargs) -> Optional[Dict[str, Any]]:
        """
        Make an HTTP request against the Vault API.

        Args:
            method: HTTP method
            path: API path relative to ``/v1/``, e.g. ``auth/aws/login``
            json: JSON body to send
            params: Query string parameters
            **kwargs: Additional requests arguments

        Returns:
            Decoded JSON body, or None for empty responses

        Raises:
            HTTPError: If the request could not be sent
            APIError: If Vault rejected the request
        """
        url = self._build_url(path)
        kwargs['headers'] = self._build_headers(kwargs.get('headers'))
        kwargs.setdefault('timeout', self.config['timeout'])

        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, json=json, params=params, **kwargs)
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

        return self._handle_response(response)

    def get(self, path: str, **kwargs) -> Optional[Dict[str, Any]]:
        """Make GET request."""
        return self._make_request('GET', path, **kwargs)

    def post(self, path: str, json=None, **kwargs) -> Optional[Dict[str, Any]]:
        """Make POST request."""
        return self._make_request('POST', path, json=json, **kwargs)

    def put(self, path: str, json=None, **kwargs) -> Optional[Dict[str, Any]]:
        """Make PUT request."""
        return self._make_request('PUT', path, json=json, **kwargs)

    def delete(self, path: str, **kwargs) -> Optional[Dict[str, Any]]:
        """Make DELETE request."""
        return self._make_request('DELETE', path, **kwargs)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
