"""
Integration tests against a local Vault dev server.

Requires the ``vault`` binary on PATH; skipped otherwise.
"""

import shutil
import subprocess
import time

import pytest
import requests

from vault_login import (
    APIError,
    AppRoleLogin,
    AwsEc2Login,
    CreateTokenRequest,
    UserpassLogin,
    VaultClient
)
from vault_login.api import token

pytestmark = pytest.mark.integration


class TestIntegration:
    """Integration tests with a Vault dev server."""
    SERVER_URL = "http://127.0.0.1:8299"
    ROOT_TOKEN = "integration-root"

    @pytest.fixture(scope="class", autouse=True)
    def vault_server(self):
        """Start Vault dev server for integration tests."""
        if shutil.which("vault") is None:
            pytest.skip("vault binary not found")

        server_process = subprocess.Popen(
            [
                "vault", "server", "-dev",
                f"-dev-root-token-id={self.ROOT_TOKEN}",
                "-dev-listen-address=127.0.0.1:8299",
            ],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE
        )

        # Wait for server to start
        deadline = time.time() + 15
        while True:
            try:
                response = requests.get(f"{self.SERVER_URL}/v1/sys/health", timeout=1)
                if response.status_code == 200:
                    break
            except requests.RequestException:
                pass
            if time.time() > deadline:
                server_process.terminate()
                server_process.wait()
                pytest.skip("Could not start Vault dev server")
            time.sleep(0.5)

        yield server_process

        # Cleanup: stop the server
        server_process.terminate()
        server_process.wait()

    @pytest.fixture
    def client(self):
        """Create client authenticated with the root token."""
        with VaultClient(self.SERVER_URL, self.ROOT_TOKEN) as client:
            yield client

    @pytest.fixture
    def child_token(self, client):
        """Create a renewable child token."""
        return token.new(client, CreateTokenRequest(
            ttl="10m", renewable=True, explicit_max_ttl="1h"))

    def test_new(self, client):
        auth = token.new(client)

        assert auth.client_token
        assert auth.accessor

    def test_new_orphan(self, client):
        auth = token.new_orphan(client)

        assert auth.orphan is True

    def test_lookup(self, client, child_token):
        info = token.lookup(client, child_token.client_token)

        assert info.accessor == child_token.accessor
        assert info.renewable is True

    def test_lookup_self(self, client):
        info = token.lookup_self(client)

        assert info.id == self.ROOT_TOKEN
        assert "root" in info.policies

    def test_lookup_accessor(self, client, child_token):
        info = token.lookup_accessor(client, child_token.accessor)

        assert info.accessor == child_token.accessor

    def test_renew(self, client, child_token):
        auth = token.renew(client, child_token.client_token, "20m")

        assert auth.client_token == child_token.client_token
        assert auth.renewable is True

    def test_revoke(self, client, child_token):
        token.revoke(client, child_token.client_token)

        with pytest.raises(APIError) as exc_info:
            token.lookup(client, child_token.client_token)
        assert exc_info.value.status_code in (400, 403)

    def test_userpass_login(self, client):
        client.post("sys/auth/userpass", json={"type": "userpass"})
        client.post("auth/userpass/users/alice",
                    json={"password": "hunter2", "token_policies": "default"})

        with VaultClient(self.SERVER_URL) as anonymous:
            auth = anonymous.login("userpass", UserpassLogin("alice", "hunter2"))
            info = token.lookup_self(anonymous)

        assert "default" in auth.policies
        assert info.accessor == auth.accessor

        with VaultClient(self.SERVER_URL) as anonymous:
            with pytest.raises(APIError) as exc_info:
                anonymous.login("userpass", UserpassLogin("alice", "wrong"))

        assert exc_info.value.status_code == 400
        assert anonymous.token is None

    def test_approle_login(self, client):
        client.post("sys/auth/approle", json={"type": "approle"})
        client.post("auth/approle/role/app", json={"token_policies": "default"})
        role_id = client.get("auth/approle/role/app/role-id")["data"]["role_id"]
        secret_id = client.post("auth/approle/role/app/secret-id")["data"]["secret_id"]

        with VaultClient(self.SERVER_URL) as anonymous:
            auth = anonymous.login("approle", AppRoleLogin(role_id, secret_id))

        assert auth.client_token
        assert auth.metadata == {"role_name": "app"}

    def test_ec2_login_rejected(self, client):
        """Test that an invalid identity document is a service error."""
        client.post("sys/auth/aws", json={"type": "aws"})

        with VaultClient(self.SERVER_URL) as anonymous:
            with pytest.raises(APIError):
                AwsEc2Login(pkcs7="bm90LWEtcGtjczc=", role="ec2-role").login(anonymous, "aws")
