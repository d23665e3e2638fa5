"""
Constants for the Vault login client library.
"""

# Vault request headers
HEADER_VAULT_TOKEN = "X-Vault-Token"
HEADER_VAULT_NAMESPACE = "X-Vault-Namespace"
HEADER_VAULT_REQUEST = "X-Vault-Request"

# Header Vault's AWS auth backend checks against its configured server ID
HEADER_AWS_IAM_SERVER_ID = "X-Vault-AWS-IAM-Server-ID"

API_PREFIX = "v1"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,       # HTTP timeout in seconds
    'verify': True,      # TLS certificate verification (bool or CA bundle path)
    'namespace': None,   # Vault Enterprise namespace
    'headers': {},       # Extra headers sent with every request
}

# Environment variables read by VaultClient.from_env()
ENV_VAULT_ADDR = "VAULT_ADDR"
ENV_VAULT_TOKEN = "VAULT_TOKEN"
ENV_VAULT_NAMESPACE = "VAULT_NAMESPACE"

# Synthetic STS request signed for IAM logins
STS_ENDPOINT = "https://sts.amazonaws.com/"
STS_SERVICE_NAME = "sts"
STS_REQUEST_BODY = "Action=GetCallerIdentity&Version=2011-06-15"
STS_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=utf-8"
