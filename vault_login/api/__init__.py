"""
Endpoint helpers mapping Vault API operations onto client calls.
"""

from . import approle, aws, token, userpass

__all__ = ["approle", "aws", "token", "userpass"]
