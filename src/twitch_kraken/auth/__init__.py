"""Authentication components for the Kraken client.

This module provides:
- ``Credentials``: client ID plus optional OAuth token, loadable from the
  environment, a .env file or a credentials file
- Multi-source credential resolution (value → env → .env → default)
- OAuth scopes and authorization URL builders

Example:
    ```python
    from twitch_kraken.auth import Credentials

    creds = Credentials.from_env()
    ```
"""

from twitch_kraken.auth.credentials import CredentialResolver, Credentials
from twitch_kraken.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from twitch_kraken.auth.scopes import Scope, auth_code_flow, format_scopes, implicit_grant_flow

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "Scope",
    "auth_code_flow",
    "format_scopes",
    "implicit_grant_flow",
]
