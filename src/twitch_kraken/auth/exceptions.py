"""Exceptions for credential resolution and persistence.

Credential problems are always recoverable: nothing here terminates the
process.

Example:
    ```python
    from twitch_kraken.auth.exceptions import CredentialNotFoundError

    if not client_id:
        raise CredentialNotFoundError("Client ID not found", env_var_name="TWITCH_CLIENT_ID")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credentials file cannot be read, parsed or written.

    Example:
        ```python
        try:
            creds = Credentials.load("~/.config/twitch/credentials")
        except CredentialFileError as e:
            print(f"Cannot load credentials: {e}")
        ```
    """

    pass
