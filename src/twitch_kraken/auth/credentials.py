"""Client credentials for the Kraken API.

A ``Credentials`` value holds the application's client ID and an optional
OAuth token. It can come from three places:

1. Explicit construction: ``Credentials("my-client-id")``
2. The environment (and a ``.env`` file, via python-dotenv):
   ``Credentials.from_env()`` reads ``TWITCH_CLIENT_ID`` and
   ``TWITCH_OAUTH_TOKEN``
3. A credentials file: ``Credentials.load(path)``

Credentials files are flat key-value documents::

    client_id='13211542'
    token='1839213891u389u1389183139'

Example:
    ```python
    from twitch_kraken.auth import Credentials

    creds = Credentials.from_env()
    creds.save("~/.config/twitch/credentials")

    same = Credentials.load("~/.config/twitch/credentials")
    ```

Credential values never appear in logs. Debug messages name the source
(argument, environment variable, file path) and print ``***`` instead.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from dotenv import dotenv_values, load_dotenv, set_key

from twitch_kraken.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

CLIENT_ID_ENV_VAR = "TWITCH_CLIENT_ID"
OAUTH_TOKEN_ENV_VAR = "TWITCH_OAUTH_TOKEN"


class CredentialResolver:
    """Pick a credential value from the first source that has one.

    Sources, highest priority first: an explicit value, the process
    environment (which includes anything loaded from ``.env``), a default.

    The ``.env`` file is loaded at most once per resolver, under a lock, so
    resolvers can be shared between threads.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Load ``.env`` unless told not to.

        Args:
            dotenv_path: ``.env`` file to load. None lets python-dotenv search
                upwards from the calling module.
            load_dotenv: Skip ``.env`` loading entirely when False.
        """
        self._dotenv_path = dotenv_path
        self._dotenv_loaded = False
        self._lock = Lock()

        if load_dotenv:
            self._load_dotenv()

    @property
    def loaded(self) -> bool:
        return self._dotenv_loaded

    def _load_dotenv(self) -> None:
        with self._lock:
            if self._dotenv_loaded:
                return
            try:
                found = load_dotenv(dotenv_path=self._dotenv_path)
            except OSError as e:
                logger.warning(f"Could not read .env file {self._dotenv_path or ''}: {e}")
            else:
                logger.debug(f".env loaded: {found}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Return the first available value, or None.

        Raises:
            CredentialNotFoundError: ``required`` is set and no source had a
                value.
        """
        candidates = [
            ("argument", value),
            (f"${env_var_name}", os.environ.get(env_var_name) if env_var_name else None),
            ("default", default),
        ]
        for source, candidate in candidates:
            if candidate is not None:
                logger.debug(f"Credential taken from {source}: ***")
                return candidate

        if required:
            detail = f" (looked in ${env_var_name})" if env_var_name else ""
            raise CredentialNotFoundError(f"Credential not found{detail}", env_var_name=env_var_name)
        return None


@dataclass
class Credentials:
    """Client ID plus optional OAuth token.

    An empty token means no token is set; requests then go out without an
    Authorization header.
    """

    client_id: str
    token: str = ""

    def __repr__(self) -> str:
        token = "***" if self.token else "''"
        return f"Credentials(client_id={self.client_id!r}, token={token})"

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    @classmethod
    def from_env(
        cls,
        *,
        client_id: str | None = None,
        token: str | None = None,
        resolver: CredentialResolver | None = None,
    ) -> "Credentials":
        """Build credentials from explicit values, the environment or .env.

        Raises:
            CredentialNotFoundError: No client ID could be resolved.
        """
        resolver = resolver or CredentialResolver()
        resolved_id = resolver.resolve(value=client_id, env_var_name=CLIENT_ID_ENV_VAR, required=True)
        resolved_token = resolver.resolve(value=token, env_var_name=OAUTH_TOKEN_ENV_VAR, default="")
        return cls(client_id=resolved_id, token=resolved_token)

    @classmethod
    def load(cls, file_path: str | Path) -> "Credentials":
        """Read credentials from a key-value file.

        Supports ~ expansion and $VAR substitution in the path.

        Raises:
            CredentialFileError: The file is missing, unreadable, or has no
                ``client_id``.
        """
        path = _expand(file_path)

        if not path.is_file():
            raise CredentialFileError(f"Credential file not found: {path}")

        try:
            values = dotenv_values(path)
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialFileError(f"Error reading credential file {path}: {e}") from e

        client_id = values.get("client_id")
        if not client_id:
            raise CredentialFileError(f"Credential file {path} has no client_id")

        logger.debug(f"Loaded credentials from file: {path} (***)")
        return cls(client_id=client_id, token=values.get("token") or "")

    def save(self, file_path: str | Path) -> None:
        """Write credentials to a key-value file, creating it if needed.

        Raises:
            CredentialFileError: The file cannot be written.
        """
        path = _expand(file_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
            set_key(path, "client_id", self.client_id, quote_mode="always")
            set_key(path, "token", self.token, quote_mode="always")
        except OSError as e:
            raise CredentialFileError(f"Error writing credential file {path}: {e}") from e

        logger.debug(f"Saved credentials to file: {path} (***)")


def _expand(file_path: str | Path) -> Path:
    return Path(os.path.expanduser(os.path.expandvars(str(file_path))))
