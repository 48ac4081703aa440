"""Tests for credential exceptions."""

import pytest

from twitch_kraken.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)


class TestCredentialNotFoundError:
    def test_is_credential_error(self):
        assert issubclass(CredentialNotFoundError, CredentialError)

    def test_env_var_name_attribute(self):
        error = CredentialNotFoundError("Client ID not found", env_var_name="TWITCH_CLIENT_ID")

        assert str(error) == "Client ID not found"
        assert error.env_var_name == "TWITCH_CLIENT_ID"

    def test_env_var_name_optional(self):
        assert CredentialNotFoundError("missing").env_var_name is None


class TestCredentialFileError:
    def test_is_credential_error(self):
        assert issubclass(CredentialFileError, CredentialError)

    def test_can_be_caught_as_base(self):
        with pytest.raises(CredentialError, match="cannot read"):
            raise CredentialFileError("cannot read credentials")
