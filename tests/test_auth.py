from unittest.mock import patch

import pytest

from m365kit.auth import Session, Settings, decode_access_token, is_app_only_access_token
from m365kit.errors import CommandError
from tests.conftest import APP_ONLY_TOKEN, DELEGATED_TOKEN


def test_decode_access_token():
    assert decode_access_token(DELEGATED_TOKEN)["upn"] == "user@contoso.com"
    assert decode_access_token("not-a-jwt") == {}


def test_is_app_only_access_token():
    assert is_app_only_access_token(APP_ONLY_TOKEN) is True
    assert is_app_only_access_token(DELEGATED_TOKEN) is False


def test_client_secret_uses_client_credentials(logger):
    settings = Settings(tenant="contoso.onmicrosoft.com", client_id="cid", client_secret="secret")

    with patch("m365kit.auth.ConfidentialClientApplication") as app_cls:
        app_cls.return_value.acquire_token_for_client.return_value = {"access_token": "tok"}
        session = Session(settings, logger)

        assert session.get_access_token("https://contoso.sharepoint.com") == "tok"
        assert session.get_access_token("https://contoso.sharepoint.com") == "tok"

    app_cls.assert_called_once_with(
        "cid",
        authority="https://login.microsoftonline.com/contoso.onmicrosoft.com",
        client_credential="secret",
    )
    app_cls.return_value.acquire_token_for_client.assert_called_once_with(
        scopes=["https://contoso.sharepoint.com/.default"]
    )


def test_device_code_flow_without_secret(logger):
    with patch("m365kit.auth.PublicClientApplication") as app_cls:
        app = app_cls.return_value
        app.get_accounts.return_value = []
        app.initiate_device_flow.return_value = {"user_code": "ABC", "message": "Go to https://microsoft.com/devicelogin"}
        app.acquire_token_by_device_flow.return_value = {"access_token": "tok"}

        assert Session(Settings(), logger).get_access_token() == "tok"

    assert "Go to https://microsoft.com/devicelogin" in logger.stderr


def test_auth_failure_raises_command_error(logger):
    with patch("m365kit.auth.ConfidentialClientApplication") as app_cls:
        app_cls.return_value.acquire_token_for_client.return_value = {
            "error": "invalid_client",
            "error_description": "AADSTS7000215: Invalid client secret provided.",
        }

        with pytest.raises(CommandError) as exc_info:
            Session(Settings(client_secret="bad"), logger).get_access_token()

    assert exc_info.value.message == "Auth failed: AADSTS7000215: Invalid client secret provided."


def test_configured_access_token_skips_msal(logger):
    with patch("m365kit.auth.PublicClientApplication") as app_cls:
        assert Session(Settings(access_token=DELEGATED_TOKEN), logger).get_access_token() == DELEGATED_TOKEN

    app_cls.assert_not_called()


def test_configured_access_token_only_covers_graph(logger):
    settings = Settings(access_token=DELEGATED_TOKEN, client_secret="secret")

    with patch("m365kit.auth.ConfidentialClientApplication") as app_cls:
        app_cls.return_value.acquire_token_for_client.return_value = {"access_token": "spo-token"}
        session = Session(settings, logger)

        assert session.get_access_token("https://graph.microsoft.com") == DELEGATED_TOKEN
        assert session.get_access_token("https://contoso.sharepoint.com") == "spo-token"
