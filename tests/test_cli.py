"""CLI commands against a stubbed client."""

import json

import httpx
import pytest
from click.testing import CliRunner

from rongcloud_sdk import AsyncRongCloud, ClientOptions
from rongcloud_sdk.cli import main as cli_main

from conftest import form


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(cli_main, "CONFIG_FILE", path)
    for var in (
        "RONGCLOUD_APP_KEY", "RONGCLOUD_APP_SECRET", "RONGCLOUD_BASE_URL", "RONGCLOUD_SMS_URL", "RONGCLOUD_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
    return path


@pytest.fixture
def stub_client(recorder, monkeypatch):
    def make() -> AsyncRongCloud:
        return AsyncRongCloud(
            "key", "secret", ClientOptions(base_url="http://example.test"), transport=httpx.MockTransport(recorder),
        )
    monkeypatch.setattr(cli_main, "_get_client", make)


def test_auth_configure_and_status(config_file):
    runner = CliRunner()
    result = runner.invoke(cli_main.main, ["auth", "configure", "--app-key", "k", "--app-secret", "s"])
    assert result.exit_code == 0
    assert json.loads(config_file.read_text()) == {"app_key": "k", "app_secret": "s"}

    result = runner.invoke(cli_main.main, ["auth", "status"])
    assert "Configured" in result.output

    runner.invoke(cli_main.main, ["auth", "logout"])
    assert json.loads(config_file.read_text()) == {}


def test_missing_credentials_exit(config_file):
    result = CliRunner().invoke(cli_main.main, ["sensitive", "list"])
    assert result.exit_code == 1
    assert "rongcloud auth configure" in result.output


def test_environment_overrides_saved_config(config_file, monkeypatch):
    config_file.write_text(json.dumps({"app_key": "k", "app_secret": "s", "sms_url": "http://saved-sms.test"}))
    assert cli_main._client_config().sms_url == "http://saved-sms.test"

    monkeypatch.setenv("RONGCLOUD_SMS_URL", "http://sms.test")
    monkeypatch.setenv("RONGCLOUD_TIMEOUT", "2.5")
    config = cli_main._client_config()
    assert config.sms_url == "http://sms.test"
    assert config.timeout == 2.5


def test_invalid_timeout_exits_with_message(config_file, monkeypatch):
    config_file.write_text(json.dumps({"app_key": "k", "app_secret": "s"}))
    monkeypatch.setenv("RONGCLOUD_TIMEOUT", "soon")

    result = CliRunner().invoke(cli_main.main, ["sensitive", "list"])
    assert result.exit_code == 1
    assert "Invalid configuration (timeout)" in result.output
    assert "Traceback" not in result.output


def test_conversation_mute(stub_client, recorder):
    result = CliRunner().invoke(cli_main.main, ["conversation", "mute", "group", "u1", "g1"])
    assert result.exit_code == 0, result.output
    params = form(recorder.last)
    assert params["conversationType"] == ["3"]
    assert params["isMuted"] == ["1"]


def test_sensitive_list_json(stub_client, recorder):
    recorder.reply({"code": 200, "words": [{"type": "0", "word": "bad", "replaceWord": "***"}]})
    result = CliRunner().invoke(cli_main.main, ["sensitive", "list", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [{"type": "0", "word": "bad", "replace_word": "***"}]


def test_remote_error_exits_nonzero(stub_client, recorder):
    recorder.reply({"code": 404, "errorMessage": "not found"}, status=404)
    result = CliRunner().invoke(cli_main.main, ["ultragroup", "members", "ug1"])
    assert result.exit_code == 1
    assert "RemoteAPIError 404: not found" in result.output


def test_validation_error_exits_before_request(stub_client, recorder):
    result = CliRunner().invoke(cli_main.main, ["sensitive", "add", "bad"])
    assert result.exit_code == 1
    assert "ClientValidationError 1002" in result.output
    assert recorder.requests == []
