import json
from unittest.mock import MagicMock

import pytest
import requests
from click.testing import CliRunner

from cap_api import cli
from cap_api.config import ENV_VARS
from conftest import make_response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_get(monkeypatch):
    get = MagicMock(return_value=make_response(200, {"name": "Chemistry"}))
    monkeypatch.setattr(cli.CAPClient, "get_http_client", lambda self: MagicMock(get=get))
    return get


def test_resources_lists_names():
    result = CliRunner().invoke(cli.main, ["resources"])
    assert result.exit_code == 0
    assert result.output.split() == ["org", "orgs", "profile", "profiles", "schema", "search", "layout", "layouts"]


def test_get_prints_json(fake_get):
    result = CliRunner().invoke(
        cli.main, ["get", "orgs", "AA00", "--token", "tok", "--limit", "10", "-q", "extra=1"]
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"name": "Chemistry"}
    url = fake_get.call_args.args[0]
    assert url == "https://api.stanford.edu/cap/v1/orgs/AA00"
    assert fake_get.call_args.kwargs["params"] == {"ps": 10, "access_token": "tok", "extra": "1"}


def test_get_unknown_resource_is_usage_error(fake_get):
    result = CliRunner().invoke(cli.main, ["get", "auth"])
    assert result.exit_code == 2
    assert "Undefined api instance" in result.output
    fake_get.assert_not_called()


def test_get_reports_transport_failure(fake_get):
    fake_get.return_value = make_response(404, {"error": "nope"})
    result = CliRunner().invoke(cli.main, ["get", "profiles", "1"])
    assert result.exit_code == 1
    assert "status 404" in result.output


def test_get_bad_param(fake_get):
    result = CliRunner().invoke(cli.main, ["get", "search", "-q", "broken"])
    assert result.exit_code == 2


def test_get_empty_endpoint_is_usage_error(fake_get):
    result = CliRunner().invoke(cli.main, ["get", "orgs", "--endpoint", ""])
    assert result.exit_code == 2
    assert "Invalid settings" in result.output
    assert "endpoint" in result.output
    fake_get.assert_not_called()


def test_get_bad_limit_from_environment_is_usage_error(monkeypatch, fake_get):
    monkeypatch.setenv("CAP_API_LIMIT", "abc")
    result = CliRunner().invoke(cli.main, ["get", "orgs"])
    assert result.exit_code == 2
    assert "limit" in result.output
    fake_get.assert_not_called()


def test_get_reports_network_error(fake_get):
    fake_get.side_effect = requests.ConnectionError("connection refused")
    result = CliRunner().invoke(cli.main, ["get", "orgs", "AA00"])
    assert result.exit_code == 1
    assert "connection refused" in result.output
    assert not isinstance(result.exception, requests.ConnectionError)
