from unittest.mock import patch

import requests

from cap_api.transport import CAPSession


def test_session_headers():
    s = CAPSession("https://api.stanford.edu")
    assert s.headers["Accept"] == "application/json"
    assert s.headers["User-Agent"].startswith("cap-api-client/")


def test_relative_urls_resolve_against_base_url():
    s = CAPSession("https://api.stanford.edu/")
    with patch.object(requests.Session, "request", return_value="resp") as req:
        assert s.get("cap/v1/orgs/AA00", params={"ps": 1}) == "resp"
    assert req.call_args.args == ("GET", "https://api.stanford.edu/cap/v1/orgs/AA00")
    assert req.call_args.kwargs["params"] == {"ps": 1}


def test_absolute_urls_untouched():
    s = CAPSession("https://api.stanford.edu")
    with patch.object(requests.Session, "request", return_value="resp") as req:
        s.get("https://other.test/x")
    assert req.call_args.args == ("GET", "https://other.test/x")
