import json
from unittest.mock import MagicMock

import pytest
import requests


def make_response(status_code=200, body=None, text=None):
    """A real requests.Response with a canned status and body."""
    r = requests.Response()
    r.status_code = status_code
    if text is None:
        text = json.dumps(body)
    r._content = text.encode("utf-8")
    r.encoding = "utf-8"
    return r


@pytest.fixture
def transport():
    t = MagicMock(name="transport")
    t.get.return_value = make_response(200, {"id": 1, "name": "x"})
    return t
