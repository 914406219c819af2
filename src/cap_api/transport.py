"""cap_api.transport

Default HTTP transport: a ``requests.Session`` bound to the CAP endpoint.
"""
from __future__ import annotations

from typing import Any

import requests

from . import __version__
from .utils import join_url

__all__ = ["CAPSession", "DEFAULT_HEADERS"]

DEFAULT_HEADERS = {
    "User-Agent": f"cap-api-client/{__version__}",
    "Accept": "application/json",
}


class CAPSession(requests.Session):
    """Session that resolves relative URLs against ``base_url``."""

    def __init__(self, base_url: str):
        super().__init__()
        self.base_url = base_url
        self.headers.update(DEFAULT_HEADERS)

    def request(self, method: str, url: Any, *args: Any, **kwargs: Any) -> requests.Response:
        url = str(url)
        if "://" not in url:
            url = join_url(self.base_url, url)
        return super().request(method, url, *args, **kwargs)
