"""cap_api.errors

Exceptions raised by the CAP API client.
"""
from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "CAPAPIError",
    "TransportFailure",
    "DecodeFailure",
    "UnknownResource",
]


class CAPAPIError(Exception):
    """Base class for every error raised by this package."""


class TransportFailure(CAPAPIError):
    """The upstream answered with anything other than HTTP 200."""

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.response, "status_code", None)


class DecodeFailure(CAPAPIError):
    """The response body could not be read or was not valid JSON."""

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response


class UnknownResource(CAPAPIError, ValueError):
    """``CAPClient.api()`` was called with a name it does not know."""

    def __init__(self, name: str):
        super().__init__(f'Undefined api instance called: "{name}"')
        self.name = name
