# noqa: D104
"""Top-level package for cap_api."""
from __future__ import annotations

__version__ = "0.1.0"
__all__ = [
    "CAPClient",
    "ResourceClient",
    "ResourceKind",
    "RequestOptions",
    "StaticTokenAuth",
    "Settings",
    "CAPAPIError",
    "TransportFailure",
    "DecodeFailure",
    "UnknownResource",
]

_LAZY = {
    "CAPClient": "client",
    "ResourceClient": "resources",
    "ResourceKind": "resources",
    "RequestOptions": "options",
    "StaticTokenAuth": "auth",
    "Settings": "config",
    "CAPAPIError": "errors",
    "TransportFailure": "errors",
    "DecodeFailure": "errors",
    "UnknownResource": "errors",
}


def __getattr__(name):  # type: ignore[override]
    if name in _LAZY:
        from importlib import import_module

        return getattr(import_module(f".{_LAZY[name]}", __name__), name)
    raise AttributeError(name)
