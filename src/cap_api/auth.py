"""cap_api.auth

Access tokens come from an authentication flow run elsewhere; the client
only asks a provider for the token it already holds.
"""
from __future__ import annotations

from typing import Optional, Protocol

__all__ = ["AuthProvider", "StaticTokenAuth"]


class AuthProvider(Protocol):
    def get_auth_api_token(self) -> Optional[str]:
        ...


class StaticTokenAuth:
    """Provider for a token obtained out-of-band (env var, secrets store...)."""

    def __init__(self, token: Optional[str]):
        self._token = token

    def get_auth_api_token(self) -> Optional[str]:
        return self._token
