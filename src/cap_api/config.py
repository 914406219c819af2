"""cap_api.config

Settings for building a :class:`~cap_api.client.CAPClient`, loaded from
the environment (and a ``.env`` file when present).

    CAP_API_ENDPOINT   base URL, default https://api.stanford.edu
    CAP_API_TOKEN      access token obtained from the auth service
    CAP_API_LIMIT      items per page (``ps``)
    CAP_API_PAGE       page number (``p``)
    CAP_API_TIMEOUT    request timeout in seconds
"""
from __future__ import annotations

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .lib import DEFAULT_ENDPOINT

__all__ = ["Settings", "ENV_VARS"]

ENV_VARS = {
    "endpoint": "CAP_API_ENDPOINT",
    "api_token": "CAP_API_TOKEN",
    "limit": "CAP_API_LIMIT",
    "page": "CAP_API_PAGE",
    "timeout": "CAP_API_TIMEOUT",
}


class Settings(BaseModel):
    """Configuration options for the CAP API client."""

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="Fully qualified base URL of the CAP API",
    )
    api_token: Optional[str] = Field(
        default=None,
        description="Access token appended to every request",
    )
    limit: Optional[int] = Field(
        default=None,
        description="Number of items per page",
    )
    page: Optional[int] = Field(
        default=None,
        description="Page of the paginated response",
    )
    timeout: Optional[float] = Field(
        default=30,
        description="Seconds before a request is abandoned",
    )

    @field_validator("endpoint")
    @classmethod
    def _endpoint_not_empty(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("endpoint must not be empty")
        return v

    @classmethod
    def from_env(cls, dotenv: bool = True, **overrides: Any) -> "Settings":
        """Build settings from ``CAP_API_*`` variables; *overrides* win when not None."""
        if dotenv:
            load_dotenv()
        values: Dict[str, Any] = {}
        for field, var in ENV_VARS.items():
            raw = os.getenv(var)
            if raw:
                values[field] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
