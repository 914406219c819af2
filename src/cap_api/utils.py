"""cap_api.utils

Utility helpers shared across the cap_api package.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable

__all__ = [
    "join_url",
    "parse_key_values",
]


def join_url(base: str, *segments: Any) -> str:
    """Join *base* and path *segments* with single slashes.

    Empty segments are skipped; numeric ids are accepted as-is.
    """
    parts = [str(base).rstrip("/")]
    for seg in segments:
        s = str(seg).strip("/")
        if s:
            parts.append(s)
    return "/".join(parts)


def parse_key_values(pairs: Iterable[str]) -> Dict[str, str]:
    """Turn ``["q=smith", "ps=10"]`` into ``{"q": "smith", "ps": "10"}``."""
    out: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        out[key] = value
    return out
