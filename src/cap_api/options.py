"""cap_api.options

Request options passed through to the HTTP transport.

``query`` holds the query-string values (pagination ``p``/``ps`` and the
``access_token``). Keys that are not declared fields are kept as extra
transport options, e.g. ``verify`` or ``allow_redirects`` for requests.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["RequestOptions", "OptionsLike"]


class RequestOptions(BaseModel):
    """HTTP options for one client, merged shallowly per request."""

    model_config = ConfigDict(extra="allow")

    query: Dict[str, Any] = Field(
        default_factory=dict,
        description="Query string parameters sent with every request",
    )
    headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra request headers",
    )
    timeout: Optional[float] = Field(
        default=None,
        description="Seconds to wait for the server; transport default when unset",
    )

    @classmethod
    def coerce(cls, value: "OptionsLike") -> "RequestOptions":
        if value is None:
            return cls()
        if isinstance(value, RequestOptions):
            return value.model_copy(deep=True)
        return cls.model_validate(dict(value))

    def merged(self, other: "OptionsLike" = None) -> "RequestOptions":
        """Return a new instance with the keys set in *other* overriding ours.

        The override is shallow: a ``query`` in *other* replaces ours whole.
        From a mapping every key given counts; from a ``RequestOptions``
        every field explicitly set, or holding a non-default value, does.
        """
        data = self.model_dump()
        if isinstance(other, RequestOptions):
            defaults = RequestOptions().model_dump()
            explicit = other.model_fields_set
            data.update(
                (k, v) for k, v in other.model_dump().items()
                if k in explicit or k not in defaults or v != defaults[k]
            )
        elif other is not None:
            given = RequestOptions.model_validate(dict(other)).model_dump()
            data.update((k, given[k]) for k in other)
        return RequestOptions.model_validate(data).model_copy(deep=True)

    def to_request_kwargs(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Keyword arguments for ``requests.Session.get``.

        An extra option named ``params`` is folded into the query, below
        ``query`` and *params*.
        """
        kwargs: Dict[str, Any] = dict(self.model_extra or {})
        query = {**(kwargs.pop("params", None) or {}), **self.query, **(params or {})}
        kwargs["params"] = {k: v for k, v in query.items() if v is not None}
        if self.headers:
            kwargs["headers"] = dict(self.headers)
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return kwargs


OptionsLike = Union[RequestOptions, Mapping[str, Any], None]
