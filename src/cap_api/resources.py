"""cap_api.resources

The CAP API resource families and the client scoped to one of them.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .errors import UnknownResource
from .lib import APILib
from .options import OptionsLike
from .utils import join_url

__all__ = ["ResourceKind", "ResourceClient"]


class ResourceKind(Enum):
    """Upstream resource family, valued by its path prefix."""

    ORG = "cap/v1/orgs"
    PROFILE = "profiles/v1"
    SCHEMA = "cap/v1/schemas"
    SEARCH = "cap/v1/search"
    LAYOUT = "cap/v1/layouts"

    @property
    def path(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "ResourceKind":
        try:
            return _NAMES[name]
        except (KeyError, TypeError):
            raise UnknownResource(name) from None

    @classmethod
    def names(cls) -> List[str]:
        return list(_NAMES)


# Case-sensitive; org, profile and layout also take the plural.
_NAMES: Dict[str, ResourceKind] = {
    "org": ResourceKind.ORG,
    "orgs": ResourceKind.ORG,
    "profile": ResourceKind.PROFILE,
    "profiles": ResourceKind.PROFILE,
    "schema": ResourceKind.SCHEMA,
    "search": ResourceKind.SEARCH,
    "layout": ResourceKind.LAYOUT,
    "layouts": ResourceKind.LAYOUT,
}


class ResourceClient(APILib):
    """An :class:`APILib` pointed at one resource family.

    Example::

        orgs = cap.api("orgs")
        orgs.get("AA00")               # GET {endpoint}/cap/v1/orgs/AA00
        cap.api("search").get("keyword", params={"q": "chemistry"})
    """

    def __init__(self, kind: ResourceKind, client: Any, options: OptionsLike = None):
        super().__init__(client, options)
        self.kind = kind

    def url(self, *segments: Any) -> str:
        return join_url(self.endpoint, self.kind.path, *segments)

    def get(
        self,
        *segments: Any,
        params: Optional[Mapping[str, Any]] = None,
        extra_options: OptionsLike = None,
    ) -> Any:
        return self.fetch(self.url(*segments), params, extra_options)

    def __repr__(self) -> str:
        return f"<ResourceClient {self.kind.name.lower()} at {self.url()}>"
