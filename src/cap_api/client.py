"""cap_api.client

``CAPClient`` is the entry point for talking to the CAP API. It holds the
HTTP client, endpoint, access token and default request options, and
hands out clients scoped to one part of the API::

    from cap_api import CAPClient, StaticTokenAuth

    cap = CAPClient(auth=StaticTokenAuth(token))
    cap.limit = 50
    profile = cap.api("profile").get(profile_id)

Most API calls require an access token. Obtaining it is the job of the
auth provider; ``CAPClient`` only reads it and appends it to the query
string of every request.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from .auth import AuthProvider
from .lib import DEFAULT_ENDPOINT
from .options import OptionsLike, RequestOptions
from .resources import ResourceClient, ResourceKind
from .transport import CAPSession

if TYPE_CHECKING:
    from .config import Settings

__all__ = ["CAPClient"]

logger = logging.getLogger(__name__)


class CAPClient:
    """Configuration holder and factory for resource clients."""

    def __init__(
        self,
        http_client: Any = None,
        auth: Optional[AuthProvider] = None,
        endpoint: str = DEFAULT_ENDPOINT,
        http_options: OptionsLike = None,
    ):
        self._http_client = http_client
        self._endpoint = endpoint
        self._http_options = RequestOptions.coerce(http_options)
        self._api_token: Optional[str] = None
        self.auth = auth
        if auth is not None:
            self.api_token = auth.get_auth_api_token()

    @classmethod
    def from_settings(cls, settings: "Settings", http_client: Any = None) -> "CAPClient":
        opts = RequestOptions(timeout=settings.timeout)
        client = cls(http_client=http_client, endpoint=settings.endpoint, http_options=opts)
        client.api_token = settings.api_token
        if settings.limit is not None:
            client.limit = settings.limit
        if settings.page is not None:
            client.page = settings.page
        return client

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def endpoint(self) -> str:
        """Fully qualified base URL without the trailing slash."""
        return self._endpoint

    @endpoint.setter
    def endpoint(self, value: str) -> None:
        self._endpoint = value

    def get_http_client(self) -> Any:
        """Return the HTTP client, building a :class:`CAPSession` on first use."""
        if self._http_client is None:
            logger.debug("Creating default HTTP session for %s", self._endpoint)
            self._http_client = CAPSession(self._endpoint)
        return self._http_client

    def set_http_client(self, client: Any) -> None:
        self._http_client = client

    @property
    def api_token(self) -> Optional[str]:
        """The access token, or ``None`` when unset or empty."""
        return self._api_token or None

    @api_token.setter
    def api_token(self, token: Optional[str]) -> None:
        self._api_token = token

    @property
    def http_options(self) -> RequestOptions:
        return self._http_options

    @http_options.setter
    def http_options(self, opts: OptionsLike) -> None:
        self._http_options = RequestOptions.coerce(opts)

    @property
    def limit(self) -> Optional[int]:
        """Items per page (the ``ps`` query parameter)."""
        return self._http_options.query.get("ps")

    @limit.setter
    def limit(self, value: int) -> None:
        self._http_options.query["ps"] = value

    @property
    def page(self) -> Optional[int]:
        """Page of the paginated response (the ``p`` query parameter)."""
        return self._http_options.query.get("p")

    @page.setter
    def page(self, value: int) -> None:
        self._http_options.query["p"] = value

    # ------------------------------------------------------------------
    # Gateway
    # ------------------------------------------------------------------

    def api(self, name: str) -> ResourceClient:
        """Return a client for one part of the API.

        :param name: One of org(s), profile(s), schema, search, layout(s).
        :raises UnknownResource: for any other name.
        """
        kind = ResourceKind.from_name(name)

        options = self._http_options.model_copy(deep=True)
        options.query["access_token"] = self.api_token

        api = ResourceClient(kind, self.get_http_client(), options)
        api.endpoint = self.endpoint
        return api

    def __repr__(self) -> str:
        return f"<CAPClient endpoint={self._endpoint!r}>"
