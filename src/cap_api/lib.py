"""cap_api.lib

Base library class shared by every CAP API resource client.

It holds the HTTP client, the endpoint and the request options, and
has the one request routine all resources use: a GET whose JSON body is
decoded and handed back. The raw response of the last request is kept
on ``last_response`` for debugging.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from .errors import DecodeFailure, TransportFailure
from .options import OptionsLike, RequestOptions

__all__ = ["APILib", "DEFAULT_ENDPOINT"]

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.stanford.edu"


class APILib:
    """Request/response core: one GET, one JSON decode, no retries."""

    def __init__(self, client: Any, options: OptionsLike = None):
        self.client = client
        self.endpoint: str = DEFAULT_ENDPOINT
        self.options: RequestOptions = RequestOptions().merged(options)
        self.last_response: Optional[requests.Response] = None

    def fetch_raw(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        extra_options: OptionsLike = None,
    ) -> Optional[requests.Response]:
        """Issue the GET and return the response, or ``None`` unless it is a 200.

        :param endpoint: Fully qualified URL.
        :param params: Additional query string parameters, eg: ``{"q": "smith"}``.
        :param extra_options: Options overriding ``self.options`` for this call only.
        """
        options = self.options.merged(extra_options)
        logger.debug("GET %s", endpoint)
        response = self.client.get(endpoint, **options.to_request_kwargs(params))
        self.last_response = response

        if response.status_code != 200:
            logger.debug("Non-200 response %s from %s", response.status_code, endpoint)
            return None
        return response

    def fetch(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        extra_options: OptionsLike = None,
    ) -> Any:
        """Like :meth:`fetch_raw` but returns the decoded JSON body.

        Raises :class:`TransportFailure` for any status other than 200 and
        :class:`DecodeFailure` when the body cannot be read or parsed.
        """
        response = self.fetch_raw(endpoint, params, extra_options)
        if response is None:
            status = getattr(self.last_response, "status_code", None)
            raise TransportFailure(
                f"Invalid response from {endpoint} (status {status})",
                response=self.last_response,
            )

        try:
            return response.json()
        except (ValueError, requests.RequestException) as exc:
            raise DecodeFailure(
                f"Could not get a JSON body from the response of {endpoint}",
                response=response,
            ) from exc
