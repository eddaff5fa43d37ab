# =============================================================================
# core/upstream.py  —  Upstream Client (StreamerSongList REST API)
# =============================================================================
#
# send() issues ONE HTTP request and classifies what happened:
#
#   2xx                         → Success(status_code, body)
#   any other status            → Failure(status_code, reason)
#   no HTTP answer at all       → NetworkError(message)
#
# A non-2xx answer is a value, not an exception: the call completed and the
# server declined it.  Nothing is retried and no backoff is applied.  The
# only exception that escapes is UpstreamResponseError, for a 2xx answer
# whose body is not JSON.
#
# There is no shared requests.Session: each call opens its own connection,
# so concurrent calls share nothing.
# =============================================================================

import logging
from typing import Optional

import requests

from core.errors import UpstreamResponseError
from core.models import Failure, NetworkError, Success, UpstreamOutcome, UpstreamRequest

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class UpstreamClient:
    def __init__(self, base_url: str, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def url_for(self, request: UpstreamRequest) -> str:
        return f"{self.base_url}/{request.path}"

    def send(self, request: UpstreamRequest) -> UpstreamOutcome:
        """Perform ``request`` and return its outcome.

        Raises:
            UpstreamResponseError: if a 2xx response body is not valid JSON.
        """
        url = self.url_for(request)
        logger.debug("%s %s params=%s body=%s", request.method, url, dict(request.query), request.body)

        try:
            response = requests.request(
                request.method,
                url,
                params=dict(request.query) or None,
                json=dict(request.body) if request.body is not None else None,
                headers=_JSON_HEADERS,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", request.method, url, e)
            return NetworkError(str(e))

        if not response.ok:
            logger.warning("%s %s → %s %s", request.method, url, response.status_code, response.reason)
            return Failure(response.status_code, response.reason or "")

        if not response.content:
            return Success(response.status_code, None)
        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamResponseError(
                f"Invalid JSON from {request.method} {request.path}: {e}"
            ) from e
        return Success(response.status_code, body)
