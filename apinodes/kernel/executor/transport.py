"""HTTP transport: performs one resolved request and returns the parsed body.

Adapters depend only on the HttpTransport call signature. RequestsTransport
is the default implementation; hosts and tests may pass any callable with
the same contract.
"""

import logging
from typing import Any, Protocol

import requests

from apinodes.config import DEFAULT_HTTP_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from apinodes.kernel.errors import TransportError
from apinodes.kernel.resolver.request_spec import RequestSpec

logger = logging.getLogger(__name__)


class HttpTransport(Protocol):
    """Performs one request; raises TransportError on non-2xx or network failure."""

    def __call__(self, request: RequestSpec) -> Any: ...


class RequestsTransport:
    """HttpTransport backed by a requests Session.

    Timeouts, TLS and redirects are handled by requests; no retries.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", DEFAULT_USER_AGENT)
        self._timeout = timeout

    def __call__(self, request: RequestSpec) -> Any:
        logger.debug("%s %s", request.method, request.url)
        try:
            response = self._session.request(
                request.method,
                request.url,
                params=request.query or None,
                json=request.body,
                headers=request.headers or None,
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request to {request.url} timed out: {e}")
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {request.url} failed: {e}")

        body = _parse_body(response)
        if not response.ok:
            logger.warning("%s %s returned %s", request.method, request.url, response.status_code)
            raise TransportError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                response=body,
            )
        return body

    def close(self) -> None:
        self._session.close()


def _parse_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
