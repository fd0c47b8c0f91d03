"""Blocking JSON-over-HTTP transport shared by Manager and Client.

Thin wrapper around ``httpx.Client``. Handles request encoding, status checks
and response decoding only - no business logic. Every failure is translated
into the client exception hierarchy:

- ``httpx.RequestError`` (connect, DNS, TLS, timeouts) -> ``TransportError``
- invalid URL or non-ASCII header value -> ``TransportError``
- non-2xx status -> ``HttpError`` (``NotFoundError`` for 404)
- unencodable body / undecodable response -> ``SerializationError``

No retries happen here; callers own retry policy.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from orama_core.core.constants import DEFAULT_TIMEOUT, H_CONTENT_TYPE, JSON_CONTENT_TYPE
from orama_core.core.exceptions import (
    HttpError,
    NotFoundError,
    SerializationError,
    TransportError,
)
from orama_core.core.logging import get_logger

__all__ = [
    "HttpTransport",
    "build_url",
    "encode_json",
]

logger = get_logger(__name__)

T = TypeVar("T")


def build_url(base_url: str, path_template: str, **path_params: str) -> str:
    """Join a base URL and an endpoint template.

    Path parameters are percent-encoded as single path segments.
    """
    quoted = {name: quote(value, safe="") for name, value in path_params.items()}
    return base_url.rstrip("/") + path_template.format(**quoted)


def encode_json(body: Any) -> bytes:
    """Encode a request body as UTF-8 JSON.

    Raises:
        SerializationError: If the body holds values JSON cannot represent.
    """
    try:
        return json.dumps(body, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode request body: {e}") from e


class HttpTransport:
    """Send JSON requests and map failures to client exceptions.

    When ``http_client`` is given it is used as-is and never closed here; its
    owner controls pooling, TLS and timeouts. Otherwise every request opens and
    closes its own short-lived client, so nothing is held between calls.
    """

    def __init__(
        self,
        *,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http_client = http_client
        self._timeout = timeout

    @contextmanager
    def _client(self) -> Iterator[httpx.Client]:
        if self._http_client is not None:
            yield self._http_client
            return
        with httpx.Client(timeout=self._timeout) as client:
            yield client

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Any = None,
    ) -> httpx.Response:
        """Send a request and return the successful response.

        Args:
            method: HTTP method.
            url: Absolute request URL.
            headers: Request headers (authorization included).
            body: JSON-compatible body, or None for no body.

        Returns:
            httpx.Response: Response with a 2xx status.

        Raises:
            SerializationError: Body could not be encoded.
            TransportError: Request could not be sent or no response arrived.
            HttpError: Service answered with a non-success status.
        """
        request_headers = dict(headers)
        content: bytes | None = None
        if body is not None:
            content = encode_json(body)
            request_headers[H_CONTENT_TYPE] = JSON_CONTENT_TYPE

        try:
            path = httpx.URL(url).path
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid request URL: {e}") from e
        logger.debug(f"{method} {path}")

        try:
            with self._client() as client:
                response = client.request(method, url, headers=request_headers, content=content)
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} failed before a response: {e.__class__.__name__}")
            raise TransportError(f'Request to "{path}" could not be completed: {e}') from e
        except httpx.InvalidURL as e:
            raise TransportError(f'Request to "{path}" has an invalid URL: {e}') from e
        except UnicodeEncodeError:
            # Not chained: the exception object carries the raw header value.
            logger.warning(f"{method} {path} has a non-ASCII header value")
            raise TransportError(
                f'Request to "{path}" could not be encoded: header values must be ASCII'
            ) from None

        if not response.is_success:
            logger.warning(f"{method} {path} returned HTTP {response.status_code}")
            error_cls = NotFoundError if response.status_code == 404 else HttpError
            raise error_cls(response.status_code, response.text, url=path)

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    @staticmethod
    def decode(response: httpx.Response, adapter: TypeAdapter[T]) -> T:
        """Validate a JSON response body against a pydantic adapter.

        Raises:
            SerializationError: Body is not valid JSON or does not match the schema.
        """
        try:
            return adapter.validate_json(response.content)
        except PydanticValidationError as e:
            path = response.request.url.path
            logger.error(f"Unexpected response body from {path}: {e.error_count()} error(s)")
            raise SerializationError(f'Failed to decode response from "{path}": {e}') from e
