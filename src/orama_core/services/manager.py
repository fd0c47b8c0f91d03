"""Administrative facade over the collection lifecycle."""

from __future__ import annotations

from typing import Any

import httpx

from orama_core.config import OramaSettings, get_settings
from orama_core.core.constants import (
    COLLECTION_PATH,
    COLLECTIONS_PATH,
    CREATE_COLLECTION_PATH,
    DEFAULT_TIMEOUT,
    DELETE_COLLECTION_PATH,
    RAND_API_KEY_LENGTH,
)
from orama_core.core.exceptions import ConfigError, ValidationError
from orama_core.core.keys import KeyGenerator, gen_random_string
from orama_core.core.logging import get_logger
from orama_core.core.security import mask_secret, master_auth_headers
from orama_core.schemas.collections import (
    ExistingCollection,
    NewCollectionParams,
    NewCollectionResponse,
    existing_collection_adapter,
    existing_collection_list_adapter,
)
from orama_core.schemas.enums import DEFAULT_LANGUAGE
from orama_core.services.transport import HttpTransport, build_url

logger = get_logger(__name__)


class Manager:
    """Create, list, inspect and delete collections with the master API key.

    All state is fixed at construction, so one instance can be shared
    between threads.
    """

    def __init__(
        self,
        url: str,
        master_api_key: str,
        *,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        key_generator: KeyGenerator = gen_random_string,
    ):
        """Initialize the manager.

        Args:
            url: Service base URL.
            master_api_key: Key authorizing administrative endpoints.
            http_client: Optional caller-owned client used for every request.
            timeout: Per-request timeout when no ``http_client`` is given.
            key_generator: Source of default read/write keys.
        """
        self._url = url.rstrip("/")
        self._master_api_key = master_api_key
        self._key_generator = key_generator
        self._transport = HttpTransport(http_client=http_client, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: OramaSettings | None = None, **kwargs: Any) -> Manager:
        """Build a manager from ``ORAMA_*`` settings.

        Raises:
            ConfigError: No master API key is configured.
        """
        settings = settings or get_settings()
        if settings.master_api_key is None:
            raise ConfigError("ORAMA_MASTER_API_KEY is required to create a Manager")
        kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.url, settings.master_api_key.get_secret_value(), **kwargs)

    @property
    def url(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"Manager(url={self._url!r}, master_api_key={mask_secret(self._master_api_key)!r})"

    def _headers(self) -> dict[str, str]:
        return master_auth_headers(self._master_api_key)

    def create_collection(self, params: NewCollectionParams) -> NewCollectionResponse:
        """Create a collection.

        Missing read/write keys are generated and a missing language falls back
        to the service default. The response echoes the request values; the
        service's response body is not consulted.

        Args:
            params: Collection configuration.

        Returns:
            NewCollectionResponse: The id, description and keys that were sent.

        Raises:
            ValidationError: ``params.id`` is blank (no request is sent).
            SerializationError, TransportError, HttpError: See ``HttpTransport``.
        """
        if not params.id or not params.id.strip():
            raise ValidationError("Please provide a collection ID")

        payload = params.model_copy(
            update={
                "write_api_key": params.write_api_key
                or self._key_generator(RAND_API_KEY_LENGTH),
                "read_api_key": params.read_api_key or self._key_generator(RAND_API_KEY_LENGTH),
                "language": params.language or DEFAULT_LANGUAGE,
            }
        )

        self._transport.request(
            "POST",
            build_url(self._url, CREATE_COLLECTION_PATH),
            headers=self._headers(),
            body=payload.to_payload(),
        )
        logger.info(f"Created collection {payload.id}")

        return NewCollectionResponse(
            id=payload.id,
            description=payload.description,
            read_api_key=payload.read_api_key,
            write_api_key=payload.write_api_key,
        )

    def list_collections(self) -> list[ExistingCollection]:
        """List all collections in the order the service returns them."""
        response = self._transport.request(
            "GET", build_url(self._url, COLLECTIONS_PATH), headers=self._headers()
        )
        return self._transport.decode(response, existing_collection_list_adapter)

    def get_collection(self, collection_id: str) -> ExistingCollection:
        """Fetch one collection.

        Raises:
            NotFoundError: The service reports no such collection.
        """
        response = self._transport.request(
            "GET",
            build_url(self._url, COLLECTION_PATH, collection_id=collection_id),
            headers=self._headers(),
        )
        return self._transport.decode(response, existing_collection_adapter)

    def delete_collection(self, collection_id: str) -> None:
        """Delete a collection. Whether deleting twice fails is up to the service."""
        self._transport.request(
            "POST",
            build_url(self._url, DELETE_COLLECTION_PATH, collection_id=collection_id),
            headers=self._headers(),
        )
        logger.info(f"Deleted collection {collection_id}")
