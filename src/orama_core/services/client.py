"""Data-plane facade: document ingestion and deletion for one collection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from orama_core.config import OramaSettings, get_settings
from orama_core.core.constants import (
    DEFAULT_TIMEOUT,
    DELETE_DOCUMENTS_PATH,
    INSERT_DOCUMENTS_PATH,
)
from orama_core.core.exceptions import (
    CollectionNotSetError,
    MissingWriteKeyError,
    ValidationError,
)
from orama_core.core.logging import get_logger
from orama_core.core.security import mask_secret, write_auth_headers
from orama_core.schemas.collections import Document
from orama_core.services.transport import HttpTransport, build_url

logger = get_logger(__name__)


class Client:
    """Insert and delete documents with a collection's write API key.

    The bound collection set by ``set_collection`` is shared, unsynchronized
    state. Threads sharing one instance should pass ``collection_id`` to every
    ``insert``/``delete`` call instead of rebinding.
    """

    def __init__(
        self,
        url: str,
        *,
        read_api_key: str | None = None,
        write_api_key: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize an unbound client.

        Args:
            url: Service base URL.
            read_api_key: Collection read key (kept for read endpoints).
            write_api_key: Collection write key, required by insert/delete.
            http_client: Optional caller-owned client used for every request.
            timeout: Per-request timeout when no ``http_client`` is given.
        """
        self._url = url.rstrip("/")
        self._read_api_key = read_api_key
        self._write_api_key = write_api_key
        self._collection_id: str | None = None
        self._transport = HttpTransport(http_client=http_client, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: OramaSettings | None = None, **kwargs: Any) -> Client:
        """Build a client from ``ORAMA_*`` settings."""
        settings = settings or get_settings()
        if settings.read_api_key is not None:
            kwargs.setdefault("read_api_key", settings.read_api_key.get_secret_value())
        if settings.write_api_key is not None:
            kwargs.setdefault("write_api_key", settings.write_api_key.get_secret_value())
        kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.url, **kwargs)

    @property
    def url(self) -> str:
        return self._url

    @property
    def collection_id(self) -> str | None:
        """The bound collection, or None before ``set_collection``."""
        return self._collection_id

    @property
    def read_api_key(self) -> str | None:
        return self._read_api_key

    @property
    def write_api_key(self) -> str | None:
        return self._write_api_key

    def __repr__(self) -> str:
        return (
            f"Client(url={self._url!r}, collection_id={self._collection_id!r}, "
            f"read_api_key={mask_secret(self._read_api_key)!r}, "
            f"write_api_key={mask_secret(self._write_api_key)!r})"
        )

    def set_collection(self, collection_id: str) -> None:
        """Bind the client to a collection. No request is made."""
        self._collection_id = collection_id

    def _write_target(self, operation: str, collection_id: str | None) -> tuple[str, str]:
        target = collection_id if collection_id is not None else self._collection_id
        if target is None:
            raise CollectionNotSetError()
        if not self._write_api_key:
            raise MissingWriteKeyError(operation)
        return target, self._write_api_key

    def insert(
        self,
        documents: Document | Iterable[Document],
        *,
        collection_id: str | None = None,
    ) -> None:
        """Insert documents into a collection.

        The service applies the batch as a whole; there is no partial success.

        Args:
            documents: One JSON object or several, each carrying its own ``id``.
            collection_id: Target collection. Defaults to the bound one.

        Raises:
            CollectionNotSetError: No target collection.
            MissingWriteKeyError: No write API key configured.
            SerializationError, TransportError, HttpError: See ``HttpTransport``.
        """
        target, write_api_key = self._write_target("insert", collection_id)
        docs = [dict(documents)] if isinstance(documents, Mapping) else list(documents)
        self._transport.request(
            "POST",
            build_url(self._url, INSERT_DOCUMENTS_PATH, collection_id=target),
            headers=write_auth_headers(write_api_key),
            body=docs,
        )
        logger.info(f"Inserted {len(docs)} documents into collection {target}")

    def delete(self, document_ids: Iterable[str], *, collection_id: str | None = None) -> None:
        """Delete documents by id.

        Args:
            document_ids: Ids of the documents to remove.
            collection_id: Target collection. Defaults to the bound one.

        Raises:
            CollectionNotSetError: No target collection.
            MissingWriteKeyError: No write API key configured.
            ValidationError: ``document_ids`` is a single string.
            SerializationError, TransportError, HttpError: See ``HttpTransport``.
        """
        target, write_api_key = self._write_target("delete", collection_id)
        if isinstance(document_ids, str):
            raise ValidationError("document_ids must be a sequence of ids, not a single string")
        ids = list(document_ids)
        self._transport.request(
            "POST",
            build_url(self._url, DELETE_DOCUMENTS_PATH, collection_id=target),
            headers=write_auth_headers(write_api_key),
            body=ids,
        )
        logger.info(f"Deleted {len(ids)} documents from collection {target}")
