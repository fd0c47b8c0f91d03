"""Python client for the OramaCore collection and document APIs."""

from orama_core.config import OramaSettings, get_settings
from orama_core.core.exceptions import (
    CollectionNotSetError,
    ConfigError,
    HttpError,
    MissingWriteKeyError,
    NotFoundError,
    OramaCoreError,
    SerializationError,
    TransportError,
    ValidationError,
)
from orama_core.core.keys import gen_random_string
from orama_core.schemas.collections import (
    ComplexField,
    ComplexType,
    Document,
    EmbeddingsConfig,
    ExistingCollection,
    FieldType,
    NewCollectionParams,
    NewCollectionResponse,
    ScalarField,
    ScalarType,
)
from orama_core.schemas.enums import EmbeddingModel, Language
from orama_core.services.client import Client
from orama_core.services.manager import Manager

__all__ = [
    # Config
    "OramaSettings",
    "get_settings",
    # Facades
    "Client",
    "Manager",
    # Models
    "ComplexField",
    "ComplexType",
    "Document",
    "EmbeddingModel",
    "EmbeddingsConfig",
    "ExistingCollection",
    "FieldType",
    "Language",
    "NewCollectionParams",
    "NewCollectionResponse",
    "ScalarField",
    "ScalarType",
    # Errors
    "CollectionNotSetError",
    "ConfigError",
    "HttpError",
    "MissingWriteKeyError",
    "NotFoundError",
    "OramaCoreError",
    "SerializationError",
    "TransportError",
    "ValidationError",
    # Utilities
    "gen_random_string",
]
