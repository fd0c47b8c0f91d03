"""Central constants shared by the Manager and Client facades."""

from typing import Final

# Length of generated read/write API keys.
RAND_API_KEY_LENGTH: Final[int] = 32

DEFAULT_TIMEOUT: Final[float] = 30.0

# Administrative endpoints (master key).
COLLECTIONS_PATH: Final[str] = "/v1/collections"
CREATE_COLLECTION_PATH: Final[str] = "/v1/collections/create"
COLLECTION_PATH: Final[str] = "/v1/collections/{collection_id}"
DELETE_COLLECTION_PATH: Final[str] = "/v1/collections/{collection_id}/delete"

# Document endpoints (collection write key).
INSERT_DOCUMENTS_PATH: Final[str] = "/collections/{collection_id}/insert"
DELETE_DOCUMENTS_PATH: Final[str] = "/collections/{collection_id}/delete"

# Headers.
H_AUTHORIZATION: Final[str] = "Authorization"
H_CONTENT_TYPE: Final[str] = "Content-Type"
JSON_CONTENT_TYPE: Final[str] = "application/json"
