"""Collection request and response schemas."""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

from orama_core.schemas.enums import EmbeddingModel, Language

# A document is an arbitrary JSON object carrying a caller-assigned "id".
Document = dict[str, Any]


class ScalarType(str, Enum):
    """Kinds of scalar fields."""

    STRING = "string"
    NUMBER = "number"


class ComplexType(str, Enum):
    """Kinds of complex fields."""

    EMBEDDING = "embedding"


SCALAR_TAG = "Scalar"
COMPLEX_TAG = "Complex"


class ScalarField(BaseModel):
    """Field tagged ``Scalar``, wire form ``{"Scalar": "string"}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    scalar: ScalarType = Field(..., alias=SCALAR_TAG)


class ComplexField(BaseModel):
    """Field tagged ``Complex``, wire form ``{"Complex": "embedding"}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    complex: ComplexType = Field(..., alias=COMPLEX_TAG)


def _field_type_tag(value: Any) -> str | None:
    """Pick the FieldType variant from its single wrapper key."""
    if isinstance(value, ScalarField):
        return SCALAR_TAG
    if isinstance(value, ComplexField):
        return COMPLEX_TAG
    if isinstance(value, dict):
        if SCALAR_TAG in value:
            return SCALAR_TAG
        if COMPLEX_TAG in value:
            return COMPLEX_TAG
    return None


FieldType = Annotated[
    Annotated[ScalarField, Tag(SCALAR_TAG)] | Annotated[ComplexField, Tag(COMPLEX_TAG)],
    Discriminator(_field_type_tag),
]

field_type_adapter: TypeAdapter[ScalarField | ComplexField] = TypeAdapter(FieldType)


class EmbeddingsConfig(BaseModel):
    """Embedding setup for a new collection."""

    model: EmbeddingModel | None = Field(None, description="Embedding model to use")
    document_fields: list[str] | None = Field(
        None, description="Document fields concatenated into the embedded text"
    )


class NewCollectionParams(BaseModel):
    """Request payload for collection creation.

    Keys and language left as ``None`` are filled in by ``Manager.create_collection``.
    """

    id: str = Field(..., description="Collection ID, unique within the service")
    description: str | None = Field(None, description="Human readable description")
    write_api_key: str | None = Field(None, repr=False)
    read_api_key: str | None = Field(None, repr=False)
    language: Language | None = Field(None, description="Tokenizer language")
    embeddings: EmbeddingsConfig | None = None

    def to_payload(self) -> dict[str, Any]:
        """Render the JSON body, omitting unset optionals."""
        return self.model_dump(mode="json", exclude_none=True)


class NewCollectionResponse(BaseModel):
    """Acknowledgment of a created collection, echoing the request values."""

    model_config = ConfigDict(frozen=True)

    id: str
    description: str | None = None
    read_api_key: str = Field(..., repr=False)
    write_api_key: str = Field(..., repr=False)


class ExistingCollection(BaseModel):
    """Current state of a collection as reported by the service."""

    model_config = ConfigDict(frozen=True)

    id: str
    description: str | None = None
    document_count: int = Field(..., ge=0)
    fields: dict[str, FieldType] = Field(default_factory=dict)


existing_collection_list_adapter: TypeAdapter[list[ExistingCollection]] = TypeAdapter(
    list[ExistingCollection]
)
existing_collection_adapter: TypeAdapter[ExistingCollection] = TypeAdapter(ExistingCollection)
