"""Example script showing how collection schemas look on the wire.

No service is needed; the payloads below are what ``Manager`` sends and
receives.
"""

import json

from orama_core import (
    EmbeddingModel,
    EmbeddingsConfig,
    ExistingCollection,
    Language,
    NewCollectionParams,
)


def example_create_payload():
    """Example: body sent to /v1/collections/create."""
    print("\n=== Example 1: Create collection payload ===")

    params = NewCollectionParams(
        id="products",
        description="Product catalog",
        read_api_key="read-key",
        write_api_key="write-key",
        language=Language.ITALIAN,
        embeddings=EmbeddingsConfig(
            model=EmbeddingModel.E5_MULTILINGUAL_LARGE,
            document_fields=["title", "content"],
        ),
    )
    print(json.dumps(params.to_payload(), indent=2))
    return params


def example_existing_collection():
    """Example: decoding a collection returned by /v1/collections/{id}."""
    print("\n=== Example 2: Existing collection ===")

    body = {
        "id": "products",
        "description": "Product catalog",
        "document_count": 2,
        "fields": {
            "id": {"Scalar": "string"},
            "price": {"Scalar": "number"},
            "title_embedding": {"Complex": "embedding"},
        },
    }
    collection = ExistingCollection.model_validate(body)
    for name, field_type in collection.fields.items():
        print(f"{name}: {type(field_type).__name__} -> {field_type.model_dump(by_alias=True)}")

    # Re-encoding gives back the service's representation
    assert collection.model_dump(mode="json", by_alias=True) == body
    return collection


if __name__ == "__main__":
    example_create_payload()
    example_existing_collection()
