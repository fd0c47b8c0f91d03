#!/usr/bin/env python3
"""Script to exercise a running OramaCore instance end to end.

Reads ORAMA_URL and ORAMA_MASTER_API_KEY from the environment (or .env).
"""

import sys

from orama_core import Client, Manager, NewCollectionParams, OramaCoreError
from orama_core.config import get_settings
from orama_core.core.keys import gen_random_string
from orama_core.core.logging import setup_logging


def run_smoke_test() -> int:
    """Create a collection, write to it, read it back and remove it."""
    setup_logging()
    settings = get_settings()

    try:
        manager = Manager.from_settings(settings)
    except OramaCoreError as e:
        print(f"Error: {e.message}")
        return 1

    collection_id = f"smoke-{gen_random_string(8).lower()}"
    print(f"Creating collection {collection_id} on {settings.url}")

    try:
        created = manager.create_collection(
            NewCollectionParams(id=collection_id, description="Smoke test collection")
        )

        client = Client(settings.url, write_api_key=created.write_api_key)
        client.set_collection(created.id)
        client.insert(
            [
                {"id": "1", "text": "The quick brown fox jumps over the lazy dog"},
                {"id": "2", "text": "I love my lazy dog"},
            ]
        )
        client.delete(["2"])

        collection = manager.get_collection(created.id)
        print(f"✓ {collection.id}: {collection.document_count} documents")
        for name, field_type in collection.fields.items():
            print(f"  {name}: {field_type.model_dump(by_alias=True)}")

        manager.delete_collection(created.id)
        print("✓ Collection deleted")
    except OramaCoreError as e:
        print(f"✗ {e.__class__.__name__}: {e.message}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(run_smoke_test())
