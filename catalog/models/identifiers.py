"""Primary key generation for catalog documents."""

import uuid


def generate_document_id() -> str:
    """Return a 32-character opaque id, like a document store auto-id."""
    return uuid.uuid4().hex
