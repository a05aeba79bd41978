"""
Infrastructure package - external dependencies and integrations.

Modules:
- document_store.py - Path addressed document store interface
- blob_store.py - Blob store interface
- supabase.py - Supabase backed document store
- minio_storage.py - MinIO backed blob store
- memory.py - In-memory stores for development and tests
"""

from typing import Optional

from core.config import settings
from core.exceptions import ValidationError
from infrastructure.blob_store import BlobStore
from infrastructure.document_store import DocumentStore

# Singleton instances
_document_store: Optional[DocumentStore] = None
_blob_store: Optional[BlobStore] = None


def get_document_store() -> DocumentStore:
    """Get singleton document store for the configured backend."""
    global _document_store
    if _document_store is None:
        if settings.document_store == "memory":
            from infrastructure.memory import InMemoryDocumentStore
            _document_store = InMemoryDocumentStore()
        elif settings.document_store == "supabase":
            from infrastructure.supabase import SupabaseDocumentStore
            _document_store = SupabaseDocumentStore()
        else:
            raise ValidationError(f"Unknown DOCUMENT_STORE '{settings.document_store}'", field="DOCUMENT_STORE")
    return _document_store


def get_blob_store() -> BlobStore:
    """Get singleton blob store for the configured backend."""
    global _blob_store
    if _blob_store is None:
        if settings.blob_store == "memory":
            from infrastructure.memory import InMemoryBlobStore
            _blob_store = InMemoryBlobStore()
        elif settings.blob_store == "minio":
            from infrastructure.minio_storage import MinioBlobStore
            _blob_store = MinioBlobStore()
        else:
            raise ValidationError(f"Unknown BLOB_STORE '{settings.blob_store}'", field="BLOB_STORE")
    return _blob_store


__all__ = [
    'DocumentStore',
    'BlobStore',
    'get_document_store',
    'get_blob_store',
]
