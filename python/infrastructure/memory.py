"""
In-memory document and blob stores.
Used for local development (DOCUMENT_STORE=memory, BLOB_STORE=memory) and tests.
"""

import copy
import uuid
from typing import Any, Dict, List, Optional

from core.exceptions import BlobNotFoundError
from core.logging import get_logger
from infrastructure.blob_store import BlobStore
from infrastructure.document_store import (
    CollectionRef,
    DocumentStore,
    parse_collection_path,
    parse_document_path,
)

logger = get_logger(__name__)


def _sort_key(value: Any):
    # None sorts last regardless of the column type
    return (value is None, value if value is not None else 0)


class InMemoryDocumentStore(DocumentStore):
    """Documents kept per collection path in plain dicts."""

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}

    def _rows(self, collection: CollectionRef) -> Dict[str, Dict[str, Any]]:
        return self._collections.setdefault(collection.path, {})

    async def get_document(self, path: str) -> Optional[Dict[str, Any]]:
        collection, doc_id = parse_document_path(path)
        row = self._rows(collection).get(doc_id)
        return copy.deepcopy(row) if row is not None else None

    async def add_document(self, collection_path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        collection = parse_collection_path(collection_path)
        doc_id = str(uuid.uuid4())
        row = {**copy.deepcopy(data), **collection.scope, "id": doc_id}
        self._rows(collection)[doc_id] = row
        return copy.deepcopy(row)

    async def set_document(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        collection, doc_id = parse_document_path(path)
        row = {**copy.deepcopy(data), **collection.scope, "id": doc_id}
        self._rows(collection)[doc_id] = row
        return copy.deepcopy(row)

    async def update_document(self, path: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        collection, doc_id = parse_document_path(path)
        row = self._rows(collection).get(doc_id)
        if row is None:
            return None
        row.update({k: copy.deepcopy(v) for k, v in data.items() if k != "id"})
        return copy.deepcopy(row)

    async def delete_document(self, path: str) -> bool:
        collection, doc_id = parse_document_path(path)
        return self._rows(collection).pop(doc_id, None) is not None

    async def query(
        self,
        collection_path: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        collection = parse_collection_path(collection_path)
        filters = filters or {}

        rows = [
            row for row in self._rows(collection).values()
            if all(row.get(key) == value for key, value in filters.items())
        ]
        if order_by:
            rows.sort(key=lambda row: _sort_key(row.get(order_by)), reverse=order_desc)
        if limit:
            rows = rows[:limit]
        return copy.deepcopy(rows)


class InMemoryBlobStore(BlobStore):
    """Objects kept as bytes keyed by object key."""

    def __init__(self, base_url: str = "memory://blobs"):
        self.base_url = base_url.rstrip("/")
        self.objects: Dict[str, bytes] = {}

    def public_url(self, key: str) -> str:
        return f"{self.base_url}/{key}"

    async def put_object(self, key: str, data: bytes, content_type: str = "image/jpeg") -> str:
        self.objects[key] = data
        return self.public_url(key)

    async def delete_object(self, key: str) -> None:
        if key not in self.objects:
            raise BlobNotFoundError(key)
        del self.objects[key]
        logger.debug(f"Deleted blob {key}")
