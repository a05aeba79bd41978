"""
Base repository with common functionality.
"""

from datetime import datetime, timezone
from typing import Optional, List, Dict, Any, TypeVar, Generic
from pydantic import BaseModel

from core.exceptions import NotFoundError, ValidationError
from core.logging import get_logger
from infrastructure.document_store import DocumentStore

T = TypeVar('T', bound=BaseModel)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseRepository(Generic[T]):
    """
    Base repository providing common document operations.

    Subclasses should:
    - Set `collection` (top-level collection) or `subcollection`
      (collection under galleries/{gallery_id})
    - Set `model_class` and `entity_name`
    - Implement domain-specific methods
    """

    collection: str = None
    subcollection: str = None
    model_class: type = None
    entity_name: str = "Document"

    def __init__(self, store: DocumentStore):
        """
        Initialize repository.

        Args:
            store: DocumentStore instance (from infrastructure/)
        """
        self.store = store
        self.logger = get_logger(f"repo.{self.__class__.__name__}")

    def collection_path(self, gallery_id: Optional[str] = None) -> str:
        """Collection path, scoped to a gallery for sub-collections."""
        if self.subcollection:
            if not gallery_id:
                raise ValidationError(f"{self.entity_name} requires a gallery", field="gallery_id")
            return f"galleries/{gallery_id}/{self.subcollection}"
        return self.collection

    def document_path(self, id: str, gallery_id: Optional[str] = None) -> str:
        return f"{self.collection_path(gallery_id)}/{id}"

    # ============================================================
    # Generic CRUD Operations
    # ============================================================

    async def get_by_id(self, id: str, gallery_id: Optional[str] = None) -> Optional[T]:
        """
        Get single document by ID.

        Returns:
            Model instance or None
        """
        data = await self.store.get_document(self.document_path(id, gallery_id))
        if data is None:
            return None
        return self._to_model(data)

    async def get_by_id_or_raise(self, id: str, gallery_id: Optional[str] = None) -> T:
        """
        Get single document by ID or raise NotFoundError.
        """
        result = await self.get_by_id(id, gallery_id)
        if result is None:
            raise NotFoundError(self.entity_name, id)
        return result

    async def find(
        self,
        filters: Dict[str, Any] = None,
        gallery_id: Optional[str] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
        limit: Optional[int] = None,
    ) -> List[T]:
        """
        Get documents whose fields equal every filter value.
        """
        rows = await self.store.query(
            self.collection_path(gallery_id),
            filters=filters,
            order_by=order_by,
            order_desc=order_desc,
            limit=limit,
        )
        return [self._to_model(row) for row in rows]

    async def create(self, data: Dict[str, Any], gallery_id: Optional[str] = None) -> T:
        """
        Create new document with a generated ID.
        """
        payload = {"created_at": utcnow(), **data}
        row = await self.store.add_document(self.collection_path(gallery_id), payload)
        self.logger.debug(f"Created {self.entity_name} {row['id']}")
        return self._to_model(row)

    async def update(self, id: str, data: Dict[str, Any], gallery_id: Optional[str] = None) -> T:
        """
        Update existing document.
        """
        row = await self.store.update_document(self.document_path(id, gallery_id), data)
        if row is None:
            raise NotFoundError(self.entity_name, id)
        return self._to_model(row)

    async def delete(self, id: str, gallery_id: Optional[str] = None) -> bool:
        """
        Delete document by ID. Returns whether it existed.
        """
        return await self.store.delete_document(self.document_path(id, gallery_id))

    # ============================================================
    # Helper Methods
    # ============================================================

    def _to_model(self, data: Dict) -> T:
        """
        Convert stored document to model instance.
        Override in subclasses for custom transformation.
        """
        if self.model_class is None:
            return data
        return self.model_class(**data)
