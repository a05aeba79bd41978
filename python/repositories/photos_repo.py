"""
Photos repository - handles galleries/{id}/photos and the gallery-photos index.

Every photo has two records:
- canonical:    galleries/{gallery_id}/photos/{photo_id}
- denormalized: gallery-photos/{id}, matched to the canonical one by
                (gallery_id, name)
"""

from typing import Optional, List, Dict, Any

from repositories.base import BaseRepository
from models.domain.gallery import Photo, IndexedPhoto
from core.exceptions import DatabaseError
from core.logging import get_logger

logger = get_logger(__name__)

INDEX_COLLECTION = "gallery-photos"


class PhotosRepository(BaseRepository[Photo]):
    """
    Repository for canonical photo records and their denormalized copies.
    """

    subcollection = "photos"
    model_class = Photo
    entity_name = "Photo"

    # ============================================================
    # Canonical records
    # ============================================================

    async def list_for_gallery(self, gallery_id: str) -> List[Photo]:
        """All canonical photos of a gallery, by name."""
        return await self.find(gallery_id=gallery_id, order_by="name")

    async def delete_canonical(self, gallery_id: str, photo_id: str) -> bool:
        """Delete the canonical record. Returns whether it existed."""
        return await self.delete(photo_id, gallery_id=gallery_id)

    # ============================================================
    # Denormalized index
    # ============================================================

    async def find_index_records(self, gallery_id: str, name: str) -> List[IndexedPhoto]:
        """Index records for (gallery_id, name)."""
        rows = await self.store.query(INDEX_COLLECTION, filters={"gallery_id": gallery_id, "name": name})
        return [IndexedPhoto(**row) for row in rows]

    async def delete_index_record(self, record_id: str) -> bool:
        return await self.store.delete_document(f"{INDEX_COLLECTION}/{record_id}")

    async def list_index_for_gallery(self, gallery_id: str) -> List[IndexedPhoto]:
        rows = await self.store.query(INDEX_COLLECTION, filters={"gallery_id": gallery_id})
        return [IndexedPhoto(**row) for row in rows]

    # ============================================================
    # Paired mutations
    # ============================================================

    async def create_with_index(self, gallery_id: str, data: Dict[str, Any]) -> Photo:
        """
        Create the canonical record and its denormalized copy together.
        If the copy cannot be written the canonical record is removed again.
        """
        photo = await self.create(data, gallery_id=gallery_id)

        index_data = photo.model_dump(exclude={"id"})
        index_data.update({"gallery_id": gallery_id, "photo_id": photo.id})
        try:
            await self.store.add_document(INDEX_COLLECTION, index_data)
        except DatabaseError:
            logger.error(f"Index write failed for photo {photo.id}, removing canonical record")
            await self.delete_canonical(gallery_id, photo.id)
            raise

        return photo

    async def assign_chapter(
        self,
        gallery_id: str,
        photo: Photo,
        chapter_id: Optional[str],
        chapter_position: Optional[int],
    ) -> Photo:
        """Move a photo into a chapter (or out of any with chapter_id=None)."""
        changes = {"chapter_id": chapter_id, "chapter_position": chapter_position}
        updated = await self.update(photo.id, changes, gallery_id=gallery_id)

        for record in await self.find_index_records(gallery_id, photo.name):
            if record.photo_id in (None, photo.id):
                await self.store.update_document(f"{INDEX_COLLECTION}/{record.id}", changes)

        return updated
