"""
Galleries repository - handles the galleries collection.
"""

from typing import Optional, List, Dict, Any

from repositories.base import BaseRepository
from models.domain.gallery import Gallery
from core.exceptions import GalleryNotFoundError, DuplicateGalleryCodeError
from core.slug import is_uuid
from core.logging import get_logger

logger = get_logger(__name__)

MIN_SEARCH_LENGTH = 2
MAX_SEARCH_RESULTS = 10


class GalleriesRepository(BaseRepository[Gallery]):
    """
    Repository for the galleries collection.
    """

    collection = "galleries"
    model_class = Gallery
    entity_name = "Gallery"

    # ============================================================
    # Query Methods
    # ============================================================

    async def get_by_code(self, code: str) -> Optional[Gallery]:
        """Get gallery by its unique code."""
        galleries = await self.find({"code": code}, limit=1)
        return galleries[0] if galleries else None

    async def resolve(self, identifier: str) -> Optional[Gallery]:
        """
        Resolve an identifier to a gallery.
        Tries the ID first when it looks like a UUID, otherwise the code first.
        """
        if is_uuid(identifier):
            gallery = await self.get_by_id(identifier)
            return gallery or await self.get_by_code(identifier)

        gallery = await self.get_by_code(identifier)
        return gallery or await self.get_by_id(identifier)

    async def resolve_or_raise(self, identifier: str) -> Gallery:
        gallery = await self.resolve(identifier)
        if gallery is None:
            raise GalleryNotFoundError(identifier)
        return gallery

    async def list_galleries(self, include_inactive: bool = False) -> List[Gallery]:
        """
        Get galleries, newest first.
        """
        filters = None if include_inactive else {"active": True}
        return await self.find(filters, order_by="created_at", order_desc=True)

    async def search(self, term: str, limit: int = MAX_SEARCH_RESULTS) -> List[Gallery]:
        """
        Search active galleries by name.
        Every word of the term must appear in the name (case-insensitive).
        """
        if len(term.strip()) < MIN_SEARCH_LENGTH:
            return []

        words = [w for w in term.lower().split() if w]
        galleries = await self.list_galleries()
        matches = [g for g in galleries if all(w in g.name.lower() for w in words)]
        return matches[:limit]

    # ============================================================
    # Mutations
    # ============================================================

    async def create_gallery(self, data: Dict[str, Any]) -> Gallery:
        """Create a gallery with a unique code."""
        if await self.get_by_code(data["code"]) is not None:
            raise DuplicateGalleryCodeError(data["code"])

        gallery = await self.create({
            **data,
            "photo_count": 0,
            "active": True,
            "has_chapters": data.get("has_chapters", False),
        })
        logger.info(f"Created gallery {gallery.id} ({gallery.code})")
        return gallery

    async def update_gallery(self, gallery: Gallery, data: Dict[str, Any]) -> Gallery:
        """Update gallery fields, keeping the code unique."""
        new_code = data.get("code")
        if new_code and new_code != gallery.code:
            existing = await self.get_by_code(new_code)
            if existing is not None and existing.id != gallery.id:
                raise DuplicateGalleryCodeError(new_code)
        return await self.update(gallery.id, data)

    async def deactivate(self, gallery_id: str) -> Gallery:
        """Soft-disable a gallery. Galleries are never physically deleted."""
        gallery = await self.update(gallery_id, {"active": False})
        logger.info(f"Deactivated gallery {gallery_id}")
        return gallery

    async def adjust_photo_count(self, gallery_id: str, delta: int) -> Optional[Gallery]:
        """Add delta to photo_count, never going below zero."""
        gallery = await self.get_by_id(gallery_id)
        if gallery is None:
            return None
        count = max(0, gallery.photo_count + delta)
        return await self.update(gallery_id, {"photo_count": count})
