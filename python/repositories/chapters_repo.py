"""
Chapters repository - handles galleries/{id}/chapters.
"""

from typing import List

from repositories.base import BaseRepository
from models.domain.gallery import Chapter


class ChaptersRepository(BaseRepository[Chapter]):
    """
    Repository for chapters of a gallery.
    """

    subcollection = "chapters"
    model_class = Chapter
    entity_name = "Chapter"

    async def list_for_gallery(self, gallery_id: str) -> List[Chapter]:
        """Chapters ordered by position."""
        return await self.find(gallery_id=gallery_id, order_by="position")

    async def renumber(self, gallery_id: str) -> List[Chapter]:
        """Rewrite positions as 0..n-1 keeping the current order."""
        chapters = await self.list_for_gallery(gallery_id)
        result = []
        for index, chapter in enumerate(chapters):
            if chapter.position != index:
                chapter = await self.update(chapter.id, {"position": index}, gallery_id=gallery_id)
            result.append(chapter)
        return result
