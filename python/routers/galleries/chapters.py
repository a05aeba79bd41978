"""
Galleries Chapter Operations

Endpoints:
- GET /{id}/chapters                          - Chapters by position
- POST /{id}/chapters                         - Append a chapter
- PATCH /{id}/chapters/{chapter_id}           - Update title/description
- POST /{id}/chapters/{chapter_id}/move       - Swap with the previous/next chapter
- DELETE /{id}/chapters/{chapter_id}          - Remove a chapter, unassigning its photos
"""

from fastapi import APIRouter, Query

from core.responses import ApiResponse
from core.exceptions import ValidationError
from core.logging import get_logger

from .models import ChapterCreate, ChapterUpdate, MoveDirection
from .helpers import _get_gallery, get_chapters_repo, get_photos_repo

logger = get_logger(__name__)
router = APIRouter()


@router.get("/{identifier}/chapters")
async def get_chapters(identifier: str):
    gallery = await _get_gallery(identifier)
    chapters = await get_chapters_repo().list_for_gallery(gallery.id)
    return ApiResponse.ok([c.model_dump() for c in chapters])


@router.post("/{identifier}/chapters", status_code=201)
async def create_chapter(identifier: str, data: ChapterCreate):
    """Create a chapter at the end of the gallery."""
    gallery = await _get_gallery(identifier)
    chapters_repo = get_chapters_repo()

    existing = await chapters_repo.list_for_gallery(gallery.id)
    chapter = await chapters_repo.create(
        {**data.model_dump(), "position": len(existing)},
        gallery_id=gallery.id,
    )
    logger.info(f"Created chapter {chapter.id} in gallery {gallery.id}")
    return ApiResponse.ok(chapter.model_dump())


@router.patch("/{identifier}/chapters/{chapter_id}")
async def update_chapter(identifier: str, chapter_id: str, data: ChapterUpdate):
    gallery = await _get_gallery(identifier)

    update_data = data.model_dump(exclude_none=True)
    if not update_data:
        raise ValidationError("No fields to update")

    chapter = await get_chapters_repo().update(chapter_id, update_data, gallery_id=gallery.id)
    return ApiResponse.ok(chapter.model_dump())


@router.post("/{identifier}/chapters/{chapter_id}/move")
async def move_chapter(identifier: str, chapter_id: str, direction: MoveDirection = Query(...)):
    """Swap a chapter with its neighbour. Moving past either end is a no-op."""
    gallery = await _get_gallery(identifier)
    chapters_repo = get_chapters_repo()

    await chapters_repo.get_by_id_or_raise(chapter_id, gallery_id=gallery.id)
    chapters = await chapters_repo.renumber(gallery.id)

    index = next(i for i, c in enumerate(chapters) if c.id == chapter_id)
    other = index - 1 if direction == MoveDirection.UP else index + 1

    if 0 <= other < len(chapters):
        await chapters_repo.update(chapters[index].id, {"position": other}, gallery_id=gallery.id)
        await chapters_repo.update(chapters[other].id, {"position": index}, gallery_id=gallery.id)

    chapters = await chapters_repo.list_for_gallery(gallery.id)
    return ApiResponse.ok([c.model_dump() for c in chapters])


@router.delete("/{identifier}/chapters/{chapter_id}")
async def delete_chapter(identifier: str, chapter_id: str):
    """Delete a chapter. Its photos stay in the gallery without a chapter."""
    gallery = await _get_gallery(identifier)
    chapters_repo = get_chapters_repo()
    photos_repo = get_photos_repo()

    await chapters_repo.get_by_id_or_raise(chapter_id, gallery_id=gallery.id)

    photos = await photos_repo.find({"chapter_id": chapter_id}, gallery_id=gallery.id)
    for photo in photos:
        await photos_repo.assign_chapter(gallery.id, photo, None, None)

    await chapters_repo.delete(chapter_id, gallery_id=gallery.id)
    chapters = await chapters_repo.renumber(gallery.id)

    logger.info(f"Deleted chapter {chapter_id}, unassigned {len(photos)} photos")
    return ApiResponse.ok({
        "deleted": True,
        "unassigned_photos": len(photos),
        "chapters": [c.model_dump() for c in chapters],
    })
