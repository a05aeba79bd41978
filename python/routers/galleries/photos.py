"""
Galleries Photo Operations

Endpoints:
- GET /{id}/photos                        - Photos in display order
- POST /{id}/photos                       - Upload a photo
- PATCH /{id}/photos/{photo_id}/chapter   - Move a photo to a chapter
- DELETE /{id}/photos/{photo_id}          - Delete a photo (requires confirm=true)
"""

from typing import List

from fastapi import APIRouter, File, Query, UploadFile

from core.responses import ApiResponse
from core.exceptions import (
    AppException,
    ConfirmationRequiredError,
    ConflictError,
    DatabaseError,
    InvalidImageError,
    StorageError,
)
from core.logging import get_logger
from models.domain.gallery import Chapter, Photo
from services.photo_deletion import confirmation_prompt
from services.notifications import ToastCollector

from .models import ChapterAssignment
from .helpers import (
    _get_gallery,
    get_blob_store,
    get_chapters_repo,
    get_deletion_service,
    get_deletion_tracker,
    get_galleries_repo,
    get_key_strategy,
    get_photos_repo,
)

logger = get_logger(__name__)
router = APIRouter()

ALLOWED_TYPES = ["image/jpeg", "image/png", "image/gif", "image/webp", "image/heic", "image/heif"]


def sort_photos(photos: List[Photo], chapters: List[Chapter]) -> List[Photo]:
    """Order by chapter position, then position inside the chapter. Unassigned photos go last."""
    chapter_order = {chapter.id: index for index, chapter in enumerate(chapters)}
    unassigned = len(chapter_order)
    return sorted(
        photos,
        key=lambda p: (chapter_order.get(p.chapter_id, unassigned), p.chapter_position or 0),
    )


@router.get("/{identifier}/photos")
async def get_gallery_photos(identifier: str):
    """Get a gallery's photos and chapters in display order."""
    gallery = await _get_gallery(identifier)

    photos = await get_photos_repo().list_for_gallery(gallery.id)
    chapters = await get_chapters_repo().list_for_gallery(gallery.id)
    if gallery.has_chapters and chapters:
        photos = sort_photos(photos, chapters)

    logger.info(f"Loaded {len(photos)} photos for gallery {gallery.id}")
    return ApiResponse.ok({
        "photos": [p.model_dump() for p in photos],
        "chapters": [c.model_dump() for c in chapters],
    })


@router.post("/{identifier}/photos", status_code=201)
async def upload_photo(identifier: str, file: UploadFile = File(...)):
    """
    Upload a photo: blob first, then the canonical and index records.

    Names must be unique within a gallery, since the index record and
    the blob key are both derived from the name.
    """
    gallery = await _get_gallery(identifier)
    photos_repo = get_photos_repo()

    content_type = file.content_type or "image/jpeg"
    if content_type not in ALLOWED_TYPES:
        raise InvalidImageError(f"Unsupported file type: {content_type}. Allowed: {', '.join(ALLOWED_TYPES)}")

    data = await file.read()
    if not data:
        raise InvalidImageError("Empty file")

    name = file.filename or "image.jpg"
    if await photos_repo.find({"name": name}, gallery_id=gallery.id, limit=1):
        raise ConflictError(f"A photo named '{name}' already exists in this gallery", code="DUPLICATE_PHOTO_NAME")

    key = get_key_strategy().upload_key(gallery.id, name)
    blob_store = get_blob_store()
    url = await blob_store.put_object(key, data, content_type)

    try:
        photo = await photos_repo.create_with_index(gallery.id, {
            "name": name,
            "url": url,
            "size": len(data),
            "content_type": content_type,
        })
    except DatabaseError:
        try:
            await blob_store.delete_object(key)
        except StorageError as e:
            logger.warning(f"Could not remove orphan blob {key}: {e.message}")
        raise

    try:
        await get_galleries_repo().adjust_photo_count(gallery.id, 1)
    except DatabaseError as e:
        logger.warning(f"photo_count not updated for gallery {gallery.id}: {e.message}")

    logger.info(f"Uploaded {name} to gallery {gallery.id} ({len(data)} bytes)")
    return ApiResponse.ok(photo.model_dump())


@router.patch("/{identifier}/photos/{photo_id}/chapter")
async def assign_photo_chapter(identifier: str, photo_id: str, data: ChapterAssignment):
    """Move a photo to the end of a chapter, or out of any chapter."""
    gallery = await _get_gallery(identifier)
    photos_repo = get_photos_repo()

    photo = await photos_repo.get_by_id_or_raise(photo_id, gallery_id=gallery.id)

    position = None
    if data.chapter_id is not None:
        await get_chapters_repo().get_by_id_or_raise(data.chapter_id, gallery_id=gallery.id)
        in_chapter = await photos_repo.find({"chapter_id": data.chapter_id}, gallery_id=gallery.id)
        position = len([p for p in in_chapter if p.id != photo.id])

    updated = await photos_repo.assign_chapter(gallery.id, photo, data.chapter_id, position)
    return ApiResponse.ok(updated.model_dump())


@router.delete("/{identifier}/photos/{photo_id}")
async def delete_photo(
    identifier: str,
    photo_id: str,
    name: str = Query(..., description="Photo name, used for the index record and blob keys"),
    confirm: bool = Query(False, description="Must be true: the deletion cannot be undone"),
):
    """
    Delete a photo's canonical record, index records and blob.

    Without confirm=true nothing is deleted and the response carries the
    confirmation prompt (409 CONFIRMATION_REQUIRED).
    """
    gallery = await _get_gallery(identifier)
    tracker = get_deletion_tracker()

    if not confirm:
        with tracker.confirming(gallery.id, photo_id):
            raise ConfirmationRequiredError(confirmation_prompt(name))

    toasts = ToastCollector()

    async def on_deleted(deleted_id: str):
        try:
            await get_galleries_repo().adjust_photo_count(gallery.id, -1)
        except DatabaseError as e:
            logger.warning(f"photo_count not updated after deleting {deleted_id}: {e.message}")

    try:
        with tracker.deleting(gallery.id, photo_id):
            # Confirmed through ?confirm=true
            result = await get_deletion_service().delete_photo(
                gallery.id,
                photo_id,
                name,
                on_deleted=on_deleted,
                notifier=toasts,
            )
    except AppException as e:
        e.details.update(toasts.as_meta())
        raise

    return ApiResponse.ok(result.model_dump(mode="json"), meta=toasts.as_meta())
