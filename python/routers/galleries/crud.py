"""
Galleries CRUD Operations

Endpoints:
- GET /             - List galleries
- GET /search       - Search galleries by name
- GET /{id}         - Get gallery by ID or code
- POST /            - Create gallery
- PATCH /{id}       - Update gallery
- DELETE /{id}      - Deactivate gallery (soft delete)
"""

from fastapi import APIRouter, Query

from core.base_path import build_url
from core.responses import ApiResponse
from core.exceptions import ValidationError
from core.logging import get_logger
from models.domain.gallery import Gallery

from .models import GalleryCreate, GalleryUpdate
from .helpers import get_galleries_repo, _get_gallery

logger = get_logger(__name__)
router = APIRouter()


def _gallery_view(gallery: Gallery) -> dict:
    """Gallery without its password, plus the guest URL."""
    view = gallery.public_view()
    view["url"] = build_url(f"/gallery/{gallery.code}")
    return view


@router.get("/")
async def get_galleries(include_inactive: bool = Query(False)):
    """Get galleries for listing, newest first."""
    galleries = await get_galleries_repo().list_galleries(include_inactive=include_inactive)
    return ApiResponse.ok([_gallery_view(g) for g in galleries])


@router.get("/search")
async def search_galleries(q: str = Query("", description="Words that must all appear in the name")):
    """Search active galleries by name. Terms shorter than 2 characters return nothing."""
    galleries = await get_galleries_repo().search(q)
    return ApiResponse.ok([_gallery_view(g) for g in galleries])


@router.get("/{identifier}")
async def get_gallery(identifier: str):
    """Get a gallery by ID or code."""
    gallery = await _get_gallery(identifier)
    return ApiResponse.ok(_gallery_view(gallery))


@router.post("/", status_code=201)
async def create_gallery(data: GalleryCreate):
    """Create a new gallery."""
    gallery = await get_galleries_repo().create_gallery(data.model_dump())
    return ApiResponse.ok(_gallery_view(gallery))


@router.patch("/{identifier}")
async def update_gallery(identifier: str, data: GalleryUpdate):
    """Update a gallery by ID or code."""
    gallery = await _get_gallery(identifier)

    update_data = data.model_dump(exclude_none=True)
    if not update_data:
        raise ValidationError("No fields to update")

    updated = await get_galleries_repo().update_gallery(gallery, update_data)
    logger.info(f"Updated gallery {gallery.id}")
    return ApiResponse.ok(_gallery_view(updated))


@router.delete("/{identifier}")
async def deactivate_gallery(identifier: str):
    """Deactivate a gallery. Photos and records are kept."""
    gallery = await _get_gallery(identifier)
    updated = await get_galleries_repo().deactivate(gallery.id)
    return ApiResponse.ok(_gallery_view(updated))
