"""
Access API Router
Guest access to password protected galleries

Galleries keep the password chosen by the studio as plain text. It is
compared in constant time here and never returned by any endpoint.
"""

import hmac

from fastapi import APIRouter
from pydantic import BaseModel, Field

from core.base_path import build_url
from core.responses import ApiResponse
from core.exceptions import GalleryNotFoundError, InvalidGalleryPasswordError
from core.logging import get_logger
from repositories import GalleriesRepository

logger = get_logger(__name__)
router = APIRouter()

galleries_repo_instance: GalleriesRepository = None


def set_services(galleries_repo: GalleriesRepository):
    global galleries_repo_instance
    galleries_repo_instance = galleries_repo


class AccessRequest(BaseModel):
    code: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


@router.post("/verify")
async def verify_gallery_access(data: AccessRequest):
    """Check a gallery code and password. Returns where the guest should go next."""
    gallery = await galleries_repo_instance.get_by_code(data.code)
    if gallery is None or not gallery.active:
        raise GalleryNotFoundError(data.code)

    if not hmac.compare_digest(gallery.password.encode("utf-8"), data.password.encode("utf-8")):
        logger.info(f"Wrong password for gallery {gallery.code}")
        raise InvalidGalleryPasswordError()

    return ApiResponse.ok({
        "gallery_id": gallery.id,
        "code": gallery.code,
        "redirect_url": build_url(f"/gallery/{gallery.code}"),
    })
