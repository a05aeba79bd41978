"""
Password Requests API Router
Guests ask for a gallery password, the studio handles the requests
"""

from fastapi import APIRouter, Query
from pydantic import BaseModel, EmailStr, Field

from core.base_path import build_url
from core.responses import ApiResponse
from core.exceptions import GalleryNotFoundError
from core.logging import get_logger
from models.domain.password_request import PasswordRequestStatus
from repositories import GalleriesRepository, PasswordRequestsRepository

logger = get_logger(__name__)
router = APIRouter()

galleries_repo_instance: GalleriesRepository = None
requests_repo_instance: PasswordRequestsRepository = None


def set_services(galleries_repo: GalleriesRepository, requests_repo: PasswordRequestsRepository):
    global galleries_repo_instance, requests_repo_instance
    galleries_repo_instance = galleries_repo
    requests_repo_instance = requests_repo


class PasswordRequestCreate(BaseModel):
    gallery_code: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    relation: str = Field(..., min_length=1)


class PasswordRequestStatusUpdate(BaseModel):
    status: PasswordRequestStatus


@router.post("", status_code=201)
async def create_password_request(data: PasswordRequestCreate):
    """Record a guest's request for a gallery password."""
    gallery = await galleries_repo_instance.get_by_code(data.gallery_code)
    if gallery is None or not gallery.active:
        raise GalleryNotFoundError(data.gallery_code)

    request = await requests_repo_instance.create({
        **data.model_dump(),
        "gallery_id": gallery.id,
        "status": PasswordRequestStatus.PENDING.value,
    })
    logger.info(f"Password request {request.id} for gallery {gallery.code}")

    return ApiResponse.ok({
        "request": request.model_dump(mode="json"),
        "result_url": build_url(f"/password-result/{gallery.code}"),
    })


@router.get("")
async def get_password_requests(gallery: str = Query(..., description="Gallery ID or code")):
    """Requests for a gallery, newest first."""
    target = await galleries_repo_instance.resolve_or_raise(gallery)
    requests = await requests_repo_instance.list_for_gallery(target.id)
    return ApiResponse.ok([r.model_dump(mode="json") for r in requests])


@router.patch("/{request_id}")
async def update_password_request(request_id: str, data: PasswordRequestStatusUpdate):
    """Mark a request as sent or rejected."""
    request = await requests_repo_instance.set_status(request_id, data.status)
    logger.info(f"Password request {request_id} is now {data.status.value}")
    return ApiResponse.ok(request.model_dump(mode="json"))
