"""
Config API Router
Hosting configuration for the frontend
"""

from fastapi import APIRouter

from core.base_path import build_url, resolve_base_path
from core.config import VERSION
from core.responses import ApiResponse

router = APIRouter()


@router.get("")
async def get_config():
    """Base path and the main application URLs for the current deployment."""
    base_path = resolve_base_path()
    return ApiResponse.ok({
        "version": VERSION,
        "base_path": base_path,
        "in_subdirectory": base_path != "/",
        "urls": {
            "home": build_url("/"),
            "admin": build_url("/admin"),
            "admin_login": build_url("/admin/login"),
        },
    })
