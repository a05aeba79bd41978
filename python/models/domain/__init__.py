"""
Domain models - core business entities.

These are the source of truth for data structures.
All other layers (requests, repositories, routers) derive from these.
"""

from models.domain.gallery import Gallery, Photo, IndexedPhoto, Chapter
from models.domain.password_request import PasswordRequest, PasswordRequestStatus

__all__ = [
    'Gallery',
    'Photo',
    'IndexedPhoto',
    'Chapter',
    'PasswordRequest',
    'PasswordRequestStatus',
]
