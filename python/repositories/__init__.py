"""
Repositories package - data access layer.

Repositories handle all document store operations.
No business logic - only queries and data transformation.

Usage:
    from repositories import PhotosRepository

    repo = PhotosRepository(document_store)
    photos = await repo.list_for_gallery(gallery_id)
"""

from repositories.base import BaseRepository
from repositories.galleries_repo import GalleriesRepository
from repositories.photos_repo import PhotosRepository
from repositories.chapters_repo import ChaptersRepository
from repositories.password_requests_repo import PasswordRequestsRepository

__all__ = [
    'BaseRepository',
    'GalleriesRepository',
    'PhotosRepository',
    'ChaptersRepository',
    'PasswordRequestsRepository',
]
