"""
Galleries API Router Package
Galleries, their photos and chapters
Supports both UUID and code identifiers for human-readable URLs
"""

from fastapi import APIRouter

from infrastructure.document_store import DocumentStore
from infrastructure.blob_store import BlobStore
from repositories import GalleriesRepository, PhotosRepository, ChaptersRepository
from services.photo_deletion import PhotoDeletionService
from services.deletion_tracker import DeletionTracker
from services.storage_keys import StorageKeyStrategy, get_storage_key_strategy

# Global service instances (set via set_services)
galleries_repo_instance: GalleriesRepository = None
photos_repo_instance: PhotosRepository = None
chapters_repo_instance: ChaptersRepository = None
blob_store_instance: BlobStore = None
key_strategy_instance: StorageKeyStrategy = None
deletion_service_instance: PhotoDeletionService = None
deletion_tracker_instance: DeletionTracker = None


def set_services(
    document_store: DocumentStore,
    blob_store: BlobStore,
    key_strategy: StorageKeyStrategy = None,
):
    """Set service instances for dependency injection."""
    global galleries_repo_instance, photos_repo_instance, chapters_repo_instance
    global blob_store_instance, key_strategy_instance
    global deletion_service_instance, deletion_tracker_instance

    key_strategy = key_strategy or get_storage_key_strategy()

    galleries_repo_instance = GalleriesRepository(document_store)
    photos_repo_instance = PhotosRepository(document_store)
    chapters_repo_instance = ChaptersRepository(document_store)
    blob_store_instance = blob_store
    key_strategy_instance = key_strategy
    deletion_service_instance = PhotoDeletionService(photos_repo_instance, blob_store, key_strategy)
    deletion_tracker_instance = DeletionTracker()


# Create main router
router = APIRouter()

# Import sub-routers AFTER globals are defined (they reference them)
from .crud import router as crud_router
from .photos import router as photos_router
from .chapters import router as chapters_router

# ORDER MATTERS! /search before the parametric /{identifier}
router.include_router(crud_router)
router.include_router(photos_router)
router.include_router(chapters_router)

# Export for main.py
__all__ = ["router", "set_services"]
