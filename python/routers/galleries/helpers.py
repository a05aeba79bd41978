"""
Galleries Helper Functions
"""

from models.domain.gallery import Gallery


def get_galleries_repo():
    """Get galleries repository from package globals."""
    from . import galleries_repo_instance
    return galleries_repo_instance


def get_photos_repo():
    """Get photos repository from package globals."""
    from . import photos_repo_instance
    return photos_repo_instance


def get_chapters_repo():
    """Get chapters repository from package globals."""
    from . import chapters_repo_instance
    return chapters_repo_instance


def get_blob_store():
    from . import blob_store_instance
    return blob_store_instance


def get_key_strategy():
    from . import key_strategy_instance
    return key_strategy_instance


def get_deletion_service():
    from . import deletion_service_instance
    return deletion_service_instance


def get_deletion_tracker():
    from . import deletion_tracker_instance
    return deletion_tracker_instance


async def _get_gallery(identifier: str) -> Gallery:
    """Resolve gallery by ID or code. Raises GalleryNotFoundError if not found."""
    return await get_galleries_repo().resolve_or_raise(identifier)
