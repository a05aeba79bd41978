"""
Photo deletion workflow.

Removes every persisted trace of a photo, in this order:

1. canonical record  galleries/{gallery_id}/photos/{photo_id}
2. index records     gallery-photos where gallery_id and name match
3. blob              first candidate key that can be deleted
4. on_deleted(photo_id) callback, success toast

Only step 1 can fail the workflow. The canonical record decides whether a
photo exists, so steps 2 and 3 are best effort: their failures are logged
and the deletion still succeeds.
"""

import inspect
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError as ModelValidationError

from core.exceptions import (
    DatabaseError,
    DeletionInProgressError,
    PhotoDeletionError,
    PhotoNotFoundError,
    StorageError,
    BlobNotFoundError,
)
from core.logging import get_logger
from infrastructure.blob_store import BlobStore
from repositories.photos_repo import PhotosRepository
from services.notifications import LoggingNotifier, Notifier
from services.storage_keys import StorageKeyStrategy, legacy_strategy

logger = get_logger(__name__)

Confirm = Callable[[str], bool]
OnDeleted = Callable[[str], Union[None, Awaitable[Any]]]


class DeletionStatus(str, Enum):
    DELETED = "deleted"
    CANCELLED = "cancelled"


class PhotoDeletionResult(BaseModel):
    """Outcome of one delete_photo call."""

    gallery_id: str
    photo_id: str
    photo_name: str
    status: DeletionStatus
    index_records_deleted: int = 0
    blob_key: Optional[str] = Field(None, description="Key the blob was deleted from, None if not found")
    attempted_keys: List[str] = Field(default_factory=list)
    callback_error: Optional[str] = Field(None, description="Error raised by on_deleted, the deletion itself succeeded")


def confirmation_prompt(photo_name: str) -> str:
    return f"Are you sure you want to delete this photo ({photo_name})? This action cannot be undone."


class PhotoDeletionService:
    """
    Deletes photos consistently across the canonical collection, the
    gallery-photos index and blob storage.
    """

    def __init__(
        self,
        photos_repo: PhotosRepository,
        blob_store: BlobStore,
        key_strategy: Optional[StorageKeyStrategy] = None,
    ):
        self.photos_repo = photos_repo
        self.blob_store = blob_store
        self.key_strategy = key_strategy or legacy_strategy()

    async def delete_photo(
        self,
        gallery_id: str,
        photo_id: str,
        photo_name: str,
        *,
        confirm: Optional[Confirm] = None,
        on_deleted: Optional[OnDeleted] = None,
        notifier: Optional[Notifier] = None,
        is_busy: Optional[Callable[[], bool]] = None,
    ) -> PhotoDeletionResult:
        """
        Delete a photo and report a single outcome.

        Args:
            gallery_id: Gallery holding the canonical record
            photo_id: Canonical record ID
            photo_name: Name used for the index lookup and blob keys
            confirm: Called with the prompt text; False cancels. Pass None
                only when the caller has already confirmed.
            on_deleted: Called with photo_id after the stores are cleaned.
                Errors it raises are logged and reported in callback_error.
            notifier: Receives the success or error toast
            is_busy: Caller owned guard; True rejects the call

        Returns:
            PhotoDeletionResult, status CANCELLED when not confirmed

        Raises:
            DeletionInProgressError: is_busy() was True
            PhotoNotFoundError: no canonical record existed
            PhotoDeletionError: the canonical record could not be deleted
        """
        notifier = notifier or LoggingNotifier()

        if is_busy is not None and is_busy():
            raise DeletionInProgressError(photo_id)

        if confirm is not None and not confirm(confirmation_prompt(photo_name)):
            logger.info(f"Deletion of photo {photo_id} cancelled")
            return PhotoDeletionResult(
                gallery_id=gallery_id,
                photo_id=photo_id,
                photo_name=photo_name,
                status=DeletionStatus.CANCELLED,
            )

        logger.info(f"Deleting photo {photo_name} (ID: {photo_id}) from gallery {gallery_id}")

        # 1. Canonical record
        try:
            existed = await self.photos_repo.delete_canonical(gallery_id, photo_id)
        except DatabaseError as e:
            logger.error(f"Failed to delete galleries/{gallery_id}/photos/{photo_id}: {e.message}")
            notifier.error("Error", "An error occurred while deleting the photo.")
            raise PhotoDeletionError(photo_id, e.message)

        if not existed:
            logger.error(f"Canonical record galleries/{gallery_id}/photos/{photo_id} does not exist")
            notifier.error("Error", "The photo no longer exists.")
            raise PhotoNotFoundError(photo_id)

        logger.info(f"✓ Deleted galleries/{gallery_id}/photos/{photo_id}")

        # 2. Index records
        index_deleted = await self._delete_index_records(gallery_id, photo_id, photo_name)

        # 3. Blob
        attempted, blob_key = await self._delete_blob(gallery_id, photo_name)

        # 4. Caller state and toast
        callback_error = None
        if on_deleted is not None:
            try:
                outcome = on_deleted(photo_id)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception as e:
                # The photo is gone from every store; report it as deleted
                logger.error(f"❌ on_deleted failed for photo {photo_id}: {e}", exc_info=True)
                callback_error = f"{type(e).__name__}: {e}"

        notifier.success("Photo deleted", "The photo was successfully deleted from the gallery.")

        return PhotoDeletionResult(
            gallery_id=gallery_id,
            photo_id=photo_id,
            photo_name=photo_name,
            status=DeletionStatus.DELETED,
            index_records_deleted=index_deleted,
            blob_key=blob_key,
            attempted_keys=attempted,
            callback_error=callback_error,
        )

    async def _delete_index_records(self, gallery_id: str, photo_id: str, photo_name: str) -> int:
        """
        Delete gallery-photos records matching (gallery_id, name).
        Records linked to a different canonical photo are left alone.
        """
        try:
            records = await self.photos_repo.find_index_records(gallery_id, photo_name)
        except DatabaseError as e:
            logger.warning(f"⚠️ gallery-photos lookup failed for {photo_name}: {e.message}")
            return 0
        except ModelValidationError as e:
            logger.warning(f"⚠️ Unreadable gallery-photos record for {photo_name}: {e.error_count()} invalid fields")
            return 0

        if not records:
            logger.warning(f"⚠️ No gallery-photos record found for {photo_name}")
            return 0

        deleted = 0
        for record in records:
            if record.photo_id is not None and record.photo_id != photo_id:
                logger.info(f"Skipping gallery-photos {record.id}: belongs to photo {record.photo_id}")
                continue
            try:
                await self.photos_repo.delete_index_record(record.id)
            except DatabaseError as e:
                logger.warning(f"⚠️ Failed to delete gallery-photos {record.id}: {e.message}")
                continue
            deleted += 1
            logger.info(f"✓ Deleted gallery-photos {record.id}")

        return deleted

    async def _delete_blob(self, gallery_id: str, photo_name: str):
        """Try candidate keys in order, stop at the first successful delete."""
        attempted: List[str] = []

        for key in self.key_strategy.resolve_storage_key(gallery_id, photo_name):
            attempted.append(key)
            try:
                await self.blob_store.delete_object(key)
            except BlobNotFoundError:
                logger.warning(f"⚠️ Not found in: {key}")
                continue
            except StorageError as e:
                logger.warning(f"⚠️ Could not delete {key}: {e.message}")
                continue
            logger.info(f"✓ Deleted blob {key}")
            return attempted, key

        logger.error(f"❌ No stored object found for photo {photo_name} in gallery {gallery_id}")
        return attempted, None
