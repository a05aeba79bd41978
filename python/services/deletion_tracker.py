"""
Per-photo deletion state owned by the caller of the deletion workflow.

Phases: IDLE -> CONFIRMING -> DELETING -> DONE | FAILED.
Only photos in CONFIRMING or DELETING are kept; a settled deletion reports
DONE or FAILED on its DeletionAttempt and the photo is IDLE again.
A photo is busy while DELETING; a second deletion of the same photo is
rejected until the first settles.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterator, Tuple

from core.exceptions import DeletionInProgressError
from core.logging import get_logger

logger = get_logger(__name__)

PhotoKey = Tuple[str, str]


class DeletionPhase(str, Enum):
    IDLE = "idle"
    CONFIRMING = "confirming"
    DELETING = "deleting"
    DONE = "done"
    FAILED = "failed"


class DeletionAttempt:
    """One pass through deleting(); phase is DONE or FAILED once the block exits."""

    def __init__(self, gallery_id: str, photo_id: str):
        self.gallery_id = gallery_id
        self.photo_id = photo_id
        self.phase = DeletionPhase.DELETING


class DeletionTracker:
    """Photos awaiting confirmation or being deleted, per (gallery_id, photo_id)."""

    def __init__(self):
        self._phases: Dict[PhotoKey, DeletionPhase] = {}

    def __len__(self) -> int:
        return len(self._phases)

    def phase(self, gallery_id: str, photo_id: str) -> DeletionPhase:
        return self._phases.get((gallery_id, photo_id), DeletionPhase.IDLE)

    def is_busy(self, gallery_id: str, photo_id: str) -> bool:
        return self.phase(gallery_id, photo_id) == DeletionPhase.DELETING

    @contextmanager
    def confirming(self, gallery_id: str, photo_id: str) -> Iterator[None]:
        """
        Mark the photo CONFIRMING while the caller asks for confirmation.

        Raises:
            DeletionInProgressError: the photo is already being deleted
        """
        key = (gallery_id, photo_id)
        if self.is_busy(gallery_id, photo_id):
            raise DeletionInProgressError(photo_id)

        self._phases[key] = DeletionPhase.CONFIRMING
        try:
            yield
        finally:
            # A deletion started inside the block owns the key now
            if self._phases.get(key) == DeletionPhase.CONFIRMING:
                del self._phases[key]

    @contextmanager
    def deleting(self, gallery_id: str, photo_id: str) -> Iterator[DeletionAttempt]:
        """
        Mark the photo DELETING for the duration of the block.

        Raises:
            DeletionInProgressError: the photo is already being deleted
        """
        key = (gallery_id, photo_id)
        if self.is_busy(gallery_id, photo_id):
            raise DeletionInProgressError(photo_id)

        attempt = DeletionAttempt(gallery_id, photo_id)
        self._phases[key] = DeletionPhase.DELETING
        try:
            yield attempt
        except BaseException:
            attempt.phase = DeletionPhase.FAILED
            raise
        else:
            attempt.phase = DeletionPhase.DONE
        finally:
            self._phases.pop(key, None)
            logger.debug(f"Deletion of photo {photo_id} settled: {attempt.phase.value}")
