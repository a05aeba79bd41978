"""
Services package.

Main modules:
- photo_deletion.py - PhotoDeletionService (canonical record, index, blob)

Supporting modules:
- storage_keys.py - Candidate blob keys per photo
- deletion_tracker.py - Caller owned per-photo deletion phases
- notifications.py - Toast style notifications
"""

from services.photo_deletion import PhotoDeletionService, PhotoDeletionResult, DeletionStatus
from services.storage_keys import StorageKeyStrategy, get_storage_key_strategy
from services.deletion_tracker import DeletionTracker, DeletionPhase, DeletionAttempt
from services.notifications import Notifier, ToastCollector, LoggingNotifier

__all__ = [
    'PhotoDeletionService',
    'PhotoDeletionResult',
    'DeletionStatus',
    'StorageKeyStrategy',
    'get_storage_key_strategy',
    'DeletionTracker',
    'DeletionPhase',
    'DeletionAttempt',
    'Notifier',
    'ToastCollector',
    'LoggingNotifier',
]
