"""
Storage key strategies.

The blob key of a photo has changed across versions of the gallery, so the
key of an existing photo cannot be derived with certainty. A strategy lists
the candidate keys, most likely first, and callers try them in order.
"""

from typing import List

from core.config import settings
from core.exceptions import ValidationError

# Current layout for new uploads
CURRENT_LAYOUT = "gallery-photos/{gallery_id}/{name}"

# Every layout used so far, most recent first
LEGACY_LAYOUTS = [
    "gallery-photos/{gallery_id}/{name}",
    "galleries/{gallery_id}/photos/{name}",
    "galleries/{gallery_id}/{name}",
    "galleries/{name}",
    "gallery-photos/{name}",
]


class StorageKeyStrategy:
    """Ordered candidate keys for a photo."""

    def __init__(self, layouts: List[str]):
        if not layouts:
            raise ValidationError("At least one storage key layout is required")
        self.layouts = list(layouts)

    def resolve_storage_key(self, gallery_id: str, name: str) -> List[str]:
        """Candidate keys for (gallery_id, name), without duplicates."""
        keys: List[str] = []
        for layout in self.layouts:
            key = layout.format(gallery_id=gallery_id, name=name)
            if key not in keys:
                keys.append(key)
        return keys

    def upload_key(self, gallery_id: str, name: str) -> str:
        """Key used for new uploads."""
        return CURRENT_LAYOUT.format(gallery_id=gallery_id, name=name)


def legacy_strategy() -> StorageKeyStrategy:
    return StorageKeyStrategy(LEGACY_LAYOUTS)


def deterministic_strategy() -> StorageKeyStrategy:
    return StorageKeyStrategy([CURRENT_LAYOUT])


def get_storage_key_strategy(layout: str = None) -> StorageKeyStrategy:
    """Strategy for STORAGE_KEY_LAYOUT ("legacy" or "deterministic")."""
    layout = layout or settings.storage_key_layout
    if layout == "legacy":
        return legacy_strategy()
    if layout == "deterministic":
        return deterministic_strategy()
    raise ValidationError(f"Unknown storage key layout '{layout}'", field="STORAGE_KEY_LAYOUT")
