"""
Gallery code utilities for human-readable URLs
Galleries are addressed by either their UUID or their code
"""

import re

# UUID regex pattern
UUID_PATTERN = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$',
    re.IGNORECASE
)

# Lowercase letters, digits and hyphens only
GALLERY_CODE_PATTERN = re.compile(r'^[a-z0-9-]+$')


def is_uuid(value: str) -> bool:
    """Check if a string is a valid UUID."""
    if not value:
        return False
    return bool(UUID_PATTERN.match(value))
