"""
Models package - data structures for the application.

Subpackages:
- domain/ - Domain models (core business entities)
- (request DTOs live next to their routers in routers/*/models.py)
"""

# Re-export commonly used models
from models.domain.gallery import Gallery, Photo, IndexedPhoto, Chapter
from models.domain.password_request import PasswordRequest, PasswordRequestStatus

__all__ = [
    # Gallery
    'Gallery',
    'Photo',
    'IndexedPhoto',
    'Chapter',
    # Access
    'PasswordRequest',
    'PasswordRequestStatus',
]
