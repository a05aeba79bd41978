"""
Core package - foundation for the application.

Modules:
- config.py - Application settings via Pydantic Settings
- exceptions.py - Custom exception hierarchy
- responses.py - Unified API response format
- logging.py - Centralized logging configuration
- base_path.py - Root/subdirectory URL building
- slug.py - Gallery code helpers
"""

from core.config import settings
from core.exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
    ConflictError,
    DatabaseError,
    StorageError,
    AuthenticationError,
)
from core.responses import ApiResponse
from core.base_path import build_url, resolve_base_path

__all__ = [
    'settings',
    'AppException',
    'NotFoundError',
    'ValidationError',
    'ConflictError',
    'DatabaseError',
    'StorageError',
    'AuthenticationError',
    'ApiResponse',
    'build_url',
    'resolve_base_path',
]
