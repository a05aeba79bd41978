"""
Base path utilities for root and subdirectory hosting.

The same build can be mounted at "/" or below a fixed directory such as
"/wedgallery/". Every application-relative URL goes through build_url so
a path that was already prefixed never ends up prefixed twice
(/wedgallery/wedgallery/admin).
"""

from typing import Optional

from core.config import settings
from core.logging import get_logger

logger = get_logger(__name__)


def normalize_base_path(base_path: Optional[str]) -> str:
    """Return base_path with exactly one leading and one trailing slash."""
    if not base_path:
        return "/"
    inner = base_path.strip("/")
    if not inner:
        return "/"
    return f"/{inner}/"


def resolve_base_path() -> str:
    """Configured base path for this deployment ("/" or "/<dir>/")."""
    return normalize_base_path(settings.base_path)


def build_url(path: str, base_path: Optional[str] = None) -> str:
    """
    Build an application-relative URL under the base path.

    Args:
        path: Logical path, with or without a leading slash
        base_path: Override for the configured base path

    Returns:
        "/" joined URL without doubled separators or a doubled base segment
    """
    base = normalize_base_path(base_path) if base_path is not None else resolve_base_path()

    if path == "" or path == "/":
        return base

    # Stripping every leading slash keeps the join point single
    remainder = path.lstrip("/")

    directory = base.strip("/")
    if directory and (remainder == directory or remainder.startswith(f"{directory}/")):
        logger.warning(f"Path '{path}' already carries base path '{base}', not prefixing again")
        return f"/{remainder}"

    return f"{base}{remainder}"


def build_absolute_url(origin: str, path: str, base_path: Optional[str] = None) -> str:
    """Absolute URL for path, e.g. build_absolute_url("https://example.com", "/admin")."""
    return f"{origin.rstrip('/')}{build_url(path, base_path)}"


def is_in_subdirectory(request_path: str, base_path: Optional[str] = None) -> bool:
    """True when the app is mounted below root and request_path is inside the mount."""
    base = normalize_base_path(base_path) if base_path is not None else resolve_base_path()
    if base == "/":
        return False
    return request_path == base.rstrip("/") or request_path.startswith(base)
