"""
Gallery, Photo and Chapter domain models.
Represents wedding galleries and their photos.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class Gallery(BaseModel):
    """Password protected wedding gallery."""

    id: str = Field(..., description="Unique gallery ID")
    name: str = Field(..., description="Gallery name, e.g. the couple")
    code: str = Field(..., description="Unique human-chosen code used in URLs")

    # Stored as given by the studio, see DESIGN.md
    password: str = Field(..., description="Guest access password")

    # Event info
    date: str = Field(..., description="Wedding date")
    location: str = Field(..., description="Wedding location")

    # Status
    photo_count: int = Field(0, ge=0, description="Number of photos")
    active: bool = Field(True, description="Disabled galleries are hidden from guests")
    has_chapters: bool = Field(False, description="Photos are grouped in chapters")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    def public_view(self) -> dict:
        """Gallery fields safe to show to guests."""
        return self.model_dump(exclude={"password"})


class Photo(BaseModel):
    """Photo in a gallery (canonical record under galleries/{id}/photos)."""

    id: str = Field(..., description="Unique photo ID")
    gallery_id: Optional[str] = Field(None, description="Parent gallery ID")

    # Also the last component of the blob key
    name: str = Field(..., description="File name")
    url: str = Field(..., description="Download URL")
    size: int = Field(0, ge=0, description="Size in bytes")
    content_type: str = Field("image/jpeg", description="MIME type")

    # Chapter grouping
    chapter_id: Optional[str] = Field(None, description="Chapter reference")
    chapter_position: Optional[int] = Field(None, ge=0, description="Position inside the chapter")

    created_at: Optional[datetime] = Field(None, description="Upload timestamp")


class IndexedPhoto(Photo):
    """
    Denormalized copy of a photo in the flat gallery-photos collection.

    Linked to the canonical record by (gallery_id, name). photo_id is only
    present on records written by this service.
    """

    gallery_id: str = Field(..., description="Parent gallery ID")
    url: Optional[str] = Field(None, description="Download URL, missing on some legacy records")
    photo_id: Optional[str] = Field(None, description="Canonical photo ID")


class Chapter(BaseModel):
    """Ordered group of photos inside a gallery."""

    id: str = Field(..., description="Unique chapter ID")
    gallery_id: Optional[str] = Field(None, description="Parent gallery ID")
    title: str = Field(..., description="Chapter title")
    description: Optional[str] = Field(None, description="Chapter description")
    position: int = Field(0, ge=0, description="Order in the gallery")
