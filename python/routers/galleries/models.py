"""
Galleries Pydantic Models
"""

from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional

from core.slug import GALLERY_CODE_PATTERN

CODE_PATTERN = GALLERY_CODE_PATTERN.pattern


class GalleryCreate(BaseModel):
    name: str = Field(..., min_length=3)
    code: str = Field(..., min_length=3, pattern=CODE_PATTERN)
    password: str = Field(..., min_length=4)
    date: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    has_chapters: bool = False


class GalleryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3)
    code: Optional[str] = Field(None, min_length=3, pattern=CODE_PATTERN)
    password: Optional[str] = Field(None, min_length=4)
    date: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    active: Optional[bool] = None
    has_chapters: Optional[bool] = None


class ChapterCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None


class ChapterUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None


class MoveDirection(str, Enum):
    UP = "up"
    DOWN = "down"


class ChapterAssignment(BaseModel):
    chapter_id: Optional[str] = None
