"""
PasswordRequest domain model.
A guest asking the studio for a gallery password.
"""

from typing import Optional
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, EmailStr, Field


class PasswordRequestStatus(str, Enum):
    """Request handling status."""
    PENDING = "pending"
    SENT = "sent"
    REJECTED = "rejected"


class PasswordRequest(BaseModel):
    """Guest request for gallery access."""

    id: str = Field(..., description="Unique request ID")
    gallery_id: str = Field(..., description="Target gallery ID")
    gallery_code: Optional[str] = Field(None, description="Target gallery code")

    # Requester
    first_name: str
    last_name: str
    email: EmailStr
    relation: str = Field(..., description="Relation to the couple")

    status: PasswordRequestStatus = Field(PasswordRequestStatus.PENDING)
    created_at: Optional[datetime] = Field(None, description="Request timestamp")
