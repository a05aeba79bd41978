"""
Password requests repository - handles the password-requests collection.
"""

from typing import List

from repositories.base import BaseRepository
from models.domain.password_request import PasswordRequest, PasswordRequestStatus


class PasswordRequestsRepository(BaseRepository[PasswordRequest]):
    """
    Repository for guest password requests.
    """

    collection = "password-requests"
    model_class = PasswordRequest
    entity_name = "Password request"

    async def list_for_gallery(self, gallery_id: str) -> List[PasswordRequest]:
        """Requests for a gallery, newest first."""
        return await self.find({"gallery_id": gallery_id}, order_by="created_at", order_desc=True)

    async def set_status(self, request_id: str, status: PasswordRequestStatus) -> PasswordRequest:
        return await self.update(request_id, {"status": status.value})
