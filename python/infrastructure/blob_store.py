"""
Blob store abstraction.
Objects are addressed by slash separated keys inside a single bucket.
"""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    """Key addressed binary object storage."""

    @abstractmethod
    async def put_object(self, key: str, data: bytes, content_type: str = "image/jpeg") -> str:
        """Store data under key and return its public URL."""

    @abstractmethod
    async def delete_object(self, key: str) -> None:
        """
        Delete the object stored under key.

        Raises:
            BlobNotFoundError: nothing is stored under key
            StorageError: any other storage failure
        """

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Public download URL for key."""
