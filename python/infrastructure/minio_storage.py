"""
MinIO Storage Service.
Handles photo uploads and deletions in MinIO S3-compatible storage.
"""

import io
from typing import Optional
from urllib.parse import quote

from minio import Minio
from minio.error import S3Error

from core.config import settings
from core.exceptions import BlobNotFoundError, StorageError
from core.logging import get_logger
from infrastructure.blob_store import BlobStore

logger = get_logger(__name__)

# S3 error codes meaning "nothing stored under this key"
NOT_FOUND_CODES = {"NoSuchKey", "NoSuchObject", "NoSuchBucket"}


class MinioBlobStore(BlobStore):
    """
    MinIO storage service for photo objects in a single bucket.

    Every client failure surfaces as StorageError: S3 errors by code,
    connection errors (urllib3 retries exhausted, timeouts) as they come.
    """

    def __init__(self, client: Optional[Minio] = None, bucket: Optional[str] = None):
        self.bucket = bucket or settings.minio_bucket
        self.public_base_url = settings.minio_public_url.rstrip("/")

        self.client = client or Minio(
            endpoint=settings.minio_endpoint,
            access_key=settings.minio_access_key,
            secret_key=settings.minio_secret_key,
            secure=settings.minio_secure
        )

        logger.info(f"MinIO storage initialized: {settings.minio_endpoint}/{self.bucket}")

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{self.bucket}/{quote(key)}"

    async def put_object(self, key: str, data: bytes, content_type: str = "image/jpeg") -> str:
        """
        Upload bytes to MinIO.

        Args:
            key: Object key, e.g. "gallery-photos/{gallery_id}/{name}"
            data: File bytes
            content_type: MIME type

        Returns:
            Public URL of the stored object
        """
        try:
            self.client.put_object(
                bucket_name=self.bucket,
                object_name=key,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type
            )
        except S3Error as e:
            logger.error(f"MinIO upload error for {key}: {e}")
            raise StorageError(f"Upload failed: {e.code}", key=key)
        except Exception as e:
            logger.error(f"MinIO unreachable during upload of {key}: {e}")
            raise StorageError(f"Upload failed: {type(e).__name__}", key=key)

        logger.info(f"Uploaded to {self.bucket}: {key} ({len(data)} bytes)")
        return self.public_url(key)

    async def delete_object(self, key: str) -> None:
        """
        Delete an object by key.

        S3 deletes succeed for missing keys, so existence is checked first
        to report BlobNotFoundError.
        """
        try:
            self.client.stat_object(bucket_name=self.bucket, object_name=key)
        except S3Error as e:
            if e.code in NOT_FOUND_CODES:
                raise BlobNotFoundError(key)
            logger.error(f"MinIO stat error for {key}: {e}")
            raise StorageError(f"Stat failed: {e.code}", key=key)
        except Exception as e:
            logger.error(f"MinIO unreachable during stat of {key}: {e}")
            raise StorageError(f"Stat failed: {type(e).__name__}", key=key)

        try:
            self.client.remove_object(bucket_name=self.bucket, object_name=key)
        except S3Error as e:
            logger.error(f"MinIO delete error for {key}: {e}")
            raise StorageError(f"Delete failed: {e.code}", key=key)
        except Exception as e:
            logger.error(f"MinIO unreachable during delete of {key}: {e}")
            raise StorageError(f"Delete failed: {type(e).__name__}", key=key)

        logger.info(f"Deleted from {self.bucket}: {key}")
