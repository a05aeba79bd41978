"""
Supabase document store.
Maps collection/document paths onto PostgREST tables.

Tables:
- galleries
- photos          (galleries/{id}/photos, scoped by gallery_id)
- chapters        (galleries/{id}/chapters, scoped by gallery_id)
- gallery_photos  (denormalized photo index)
- password_requests
"""

import uuid
from datetime import date, datetime
from typing import List, Dict, Optional, Any

from supabase import create_client, Client

from core.config import settings
from core.exceptions import DatabaseError
from core.logging import get_logger
from infrastructure.document_store import (
    DocumentStore,
    parse_collection_path,
    parse_document_path,
)

logger = get_logger(__name__)


class SupabaseDocumentStore(DocumentStore):
    """
    Document store backed by Supabase tables.

    Provides:
    - Connection management
    - Path to table translation
    - Query execution with error handling
    """

    def __init__(self, client: Optional[Client] = None):
        """Initialize Supabase client (or use the given one)."""
        self._client: Optional[Client] = client
        if self._client is None:
            self._connect()

    def _connect(self):
        """Establish connection to Supabase."""
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise DatabaseError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set", operation="connect")
        try:
            self._client = create_client(
                settings.supabase_url,
                settings.supabase_service_role_key
            )
            logger.info("Supabase client initialized")
        except Exception as e:
            logger.error(f"Failed to connect to Supabase: {e}")
            raise DatabaseError(str(e), operation="connect")

    @property
    def client(self) -> Client:
        """Get raw Supabase client for direct queries."""
        if not self._client:
            self._connect()
        return self._client

    # ============================================================
    # DocumentStore
    # ============================================================

    async def get_document(self, path: str) -> Optional[Dict[str, Any]]:
        collection, doc_id = parse_document_path(path)
        try:
            query = self.client.table(collection.table).select("*").eq("id", doc_id)
            for key, value in collection.scope.items():
                query = query.eq(key, value)
            response = query.execute()
        except Exception as e:
            logger.error(f"Get failed: {path} - {e}")
            raise DatabaseError(str(e), operation=f"{collection.table}.select")

        return response.data[0] if response.data else None

    async def add_document(self, collection_path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        collection = parse_collection_path(collection_path)
        row = {**self.clean_for_json(data), **collection.scope, "id": str(uuid.uuid4())}
        try:
            response = self.client.table(collection.table).insert(row).execute()
        except Exception as e:
            logger.error(f"Insert failed: {collection_path} - {e}")
            raise DatabaseError(str(e), operation=f"{collection.table}.insert")

        if not response.data:
            raise DatabaseError("Insert returned no data", operation=f"{collection.table}.insert")
        return response.data[0]

    async def set_document(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        collection, doc_id = parse_document_path(path)
        row = {**self.clean_for_json(data), **collection.scope, "id": doc_id}
        try:
            response = self.client.table(collection.table).upsert(row, on_conflict="id").execute()
        except Exception as e:
            logger.error(f"Upsert failed: {path} - {e}")
            raise DatabaseError(str(e), operation=f"{collection.table}.upsert")

        if not response.data:
            raise DatabaseError("Upsert returned no data", operation=f"{collection.table}.upsert")
        return response.data[0]

    async def update_document(self, path: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        collection, doc_id = parse_document_path(path)
        changes = {k: v for k, v in self.clean_for_json(data).items() if k != "id"}
        try:
            query = self.client.table(collection.table).update(changes).eq("id", doc_id)
            for key, value in collection.scope.items():
                query = query.eq(key, value)
            response = query.execute()
        except Exception as e:
            logger.error(f"Update failed: {path} - {e}")
            raise DatabaseError(str(e), operation=f"{collection.table}.update")

        return response.data[0] if response.data else None

    async def delete_document(self, path: str) -> bool:
        collection, doc_id = parse_document_path(path)
        try:
            query = self.client.table(collection.table).delete().eq("id", doc_id)
            for key, value in collection.scope.items():
                query = query.eq(key, value)
            response = query.execute()
        except Exception as e:
            logger.error(f"Delete failed: {path} - {e}")
            raise DatabaseError(str(e), operation=f"{collection.table}.delete")

        return len(response.data or []) > 0

    async def query(
        self,
        collection_path: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        collection = parse_collection_path(collection_path)
        try:
            query = self.client.table(collection.table).select("*")

            for key, value in {**(filters or {}), **collection.scope}.items():
                if value is None:
                    query = query.is_(key, "null")
                else:
                    query = query.eq(key, value)

            if order_by:
                query = query.order(order_by, desc=order_desc)
            if limit:
                query = query.limit(limit)

            response = query.execute()
        except Exception as e:
            logger.error(f"Query failed: {collection_path} - {e}")
            raise DatabaseError(str(e), operation=f"{collection.table}.select")

        return response.data or []

    # ============================================================
    # Type Conversion Utilities
    # ============================================================

    @staticmethod
    def clean_for_json(data: Dict) -> Dict:
        """Clean dict values for JSON serialization."""
        result = {}
        for key, value in data.items():
            if isinstance(value, (datetime, date)):
                result[key] = value.isoformat()
            else:
                result[key] = value
        return result
