"""
Document store abstraction.

Documents are addressed with slash separated paths in collection/document
form:

    galleries                       -> collection
    galleries/{gallery_id}          -> document
    galleries/{gallery_id}/photos   -> sub-collection scoped to a gallery
    gallery-photos/{id}             -> document in the flat photo index

Backends (Supabase, in-memory) implement DocumentStore and map collections
to their own storage through CollectionRef.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from core.exceptions import ValidationError

# Top-level collection name -> table name
ROOT_COLLECTIONS = {
    "galleries": "galleries",
    "gallery-photos": "gallery_photos",
    "password-requests": "password_requests",
}

# Sub-collection name under galleries/{id} -> table name
GALLERY_SUBCOLLECTIONS = {
    "photos": "photos",
    "chapters": "chapters",
}

# Column holding the parent gallery id in sub-collection tables
PARENT_COLUMN = "gallery_id"


@dataclass(frozen=True)
class CollectionRef:
    """Resolved collection: table plus optional parent scope."""

    name: str
    table: str
    parent_id: Optional[str] = None

    @property
    def path(self) -> str:
        if self.parent_id is None:
            return self.name
        return f"galleries/{self.parent_id}/{self.name}"

    @property
    def scope(self) -> Dict[str, Any]:
        """Equality filters every row of this collection must satisfy."""
        if self.parent_id is None:
            return {}
        return {PARENT_COLUMN: self.parent_id}


def _segments(path: str) -> List[str]:
    segments = [s for s in path.strip("/").split("/") if s]
    if not segments:
        raise ValidationError("Empty document path", field="path")
    return segments


def parse_collection_path(path: str) -> CollectionRef:
    """Resolve 'galleries' or 'galleries/{id}/photos' style paths."""
    segments = _segments(path)

    if len(segments) == 1:
        name = segments[0]
        if name not in ROOT_COLLECTIONS:
            raise ValidationError(f"Unknown collection '{name}'", field="path")
        return CollectionRef(name=name, table=ROOT_COLLECTIONS[name])

    if len(segments) == 3 and segments[0] == "galleries":
        name = segments[2]
        if name not in GALLERY_SUBCOLLECTIONS:
            raise ValidationError(f"Unknown sub-collection '{name}'", field="path")
        return CollectionRef(name=name, table=GALLERY_SUBCOLLECTIONS[name], parent_id=segments[1])

    raise ValidationError(f"'{path}' is not a collection path", field="path")


def parse_document_path(path: str) -> Tuple[CollectionRef, str]:
    """Split a document path into its collection and document id."""
    segments = _segments(path)
    if len(segments) % 2 != 0:
        raise ValidationError(f"'{path}' is not a document path", field="path")
    collection = parse_collection_path("/".join(segments[:-1]))
    return collection, segments[-1]


def document_path(collection_path: str, document_id: str) -> str:
    return f"{collection_path.rstrip('/')}/{document_id}"


class DocumentStore(ABC):
    """
    Path addressed document storage.

    Documents are plain dicts that always carry their "id". Deleting a
    missing document is not an error.
    """

    @abstractmethod
    async def get_document(self, path: str) -> Optional[Dict[str, Any]]:
        """Return the document at path or None."""

    @abstractmethod
    async def add_document(self, collection_path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document with a generated id and return it."""

    @abstractmethod
    async def set_document(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create or replace the document at path and return it."""

    @abstractmethod
    async def update_document(self, path: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Merge data into an existing document. None if it does not exist."""

    @abstractmethod
    async def delete_document(self, path: str) -> bool:
        """Delete the document at path. Returns whether it existed."""

    @abstractmethod
    async def query(
        self,
        collection_path: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Documents of a collection whose fields equal every filter value."""
