"""
Document paths, the in-memory store and the base repository on top of it.
"""

import pytest

from core.exceptions import BlobNotFoundError, NotFoundError, ValidationError
from infrastructure.document_store import (
    document_path,
    parse_collection_path,
    parse_document_path,
)
from infrastructure.memory import InMemoryBlobStore


class TestPaths:

    def test_root_collection(self):
        ref = parse_collection_path("gallery-photos")
        assert ref.table == "gallery_photos"
        assert ref.parent_id is None
        assert ref.scope == {}

    def test_subcollection(self):
        ref = parse_collection_path("/galleries/g1/photos/")
        assert ref.table == "photos"
        assert ref.parent_id == "g1"
        assert ref.scope == {"gallery_id": "g1"}
        assert ref.path == "galleries/g1/photos"

    def test_document(self):
        ref, doc_id = parse_document_path("galleries/g1/chapters/c1")
        assert ref.table == "chapters"
        assert doc_id == "c1"
        assert document_path("galleries/g1/chapters/", "c1") == "galleries/g1/chapters/c1"

    @pytest.mark.parametrize("path", ["", "/", "unknown", "galleries/g1/faces", "photos/p1/x"])
    def test_invalid_collection(self, path):
        with pytest.raises(ValidationError):
            parse_collection_path(path)

    def test_collection_is_not_a_document(self):
        with pytest.raises(ValidationError):
            parse_document_path("galleries/g1/photos")


class TestInMemoryDocumentStore:

    async def test_add_and_get(self, document_store):
        row = await document_store.add_document("galleries/g1/photos", {"name": "a.jpg"})
        assert row["gallery_id"] == "g1"

        fetched = await document_store.get_document(f"galleries/g1/photos/{row['id']}")
        assert fetched == row

    async def test_subcollections_are_scoped(self, document_store):
        row = await document_store.add_document("galleries/g1/photos", {"name": "a.jpg"})
        assert await document_store.get_document(f"galleries/g2/photos/{row['id']}") is None
        assert await document_store.query("galleries/g2/photos") == []

    async def test_returned_rows_are_copies(self, document_store):
        row = await document_store.add_document("galleries", {"tags": ["a"]})
        row["tags"].append("b")
        fetched = await document_store.get_document(f"galleries/{row['id']}")
        assert fetched["tags"] == ["a"]

    async def test_update_and_delete(self, document_store):
        row = await document_store.add_document("galleries", {"name": "x"})
        path = f"galleries/{row['id']}"

        updated = await document_store.update_document(path, {"name": "y", "id": "ignored"})
        assert updated == {"id": row["id"], "name": "y"}

        assert await document_store.delete_document(path) is True
        assert await document_store.delete_document(path) is False
        assert await document_store.update_document(path, {"name": "z"}) is None

    async def test_set_document(self, document_store):
        row = await document_store.set_document("password-requests/r1", {"status": "pending"})
        assert row == {"id": "r1", "status": "pending"}

    async def test_query_filters_order_limit(self, document_store):
        for name, position in [("b", 2), ("a", 1), ("c", None)]:
            await document_store.add_document("galleries/g1/chapters", {"title": name, "position": position})

        rows = await document_store.query("galleries/g1/chapters", order_by="position")
        assert [r["title"] for r in rows] == ["a", "b", "c"]

        rows = await document_store.query("galleries/g1/chapters", filters={"title": "b"})
        assert len(rows) == 1

        rows = await document_store.query("galleries/g1/chapters", order_by="position", order_desc=True, limit=1)
        assert rows[0]["title"] == "c"


class TestInMemoryBlobStore:

    async def test_put_and_delete(self):
        store = InMemoryBlobStore()
        url = await store.put_object("gallery-photos/g1/a.jpg", b"data")
        assert url == "memory://blobs/gallery-photos/g1/a.jpg"

        await store.delete_object("gallery-photos/g1/a.jpg")
        with pytest.raises(BlobNotFoundError):
            await store.delete_object("gallery-photos/g1/a.jpg")


class TestRepositories:

    async def test_subcollection_requires_gallery(self, photos_repo):
        with pytest.raises(ValidationError):
            await photos_repo.find()

    async def test_get_or_raise(self, chapters_repo):
        with pytest.raises(NotFoundError):
            await chapters_repo.get_by_id_or_raise("missing", gallery_id="g1")

    async def test_create_with_index_links_records(self, photos_repo):
        photo = await photos_repo.create_with_index("g1", {"name": "a.jpg", "url": "u"})

        records = await photos_repo.find_index_records("g1", "a.jpg")
        assert len(records) == 1
        assert records[0].photo_id == photo.id
        assert records[0].gallery_id == "g1"
        assert photo.created_at is not None

    async def test_chapter_renumber(self, chapters_repo):
        for title, position in [("a", 3), ("b", 7)]:
            await chapters_repo.create({"title": title, "position": position}, gallery_id="g1")

        chapters = await chapters_repo.renumber("g1")
        assert [(c.title, c.position) for c in chapters] == [("a", 0), ("b", 1)]


class TestGalleriesRepository:

    async def test_resolve_by_code_or_id(self, galleries_repo, gallery):
        assert (await galleries_repo.resolve("anna-marco")).id == gallery.id
        assert (await galleries_repo.resolve(gallery.id)).code == "anna-marco"
        assert await galleries_repo.resolve("nobody") is None

    async def test_search_requires_every_word(self, galleries_repo, gallery):
        assert [g.id for g in await galleries_repo.search("anna")] == [gallery.id]
        assert [g.id for g in await galleries_repo.search("MARCO anna")] == [gallery.id]
        assert await galleries_repo.search("anna luca") == []
        assert await galleries_repo.search("a") == []

    async def test_inactive_galleries_hidden_from_search(self, galleries_repo, gallery):
        await galleries_repo.deactivate(gallery.id)
        assert await galleries_repo.search("anna") == []
        assert await galleries_repo.list_galleries() == []
        assert len(await galleries_repo.list_galleries(include_inactive=True)) == 1

    async def test_photo_count_never_negative(self, galleries_repo, gallery):
        updated = await galleries_repo.adjust_photo_count(gallery.id, -1)
        assert updated.photo_count == 0
