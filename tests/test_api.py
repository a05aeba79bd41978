"""
HTTP API end to end against the in-memory stores.
"""

import pytest

from routers.galleries.helpers import get_deletion_tracker

GALLERY = {
    "name": "Anna & Marco",
    "code": "anna-marco",
    "password": "secret",
    "date": "2024-06-15",
    "location": "Lake Como",
}


def create_gallery(client, **overrides):
    response = client.post("/api/galleries/", json={**GALLERY, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def upload(client, code, name="IMG_001.jpg", data=b"jpeg-bytes", content_type="image/jpeg"):
    return client.post(f"/api/galleries/{code}/photos", files={"file": (name, data, content_type)})


def test_health(client):
    body = client.get("/api/health").json()
    assert body["success"] is True
    assert body["data"]["status"] == "healthy"


class TestGalleries:

    def test_create_hides_password(self, client):
        gallery = create_gallery(client)
        assert gallery["code"] == "anna-marco"
        assert gallery["photo_count"] == 0
        assert gallery["active"] is True
        assert gallery["url"] == "/gallery/anna-marco"
        assert "password" not in gallery

    def test_duplicate_code(self, client):
        create_gallery(client)
        response = client.post("/api/galleries/", json={**GALLERY, "name": "Other couple"})
        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_CODE"

    @pytest.mark.parametrize("field,value", [
        ("code", "Anna Marco"),
        ("code", "ab"),
        ("name", "AB"),
        ("password", "123"),
    ])
    def test_invalid_fields(self, client, field, value):
        response = client.post("/api/galleries/", json={**GALLERY, field: value})
        assert response.status_code == 422

    def test_get_by_code_and_id(self, client):
        gallery = create_gallery(client)
        by_code = client.get("/api/galleries/anna-marco").json()["data"]
        by_id = client.get(f"/api/galleries/{gallery['id']}").json()["data"]
        assert by_code["id"] == by_id["id"] == gallery["id"]

    def test_unknown_gallery(self, client):
        response = client.get("/api/galleries/nobody")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "NOT_FOUND"

    def test_list_and_search(self, client):
        create_gallery(client)
        create_gallery(client, name="Giulia & Luca", code="giulia-luca")

        listed = client.get("/api/galleries/").json()["data"]
        assert {g["code"] for g in listed} == {"anna-marco", "giulia-luca"}

        found = client.get("/api/galleries/search", params={"q": "luca giulia"}).json()["data"]
        assert [g["code"] for g in found] == ["giulia-luca"]

        assert client.get("/api/galleries/search", params={"q": "l"}).json()["data"] == []

    def test_update(self, client):
        create_gallery(client)
        response = client.patch("/api/galleries/anna-marco", json={"location": "Florence"})
        assert response.json()["data"]["location"] == "Florence"

        response = client.patch("/api/galleries/anna-marco", json={})
        assert response.status_code == 422

    def test_update_to_taken_code(self, client):
        create_gallery(client)
        create_gallery(client, name="Giulia & Luca", code="giulia-luca")
        response = client.patch("/api/galleries/giulia-luca", json={"code": "anna-marco"})
        assert response.status_code == 409

    def test_deactivate_keeps_gallery(self, client):
        create_gallery(client)
        response = client.delete("/api/galleries/anna-marco")
        assert response.json()["data"]["active"] is False

        assert client.get("/api/galleries/").json()["data"] == []
        listed = client.get("/api/galleries/", params={"include_inactive": True}).json()["data"]
        assert len(listed) == 1


class TestPhotos:

    def test_upload_and_list(self, client, blob_store):
        gallery = create_gallery(client)
        response = upload(client, "anna-marco")
        assert response.status_code == 201

        photo = response.json()["data"]
        key = f"gallery-photos/{gallery['id']}/IMG_001.jpg"
        assert blob_store.objects[key] == b"jpeg-bytes"
        assert photo["url"] == blob_store.public_url(key)

        data = client.get("/api/galleries/anna-marco/photos").json()["data"]
        assert [p["name"] for p in data["photos"]] == ["IMG_001.jpg"]
        assert client.get("/api/galleries/anna-marco").json()["data"]["photo_count"] == 1

    def test_upload_rejects_bad_files(self, client):
        create_gallery(client)
        assert upload(client, "anna-marco", content_type="application/pdf").status_code == 422
        assert upload(client, "anna-marco", data=b"").status_code == 422

    def test_upload_rejects_duplicate_name(self, client):
        create_gallery(client)
        upload(client, "anna-marco")
        response = upload(client, "anna-marco")
        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_PHOTO_NAME"


class TestPhotoDeletion:

    @pytest.fixture
    def uploaded(self, client):
        gallery = create_gallery(client)
        photo = upload(client, "anna-marco").json()["data"]
        return gallery, photo

    def delete(self, client, photo, **params):
        return client.delete(
            f"/api/galleries/anna-marco/photos/{photo['id']}",
            params={"name": photo["name"], **params},
        )

    def test_requires_confirmation(self, client, uploaded, blob_store):
        _, photo = uploaded
        response = self.delete(client, photo)

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "CONFIRMATION_REQUIRED"
        assert "IMG_001.jpg" in body["meta"]["prompt"]
        assert len(client.get("/api/galleries/anna-marco/photos").json()["data"]["photos"]) == 1
        assert len(blob_store.objects) == 1

    def test_confirmed_delete(self, client, uploaded, blob_store):
        gallery, photo = uploaded
        response = self.delete(client, photo, confirm=True)

        assert response.status_code == 200
        body = response.json()
        assert body["data"]["status"] == "deleted"
        assert body["data"]["index_records_deleted"] == 1
        assert body["data"]["blob_key"] == f"gallery-photos/{gallery['id']}/IMG_001.jpg"
        assert [n["title"] for n in body["meta"]["notifications"]] == ["Photo deleted"]

        assert client.get("/api/galleries/anna-marco/photos").json()["data"]["photos"] == []
        assert client.get("/api/galleries/anna-marco").json()["data"]["photo_count"] == 0
        assert blob_store.objects == {}

    def test_delete_missing_photo(self, client, uploaded):
        _, photo = uploaded
        self.delete(client, photo, confirm=True)

        response = self.delete(client, photo, confirm=True)
        assert response.status_code == 404
        notifications = response.json()["meta"]["notifications"]
        assert notifications[0]["variant"] == "destructive"

    def test_settled_requests_leave_no_tracker_state(self, client, uploaded):
        _, photo = uploaded
        for _ in range(3):
            assert self.delete(client, photo).status_code == 409
        assert len(get_deletion_tracker()) == 0

        self.delete(client, photo, confirm=True)
        self.delete(client, photo, confirm=True)
        assert len(get_deletion_tracker()) == 0

    def test_name_is_required(self, client, uploaded):
        _, photo = uploaded
        response = client.delete(f"/api/galleries/anna-marco/photos/{photo['id']}", params={"confirm": True})
        assert response.status_code == 422


class TestChapters:

    def add_chapter(self, client, title):
        response = client.post("/api/galleries/anna-marco/chapters", json={"title": title})
        assert response.status_code == 201
        return response.json()["data"]

    def test_create_and_move(self, client):
        create_gallery(client, has_chapters=True)
        first = self.add_chapter(client, "Ceremony")
        self.add_chapter(client, "Dinner")
        last = self.add_chapter(client, "Party")
        assert last["position"] == 2

        response = client.post(f"/api/galleries/anna-marco/chapters/{last['id']}/move", params={"direction": "up"})
        assert [c["title"] for c in response.json()["data"]] == ["Ceremony", "Party", "Dinner"]

        response = client.post(f"/api/galleries/anna-marco/chapters/{first['id']}/move", params={"direction": "up"})
        assert [c["title"] for c in response.json()["data"]] == ["Ceremony", "Party", "Dinner"]

    def test_update(self, client):
        create_gallery(client)
        chapter = self.add_chapter(client, "Ceremony")
        response = client.patch(
            f"/api/galleries/anna-marco/chapters/{chapter['id']}",
            json={"description": "In the church"},
        )
        assert response.json()["data"]["description"] == "In the church"

    def test_photos_sorted_by_chapter(self, client):
        create_gallery(client, has_chapters=True)
        first = self.add_chapter(client, "Ceremony")
        second = self.add_chapter(client, "Party")
        a = upload(client, "anna-marco", name="a.jpg").json()["data"]
        b = upload(client, "anna-marco", name="b.jpg").json()["data"]
        upload(client, "anna-marco", name="c.jpg")

        client.patch(f"/api/galleries/anna-marco/photos/{a['id']}/chapter", json={"chapter_id": second["id"]})
        client.patch(f"/api/galleries/anna-marco/photos/{b['id']}/chapter", json={"chapter_id": first["id"]})

        photos = client.get("/api/galleries/anna-marco/photos").json()["data"]["photos"]
        assert [p["name"] for p in photos] == ["b.jpg", "a.jpg", "c.jpg"]

    def test_delete_unassigns_photos(self, client):
        create_gallery(client, has_chapters=True)
        chapter = self.add_chapter(client, "Ceremony")
        photo = upload(client, "anna-marco").json()["data"]
        client.patch(f"/api/galleries/anna-marco/photos/{photo['id']}/chapter", json={"chapter_id": chapter["id"]})

        response = client.delete(f"/api/galleries/anna-marco/chapters/{chapter['id']}")
        assert response.json()["data"]["unassigned_photos"] == 1

        photos = client.get("/api/galleries/anna-marco/photos").json()["data"]
        assert photos["chapters"] == []
        assert photos["photos"][0]["chapter_id"] is None


class TestAccess:

    def test_correct_password(self, client):
        gallery = create_gallery(client)
        response = client.post("/api/access/verify", json={"code": "anna-marco", "password": "secret"})
        data = response.json()["data"]
        assert data["gallery_id"] == gallery["id"]
        assert data["redirect_url"] == "/gallery/anna-marco"

    def test_wrong_password(self, client):
        create_gallery(client)
        response = client.post("/api/access/verify", json={"code": "anna-marco", "password": "guess"})
        assert response.status_code == 401

    def test_inactive_gallery(self, client):
        create_gallery(client)
        client.delete("/api/galleries/anna-marco")
        response = client.post("/api/access/verify", json={"code": "anna-marco", "password": "secret"})
        assert response.status_code == 404


class TestPasswordRequests:

    REQUEST = {
        "gallery_code": "anna-marco",
        "first_name": "Sofia",
        "last_name": "Rossi",
        "email": "sofia@example.com",
        "relation": "Friend of the bride",
    }

    def test_create_list_update(self, client):
        create_gallery(client)
        response = client.post("/api/password-requests", json=self.REQUEST)
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["request"]["status"] == "pending"
        assert data["result_url"] == "/password-result/anna-marco"

        listed = client.get("/api/password-requests", params={"gallery": "anna-marco"}).json()["data"]
        assert [r["email"] for r in listed] == ["sofia@example.com"]

        request_id = data["request"]["id"]
        response = client.patch(f"/api/password-requests/{request_id}", json={"status": "sent"})
        assert response.json()["data"]["status"] == "sent"

    def test_unknown_gallery(self, client):
        response = client.post("/api/password-requests", json=self.REQUEST)
        assert response.status_code == 404

    @pytest.mark.parametrize("email", ["not-an-email", "guest@example..com", "guest@", "@example.com"])
    def test_invalid_email(self, client, email):
        create_gallery(client)
        response = client.post("/api/password-requests", json={**self.REQUEST, "email": email})
        assert response.status_code == 422

    def test_unknown_request(self, client):
        response = client.patch("/api/password-requests/missing", json={"status": "rejected"})
        assert response.status_code == 404


class TestConfig:

    def test_root_hosting(self, client):
        data = client.get("/api/config").json()["data"]
        assert data["base_path"] == "/"
        assert data["in_subdirectory"] is False
        assert data["urls"]["admin"] == "/admin"

    def test_subdirectory_hosting(self, client, monkeypatch):
        from core.config import settings

        monkeypatch.setattr(settings, "base_path", "/wedgallery/")
        data = client.get("/api/config").json()["data"]
        assert data["base_path"] == "/wedgallery/"
        assert data["in_subdirectory"] is True
        assert data["urls"] == {
            "home": "/wedgallery/",
            "admin": "/wedgallery/admin",
            "admin_login": "/wedgallery/admin/login",
        }
