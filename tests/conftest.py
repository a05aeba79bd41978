"""
Shared fixtures. Every test runs against the in-memory stores.
"""

import os

os.environ["DOCUMENT_STORE"] = "memory"
os.environ["BLOB_STORE"] = "memory"
os.environ["BASE_PATH"] = "/"

import pytest
from fastapi.testclient import TestClient

from infrastructure.memory import InMemoryBlobStore, InMemoryDocumentStore
from repositories import (
    ChaptersRepository,
    GalleriesRepository,
    PasswordRequestsRepository,
    PhotosRepository,
)
from services.photo_deletion import PhotoDeletionService
from services.storage_keys import legacy_strategy


@pytest.fixture
def document_store():
    return InMemoryDocumentStore()


@pytest.fixture
def blob_store():
    return InMemoryBlobStore()


@pytest.fixture
def galleries_repo(document_store):
    return GalleriesRepository(document_store)


@pytest.fixture
def photos_repo(document_store):
    return PhotosRepository(document_store)


@pytest.fixture
def chapters_repo(document_store):
    return ChaptersRepository(document_store)


@pytest.fixture
def deletion_service(photos_repo, blob_store):
    return PhotoDeletionService(photos_repo, blob_store, legacy_strategy())


@pytest.fixture
async def gallery(galleries_repo):
    return await galleries_repo.create_gallery({
        "name": "Anna & Marco",
        "code": "anna-marco",
        "password": "secret",
        "date": "2024-06-15",
        "location": "Lake Como",
    })


@pytest.fixture
def client(document_store, blob_store):
    """API client wired to fresh in-memory stores."""
    from main import app
    from routers import access, galleries, password_requests

    galleries.set_services(document_store, blob_store, legacy_strategy())
    access.set_services(GalleriesRepository(document_store))
    password_requests.set_services(
        GalleriesRepository(document_store),
        PasswordRequestsRepository(document_store),
    )

    with TestClient(app) as test_client:
        yield test_client
