"""Unit tests for marketing content HTTP routes."""

import re

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from app.infrastructure.config.settings import Settings
from app.infrastructure.wiring.container import Container, get_container
from app.main import create_app


@pytest.fixture
def client(tmp_path):
    """Create test client with in-memory content."""
    container = Container(Settings(upload_dir=str(tmp_path), content_repository="in_memory"))
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    return TestClient(app)


def test_hero_section_is_stored_camel_case(client):
    """Test hero section creation and listing."""
    response = client.post(
        "/update_hero_section_data",
        json={"title": "Study abroad", "primaryButton": "Apply", "secondaryButton": "Call us"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    items = client.get("/hero_section_data").json()
    assert len(items) == 1
    assert items[0]["primaryButton"] == "Apply"
    assert items[0]["pk"] == response.json()["pk"]


def test_create_requires_mandatory_fields(client):
    """Test that a service without title is rejected."""
    response = client.post("/post_new_service", json={"description": "No title"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "title" in response.json()["error"]


def test_service_crud(client):
    """Test creating, updating and deleting a service."""
    pk = client.post("/post_new_service", json={"title": "Visa", "icon": "visa"}).json()["pk"]

    updated = client.patch(f"/update_service_data/{pk}", json={"title": "Visa support"})
    deleted = client.delete(f"/delete_service_data/{pk}")

    assert updated.status_code == status.HTTP_200_OK
    assert updated.json() == {"pk": pk, "title": "Visa support", "icon": "visa", "description": None, "image": None}
    assert deleted.status_code == status.HTTP_200_OK
    assert client.get("/our_services").json() == []


def test_update_and_delete_missing_item(client):
    """Test that missing items are not found."""
    updated = client.patch("/update_faq/missing", json={"answer": "x"})
    deleted = client.delete("/delete_faq_data/missing")

    assert updated.status_code == status.HTTP_404_NOT_FOUND
    assert deleted.status_code == status.HTTP_404_NOT_FOUND


def test_lists_are_newest_first(client):
    """Test list ordering."""
    client.post("/add_new_faq", json={"question": "First?", "answer": "a"})
    client.post("/add_new_faq", json={"question": "Second?", "answer": "b"})

    questions = [faq["question"] for faq in client.get("/all_faqs").json()]

    assert questions == ["Second?", "First?"]


def test_contact_informations_returns_latest(client):
    """Test that only the newest contact block is returned."""
    assert client.get("/contact_informations").json() is None

    client.post("/add_contact_informations", json={"email1": "old@example.com"})
    client.post("/add_contact_informations", json={"email1": "new@example.com", "officeHours": "9-5"})

    latest = client.get("/contact_informations").json()
    assert latest["email1"] == "new@example.com"
    assert latest["officeHours"] == "9-5"


def test_admin_data(client):
    """Test admin creation and update."""
    pk = client.post("/admin_data", json={"email": "admin@example.com"}).json()["pk"]

    response = client.patch(f"/admin_data/{pk}", json={"role": "owner"})

    assert response.status_code == status.HTTP_200_OK
    assert client.get("/admin_data").json()[0]["role"] == "owner"


@pytest.mark.parametrize("method", ["PATCH", "DELETE"])
def test_delete_material_accepts_patch_and_delete(client, method):
    """Test that the legacy delete route answers both methods."""
    pk = client.post("/post_a_new_metarila", json={"title": "IELTS guide"}).json()["pk"]

    response = client.request(method, f"/delete_metarila_data/{pk}")

    assert response.status_code == status.HTTP_200_OK
    assert client.get("/all_metarial_data").json() == []


def test_increment_download(client):
    """Test the download counter."""
    pk = client.post("/post_a_new_metarila", json={"title": "IELTS guide"}).json()["pk"]

    first = client.patch(f"/increment_download/{pk}")
    client.patch(f"/increment_download/{pk}")

    assert first.json() == {"success": True, "message": "Download count updated"}
    assert client.get("/all_metarial_data").json()[0]["downloads"] == 2


def test_increment_missing_item(client):
    """Test that counters of unknown items fail with the counter body."""
    response = client.patch("/add_views/missing")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["success"] is False


def test_category_crud(client):
    """Test creating and deleting a category."""
    pk = client.post("/post_a_new_category", json={"name": "Scholarships"}).json()["pk"]

    assert client.get("/all_category_data").json()[0]["name"] == "Scholarships"
    assert client.patch(f"/delete_category_data/{pk}").status_code == status.HTTP_200_OK
    assert client.get("/all_category_data").json() == []


def test_blog_publish_date_and_views(client):
    """Test blog creation, retrieval and view counting."""
    created = client.post(
        "/post_a_new_blog",
        json={"title": "Study in Canada", "tags": ["canada", "visa"]},
    ).json()

    client.patch(f"/add_views/{created['pk']}")
    blog = client.get(f"/blog/{created['pk']}").json()

    assert re.fullmatch(r"[A-Z][a-z]{2} [A-Z][a-z]{2} \d{2} \d{4}", created["publishDate"])
    assert blog["tags"] == ["canada", "visa"]
    assert blog["views"] == 1


def test_blog_update_and_delete(client):
    """Test blog update and deletion."""
    pk = client.post("/post_a_new_blog", json={"title": "Draft"}).json()["pk"]

    updated = client.patch(f"/update_blog_data/{pk}", json={"title": "Final"})
    deleted = client.delete(f"/delete_blog_data/{pk}")

    assert updated.json()["title"] == "Final"
    assert deleted.status_code == status.HTTP_200_OK
    assert client.get(f"/blog/{pk}").status_code == status.HTTP_404_NOT_FOUND


def test_partners_and_stats(client):
    """Test university partners and statistics."""
    client.post("/add_new_university", json={"name": "University of Toronto", "country": "Canada"})
    client.post("/add_stats", json={"successfullyDeparted": 120, "filesOpened": 300})

    partners = client.get("/all_university_partners").json()
    stats = client.get("/stats_collection").json()

    assert partners[0]["country"] == "Canada"
    assert stats[0]["successfullyDeparted"] == 120
    assert stats[0]["interestedStudents"] == 0
