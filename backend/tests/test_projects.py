"""Test Projects 동작과 회귀 시나리오를 검증하는 자동화 테스트입니다."""

import json

from app.models.project import Project
from tests.conftest import auth_headers, image_file


def _create(client, headers, **overrides):
    data = {
        "title": "Portfolio Site",
        "description": "A personal portfolio built with FastAPI",
        "technologies": json.dumps(["Python", "FastAPI"]),
        "projectUrl": "https://example.com",
        "githubUrl": "https://github.com/example/site",
        "featured": "false",
    }
    data.update(overrides)
    return client.post("/api/admin/projects", data=data, files=image_file(), headers=headers)


def test_create_project_admin(client, seed_users, upload_dir):
    headers = auth_headers(client)
    resp = _create(client, headers, featured="true")
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["title"] == "Portfolio Site"
    assert data["technologies"] == ["Python", "FastAPI"]
    assert data["featured"] is True
    assert data["imageUrl"].startswith("/uploads/images/")
    assert data["authorId"] == seed_users["admin"].id
    assert data["authorName"] == "Admin"
    assert len(list((upload_dir / "images").iterdir())) == 1


def test_create_project_comma_separated_technologies(client, seed_users):
    headers = auth_headers(client)
    resp = _create(client, headers, technologies="React, Node.js , ,SQL")
    assert resp.status_code == 201
    assert resp.json()["technologies"] == ["React", "Node.js", "SQL"]


def test_create_project_requires_image(client, db, seed_users):
    headers = auth_headers(client)
    resp = client.post(
        "/api/admin/projects",
        data={"title": "No Image", "description": "Missing the cover image"},
        headers=headers,
    )
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "image"
    assert db.query(Project).count() == 0


def test_create_project_rejects_bad_image_before_write(client, db, seed_users, upload_dir):
    headers = auth_headers(client)
    resp = client.post(
        "/api/admin/projects",
        data={"title": "Bad Image", "description": "Cover is not an image at all"},
        files={"image": ("doc.pdf", b"%PDF-1.4", "application/pdf")},
        headers=headers,
    )
    assert resp.status_code == 400
    assert db.query(Project).count() == 0
    assert not (upload_dir / "images").exists()


def test_create_project_validation_removes_uploaded_file(client, db, seed_users, upload_dir):
    headers = auth_headers(client)
    resp = _create(client, headers, title="ab", projectUrl="not a url")
    assert resp.status_code == 400
    fields = {err["field"] for err in resp.json()["errors"]}
    assert {"title", "projectUrl"} <= fields
    assert db.query(Project).count() == 0
    assert list((upload_dir / "images").iterdir()) == []


def test_list_projects_and_featured(client, db, seed_users):
    headers = auth_headers(client)
    _create(client, headers, title="Plain Project", featured="false")
    _create(client, headers, title="Star Project", featured="true")

    all_resp = client.get("/api/projects")
    assert all_resp.status_code == 200
    titles = [p["title"] for p in all_resp.json()]
    # newest first
    assert titles == ["Star Project", "Plain Project"]

    featured = client.get("/api/projects", params={"featured": "true"}).json()
    assert [p["title"] for p in featured] == ["Star Project"]
    assert {p["id"] for p in featured} <= {p["id"] for p in all_resp.json()}


def test_get_project_not_found(client):
    resp = client.get("/api/projects/999")
    assert resp.status_code == 404


def test_update_project_partial(client, seed_users):
    headers = auth_headers(client)
    created = _create(client, headers).json()

    resp = client.put(f"/api/admin/projects/{created['id']}", data={"title": "Renamed Project"}, headers=headers)
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    assert updated["title"] == "Renamed Project"
    for key in ("description", "imageUrl", "technologies", "projectUrl", "githubUrl", "featured", "createdAt"):
        assert updated[key] == created[key]


def test_update_project_replaces_image(client, seed_users, upload_dir):
    headers = auth_headers(client)
    created = _create(client, headers).json()

    resp = client.put(
        f"/api/admin/projects/{created['id']}",
        files=image_file("new.webp", content_type="image/webp"),
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["imageUrl"] != created["imageUrl"]
    assert resp.json()["imageUrl"].endswith(".webp")
    assert len(list((upload_dir / "images").iterdir())) == 1


def test_update_project_clears_optional_link(client, seed_users):
    headers = auth_headers(client)
    created = _create(client, headers).json()
    resp = client.put(f"/api/admin/projects/{created['id']}", data={"projectUrl": ""}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["projectUrl"] is None
    assert resp.json()["githubUrl"] == created["githubUrl"]


def test_update_project_invalid_merged_result(client, db, seed_users):
    headers = auth_headers(client)
    created = _create(client, headers).json()
    resp = client.put(f"/api/admin/projects/{created['id']}", data={"description": "short"}, headers=headers)
    assert resp.status_code == 400
    assert db.get(Project, created["id"]).description == created["description"]


def test_update_project_not_found(client, seed_users):
    headers = auth_headers(client)
    resp = client.put("/api/admin/projects/999", data={"title": "Ghost project"}, headers=headers)
    assert resp.status_code == 404


def test_delete_project_twice(client, seed_users):
    headers = auth_headers(client)
    created = _create(client, headers).json()

    first = client.delete(f"/api/admin/projects/{created['id']}", headers=headers)
    assert first.status_code == 200
    second = client.delete(f"/api/admin/projects/{created['id']}", headers=headers)
    assert second.status_code == 404
    assert client.get(f"/api/projects/{created['id']}").status_code == 404


def test_dangling_author_is_tolerated(client, db, seed_users):
    headers = auth_headers(client)
    project = Project(
        title="Orphaned",
        description="Author account no longer exists",
        image_url="https://example.com/cover.png",
        technologies=["Go"],
        author_id=4242,
    )
    db.add(project)
    db.commit()

    resp = client.get(f"/api/projects/{project.id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["authorId"] == 4242
    assert resp.json()["authorName"] is None


def test_bare_featured_filter_lists_everything(client, seed_users):
    headers = auth_headers(client)
    _create(client, headers, title="Plain Project", featured="false")
    _create(client, headers, title="Star Project", featured="true")

    for url in ("/api/projects?featured", "/api/projects?featured=nope", "/api/projects?featured=false"):
        resp = client.get(url)
        assert resp.status_code == 200
        assert len(resp.json()) == 2
