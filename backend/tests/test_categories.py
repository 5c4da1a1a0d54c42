"""Test Categories 동작과 회귀 시나리오를 검증하는 자동화 테스트입니다."""

from app.models.blog import Blog
from app.models.category import Category
from tests.conftest import auth_headers


def test_create_category(client, seed_users):
    resp = client.post(
        "/api/admin/categories",
        json={"name": "Machine Learning", "slug": "machine-learning"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 201
    assert resp.json()["slug"] == "machine-learning"


def test_duplicate_slug_rejected(client, db, seed_users, seed_category):
    resp = client.post(
        "/api/admin/categories",
        json={"name": "Web Dev Again", "slug": "web-development"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 400
    assert {"field": "slug", "message": "Slug 'web-development' is already in use"} in resp.json()["errors"]
    assert db.query(Category).count() == 1


def test_duplicate_name_rejected(client, seed_users, seed_category):
    resp = client.post(
        "/api/admin/categories",
        json={"name": "Web Development", "slug": "web-dev"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "name"


def test_invalid_slug_format(client, seed_users):
    resp = client.post(
        "/api/admin/categories",
        json={"name": "Design", "slug": "Not A Slug"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "slug"


def test_list_categories_by_name(client, seed_users, seed_category):
    client.post(
        "/api/admin/categories",
        json={"name": "Android", "slug": "android"},
        headers=auth_headers(client),
    )
    names = [c["name"] for c in client.get("/api/categories").json()]
    assert names == ["Android", "Web Development"]


def test_get_category_by_id_and_slug(client, seed_category):
    by_id = client.get(f"/api/categories/{seed_category.id}")
    assert by_id.status_code == 200
    by_slug = client.get("/api/categories/slug/web-development")
    assert by_slug.status_code == 200
    assert by_slug.json() == by_id.json()
    assert client.get("/api/categories/slug/missing").status_code == 404
    assert client.get("/api/categories/999").status_code == 404


def test_update_category_keeps_own_slug(client, seed_users, seed_category):
    resp = client.put(
        f"/api/admin/categories/{seed_category.id}",
        json={"name": "Web", "slug": "web-development"},
        headers=auth_headers(client),
    )
    assert resp.status_code == 200
    assert resp.json()["name"] == "Web"


def test_delete_category_leaves_blog_uncategorized(client, db, seed_users, seed_category):
    blog = Blog(
        title="Categorized post",
        slug="categorized-post",
        content="Body text long enough",
        excerpt="Excerpt long enough",
        image_url="https://example.com/img.png",
        category_id=seed_category.id,
        author_id=seed_users["admin"].id,
        published=True,
    )
    db.add(blog)
    db.commit()
    assert client.get(f"/api/blogs/{blog.id}").json()["categoryName"] == "Web Development"

    resp = client.delete(f"/api/admin/categories/{seed_category.id}", headers=auth_headers(client))
    assert resp.status_code == 200

    data = client.get(f"/api/blogs/{blog.id}").json()
    assert data["categoryId"] == seed_category.id
    assert data["categoryName"] is None
