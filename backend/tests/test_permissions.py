"""Test Permissions 동작과 회귀 시나리오를 검증하는 자동화 테스트입니다."""

import pytest

from app.models.user import User
from app.utils.permissions import is_admin
from tests.conftest import auth_headers, user_headers

ADMIN_ENDPOINTS = [
    ("post", "/api/admin/skills"),
    ("put", "/api/admin/skills/1"),
    ("delete", "/api/admin/skills/1"),
    ("post", "/api/admin/categories"),
    ("delete", "/api/admin/categories/1"),
    ("post", "/api/admin/projects"),
    ("put", "/api/admin/projects/1"),
    ("delete", "/api/admin/projects/1"),
    ("post", "/api/admin/blogs"),
    ("put", "/api/admin/blogs/1"),
    ("delete", "/api/admin/blogs/1"),
    ("post", "/api/admin/videos"),
    ("delete", "/api/admin/videos/1"),
    ("get", "/api/admin/contacts"),
    ("put", "/api/admin/contacts/1/read"),
    ("delete", "/api/admin/contacts/1"),
    ("get", "/api/admin/dashboard"),
]


def test_is_admin():
    assert is_admin(User(role="admin"))
    assert not is_admin(User(role="user"))
    assert not is_admin(None)


@pytest.mark.parametrize("method,path", ADMIN_ENDPOINTS)
def test_admin_endpoints_forbidden_for_anonymous(client, method, path):
    resp = getattr(client, method)(path)
    assert resp.status_code == 403
    assert resp.json() == {"detail": "Forbidden"}


@pytest.mark.parametrize("method,path", ADMIN_ENDPOINTS)
def test_admin_endpoints_forbidden_for_regular_user(client, seed_users, method, path):
    headers = user_headers(client)
    resp = getattr(client, method)(path, headers=headers)
    assert resp.status_code == 403
    assert resp.json() == {"detail": "Forbidden"}


def test_forbidden_write_does_not_persist(client, db, seed_users):
    headers = user_headers(client)
    resp = client.post(
        "/api/admin/skills",
        json={"name": "Go", "percentage": 80, "category": "backend", "order": 1},
        headers=headers,
    )
    assert resp.status_code == 403
    assert client.get("/api/skills").json() == []


def test_invalid_token_on_admin_endpoint_is_forbidden(client, seed_users):
    resp = client.get("/api/admin/contacts", headers={"Authorization": "Bearer broken"})
    assert resp.status_code == 403


def test_admin_passes_gate(client, seed_users):
    resp = client.get("/api/admin/contacts", headers=auth_headers(client))
    assert resp.status_code == 200
