"""Tests for the post store's user endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from tests.conftest import make_post_payload


def test_create_user(store_client: TestClient) -> None:
    resp = store_client.post("/users", json={"email": "writer@blog.org", "role": "admin"})
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["email"] == "writer@blog.org"
    assert data["role"] == "admin"


def test_create_user_rejects_bad_email(store_client: TestClient) -> None:
    resp = store_client.post("/users", json={"email": "not an email"})
    assert resp.status_code == 422


def test_create_user_rejects_duplicate_email(store_client: TestClient, author) -> None:
    resp = store_client.post("/users", json={"email": author.email})
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Email already registered."}


def test_read_user(store_client: TestClient, author) -> None:
    resp = store_client.get(f"/users/{author.id}")
    assert resp.status_code == 200
    assert resp.json()["data"]["email"] == "bin@blog.org"


def test_read_user_not_found(store_client: TestClient) -> None:
    assert store_client.get("/users/999").status_code == 404


def test_read_user_posts(store_client: TestClient, author) -> None:
    other = store_client.post("/users", json={"email": "other@blog.org"}).json()["data"]
    mine = store_client.post("/posts", json=make_post_payload(user_id=author.id)).json()["data"]
    store_client.post("/posts", json=make_post_payload(user_id=other["id"]))

    resp = store_client.get(f"/users/{author.id}/posts")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()["data"]] == [mine["id"]]


def test_read_user_posts_unknown_user(store_client: TestClient) -> None:
    assert store_client.get("/users/999/posts").status_code == 404


def test_create_user_duplicate_email_caught_by_constraint(store_client: TestClient, author) -> None:
    # Another request inserted the same email after the lookup ran.
    with patch("post_store.api.routes.users.user_crud.get_user_by_email", return_value=None):
        resp = store_client.post("/users", json={"email": author.email})
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Email already registered."}
    assert store_client.get(f"/users/{author.id}").status_code == 200
