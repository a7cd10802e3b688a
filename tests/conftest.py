import pytest
from fastapi.testclient import TestClient

from blog_list_api.app.core.config import Settings
from blog_list_api.app.main import create_app

from helper import INITIAL_BLOGS, INITIAL_USERS, auth_header, login


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=str(tmp_path / "blog_list_test.db"),
        secret_key="test-secret",
        access_token_expire_minutes=5,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def users(client):
    """Register the initial users and return ``{username: {"id", "token"}}``."""
    created = {}
    for user in INITIAL_USERS:
        response = client.post("/api/v1/users/", json=user)
        assert response.status_code == 201
        created[user["username"]] = {
            "id": response.json()["id"],
            "token": login(client, user["username"], user["password"]),
        }
    return created


@pytest.fixture
def blogs(client, users):
    """Create one initial blog per user: root owns the first, dummy the second."""
    created = []
    for owner, blog in zip(("root", "dummy"), INITIAL_BLOGS):
        response = client.post(
            "/api/v1/blogs/", json=blog, headers=auth_header(users[owner]["token"])
        )
        assert response.status_code == 201
        created.append(response.json())
    return created
