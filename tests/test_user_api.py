"""
User and auth endpoints through the ASGI app.

Services run for real on top of mocked repositories, so the request
validation and error mapping in between is exercised end to end.
"""

from unittest.mock import AsyncMock, patch

import pytest

from snipshare.api.dependencies.auth import get_optional_user
from snipshare.api.dependencies.services import get_auth_service, get_user_service
from snipshare.shared.services.auth_service import AuthService
from snipshare.shared.services.user_service import UserService
from snipshare.shared.utils.security import SecurityUtils


@pytest.fixture
def user_service(mock_db_session):
    service = UserService(mock_db_session)
    service.user_repo = AsyncMock()
    service.snippet_repo = AsyncMock()
    service.snippet_repo.list_page.return_value = []
    service.snippet_repo.count_matching.return_value = 0
    service.snippet_repo.author_totals.return_value = {
        "total_snippets": 2,
        "public_snippets": 1,
        "total_views": 9,
        "total_likes": 3,
        "total_forks": 0,
    }
    service.snippet_repo.author_counts_by.return_value = []
    return service


@pytest.fixture
def auth_service(mock_db_session):
    service = AuthService(mock_db_session)
    service.repo = AsyncMock()
    service.repo.email_exists.return_value = False
    service.repo.username_exists.return_value = False
    return service


@pytest.fixture
def wired_app(app, user_service, auth_service):
    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_optional_user] = lambda: None
    return app


def act_as(app, user):
    app.dependency_overrides[get_optional_user] = lambda: user


class TestUserEndpoints:

    @pytest.mark.asyncio
    async def test_profile(self, wired_app, api_client, user_service, author, public_snippet):
        user_service.user_repo.get_by_username.return_value = author
        user_service.snippet_repo.list_page.return_value = [public_snippet]
        user_service.snippet_repo.count_matching.return_value = 1

        response = await api_client.get("/users/profile/ada")

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["username"] == "ada"
        assert "email" not in body["user"]
        assert "passwordHash" not in body["user"]
        assert body["stats"] == {
            "totalSnippets": 2,
            "publicSnippets": 1,
            "totalViews": 9,
            "totalLikes": 3,
        }
        assert body["pagination"]["totalSnippets"] == 1
        assert [item["id"] for item in body["snippets"]] == [str(public_snippet.id)]

    @pytest.mark.asyncio
    async def test_unknown_profile(self, wired_app, api_client, user_service):
        user_service.user_repo.get_by_username.return_value = None

        response = await api_client.get("/users/profile/nobody")

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    @pytest.mark.asyncio
    async def test_search_needs_two_characters(self, wired_app, api_client, user_service):
        response = await api_client.get("/users/search", params={"q": "a"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "q"
        user_service.user_repo.search_by_username.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_search(self, wired_app, api_client, user_service, author):
        user_service.user_repo.search_by_username.return_value = [author]

        response = await api_client.get("/users/search", params={"q": "AD"})

        assert response.status_code == 200
        assert [user["username"] for user in response.json()["users"]] == ["ada"]
        user_service.user_repo.search_by_username.assert_awaited_once_with("AD", limit=10)

    @pytest.mark.asyncio
    async def test_stats_of_someone_else(self, wired_app, api_client, author, other_user):
        act_as(wired_app, other_user)

        response = await api_client.get(f"/users/stats/{author.id}")

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_own_stats(self, wired_app, api_client, author):
        act_as(wired_app, author)

        response = await api_client.get(f"/users/stats/{author.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["overall"]["privateSnippets"] == 1
        assert body["languages"] == []
        assert body["collections"] == []

    @pytest.mark.asyncio
    async def test_stats_with_malformed_id(self, wired_app, api_client, author):
        act_as(wired_app, author)

        response = await api_client.get("/users/stats/not-a-uuid")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_liked_snippets_requires_auth(self, wired_app, api_client):
        response = await api_client.get("/users/liked-snippets")
        assert response.status_code == 401


class TestAuthEndpoints:

    @pytest.mark.asyncio
    async def test_register(self, wired_app, api_client, auth_service, author):
        auth_service.repo.create.return_value = author

        with patch.object(SecurityUtils, "hash_password", return_value="hashed"):
            response = await api_client.post(
                "/auth/register",
                json={"username": "ada", "email": "ada@example.com", "password": "secret1"},
            )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert body["token"]
        assert body["user"]["email"] == "ada@example.com"
        assert "passwordHash" not in body["user"]

    @pytest.mark.asyncio
    async def test_register_duplicate(self, wired_app, api_client, auth_service):
        auth_service.repo.email_exists.return_value = True

        response = await api_client.post(
            "/auth/register",
            json={"username": "ada", "email": "ada@example.com", "password": "secret1"},
        )

        assert response.status_code == 409
        auth_service.repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_validation(self, wired_app, api_client, auth_service):
        response = await api_client.post(
            "/auth/register",
            json={"username": "a!", "email": "not-an-email", "password": "123"},
        )

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"username", "email", "password"}
        auth_service.repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_login_with_bad_credentials(self, wired_app, api_client, auth_service):
        auth_service.repo.get_by_email.return_value = None

        response = await api_client.post(
            "/auth/login", json={"email": "ada@example.com", "password": "secret1"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "AUTHENTICATION_ERROR"

    @pytest.mark.asyncio
    async def test_me(self, wired_app, api_client, author):
        act_as(wired_app, author)

        response = await api_client.get("/auth/me")

        assert response.status_code == 200
        assert response.json()["user"]["id"] == str(author.id)

    @pytest.mark.asyncio
    async def test_me_without_token(self, wired_app, api_client):
        response = await api_client.get("/auth/me")
        assert response.status_code == 401
