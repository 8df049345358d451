"""
Tests for user registration and the hosted auth provider client.
"""

import json

import httpx
import pytest

from app.schemas.user import AuthUser
from app.services.auth_provider import (
    AuthProviderClient,
    AuthProviderError,
    AuthProviderRejected,
    get_auth_provider,
)
from main import app


class FakeAuthProvider:
    def __init__(self, error: Exception = None):
        self.error = error
        self.calls = []

    def sign_up(self, email, password, metadata=None):
        self.calls.append({"email": email, "password": password, "metadata": metadata})
        if self.error:
            raise self.error
        return AuthUser(id="user-123", email=email, user_metadata=metadata or {})


@pytest.fixture
def provider():
    fake = FakeAuthProvider()
    app.dependency_overrides[get_auth_provider] = lambda: fake
    return fake


class TestRegister:

    def test_register(self, client, make_tenant, provider):
        tenant_id = make_tenant("acme").id

        response = client.post(
            "/api/auth/register",
            json={"email": "alice@acme.com", "password": "s3cret!", "full_name": "Alice", "tenant_id": tenant_id},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["id"] == "user-123"
        assert body["user"]["email"] == "alice@acme.com"
        assert body["message"] == "User created successfully. Please check your email to verify your account."
        assert provider.calls == [{
            "email": "alice@acme.com",
            "password": "s3cret!",
            "metadata": {"full_name": "Alice", "tenant_id": tenant_id},
        }]

    @pytest.mark.parametrize("payload", [
        {"password": "x", "tenant_id": 1},
        {"email": "alice@acme.com", "tenant_id": 1},
        {"email": "alice@acme.com", "password": "x"},
        {"email": "not-an-email", "password": "x", "tenant_id": 1},
    ])
    def test_missing_or_invalid_fields(self, client, provider, payload):
        response = client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        assert provider.calls == []

    def test_unknown_tenant(self, client, provider):
        response = client.post(
            "/api/auth/register",
            json={"email": "alice@acme.com", "password": "x", "tenant_id": 999},
        )

        assert response.status_code == 404
        assert provider.calls == []

    def test_provider_rejects(self, client, make_tenant):
        tenant_id = make_tenant("acme").id
        app.dependency_overrides[get_auth_provider] = lambda: FakeAuthProvider(
            AuthProviderRejected("User already registered")
        )

        response = client.post(
            "/api/auth/register",
            json={"email": "alice@acme.com", "password": "x", "tenant_id": tenant_id},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "User already registered"}

    def test_provider_failure(self, client, make_tenant):
        tenant_id = make_tenant("acme").id
        app.dependency_overrides[get_auth_provider] = lambda: FakeAuthProvider(
            AuthProviderError("Auth provider unreachable")
        )

        response = client.post(
            "/api/auth/register",
            json={"email": "alice@acme.com", "password": "x", "tenant_id": tenant_id},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create user"}


def provider_client(handler) -> AuthProviderClient:
    return AuthProviderClient(
        base_url="https://auth.test/auth/v1/",
        api_key="anon-key",
        transport=httpx.MockTransport(handler),
    )


class TestAuthProviderClient:

    def test_sign_up_request(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["apikey"] = request.headers.get("apikey")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "u-1", "email": "a@b.test", "user_metadata": {"tenant_id": 3}})

        user = provider_client(handler).sign_up("a@b.test", "pw", {"tenant_id": 3})

        assert user.id == "u-1"
        assert user.user_metadata == {"tenant_id": 3}
        assert seen["url"] == "https://auth.test/auth/v1/signup"
        assert seen["apikey"] == "anon-key"
        assert seen["body"] == {"email": "a@b.test", "password": "pw", "data": {"tenant_id": 3}}

    def test_nested_user(self):
        def handler(request):
            return httpx.Response(200, json={"user": {"id": "u-2", "email": "a@b.test"}, "session": None})

        assert provider_client(handler).sign_up("a@b.test", "pw").id == "u-2"

    def test_rejection_message(self):
        def handler(request):
            return httpx.Response(422, json={"code": 422, "msg": "Password should be at least 6 characters"})

        with pytest.raises(AuthProviderRejected, match="at least 6 characters"):
            provider_client(handler).sign_up("a@b.test", "pw")

    def test_server_error(self):
        def handler(request):
            return httpx.Response(503, text="unavailable")

        with pytest.raises(AuthProviderError) as excinfo:
            provider_client(handler).sign_up("a@b.test", "pw")
        assert not isinstance(excinfo.value, AuthProviderRejected)

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(AuthProviderError, match="unreachable"):
            provider_client(handler).sign_up("a@b.test", "pw")

    def test_no_user_returned(self):
        def handler(request):
            return httpx.Response(200, json={"user": None})

        with pytest.raises(AuthProviderError, match="no user"):
            provider_client(handler).sign_up("a@b.test", "pw")

    def test_not_configured(self):
        client = AuthProviderClient()
        client.base_url = ""

        with pytest.raises(AuthProviderError, match="not configured"):
            client.sign_up("a@b.test", "pw")

    def test_dependency_reuses_one_client(self, caplog):
        with caplog.at_level("WARNING", logger="storefront"):
            first = get_auth_provider()
            second = get_auth_provider()

        assert first is second
        assert "AUTH_PROVIDER_URL not set" not in caplog.text
