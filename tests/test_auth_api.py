"""Tests for the HTTP auth provider."""

import json
from unittest.mock import MagicMock
from urllib.parse import parse_qs

import httpx
import pytest

from storefront.api.auth import HttpAuthProvider
from storefront.core.flow import FlowController
from storefront.schemas.auth import AuthError, PriorLocation, Session


class FakeAuthBackend:
    """Just enough of the auth API to drive the provider."""

    def __init__(self, profile=None, me_status=200):
        self.users = {}
        self.profile = profile if profile is not None else {"role": "user"}
        self.me_status = me_status
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/token":
            form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
            if self.users.get(form.get("username")) != form.get("password"):
                return httpx.Response(401, json={"detail": "Incorrect username or password"})
            return httpx.Response(200, json={"access_token": "token-123", "token_type": "bearer"})
        if request.url.path == "/signup":
            body = json.loads(request.content)
            if body["email"] in self.users:
                return httpx.Response(400, json={"detail": "Email already registered"})
            self.users[body["email"]] = body["password"]
            return httpx.Response(200, json={"id": 1, "email": body["email"], "is_active": True})
        if request.url.path == "/users/me":
            assert request.headers["Authorization"] == "Bearer token-123"
            return httpx.Response(self.me_status, json=self.profile)
        return httpx.Response(404, json={"detail": "Not Found"})


@pytest.fixture
def backend():
    fake = FakeAuthBackend(profile={"role": "admin", "name": "Ada"})
    fake.users["ada@example.com"] = "secret-pw"
    return fake


@pytest.fixture
def on_session():
    return MagicMock()


@pytest.fixture
def auth_provider(backend, on_session):
    return HttpAuthProvider(on_session=on_session, transport=httpx.MockTransport(backend))


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_returns_session(self, auth_provider, backend, on_session):
        session = await auth_provider.login("ada@example.com", "secret-pw")

        assert session == Session(access_token="token-123", email="ada@example.com", role="admin", name="Ada")
        on_session.assert_called_once_with(session)
        assert [r.url.path for r in backend.requests] == ["/token", "/users/me"]

    @pytest.mark.asyncio
    async def test_wrong_password(self, auth_provider, on_session):
        result = await auth_provider.login("ada@example.com", "nope")

        assert result == AuthError(message="Incorrect username or password", status_code=401)
        on_session.assert_not_called()

    @pytest.mark.asyncio
    async def test_profile_lookup_failure_defaults_role(self, on_session):
        backend = FakeAuthBackend(me_status=500)
        backend.users["ada@example.com"] = "secret-pw"
        auth_provider = HttpAuthProvider(on_session=on_session, transport=httpx.MockTransport(backend))

        session = await auth_provider.login("ada@example.com", "secret-pw")

        assert session.role == "user"
        assert session.name is None

    @pytest.mark.asyncio
    async def test_network_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        auth_provider = HttpAuthProvider(transport=httpx.MockTransport(refuse))

        result = await auth_provider.login("ada@example.com", "secret-pw")

        assert isinstance(result, AuthError)
        assert result.message.startswith("Network error during Login")
        assert result.status_code is None

    @pytest.mark.asyncio
    async def test_malformed_token_response_has_no_message(self):
        auth_provider = HttpAuthProvider(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={}))
        )

        result = await auth_provider.login("ada@example.com", "secret-pw")

        assert result == AuthError(message=None)

    @pytest.mark.asyncio
    async def test_validation_error_detail(self):
        detail = [{"loc": ["body", "email"], "msg": "value is not a valid email address"}]
        auth_provider = HttpAuthProvider(
            transport=httpx.MockTransport(lambda request: httpx.Response(422, json={"detail": detail}))
        )

        result = await auth_provider.login("not-an-email", "secret-pw")

        assert result.message == "Please enter a valid email address."
        assert result.status_code == 422


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_signs_in_new_account(self, on_session):
        backend = FakeAuthBackend()
        auth_provider = HttpAuthProvider(on_session=on_session, transport=httpx.MockTransport(backend))

        session = await auth_provider.register("grace@example.com", "secret-pw", "Grace Hopper")

        assert isinstance(session, Session)
        assert session.email == "grace@example.com"
        assert session.name == "Grace Hopper"
        signup = backend.requests[0]
        assert json.loads(signup.content) == {
            "email": "grace@example.com", "password": "secret-pw", "name": "Grace Hopper"
        }
        on_session.assert_called_once_with(session)

    @pytest.mark.asyncio
    async def test_duplicate_account(self, auth_provider, on_session):
        result = await auth_provider.register("ada@example.com", "secret-pw", "Ada")

        assert result == AuthError(message="Email already registered", status_code=400)
        on_session.assert_not_called()


class TestFlowAgainstHttpProvider:

    @pytest.mark.asyncio
    async def test_login_redirects_back_to_checkout(self, auth_provider):
        navigator, notifications = MagicMock(), MagicMock()
        controller = FlowController(
            provider=auth_provider,
            navigator=navigator,
            notifications=notifications,
            prior_location=PriorLocation(pathname="/checkout"),
        )

        await controller.handle_login({"email": "ada@example.com", "password": "secret-pw"})

        navigator.navigate.assert_called_once_with("/checkout", replace=True)

    @pytest.mark.asyncio
    async def test_bad_credentials_surface_server_message(self, auth_provider):
        navigator, notifications = MagicMock(), MagicMock()
        controller = FlowController(provider=auth_provider, navigator=navigator, notifications=notifications)

        await controller.handle_login({"email": "ada@example.com", "password": "wrong-pw"})

        assert controller.error == "Incorrect username or password"
        assert controller.is_loading is False
        navigator.navigate.assert_not_called()
