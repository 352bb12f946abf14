"""
Authentication API endpoints.
"""
from typing import Callable, Optional, Union

import httpx

from storefront.api.client import extract_error_message, get_async_client
from storefront.core.logging import get_logger
from storefront.schemas.auth import AuthError, Session

logger = get_logger(__name__)


class HttpAuthProvider:
    """Auth provider backed by the storefront API (/token, /signup, /users/me)."""

    def __init__(
        self,
        on_session: Optional[Callable[[Session], None]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._on_session = on_session
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return get_async_client(timeout=self._timeout, transport=self._transport)

    async def login(self, email: str, password: str) -> Union[Session, AuthError]:
        """
        Login user and return the new session.

        Args:
            email: User email
            password: User password
        """
        return await self._sign_in(email, password)

    async def _sign_in(self, email: str, password: str, name: Optional[str] = None) -> Union[Session, AuthError]:
        logger.info(f"Login request for email: {email}")
        async with self._client() as client:
            try:
                response = await client.post(
                    "/token",
                    data={"username": email, "password": password}
                )
                response.raise_for_status()
                token = response.json()["access_token"]
            except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
                return self._error(e, "Login")

            # /token does not return role; fetch it from /users/me using the token.
            role = "user"
            try:
                me = await client.get(
                    "/users/me",
                    headers={"Authorization": f"Bearer {token}"},
                )
                me.raise_for_status()
                profile = me.json() or {}
                role = profile.get("role") or "user"
                name = profile.get("name") or name
            except (httpx.HTTPError, ValueError, AttributeError) as e:
                logger.warning(f"Failed to fetch /users/me after login: {e}")

        session = Session(access_token=token, email=email, role=role, name=name)
        logger.info(f"Login successful for email: {email}, role: {role}")
        if self._on_session is not None:
            self._on_session(session)
        return session

    async def register(self, email: str, password: str, name: str) -> Union[Session, AuthError]:
        """
        Register a new user, then sign them in.

        Args:
            email: User email
            password: User password
            name: Display name
        """
        logger.info(f"Registration request for email: {email}")
        async with self._client() as client:
            try:
                response = await client.post(
                    "/signup",
                    json={"email": email, "password": password, "name": name}
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                return self._error(e, "Registration")

        logger.info(f"Registration successful for email: {email}")
        return await self._sign_in(email, password, name=name)

    def _error(self, e: Exception, operation: str) -> AuthError:
        status_code = None
        if isinstance(e, httpx.HTTPStatusError):
            status_code = e.response.status_code
        return AuthError(message=extract_error_message(e, operation, logger), status_code=status_code)
