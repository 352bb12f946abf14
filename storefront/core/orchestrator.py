"""
Submission state machine for the login/registration flow.

One orchestrator owns one submission state:

    Idle --submit--> Submitting --> Succeeded(session) | Failed(message)

A submit made while another is Submitting is rejected without validating or
calling the provider. Succeeded and Failed accept the next submit as a new,
independent attempt.
"""
import asyncio
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union

from storefront.core.logging import get_logger
from storefront.core.validation import (
    LoginCredentials,
    SubmissionKind,
    ValidatedCredentials,
    ValidationFailure,
    validate,
)
from storefront.schemas.auth import AuthError, LoginInput, RegisterInput

logger = get_logger(__name__)

GENERIC_FAILURE_MESSAGES = {
    SubmissionKind.LOGIN: "Failed to login",
    SubmissionKind.REGISTER: "Failed to create account",
}


class AuthProvider(Protocol):
    """External collaborator that performs the real authentication."""

    async def login(self, email: str, password: str) -> Any:
        ...

    async def register(self, email: str, password: str, name: str) -> Any:
        ...


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Submitting:
    kind: SubmissionKind


@dataclass(frozen=True)
class Succeeded:
    session: Any


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Rejected:
    kind: SubmissionKind


@dataclass(frozen=True)
class Cancelled:
    kind: SubmissionKind


SubmissionState = Union[Idle, Submitting, Succeeded, Failed]
SubmitOutcome = Union[Succeeded, Failed, Rejected, Cancelled]


class AuthOrchestrator:
    """Runs one submission at a time against an auth provider."""

    def __init__(self, provider: AuthProvider):
        self._provider = provider
        self._state: SubmissionState = Idle()
        self._inflight: Optional[asyncio.Task] = None
        self._cancel_requested = False

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return isinstance(self._state, Submitting)

    async def submit(
        self, kind: SubmissionKind, raw: Union[LoginInput, RegisterInput]
    ) -> SubmitOutcome:
        """
        Validate ``raw`` and, if valid, call the provider.

        Returns the terminal outcome of this attempt. Never raises for
        validation or provider failures.
        """
        if self.is_submitting:
            logger.warning(f"Rejected {kind.value} submission - another submission is in flight")
            return Rejected(kind)

        self._state = Submitting(kind)
        self._cancel_requested = False
        outcome: Optional[SubmitOutcome] = None
        try:
            outcome = await self._attempt(kind, raw)
            return outcome
        finally:
            self._inflight = None
            if isinstance(outcome, (Succeeded, Failed)):
                self._state = outcome
            else:
                self._state = Idle()

    def cancel(self) -> bool:
        """Abort the in-flight provider call, if any. Returns True if one was aborted."""
        if self._inflight is None or self._inflight.done():
            return False
        logger.info(f"Cancelling in-flight {self._state.kind.value} request")
        self._cancel_requested = True
        self._inflight.cancel()
        return True

    def reset(self):
        """Return a terminal state to Idle once the caller has consumed it."""
        if not self.is_submitting:
            self._state = Idle()

    async def _attempt(
        self, kind: SubmissionKind, raw: Union[LoginInput, RegisterInput]
    ) -> SubmitOutcome:
        result = validate(kind, raw)
        if isinstance(result, ValidationFailure):
            logger.info(f"{kind.value.capitalize()} validation failed: {result.name}")
            return Failed(result.message)

        generic = GENERIC_FAILURE_MESSAGES[kind]
        logger.info(f"Attempting {kind.value} for email: {result.email}")
        self._inflight = asyncio.ensure_future(self._call_provider(result))
        try:
            response = await self._inflight
        except asyncio.CancelledError:
            if not self._cancel_requested:
                raise
            logger.info(f"{kind.value.capitalize()} cancelled for email: {result.email}")
            return Cancelled(kind)
        except Exception as e:
            if self._cancel_requested:
                logger.info(f"Ignoring {kind.value} error after cancel for email: {result.email}: {e}")
                return Cancelled(kind)
            logger.error(f"{kind.value.capitalize()} error: {e}", exc_info=True)
            return Failed(generic)

        # provider swallowed the cancellation; its response is stale
        if self._cancel_requested:
            logger.info(f"Discarding stale {kind.value} response for email: {result.email}")
            return Cancelled(kind)

        if isinstance(response, AuthError):
            logger.error(f"{kind.value.capitalize()} failed for email: {result.email} | {response.message}")
            return Failed(response.message or generic)

        logger.info(f"{kind.value.capitalize()} successful for email: {result.email}")
        return Succeeded(response)

    async def _call_provider(self, credentials: ValidatedCredentials):
        if isinstance(credentials, LoginCredentials):
            return await self._provider.login(credentials.email, credentials.password)
        return await self._provider.register(credentials.email, credentials.password, credentials.name)
