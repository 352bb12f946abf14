"""
Composition root for the auth page: form submission -> validation -> provider -> redirect.
"""
from typing import Any, Mapping, Optional, Protocol

from storefront.core.logging import get_logger
from storefront.core.orchestrator import (
    AuthOrchestrator,
    AuthProvider,
    Failed,
    Submitting,
    SubmitOutcome,
    Succeeded,
)
from storefront.core.redirect import resolve_redirect
from storefront.core.validation import SubmissionKind
from storefront.schemas.auth import LoginInput, PriorLocation, RegisterInput

logger = get_logger(__name__)

SUCCESS_NOTIFICATIONS = {
    SubmissionKind.LOGIN: ("Welcome back!", "You have been successfully logged in."),
    SubmissionKind.REGISTER: ("Account created!", "Your account has been created successfully."),
}


class Navigator(Protocol):
    def navigate(self, path: str, replace: bool = True) -> None:
        ...


class NotificationSink(Protocol):
    def show(self, title: str, description: str) -> None:
        ...


class FlowController:
    """Drives one auth page: owns the orchestrator and reacts to its outcomes."""

    def __init__(
        self,
        provider: AuthProvider,
        navigator: Navigator,
        notifications: NotificationSink,
        prior_location: Optional[PriorLocation] = None,
    ):
        self._orchestrator = AuthOrchestrator(provider)
        self._navigator = navigator
        self._notifications = notifications
        self._prior_location = prior_location

    @property
    def is_loading(self) -> bool:
        """True while a submission is in flight; the page disables its buttons."""
        return isinstance(self._orchestrator.state, Submitting)

    @property
    def error(self) -> Optional[str]:
        state = self._orchestrator.state
        if isinstance(state, Failed):
            return state.message
        return None

    async def handle_login(self, form: Mapping[str, Any]) -> SubmitOutcome:
        return await self.handle_submit(SubmissionKind.LOGIN, LoginInput.model_validate(dict(form)))

    async def handle_register(self, form: Mapping[str, Any]) -> SubmitOutcome:
        return await self.handle_submit(SubmissionKind.REGISTER, RegisterInput.model_validate(dict(form)))

    async def handle_submit(self, kind: SubmissionKind, raw) -> SubmitOutcome:
        outcome = await self._orchestrator.submit(kind, raw)

        if isinstance(outcome, Succeeded):
            title, description = SUCCESS_NOTIFICATIONS[kind]
            self._notifications.show(title, description)
            target = resolve_redirect(self._prior_location)
            logger.info(f"Redirecting after {kind.value} to {target.path}")
            self._orchestrator.reset()
            self._navigator.navigate(target.path, replace=target.replace)
        elif isinstance(outcome, Failed):
            logger.debug(f"{kind.value.capitalize()} failed: {outcome.message}")

        return outcome

    def cancel(self) -> bool:
        """Abort an in-flight submission, e.g. when the page is torn down."""
        return self._orchestrator.cancel()

    def dismiss_error(self):
        self._orchestrator.reset()
