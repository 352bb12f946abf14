from .auth import (
    AuthError,
    LoginInput,
    PriorLocation,
    RedirectTarget,
    RegisterInput,
    Session,
)

__all__ = [
    "AuthError",
    "LoginInput",
    "PriorLocation",
    "RedirectTarget",
    "RegisterInput",
    "Session",
]
