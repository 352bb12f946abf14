"""
Local validation of login and registration form input.

Validation runs before any network call. The first failing rule wins:

1. a required field is empty (name and email are trimmed, passwords are not)
2. registration only: password and confirmation differ
3. registration only: password shorter than ``MIN_PASSWORD_LENGTH``

Validated credentials can only be produced by the functions in this module.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from storefront.schemas.auth import LoginInput, RegisterInput

MIN_PASSWORD_LENGTH = 6


class SubmissionKind(str, Enum):
    LOGIN = "login"
    REGISTER = "register"


class ValidationFailure(Enum):
    MISSING_FIELDS = "Please fill in all fields"
    PASSWORD_MISMATCH = "Passwords do not match"
    PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class _Validated:
    """Credentials are issued by this module only; calling the constructor (or dataclasses.replace) raises."""

    def __post_init__(self):
        raise TypeError(f"{type(self).__name__} can only be created by the field validator")

    @classmethod
    def _issue(cls, **values):
        credentials = object.__new__(cls)
        for name, value in values.items():
            object.__setattr__(credentials, name, value)
        return credentials


@dataclass(frozen=True)
class LoginCredentials(_Validated):
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class RegistrationCredentials(_Validated):
    name: str
    email: str
    password: str = field(repr=False)


ValidatedCredentials = Union[LoginCredentials, RegistrationCredentials]


def validate_login(raw: LoginInput) -> Union[LoginCredentials, ValidationFailure]:
    """Validate login form input."""
    email = raw.email.strip()
    if not email or not raw.password:
        return ValidationFailure.MISSING_FIELDS
    return LoginCredentials._issue(email=email, password=raw.password)


def validate_register(raw: RegisterInput) -> Union[RegistrationCredentials, ValidationFailure]:
    """Validate registration form input."""
    name = raw.name.strip()
    email = raw.email.strip()
    if not name or not email or not raw.password or not raw.confirm_password:
        return ValidationFailure.MISSING_FIELDS
    if raw.password != raw.confirm_password:
        return ValidationFailure.PASSWORD_MISMATCH
    if len(raw.password) < MIN_PASSWORD_LENGTH:
        return ValidationFailure.PASSWORD_TOO_SHORT
    return RegistrationCredentials._issue(name=name, email=email, password=raw.password)


def validate(
    kind: SubmissionKind, raw: Union[LoginInput, RegisterInput]
) -> Union[ValidatedCredentials, ValidationFailure]:
    """Validate raw input for the given form kind."""
    if kind is SubmissionKind.LOGIN:
        return validate_login(raw)
    return validate_register(raw)
