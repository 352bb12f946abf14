from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormInput(BaseModel):
    """Raw values submitted from an auth form. Missing values become empty strings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _missing_as_empty(cls, value):
        return "" if value is None else value


class LoginInput(FormInput):
    email: str = ""
    password: str = ""


class RegisterInput(FormInput):
    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = Field(default="", alias="confirmPassword")


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token: str
    token_type: str = "bearer"
    email: str
    role: str = "user"
    name: Optional[str] = None


class AuthError(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: Optional[str] = None
    status_code: Optional[int] = None


class PriorLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    pathname: Optional[str] = None


class RedirectTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    replace: bool = True
