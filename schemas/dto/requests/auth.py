"""
Request DTOs for the authentication endpoints.

RegistrationData  — ``registrationData`` object of POST /api/auth/register
RegisterRequest   — POST /api/auth/register
LoginData         — ``loginData`` object of POST /api/auth/login
LoginRequest      — POST /api/auth/login

Field names are snake_case in Python and camelCase on the wire; always dump
with ``by_alias=True``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.models.forms import LoginFields, RegistrationFields
from schemas.models.verification import VerificationProof


class RegistrationData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    email: str
    password: str
    verification_type: str = Field(alias="verificationType")
    math_answer: Optional[int] = Field(default=None, alias="mathAnswer")
    math_problem: Optional[str] = Field(default=None, alias="mathProblem")
    recaptcha_token: Optional[str] = Field(default=None, alias="recaptchaToken")


class RegisterRequest(BaseModel):
    """Request body for POST /api/auth/register."""

    model_config = ConfigDict(populate_by_name=True)

    rqid: int
    registration_data: RegistrationData = Field(alias="registrationData")

    @classmethod
    def build(
        cls,
        rqid: int,
        fields: RegistrationFields,
        proof: VerificationProof,
    ) -> "RegisterRequest":
        data = RegistrationData.model_validate(
            {
                "username": fields.username,
                "email": fields.email,
                "password": fields.password,
                **proof.to_wire(),
            }
        )
        return cls(rqid=rqid, registration_data=data)

    def to_wire(self) -> dict:
        # Fields of the inactive method are omitted, not sent as null
        return self.model_dump(by_alias=True, exclude_none=True)


class LoginData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username_or_email: str = Field(alias="usernameOrEmail")
    password: str


class LoginRequest(BaseModel):
    """Request body for POST /api/auth/login."""

    model_config = ConfigDict(populate_by_name=True)

    rqid: int
    login_data: LoginData = Field(alias="loginData")

    @classmethod
    def build(cls, rqid: int, fields: LoginFields) -> "LoginRequest":
        return cls(
            rqid=rqid,
            login_data=LoginData(
                username_or_email=fields.username_or_email,
                password=fields.password,
            ),
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
