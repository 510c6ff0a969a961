"""
Response DTOs for the authentication endpoints.

AuthUser       — user object inside a successful login response
LoginPayload   — ``response`` envelope of POST /api/auth/login (200)
LoginResponse  — POST /api/auth/login (200)
ErrorResponse  — body of any non-2xx response (all keys optional)
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_DISPLAY_FORMAT = "%d.%m.%Y, %H:%M:%S"


class AuthUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | int
    username: str
    email: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    def registered_display(self) -> str:
        """Registration time in local wall-clock form, e.g. ``02.01.2024, 03:04:05``."""
        if self.created_at is None:
            return "unknown"
        moment = self.created_at
        if moment.tzinfo is not None:
            moment = moment.astimezone()
        return moment.strftime(_DISPLAY_FORMAT)

    def summary(self) -> str:
        """Multi-line text shown to the user after a successful login."""
        return (
            "Login successful!\n\n"
            "User details:\n"
            f"ID: {self.id}\n"
            f"Username: {self.username}\n"
            f"Email: {self.email}\n"
            f"Registered: {self.registered_display()}"
        )


class LoginPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user: AuthUser


class LoginResponse(BaseModel):
    """Response body for POST /api/auth/login (200)."""

    model_config = ConfigDict(populate_by_name=True)

    response: LoginPayload


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message: Optional[str] = None
    error: Optional[str] = None

    @property
    def best_message(self) -> Optional[str]:
        return self.message or self.error or None
