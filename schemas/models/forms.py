"""Transient form input. Lives for a single submission attempt."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RegistrationFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    email: str
    password: str

    @property
    def is_complete(self) -> bool:
        return bool(self.username and self.email and self.password)


class LoginFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    username_or_email: str
    password: str
