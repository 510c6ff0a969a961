"""
Outbound auth requests: wire format and response interpretation.

Every failure is mapped onto a SubmissionError subclass:
- transport failure           → NetworkError
- non-2xx status              → ServerError (message from the body when present)
- 2xx with an unexpected body → MalformedResponseError
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from config import ClientSettings
from errors import MalformedResponseError, NetworkError, ServerError
from infrastructure.http_client import HttpClient
from schemas.dto.requests.auth import LoginRequest, RegisterRequest
from schemas.dto.responses.auth import AuthUser, ErrorResponse, LoginResponse
from schemas.models.forms import LoginFields, RegistrationFields
from schemas.models.verification import VerificationProof
from shared.logging import get_logger

log = get_logger(__name__)

_NETWORK_MESSAGE = "Could not reach the server. Check your internet connection."


class SubmissionFlow:
    def __init__(self, settings: ClientSettings, http_client: HttpClient) -> None:
        self._settings = settings
        self._http = http_client

    async def register(
        self,
        fields: RegistrationFields,
        proof: VerificationProof,
    ) -> None:
        body = RegisterRequest.build(self._settings.rqid, fields, proof).to_wire()
        response = await self._post(self._settings.register_url, body)
        if not response.is_success:
            raise _server_error(response)
        log.info("registration_succeeded", verification_type=proof.kind)

    async def login(self, fields: LoginFields) -> AuthUser:
        body = LoginRequest.build(self._settings.rqid, fields).to_wire()
        response = await self._post(self._settings.login_url, body)
        if not response.is_success:
            raise _server_error(response, fallback="Login failed")
        try:
            user = LoginResponse.model_validate(response.json()).response.user
        except (ValueError, PydanticValidationError) as e:
            log.error("login_response_malformed", error=str(e), error_type=type(e).__name__)
            raise MalformedResponseError("The server returned an unexpected response") from e
        log.info("login_succeeded", user_id=str(user.id))
        return user

    async def _post(self, url: str, body: dict[str, Any]) -> httpx.Response:
        try:
            return await self._http.post(url, json=body)
        except httpx.TransportError as e:
            log.error("auth_request_failed", url=url, error=str(e), error_type=type(e).__name__)
            raise NetworkError(_NETWORK_MESSAGE) from e


def _server_error(response: httpx.Response, fallback: str | None = None) -> ServerError:
    message = None
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        try:
            message = ErrorResponse.model_validate(data).best_message
        except PydanticValidationError:
            message = None
    if not message:
        message = fallback or f"Server error: {response.status_code} {response.reason_phrase}"
    log.warning(
        "auth_request_rejected",
        status_code=response.status_code,
        response_text=response.text[:200],
    )
    return ServerError(message, status_code=response.status_code)
