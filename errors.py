"""
Form error hierarchy.

AppError is the base for all typed errors. Every error carries a user-facing
message (shown in the form's error slot) and a stable ``error_code`` for logs.

None of these errors is fatal: each one leaves the form in a retryable state.
"""

from __future__ import annotations

from typing import Any, Optional


class AppError(Exception):
    """Base application error. All typed errors inherit from this."""

    error_code: str = "internal_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.field is not None:
            payload["field"] = self.field
        if self.details is not None:
            payload["details"] = self.details
        return payload


# ── Verification ──────────────────────────────────────────────────────────────


class VerificationError(AppError):
    error_code = "verification_error"


class EmptyAnswerError(VerificationError):
    error_code = "empty_answer"


class NotANumberError(VerificationError):
    error_code = "not_a_number"


class WrongAnswerError(VerificationError):
    error_code = "wrong_answer"


class ExternalApiMissingError(VerificationError):
    error_code = "external_api_missing"


class ExternalTokenMissingError(VerificationError):
    error_code = "external_token_missing"


# ── Form ──────────────────────────────────────────────────────────────────────


class FormError(AppError):
    error_code = "form_error"


class MissingFieldsError(FormError):
    error_code = "missing_fields"


class SubmissionInProgressError(FormError):
    error_code = "submission_in_progress"


# ── Submission ────────────────────────────────────────────────────────────────


class SubmissionError(AppError):
    error_code = "submission_error"


class NetworkError(SubmissionError):
    error_code = "network_error"


class ServerError(SubmissionError):
    error_code = "server_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message, field=field, details=details)
        self.status_code = status_code

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["status_code"] = self.status_code
        return payload


class MalformedResponseError(SubmissionError):
    error_code = "malformed_response"
