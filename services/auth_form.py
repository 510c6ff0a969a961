"""
Page-level controller for the register/login form.

Wires the availability check, the verification coordinator and the
submission flow together and projects every outcome onto the FormView.
Errors never escape: each one is shown in the form and leaves it retryable.
"""

from __future__ import annotations

from typing import Optional

from config import ClientSettings
from errors import (
    MissingFieldsError,
    SubmissionError,
    SubmissionInProgressError,
    VerificationError,
)
from infrastructure.captcha.protocol import WidgetHost
from infrastructure.http_client import HttpClient
from infrastructure.ui.protocol import FormView
from schemas.models.forms import LoginFields, RegistrationFields
from services.availability import VerificationAvailabilityDetector
from services.fallback_captcha import FallbackCaptchaController
from services.submission import SubmissionFlow
from services.verification import VerificationCoordinator
from shared.logging import get_logger

log = get_logger(__name__)

REGISTRATION_SUCCESS_MESSAGE = "Registration successful! You can now log in."


class AuthFormController:
    def __init__(
        self,
        view: FormView,
        detector: VerificationAvailabilityDetector,
        captcha: FallbackCaptchaController,
        coordinator: VerificationCoordinator,
        submission: SubmissionFlow,
    ) -> None:
        self._view = view
        self._detector = detector
        self._captcha = captcha
        self._coordinator = coordinator
        self._submission = submission
        self._submitting = False

    @classmethod
    def create(
        cls,
        view: FormView,
        host: WidgetHost,
        settings: ClientSettings,
        http_client: Optional[HttpClient] = None,
    ) -> "AuthFormController":
        """Wire the form from settings. Without *http_client* one is built from them."""
        http_client = http_client or HttpClient.from_settings(settings)
        captcha = FallbackCaptchaController(view, host)
        return cls(
            view=view,
            detector=VerificationAvailabilityDetector(host, settings.grace_period_seconds),
            captcha=captcha,
            coordinator=VerificationCoordinator(captcha, host, view),
            submission=SubmissionFlow(settings, http_client),
        )

    @property
    def coordinator(self) -> VerificationCoordinator:
        return self._coordinator

    async def on_page_ready(self) -> None:
        if not await self._detector.wait_and_check():
            self._captcha.activate()

    def open_tab(self, name: str) -> None:
        self._view.open_tab(name)

    async def register(self) -> bool:
        """Submit the registration form. Returns True on success."""
        if self._submitting:
            log.warning("registration_ignored", code=SubmissionInProgressError.error_code)
            return False

        self._view.show_register_error("")
        username, email, password = self._view.read_registration()
        fields = RegistrationFields(
            username=username.strip(), email=email.strip(), password=password
        )

        try:
            if not fields.is_complete:
                raise MissingFieldsError("Please fill in all fields")
            proof = self._coordinator.resolve_proof()
        except (MissingFieldsError, VerificationError) as e:
            log.info("registration_rejected", code=e.error_code)
            self._view.show_register_error(e.message)
            return False

        self._submitting = True
        try:
            await self._submission.register(fields, proof)
        except SubmissionError as e:
            log.warning("registration_failed", code=e.error_code, error=e.message)
            self._view.show_register_error(e.message)
            self._coordinator.reset()
            return False
        finally:
            self._submitting = False

        self._view.alert(REGISTRATION_SUCCESS_MESSAGE)
        self.open_tab("login")
        self._view.clear_registration()
        self._view.clear_answer()
        self._coordinator.reset()
        return True

    async def login(self) -> bool:
        """Submit the login form. Returns True on success."""
        self._view.show_login_error("")
        username_or_email, password = self._view.read_login()
        fields = LoginFields(username_or_email=username_or_email, password=password)

        try:
            user = await self._submission.login(fields)
        except SubmissionError as e:
            log.warning("login_failed", code=e.error_code, error=e.message)
            self._view.show_login_error(e.message)
            return False

        self._view.alert(user.summary())
        self._view.clear_login()
        return True
