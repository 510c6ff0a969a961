"""
Single decision point for which verification proof goes out with a request.

Exactly one of the two methods is consulted per submission: the fallback
challenge when it is active, the external widget otherwise.
"""

from __future__ import annotations

from errors import ExternalApiMissingError, ExternalTokenMissingError
from infrastructure.captcha.protocol import WidgetHost
from infrastructure.ui.protocol import FormView
from schemas.models.verification import (
    ExternalTokenProof,
    VerificationMode,
    VerificationProof,
)
from services.fallback_captcha import FallbackCaptchaController


class VerificationCoordinator:
    def __init__(
        self,
        controller: FallbackCaptchaController,
        host: WidgetHost,
        view: FormView,
    ) -> None:
        self._controller = controller
        self._host = host
        self._view = view

    @property
    def mode(self) -> VerificationMode:
        if self._controller.is_active:
            return VerificationMode.FALLBACK
        return VerificationMode.EXTERNAL

    def resolve_proof(self) -> VerificationProof:
        if self.mode is VerificationMode.FALLBACK:
            return self._controller.validate(self._view.read_answer())

        widget = self._host.lookup_widget()
        if widget is None:
            raise ExternalApiMissingError(
                "The verification service failed to load. "
                "Please reload the page or try another browser."
            )
        token = widget.get_response()
        if not token:
            raise ExternalTokenMissingError("Please confirm that you are not a robot")
        return ExternalTokenProof(token=token)

    def reset(self) -> None:
        self._controller.reset()
