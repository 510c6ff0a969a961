"""
Fallback arithmetic captcha shown when the external widget is unavailable.

The controller owns the current Challenge; the view only mirrors its text.
Once activated it stays active for the rest of the session.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from errors import EmptyAnswerError, NotANumberError, WrongAnswerError
from infrastructure.captcha.protocol import WidgetHost
from infrastructure.ui.protocol import FormView
from schemas.models.verification import Challenge, MathProof
from shared.generators import generate_challenge
from shared.logging import get_logger
from shared.validators import is_lenient_number, parse_int_prefix

log = get_logger(__name__)


class CaptchaState(Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


class FallbackCaptchaController:
    def __init__(
        self,
        view: FormView,
        host: WidgetHost,
        generator: Callable[[], Challenge] = generate_challenge,
    ) -> None:
        self._view = view
        self._host = host
        self._generate = generator
        self._state = CaptchaState.INACTIVE
        self._challenge: Optional[Challenge] = None

    @property
    def state(self) -> CaptchaState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is CaptchaState.ACTIVE

    def activate(self) -> None:
        """Hide the external widget and show a fresh challenge. Idempotent."""
        if self.is_active:
            return
        self._state = CaptchaState.ACTIVE
        self._host.hide_container()
        self._challenge = self._generate()
        self._view.show_fallback(self._challenge.problem_text)
        log.info("fallback_captcha_activated")

    def current_challenge(self) -> Challenge:
        if self._challenge is None:
            raise RuntimeError("fallback captcha is not active")
        return self._challenge

    def validate(self, user_answer: str) -> MathProof:
        """Check *user_answer* against the current challenge.

        Raises:
            EmptyAnswerError: blank input.
            NotANumberError: input fails the lenient numeric check.
            WrongAnswerError: parsed value does not match; a new challenge
                has already replaced the old one when this is raised.
        """
        challenge = self.current_challenge()
        answer = user_answer.strip()

        if not answer:
            self._view.focus_answer()
            raise EmptyAnswerError("Please enter the answer to the problem", field="math_answer")

        if not is_lenient_number(answer):
            self._view.clear_answer()
            self._view.focus_answer()
            raise NotANumberError("The answer must be a number", field="math_answer")

        if parse_int_prefix(answer) != challenge.expected_answer:
            log.info("math_captcha_wrong_answer")
            self._regenerate()
            self._view.clear_answer()
            self._view.focus_answer()
            raise WrongAnswerError("Wrong answer. Please try again.", field="math_answer")

        return MathProof(answer=challenge.expected_answer, problem_text=challenge.problem_text)

    def reset(self) -> None:
        """Discard the current proof source after a failed submission."""
        if self.is_active:
            self._regenerate()
            return
        widget = self._host.lookup_widget()
        if widget is not None:
            widget.reset()

    def _regenerate(self) -> None:
        self._challenge = self._generate()
        self._view.set_problem_text(self._challenge.problem_text)
