"""In-memory implementation of FormView.

Holds the same state the page keeps in its input elements so the form can
run headless (tests, scripted clients).
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MemoryFormView:
    reg_username: str = ""
    reg_email: str = ""
    reg_password: str = ""
    login_username: str = ""
    login_password: str = ""
    math_answer: str = ""

    problem_text: str = ""
    fallback_visible: bool = False
    answer_focused: bool = False
    register_error: str = ""
    login_error: str = ""
    active_tab: str = "register"
    alerts: list[str] = field(default_factory=list)

    def show_fallback(self, problem_text: str) -> None:
        self.problem_text = problem_text
        self.fallback_visible = True

    def set_problem_text(self, problem_text: str) -> None:
        self.problem_text = problem_text

    def read_answer(self) -> str:
        return self.math_answer

    def clear_answer(self) -> None:
        self.math_answer = ""

    def focus_answer(self) -> None:
        self.answer_focused = True

    def read_registration(self) -> tuple[str, str, str]:
        return self.reg_username, self.reg_email, self.reg_password

    def clear_registration(self) -> None:
        self.reg_username = ""
        self.reg_email = ""
        self.reg_password = ""

    def show_register_error(self, message: str) -> None:
        self.register_error = message

    def read_login(self) -> tuple[str, str]:
        return self.login_username, self.login_password

    def clear_login(self) -> None:
        self.login_username = ""
        self.login_password = ""

    def show_login_error(self, message: str) -> None:
        self.login_error = message

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def open_tab(self, name: str) -> None:
        self.active_tab = name
