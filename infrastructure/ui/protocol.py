"""FormView protocol — the form controller renders through this, never touches widgets directly."""

from typing import Protocol


class FormView(Protocol):
    # Fallback challenge
    def show_fallback(self, problem_text: str) -> None: ...

    def set_problem_text(self, problem_text: str) -> None: ...

    def read_answer(self) -> str: ...

    def clear_answer(self) -> None: ...

    def focus_answer(self) -> None: ...

    # Registration tab
    def read_registration(self) -> tuple[str, str, str]: ...

    def clear_registration(self) -> None: ...

    def show_register_error(self, message: str) -> None: ...

    # Login tab
    def read_login(self) -> tuple[str, str]: ...

    def clear_login(self) -> None: ...

    def show_login_error(self, message: str) -> None: ...

    # Page
    def alert(self, message: str) -> None: ...

    def open_tab(self, name: str) -> None: ...
