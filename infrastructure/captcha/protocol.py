"""Verification widget protocols — services depend on these, not the concrete widget."""

from typing import Optional, Protocol


class VerificationWidget(Protocol):
    """Capability object exposed by the external bot-check script."""

    def get_response(self) -> Optional[str]: ...

    def reset(self) -> None: ...


class WidgetHost(Protocol):
    """The page surface the widget mounts into."""

    def lookup_widget(self) -> Optional[VerificationWidget]: ...

    def container_rendered(self) -> bool: ...

    def hide_container(self) -> None: ...
