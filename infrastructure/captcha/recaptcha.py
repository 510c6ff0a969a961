"""reCAPTCHA v2 implementation of VerificationWidget and WidgetHost.

The browser script delivers tokens through a callback; the embedding page
forwards them to ``RecaptchaWidget.on_token``. ``RecaptchaHost`` tracks
whether the script loaded and whether the widget rendered its iframe.
"""

from typing import Optional

from shared.logging import get_logger

log = get_logger(__name__)


class RecaptchaWidget:
    def __init__(self, site_key: str = "") -> None:
        self.site_key = site_key
        self._token: Optional[str] = None

    def on_token(self, token: str) -> None:
        self._token = token

    def on_expired(self) -> None:
        self._token = None

    def get_response(self) -> Optional[str]:
        return self._token

    def reset(self) -> None:
        log.debug("recaptcha_widget_reset", had_token=self._token is not None)
        self._token = None


class RecaptchaHost:
    def __init__(self) -> None:
        self._widget: Optional[RecaptchaWidget] = None
        self._iframe_rendered = False
        self.container_visible = True

    def script_loaded(self, widget: RecaptchaWidget) -> None:
        self._widget = widget

    def iframe_rendered(self) -> None:
        self._iframe_rendered = True

    def lookup_widget(self) -> Optional[RecaptchaWidget]:
        return self._widget

    def container_rendered(self) -> bool:
        return self._iframe_rendered

    def hide_container(self) -> None:
        self.container_visible = False
