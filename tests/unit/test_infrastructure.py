"""Unit tests for the infrastructure layer."""

from unittest.mock import MagicMock

import httpx
import pytest

from config import ClientSettings
from infrastructure.captcha.recaptcha import RecaptchaHost, RecaptchaWidget
from infrastructure.http_client import HttpClient
from infrastructure.ui.memory import MemoryFormView


# ── HttpClient ────────────────────────────────────────────────────────────────


class TestHttpClient:
    async def test_post_delegates_to_httpx(self, mocker):
        client = HttpClient()
        fake_resp = MagicMock(status_code=200)
        mocker.patch.object(client._client, "post", return_value=fake_resp)
        resp = await client.post("http://example.com")
        assert resp.status_code == 200
        await client.aclose()

    async def test_post_propagates_exception(self, mocker):
        client = HttpClient()
        mocker.patch.object(client._client, "post", side_effect=Exception("timeout"))
        with pytest.raises(Exception, match="timeout"):
            await client.post("http://example.com")
        await client.aclose()

    async def test_uses_injected_transport(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(204))
        async with HttpClient(timeout=None, transport=transport) as client:
            resp = await client.post("http://example.com", json={"a": 1})
        assert resp.status_code == 204

    async def test_context_manager(self):
        async with HttpClient() as client:
            assert client is not None

    async def test_from_default_settings_has_no_timeout(self, monkeypatch):
        monkeypatch.delenv("HTTP_TIMEOUT", raising=False)
        async with HttpClient.from_settings(ClientSettings()) as client:
            assert client._client.timeout == httpx.Timeout(None)

    async def test_from_settings_applies_timeout(self, monkeypatch):
        monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
        async with HttpClient.from_settings(ClientSettings()) as client:
            assert client._client.timeout == httpx.Timeout(2.5)


# ── reCAPTCHA adapter ─────────────────────────────────────────────────────────


class TestRecaptchaWidget:
    def test_no_token_until_solved(self):
        assert RecaptchaWidget().get_response() is None

    def test_token_round_trip(self):
        widget = RecaptchaWidget()
        widget.on_token("03AGdBq")
        assert widget.get_response() == "03AGdBq"

    @pytest.mark.parametrize("drop", ["reset", "on_expired"])
    def test_token_dropped(self, drop):
        widget = RecaptchaWidget()
        widget.on_token("03AGdBq")
        getattr(widget, drop)()
        assert widget.get_response() is None


class TestRecaptchaHost:
    def test_initially_empty(self):
        host = RecaptchaHost()
        assert host.lookup_widget() is None
        assert host.container_rendered() is False
        assert host.container_visible is True

    def test_loaded_and_rendered(self):
        host = RecaptchaHost()
        widget = RecaptchaWidget()
        host.script_loaded(widget)
        host.iframe_rendered()
        assert host.lookup_widget() is widget
        assert host.container_rendered() is True

    def test_hide_container(self):
        host = RecaptchaHost()
        host.hide_container()
        assert host.container_visible is False


# ── MemoryFormView ────────────────────────────────────────────────────────────


class TestMemoryFormView:
    def test_show_fallback(self):
        view = MemoryFormView()
        view.show_fallback("2 + 2")
        assert view.fallback_visible
        assert view.problem_text == "2 + 2"

    def test_clear_registration(self):
        view = MemoryFormView(reg_username="a", reg_email="b", reg_password="c")
        view.clear_registration()
        assert view.read_registration() == ("", "", "")

    def test_alerts_accumulate(self):
        view = MemoryFormView()
        view.alert("one")
        view.alert("two")
        assert view.alerts == ["one", "two"]
