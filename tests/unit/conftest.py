"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads the project's real .env file
during unit tests. Tests control config exclusively through monkeypatch.setenv().
"""

import itertools

import pytest

from infrastructure.captcha.recaptcha import RecaptchaHost, RecaptchaWidget
from infrastructure.ui.memory import MemoryFormView
from shared.generators import build_challenge


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture
def view():
    return MemoryFormView()


@pytest.fixture
def host():
    """Host whose script never loaded (fallback scenario)."""
    return RecaptchaHost()


@pytest.fixture
def rendered_host():
    """Host with a loaded, rendered widget (external scenario)."""
    h = RecaptchaHost()
    h.script_loaded(RecaptchaWidget(site_key="test-site-key"))
    h.iframe_rendered()
    return h


@pytest.fixture
def challenges():
    """Deterministic generator: 3 - 4, then 2 + 3, then 6 * 7, repeating."""
    seq = itertools.cycle(
        [build_challenge(3, "-", 4), build_challenge(2, "+", 3), build_challenge(6, "*", 7)]
    )
    return lambda: next(seq)
