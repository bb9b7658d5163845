import pytest

ENV_KEYS = [
    "ZENN_BASE_URL",
    "ZENN_SIGNIN_PATH",
    "ZENN_SESSION_COOKIE_NAME",
    "ZENN_COOKIE_ENV",
    "ZENN_COOKIE",
    "WEBDRIVER_URL",
    "WEBDRIVER_HEADLESS",
    "LOGIN_SETTLE_SECONDS",
    "HTTP_TIMEOUT",
    "SKIP_HEADER",
    "RENDER_STYLE",
    "INTERACTIVE_LOGIN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset exporter variables; anything a test loads from .env is undone too."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
