import pytest

from repoproxy.config import get_settings
from repoproxy.registry import reset_registry


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.setenv("REPO_VERSION_SUFFIX", "_2")
    monkeypatch.setenv("REPO_MARKER_INTERFACE", "Repository")
    monkeypatch.delenv("REPO_CATALOG_PATH", raising=False)
    get_settings.cache_clear()
    reset_registry()
    yield
    get_settings.cache_clear()
    reset_registry()
