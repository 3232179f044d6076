import pytest

from repoproxy.config import get_settings, validate_settings_for_env


def test_defaults() -> None:
    settings = get_settings()
    assert settings.repo_version_suffix == "_2"
    assert settings.repo_marker_interface == "Repository"
    validate_settings_for_env(settings)


def test_empty_suffix_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPO_VERSION_SUFFIX", " ")
    get_settings.cache_clear()
    with pytest.raises(ValueError, match="REPO_VERSION_SUFFIX"):
        validate_settings_for_env(get_settings())


def test_prod_requires_catalog_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "prod")
    get_settings.cache_clear()
    with pytest.raises(ValueError, match="REPO_CATALOG_PATH"):
        validate_settings_for_env(get_settings())

    monkeypatch.setenv("REPO_CATALOG_PATH", "/etc/repoproxy/catalog.json")
    get_settings.cache_clear()
    validate_settings_for_env(get_settings())
