"""Application configuration contract."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="APP_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")
    repo_version_suffix: str = Field(alias="REPO_VERSION_SUFFIX", default="_2")
    repo_marker_interface: str = Field(alias="REPO_MARKER_INTERFACE", default="Repository")
    repo_catalog_path: str = Field(alias="REPO_CATALOG_PATH", default="")


def validate_settings_for_env(settings: Settings) -> None:
    missing: list[str] = []
    if not settings.repo_version_suffix.strip():
        missing.append("REPO_VERSION_SUFFIX")
    if not settings.repo_marker_interface.strip():
        missing.append("REPO_MARKER_INTERFACE")
    if settings.app_env == "prod" and not settings.repo_catalog_path.strip():
        missing.append("REPO_CATALOG_PATH")

    if missing:
        keys = ", ".join(sorted(set(missing)))
        raise ValueError(f"invalid configuration: {keys}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
