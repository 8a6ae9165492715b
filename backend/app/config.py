"""Application configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def project_root() -> Path:
    """Return the backend project root."""

    return Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Environment-driven settings."""

    app_name: str = "Service Dashboard"
    config_dir: str = "/config"
    services_filename: str = "services.yaml"
    groups_filename: str = "config.yaml"
    static_dir: str = str(project_root() / "public")

    host: str = "0.0.0.0"
    port: int = 3000
    cors_allow_origins: list[str] = ["*"]

    log_level: str = "INFO"
    log_file: str | None = None

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def store_path(self) -> Path:
        return Path(self.config_dir) / self.services_filename


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""

    return Settings()
