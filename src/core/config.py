"""Application settings, read from GIF_EXPORT_* environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GIF_EXPORT_", extra="ignore")

    # public URL of the site, quoted in the comment of animated GIFs
    base_url: str = "http://localhost:9663"
    # rendering service (lila-gif)
    gif_url: str = "http://localhost:6175"
    db_url: str = "sqlite:///./gif_export.db"
    http_timeout: float = 15.0
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 9664


@lru_cache
def get_settings() -> Settings:
    return Settings()
