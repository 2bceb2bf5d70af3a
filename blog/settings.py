from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    POSTS_DIR: str = "content/posts"
    ABOUT_PATH: str = "content/about.md"

    # Listing
    POSTS_PER_PAGE: int = Field(default=5, gt=0)

    # Site
    SITE_TITLE: str = "Tero's blog"
    SITE_DESCRIPTION: str = "Personal blog by Tero Laitinen."

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def about_path(self) -> Path:
        return Path(self.ABOUT_PATH)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
