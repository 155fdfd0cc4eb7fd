"""Configuration settings loaded from .env file."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from models.enums import Section

LAYOUTS = ("phone", "tablet")


class Settings(BaseSettings):
    """Application settings, loaded from .env file.

    Catalog sizes only shape the generated sample data; nothing here is
    persisted between sessions.
    """

    # Navigation
    default_section: Section = Section.MARTIAL

    # Presentation
    layout: str = "phone"      # phone → tab bar, tablet → sidebar
    dark_mode: bool = False

    # Catalog seed
    chapters_per_novel: int = 5
    photo_count: int = 50
    photo_size: int = 400

    # External pages
    search_base_url: str = "https://www.google.com/search?q="
    reference_base_url: str = "https://zh.wikipedia.org/wiki/"

    # Logging
    log_dir: Path = Path("./data/logs")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("layout")
    @classmethod
    def validate_layout(cls, v: str) -> str:
        v = v.lower()
        if v not in LAYOUTS:
            raise ValueError(f"layout must be one of {', '.join(LAYOUTS)}")
        return v

    @field_validator("chapters_per_novel", "photo_count", "photo_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Count must be >= 1")
        return v

    @field_validator("search_base_url", "reference_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v

    @field_validator("log_dir")
    @classmethod
    def ensure_parent_dirs(cls, v: Path) -> Path:
        v.parent.mkdir(parents=True, exist_ok=True)
        return v


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
