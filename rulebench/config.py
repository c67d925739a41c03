"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global extraction settings."""

    skills_root: str = "skills"
    build_dir: str = "build"
    default_profile: str = "react-best-practices"
    default_language: str = Field(
        default="typescript",
        description="Language used for examples whose fence has no info string.",
    )
    profiles_file: Optional[str] = Field(
        default=None, description="Optional YAML file with extra profiles."
    )

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def skills_root_path(self) -> Path:
        return Path(self.skills_root)

    @property
    def build_dir_path(self) -> Path:
        return Path(self.build_dir)

    @property
    def profiles_file_path(self) -> Optional[Path]:
        return Path(self.profiles_file) if self.profiles_file else None


settings = Settings()
