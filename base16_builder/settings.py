from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BASE16_BUILDER_", case_sensitive=False)

    schemes_dir: Path = Path("schemes")
    templates_dir: Path = Path("templates")
    config_file: str = "config.yaml"
    output_root: Path = Path(".")

    @property
    def config_path(self) -> Path:
        return self.templates_dir / self.config_file
