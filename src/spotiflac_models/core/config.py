# src/spotiflac_models/core/config.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field("INFO", description="Level for the spotiflac_models logger")
    log_colors: bool = Field(True, description="Colour console output when stdout is a TTY")
    log_mapping_failures: bool = Field(True, description="Log a warning before raising a mapping error")

    model_config = SettingsConfigDict(
        env_prefix="SPOTIFLAC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
