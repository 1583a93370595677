from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    # Default file offered by the save/load prompts
    save_path: str = "goals.txt"
    # Logging; log_file enables a rotating file handler next to stderr
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_file: str | None = None
    # Encoding used by the console presentation layer
    output_encoding: str = "utf-8"

    # Allow empty env strings for optional fields
    @field_validator("log_file", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        if v in ("", None, "null", "None"):
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return str(v).upper() if v else "WARNING"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="QUESTLOG_", extra="ignore")


settings = Settings()
