from functools import lru_cache
from pathlib import Path
from typing import Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    FLATWIKI_VERSION: str = "v0.1.x"
    API_NAME: str = "Flatwiki"
    API_SUMMARY: str = "A minimal wiki storing each page as a flat text file"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    # Page Storage
    PAGES_DIR: Path = Path(".")
    PAGE_FILE_MODE: int = 0o600

    # Templates
    TEMPLATES_DIR: Path = Path(__file__).parent / "templates"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("PAGE_FILE_MODE", mode="before")
    def parse_octal_mode(cls, v: Any):
        # Environment values are octal strings, e.g. "600" or "0o640"
        if isinstance(v, str):
            value = v.strip().lower()
            if value.startswith("0o"):
                value = value[2:]
            return int(value, 8)
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
