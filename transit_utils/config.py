import os, logging
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator
from .fetching.session import API_KEY_ENV

TIMEOUT_ENV: str = "GOOGLE_MAPS_TIMEOUT"
LOG_LEVEL_ENV: str = "LOG_LEVEL"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

class Settings(BaseModel):
    api_key: Optional[str] = None
    timeout_s: Optional[float] = None
    log_level: str = "WARNING"

    @field_validator("timeout_s", mode="before")
    @classmethod
    def _blank_timeout_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    load_dotenv(dotenv_path)
    return Settings(
        api_key=os.getenv(API_KEY_ENV) or None,
        timeout_s=os.getenv(TIMEOUT_ENV),
        log_level=os.getenv(LOG_LEVEL_ENV, "WARNING"),
    )


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
