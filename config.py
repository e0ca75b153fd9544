"""
Runtime settings, read from the environment or a local .env file.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from logger import get_logger

logger = get_logger(__name__)

DEFAULT_FILE = "characters.json"
DEFAULT_WIDTH = 120


class Settings(BaseModel):
    file: str = DEFAULT_FILE
    log_level: str = "WARNING"
    width: int = DEFAULT_WIDTH

    @field_validator("width", mode="before")
    @classmethod
    def width_or_default(cls, value):
        try:
            width = int(value)
        except (TypeError, ValueError):
            width = 0
        if width <= 0:
            logger.warning("Ignoring CHARACTER_INFO_WIDTH=%r, using %d", value, DEFAULT_WIDTH)
            return DEFAULT_WIDTH
        return width


def get_settings() -> Settings:
    load_dotenv()
    return Settings(
        file=os.getenv("CHARACTER_INFO_FILE", DEFAULT_FILE),
        log_level=os.getenv("CHARACTER_INFO_LOG_LEVEL", "WARNING"),
        width=os.getenv("CHARACTER_INFO_WIDTH", str(DEFAULT_WIDTH)),
    )
