"""
Single place to:
- Load env vars from .env if present
- Read GUESS_ENTROPY_SOURCE and GUESS_LOG_LEVEL
- Validate them into a Settings model

Command line flags in main.py win over whatever is set here.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .random_client import DEFAULT_SOURCE


class Settings(BaseModel):
    entropy_source: str = Field(DEFAULT_SOURCE, min_length=1, description="Where the secret byte comes from")
    log_level: str = Field("WARNING", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, level: str) -> str:
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {level}")
        return level


def load_settings() -> Settings:
    # dev convenience; a real shell can just export the variables
    load_dotenv()
    return Settings(
        entropy_source=os.getenv("GUESS_ENTROPY_SOURCE", DEFAULT_SOURCE),
        log_level=os.getenv("GUESS_LOG_LEVEL", "WARNING"),
    )
