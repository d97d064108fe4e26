"""Configuration settings for the workout caption parser."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

_DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001"


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Parsing limits
    MAX_CAPTION_CHARS: int = 50000
    REVIEW_CONFIDENCE_THRESHOLD: float = 0.6

    # HTTP
    CORS_ORIGINS: List[str] = []

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Parsing limits
        self.MAX_CAPTION_CHARS = _int_env("MAX_CAPTION_CHARS", 50000)
        self.REVIEW_CONFIDENCE_THRESHOLD = _float_env("REVIEW_CONFIDENCE_THRESHOLD", 0.6)

        # HTTP
        origins = os.getenv("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
        self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


settings = Settings()
