import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Values are read once at import time; a `.env` file in the working
    directory is honoured.
    """

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: str = os.getenv("PORT", "8000")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    API_NAME: str = os.getenv("API_NAME", "CUI Validator API")
    API_DESCRIPTION: str = os.getenv(
        "API_DESCRIPTION", "Validate a Romanian company identification number (CUI)"
    )
    API_AUTHOR: str = os.getenv("API_AUTHOR", "Cristian L.")

    CORS_ALLOWED_ORIGINS_ENV: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")
    CORS_ALLOW_METHODS: Tuple[str, ...] = ("GET", "OPTIONS")

    @classmethod
    def port(cls) -> int:
        return int(cls.PORT)

    @classmethod
    def log_level(cls) -> Optional[int]:
        """Numeric level for LOG_LEVEL, or None when the name is unknown."""
        return logging.getLevelNamesMapping().get(cls.LOG_LEVEL)

    @classmethod
    def allowed_origins(cls, extra_origins: List[str] | None = None) -> List[str]:
        merged = [o.strip() for o in cls.CORS_ALLOWED_ORIGINS_ENV.split(",") if o.strip()]
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @classmethod
    def validate(cls) -> None:
        try:
            port = cls.port()
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {cls.PORT!r}")
        if not 1 <= port <= 65535:
            raise ValueError(f"PORT must be between 1 and 65535, got {port}")
        if cls.log_level() is None:
            raise ValueError(f"LOG_LEVEL {cls.LOG_LEVEL!r} is not a known logging level")
