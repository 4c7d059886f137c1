"""
config.py – Settings read from environment variables (and `.env`).

Values are computed once, at import time, so `.env` is loaded first.
"""
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "City Info API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # JSON array of cities. Relative paths resolve against the working directory.
    city_data_file: str = os.getenv("CITY_DATA_FILE", "./data/cities.json")

    # Load the data file during startup instead of on the first request.
    preload_city_data: bool = _flag("PRELOAD_CITY_DATA")

    cors_origins: list[str] = field(
        default_factory=lambda: [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    )


settings = Settings()
