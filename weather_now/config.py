from __future__ import annotations

import os
from dotenv import load_dotenv
from dataclasses import dataclass


DEFAULT_BASE_URL = "https://api.weatherapi.com/v1/current.json"


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    weatherapi_key: str | None
    weatherapi_base_url: str
    default_city: str
    log_level: str

    @classmethod
    def load(cls) -> "Settings":
        # Load .env file if present (no-op if not)
        load_dotenv()

        return cls(
            weatherapi_key=os.getenv("WEATHERAPI_KEY"),
            weatherapi_base_url=os.getenv("WEATHERAPI_BASE_URL", DEFAULT_BASE_URL),
            default_city=os.getenv("WEATHER_DEFAULT_CITY", "Praha"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


settings = Settings.load()
