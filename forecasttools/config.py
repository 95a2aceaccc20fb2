# ABOUTME: Environment-driven settings for the forecast client.
# ABOUTME: Loads a .env file with python-dotenv and validates values into a Pydantic model.

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from forecasttools.dispatcher import DEFAULT_CONCURRENCY, Strategy
from forecasttools.errors import ForecastError
from forecasttools.query_builder import API_URL


class ForecastSettings(BaseModel):
    """Settings read from FORECAST_* environment variables."""

    api_key: str = Field(min_length=1)
    api_url: str = API_URL
    concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1)
    strategy: Strategy | None = None

    @classmethod
    def from_env(cls) -> "ForecastSettings":
        """Build settings from the environment, after loading any .env file."""
        load_dotenv()
        values = {
            "api_key": os.environ.get("FORECAST_API_KEY", ""),
            "api_url": os.environ.get("FORECAST_API_URL") or API_URL,
            "concurrency": os.environ.get("FORECAST_CONCURRENCY") or DEFAULT_CONCURRENCY,
            "strategy": os.environ.get("FORECAST_STRATEGY") or None,
        }
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ForecastError(f"Invalid forecast settings: {e}") from e
