"""Configuration for the calendar application."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

try:
    from dotenv import load_dotenv
except ImportError:
    load_dotenv = None


class AppConfig(BaseModel):
    """Application configuration with Pydantic validation."""

    # Storage paths
    data_dir: Path = Field(default=Path("data"))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    events_filename: str = Field(default="events.json")
    settings_filename: str = Field(default="settings.json")
    local_state_filename: str = Field(default="local_state.json")
    log_filename: str = Field(default="smartcal.log")

    # Identity of the local user
    owner_id: str = Field(default="local")

    # Weather provider (Open-Meteo); default location is Seoul
    weather_api_url: str = Field(default="https://api.open-meteo.com/v1/forecast")
    weather_lat: float = Field(default=37.5665)
    weather_lon: float = Field(default=126.9780)
    weather_timeout: float = Field(default=10.0, gt=0)

    # AI text provider
    gemini_api_key: str | None = None
    gemini_model: str = Field(default="gemini-2.5-flash")

    # Dedup records older than this many days are pruned
    dedup_retention_days: int = Field(default=30, ge=0)

    @property
    def events_path(self) -> Path:
        return self.data_dir / self.events_filename

    @property
    def settings_path(self) -> Path:
        return self.data_dir / self.settings_filename

    @property
    def local_state_path(self) -> Path:
        return self.data_dir / self.local_state_filename

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        # Load .env file if python-dotenv is available
        if load_dotenv is not None:
            load_dotenv()

        config_dict = {}

        # Storage paths
        if "SMARTCAL_DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["SMARTCAL_DATA_DIR"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        if "SMARTCAL_OWNER" in os.environ:
            config_dict["owner_id"] = os.environ["SMARTCAL_OWNER"]

        # Weather
        if "WEATHER_API_URL" in os.environ:
            config_dict["weather_api_url"] = os.environ["WEATHER_API_URL"]
        for env_name, key in (
            ("WEATHER_LAT", "weather_lat"),
            ("WEATHER_LON", "weather_lon"),
            ("WEATHER_TIMEOUT", "weather_timeout"),
        ):
            if env_name in os.environ:
                try:
                    config_dict[key] = float(os.environ[env_name])
                except ValueError:
                    pass  # Keep default if invalid

        # AI
        api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
        if api_key:
            config_dict["gemini_api_key"] = api_key
        if "GEMINI_MODEL" in os.environ:
            config_dict["gemini_model"] = os.environ["GEMINI_MODEL"]

        if "DEDUP_RETENTION_DAYS" in os.environ:
            try:
                config_dict["dedup_retention_days"] = int(
                    os.environ["DEDUP_RETENTION_DAYS"]
                )
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
