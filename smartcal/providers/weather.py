"""Daily weather forecast from Open-Meteo."""

import logging
from typing import Protocol

import requests

from smartcal.exceptions import ProviderError
from smartcal.models.weather import WeatherInfo

logger = logging.getLogger(__name__)

# Seoul
DEFAULT_LOCATION = (37.5665, 126.9780)

DEFAULT_API_URL = "https://api.open-meteo.com/v1/forecast"

# WMO weather interpretation codes -> icon
WEATHER_ICONS = {
    0: "☀️",
    1: "🌤️",
    2: "⛅",
    3: "☁️",
    45: "🌫️",
    48: "🌫️",
    51: "🌦️",
    53: "🌦️",
    55: "🌦️",
    56: "🌧️",
    57: "🌧️",
    61: "🌧️",
    63: "🌧️",
    65: "🌧️",
    66: "🌧️",
    67: "🌧️",
    71: "🌨️",
    73: "🌨️",
    75: "❄️",
    77: "🌨️",
    80: "🌦️",
    81: "🌧️",
    82: "⛈️",
    85: "🌨️",
    86: "❄️",
    95: "⛈️",
    96: "⛈️",
    99: "⛈️",
}
UNKNOWN_ICON = "🌡️"


def weather_icon(code: int) -> str:
    return WEATHER_ICONS.get(code, UNKNOWN_ICON)


class WeatherProvider(Protocol):
    def forecast(self, lat: float, lon: float) -> dict[str, WeatherInfo]:
        """Daily forecast keyed by ISO date; empty when unavailable."""
        ...


class OpenMeteoWeatherProvider:
    """Fetch a bounded forward window of daily forecasts."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        forecast_days: int = 7,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.forecast_days = forecast_days
        self.session = session or requests.Session()

    def fetch(self, lat: float, lon: float) -> dict[str, WeatherInfo]:
        """Fetch and parse the forecast.

        Raises:
            ProviderError: On network, HTTP or payload errors.
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "daily": "weathercode,temperature_2m_max,temperature_2m_min",
            "timezone": "auto",
            "forecast_days": self.forecast_days,
        }
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            raise ProviderError(f"Weather request failed: {e}") from e

        try:
            daily = payload["daily"]
            rows = zip(
                daily["time"],
                daily["weathercode"],
                daily["temperature_2m_max"],
                daily["temperature_2m_min"],
            )
            return {
                day: WeatherInfo(
                    max_temp=max_temp,
                    min_temp=min_temp,
                    weather_code=int(code),
                    icon=weather_icon(int(code)),
                )
                for day, code, max_temp, min_temp in rows
                if code is not None and max_temp is not None and min_temp is not None
            }
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(f"Unexpected weather payload: {e}") from e

    def forecast(self, lat: float, lon: float) -> dict[str, WeatherInfo]:
        """Forecast keyed by ISO date. Failures yield an empty mapping."""
        try:
            forecast = self.fetch(lat, lon)
        except ProviderError as e:
            logger.warning(f"{e}; showing no weather")
            return {}
        logger.debug(f"Fetched weather for {len(forecast)} day(s)")
        return forecast
