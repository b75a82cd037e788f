"""Daily weather model."""

from pydantic import BaseModel


class WeatherInfo(BaseModel):
    """Forecast for one day."""

    max_temp: float
    min_temp: float
    weather_code: int
    icon: str
