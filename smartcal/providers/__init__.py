"""External collaborators: weather, AI text and notification sinks."""

from smartcal.providers.ai import GeminiTextProvider, TextProvider
from smartcal.providers.notifications import ConsoleNotificationSink, NotificationSink
from smartcal.providers.weather import (
    DEFAULT_LOCATION,
    OpenMeteoWeatherProvider,
    WeatherProvider,
)

__all__ = [
    "GeminiTextProvider",
    "TextProvider",
    "ConsoleNotificationSink",
    "NotificationSink",
    "DEFAULT_LOCATION",
    "OpenMeteoWeatherProvider",
    "WeatherProvider",
]
