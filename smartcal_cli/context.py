"""Shared CLI context with lazy-initialized dependencies."""

from datetime import date

from smartcal.config import AppConfig
from smartcal.providers.ai import GeminiTextProvider
from smartcal.providers.notifications import ConsoleNotificationSink
from smartcal.providers.weather import OpenMeteoWeatherProvider
from smartcal.scheduler import NotificationScheduler, NotificationService
from smartcal.storage.event_store import JsonEventStore
from smartcal.storage.kv_store import DedupRecordStore, LocalKeyValueStore, ThemePreference
from smartcal.storage.settings_store import JsonSettingsStore
from smartcal_cli.display.console import console


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Commands pull stores and providers from here instead of building them.

    Usage:
        ctx = CLIContext()
        events = ctx.event_store.list(ctx.owner_id)
    """

    def __init__(self, verbose: bool = False, quiet: bool = False, config: AppConfig | None = None):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            config: Preloaded configuration (read from the environment if omitted)
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: AppConfig | None = config
        self._event_store: JsonEventStore | None = None
        self._settings_store: JsonSettingsStore | None = None
        self._kv: LocalKeyValueStore | None = None
        self._weather_provider: OpenMeteoWeatherProvider | None = None
        self._text_provider: GeminiTextProvider | None = None
        self._notification_service: NotificationService | None = None

    @property
    def config(self) -> AppConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = AppConfig.from_env()
        return self._config

    @property
    def owner_id(self) -> str:
        return self.config.owner_id

    def today(self) -> date:
        return date.today()

    @property
    def event_store(self) -> JsonEventStore:
        if self._event_store is None:
            self._event_store = JsonEventStore(self.config.events_path)
        return self._event_store

    @property
    def settings_store(self) -> JsonSettingsStore:
        if self._settings_store is None:
            self._settings_store = JsonSettingsStore(self.config.settings_path)
        return self._settings_store

    @property
    def kv(self) -> LocalKeyValueStore:
        """Device-local key-value store (dedup records, permission, theme)."""
        if self._kv is None:
            self._kv = LocalKeyValueStore(self.config.local_state_path)
        return self._kv

    @property
    def dedup_store(self) -> DedupRecordStore:
        return DedupRecordStore(self.kv)

    @property
    def theme(self) -> ThemePreference:
        return ThemePreference(self.kv)

    @property
    def notification_sink(self) -> ConsoleNotificationSink:
        return ConsoleNotificationSink(self.kv, console=console)

    @property
    def weather_provider(self) -> OpenMeteoWeatherProvider:
        if self._weather_provider is None:
            self._weather_provider = OpenMeteoWeatherProvider(
                base_url=self.config.weather_api_url,
                timeout=self.config.weather_timeout,
            )
        return self._weather_provider

    @property
    def text_provider(self) -> GeminiTextProvider:
        if self._text_provider is None:
            self._text_provider = GeminiTextProvider(
                self.config.gemini_api_key, model=self.config.gemini_model
            )
        return self._text_provider

    @property
    def notification_service(self) -> NotificationService:
        """Get notification service (lazy-loaded)."""
        if self._notification_service is None:
            self._notification_service = NotificationService(
                NotificationScheduler(self.dedup_store),
                self.notification_sink,
                retention_days=self.config.dedup_retention_days,
            )
        return self._notification_service

    def forecast(self) -> dict:
        """Forecast for the configured location, empty when unavailable."""
        return self.weather_provider.forecast(self.config.weather_lat, self.config.weather_lon)


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
