"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class ValidationError(CalendarError):
    """Invalid input rejected before it reaches the resolver or a store."""

    pass


class InvalidDateError(ValidationError, ValueError):
    """Date string is not a zero-padded ISO calendar date (YYYY-MM-DD)."""

    pass


class EventNotFoundError(CalendarError):
    """Event not found in the event store."""

    pass


class StoreError(CalendarError):
    """Error reading or writing a local store file."""

    pass


class ProviderError(CalendarError):
    """External provider (weather, AI) failed.

    Providers catch this internally and degrade to an empty result.
    """

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass
