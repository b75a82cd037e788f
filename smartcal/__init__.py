"""SmartCal: personal calendar with holidays, weather and advance notifications."""

from smartcal.web import create_app

__all__ = ["create_app"]
