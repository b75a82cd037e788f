"""Display module for rendering calendar output.

This module provides:
- console: Shared Rich console instance
- MonthRenderer: the 6x7 month grid
- RichEventRenderer: day detail and agenda views
- Formatting functions for day labels, periods and temperatures
"""

from smartcal_cli.display.console import console
from smartcal_cli.display.event_renderer import RichEventRenderer
from smartcal_cli.display.formatters import format_day_label, format_period, format_temp
from smartcal_cli.display.month_renderer import MonthRenderer

__all__ = [
    "console",
    "MonthRenderer",
    "RichEventRenderer",
    "format_day_label",
    "format_period",
    "format_temp",
]
