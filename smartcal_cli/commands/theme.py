"""Show or change the theme preference."""

import logging

import typer
from typing_extensions import Annotated

from smartcal.exceptions import ValidationError
from smartcal.storage.kv_store import THEMES
from smartcal_cli.context import get_context
from smartcal_cli.display import console

logger = logging.getLogger(__name__)


def theme_command(
    theme: Annotated[
        str | None, typer.Argument(help=f"New theme: {' or '.join(THEMES)}")
    ] = None,
) -> None:
    """Show the theme, or set it when one is given."""
    preference = get_context().theme
    if theme is not None:
        try:
            preference.set_theme(theme)
        except ValidationError as e:
            logger.error(str(e))
            raise typer.Exit(1)
    console.print(f"Theme: [bold]{preference.get_theme()}[/bold]")
