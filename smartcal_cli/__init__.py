"""CLI package for the smart calendar."""

import logging
import sys

from smartcal.config import AppConfig

# The file keeps the logger name so provider and store messages can be told apart
FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"

# HTTP and SDK loggers that would otherwise flood the debug log file
NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "google_genai", "werkzeug")


def _console_level(verbose: bool, quiet: bool) -> int:
    # --quiet wins over --verbose
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: AppConfig | None = None
) -> None:
    """Configure logging to a debug file and to stderr.

    Every message from the calendar goes to the log file. The console only
    shows warnings unless ``verbose`` or ``quiet`` say otherwise; stdout is
    left to the views.

    Args:
        verbose: If True, set console to INFO level
        quiet: If True, set console to ERROR level only
        config: Optional AppConfig for log directory/filename settings
    """
    if config is None:
        config = AppConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(config.log_dir / config.log_filename, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    console_handler.setLevel(_console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Re-running (tests, nested invocations) must not stack handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def main() -> None:
    """Main entry point for the CLI."""
    from smartcal_cli.parser import main as run

    run()


__all__ = ["main", "setup_logging"]
