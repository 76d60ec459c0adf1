"""Logging setup for the command-line entry point, built on Rich.

The library modules only create loggers; handlers are installed here, never
on import. Console records go through Rich on stderr, so `--json` output on
stdout stays machine-readable. A rotating file log is added on request.
"""
import atexit
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

__all__ = ['console', 'err_console', 'setup_logging']

# --- Shared Rich console instances ---
console: Console = Console()
err_console: Console = Console(stderr=True)

# --- Handler names for idempotency ---
CONSOLE_HANDLER_NAME = 'iplocate_console'
FILE_HANDLER_NAME = 'iplocate_file'

LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUP_COUNT = 3


def _replace_handler(root: logging.Logger, handler: logging.Handler) -> None:
    for existing in [h for h in root.handlers if h.name == handler.name]:
        root.removeHandler(existing)
        existing.close()
    root.addHandler(handler)


def _build_console_handler(level: int) -> RichHandler:
    handler = RichHandler(console=err_console, show_path=False, markup=False, rich_tracebacks=True)
    handler.name = CONSOLE_HANDLER_NAME
    handler.setLevel(level)
    return handler


def _build_file_handler(log_file: Path) -> RotatingFileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding='utf-8',
    )
    handler.name = FILE_HANDLER_NAME
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S'),
    )
    return handler


def setup_logging(console_level: int = logging.WARNING, log_file: Path | str | None = None) -> None:
    """Install the Rich console handler and, when `log_file` is given, a rotating file handler.

    Calling it again replaces the handlers it installed before, so the latest
    levels and file path always apply. The file receives DEBUG records and up.

    Args:
        console_level: Minimum level shown on the console.
        log_file: Path of the log file, or None for console-only logging.
    """
    root = logging.getLogger()
    _replace_handler(root, _build_console_handler(console_level))

    root_level = console_level
    if log_file is not None:
        _replace_handler(root, _build_file_handler(Path(log_file)))
        root_level = logging.DEBUG

    root.setLevel(root_level)
    logging.captureWarnings(capture=True)
    atexit.register(logging.shutdown)
