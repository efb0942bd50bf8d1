"""Logging setup for the command line entry point."""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_LOG_LEVEL

_CONFIGURED = False

# Markdown goes to stdout, so diagnostics stay on stderr
err_console = Console(stderr=True)


def configure_logging(level: Optional[str] = None) -> None:
    """Install a rich handler on the root logger (once) and set the level."""
    global _CONFIGURED

    root = logging.getLogger()
    if not _CONFIGURED:
        handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.handlers = [handler]
        _CONFIGURED = True

    value = logging.getLevelName((level or DEFAULT_LOG_LEVEL).upper())
    root.setLevel(value if isinstance(value, int) else logging.WARNING)
