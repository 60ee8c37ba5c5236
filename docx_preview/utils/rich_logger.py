"""
Rich logging for docx-preview.

Provides colorful console logging and report tables for the command line tool.
"""

import logging
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.traceback import install

PACKAGE_LOGGER = "docx_preview"


def setup_logging(level: str = "INFO", use_rich: bool = True, console: Optional[Console] = None) -> logging.Logger:
    """
    Setup logging for the command line tool.

    Args:
        level: Log level name
        use_rich: Whether to log through a rich handler
        console: Console to log to (stderr by default)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    if use_rich:
        install(show_locals=False)
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

    logger.addHandler(handler)
    logger.propagate = False
    return logger


def print_table(console: Console, title: str, data: Dict[str, Any]) -> None:
    """Display a property table."""
    table = Table(title=title)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="magenta")

    for key, value in data.items():
        if value is None:
            continue
        table.add_row(str(key), str(value))

    console.print(table)


def success(console: Console, message: str) -> None:
    console.print(f"[green]✓ {message}[/green]")


def failure(console: Console, message: str) -> None:
    console.print(f"[red]✗ {message}[/red]")
