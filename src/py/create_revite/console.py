"""Shared rich consoles."""

import logging

from rich.console import Console

__all__ = ("console", "err_console", "logger")

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger("create_revite")
