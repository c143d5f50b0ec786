"""Command-line interface for telegram-mcp."""

from telegram_mcp.cli.commands import app, main

__all__ = ["app", "main"]
