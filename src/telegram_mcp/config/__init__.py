"""Configuration management."""

from telegram_mcp.config.schema import Settings
from telegram_mcp.config.loader import load_config

__all__ = ["Settings", "load_config"]
