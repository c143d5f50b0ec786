"""telegram-mcp — MCP server that sends messages to a Telegram chat."""

__version__ = "1.0.0"
