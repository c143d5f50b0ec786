"""MCP tools exposed by telegram-mcp."""

from telegram_mcp.tools.message import SEND_MESSAGE_SCHEMA, create_send_message_tool

__all__ = ["SEND_MESSAGE_SCHEMA", "create_send_message_tool"]
