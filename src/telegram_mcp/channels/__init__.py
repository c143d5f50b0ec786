"""Outbound channel to the Telegram Bot API."""

from telegram_mcp.channels.base import HttpResponse, HttpTransport
from telegram_mcp.channels.http import HttpxTransport
from telegram_mcp.channels.telegram import SendMessageRequest, TelegramSender, validate

__all__ = [
    "HttpResponse",
    "HttpTransport",
    "HttpxTransport",
    "SendMessageRequest",
    "TelegramSender",
    "validate",
]
