"""
MCP tool: send_message

Sends a message to the Telegram chat configured at startup.
"""

from typing import Any

from claude_agent_sdk import SdkMcpTool, tool

from telegram_mcp.channels.telegram import MAX_MESSAGE_LENGTH, PARSE_MODES, TelegramSender


SEND_MESSAGE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "message": {
            "type": "string",
            "description": (
                f"The message to send (max {MAX_MESSAGE_LENGTH} characters). "
                "Can contain newlines and special characters."
            ),
            "example": "Hello from Telegram MCP!",
        },
        "parse_mode": {
            "type": "string",
            "enum": PARSE_MODES,
            "description": (
                "Optional text formatting mode. Use HTML for <b>bold</b> and "
                "<i>italic</i>, Markdown for **bold** and *italic*"
            ),
            "example": "HTML",
        },
    },
    "required": ["message"],
}


def create_send_message_tool(sender: TelegramSender) -> SdkMcpTool[Any]:
    """
    Build the send_message tool bound to a sender.

    The handler raises on failure; the gateway turns errors into text.
    """

    @tool(
        "send_message",
        "Send a message to a Telegram chat. Configure the bot token and chat ID "
        "via environment variables TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID.",
        SEND_MESSAGE_SCHEMA,
    )
    async def send_message(args: dict[str, Any]) -> dict[str, Any]:
        request = sender.validate(args)
        text = await sender.send(request.message, request.parse_mode)
        return {"content": [{"type": "text", "text": text}]}

    return send_message
