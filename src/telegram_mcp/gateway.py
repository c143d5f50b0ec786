"""
Tool gateway: bridges MCP list_tools / call_tool to the Telegram sender.

Every call_tool request gets exactly one text content item back. Failures are
reported in that text, never as protocol-level errors.
"""

import logging
from dataclasses import dataclass
from typing import Any

import mcp.types as types
from claude_agent_sdk import SdkMcpTool
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from telegram_mcp import __version__
from telegram_mcp.channels.base import HttpTransport
from telegram_mcp.channels.telegram import TelegramSender
from telegram_mcp.config.schema import Settings
from telegram_mcp.errors import TelegramMcpError, ValidationError
from telegram_mcp.tools.message import create_send_message_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "telegram-mcp"


@dataclass(frozen=True)
class ToolReply:
    """Outcome of one tool invocation, before it is wrapped for MCP."""

    text: str
    is_error: bool = False

    def to_content(self) -> list[types.TextContent]:
        return [types.TextContent(type="text", text=self.text)]


class ToolGateway:
    """
    Holds the registered tools and dispatches invocations to them.

    Args:
        tools: Tools created with the claude_agent_sdk `tool` decorator.
    """

    def __init__(self, tools: list[SdkMcpTool[Any]]):
        self._tools = {t.name: t for t in tools}

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: HttpTransport | None = None
    ) -> "ToolGateway":
        """Gateway with the send_message tool wired to a fresh sender."""
        sender = TelegramSender(settings, transport)
        return cls([create_send_message_tool(sender)])

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=t.name,
                description=t.description,
                inputSchema=t.input_schema,
            )
            for t in self._tools.values()
        ]

    async def invoke(self, name: str, arguments: dict[str, Any] | None) -> ToolReply:
        """
        Run a tool by name. Never raises.

        Args:
            name: Tool name from the call_tool request.
            arguments: Raw arguments from the client (may be None).

        Returns:
            ToolReply with the text to send back to the client.
        """
        t = self._tools.get(name)
        if t is None:
            logger.warning(f"Unknown tool requested: {name}")
            return ToolReply(f"Unknown tool: {name}")

        logger.info(f"Tool call: {name}")
        try:
            result = await t.handler(arguments or {})
        except ValidationError as e:
            logger.info(f"Rejected {name} call: {e}")
            return ToolReply(f"Invalid input: {e}", is_error=True)
        except TelegramMcpError as e:
            logger.error(f"{name} failed: {e}")
            return ToolReply(f"Error: {e}", is_error=True)
        except Exception as e:
            logger.exception(f"Unexpected error in {name}")
            return ToolReply(f"Error: {str(e) or 'Unknown error occurred'}", is_error=True)

        return _reply_from_result(result)


def _reply_from_result(result: dict[str, Any]) -> ToolReply:
    """Collapse a tool handler result into a single text reply."""
    texts = [
        block.get("text", "")
        for block in result.get("content", [])
        if block.get("type") == "text"
    ]
    return ToolReply("\n".join(texts), is_error=bool(result.get("is_error")))


def build_server(gateway: ToolGateway) -> Server:
    """
    Create the low-level MCP server for a gateway.

    Input validation by the MCP library is disabled so that schema
    violations come back as "Invalid input: ..." text.
    """
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return gateway.list_tools()

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        reply = await gateway.invoke(name, arguments)
        return reply.to_content()

    return server


async def serve_stdio(settings: Settings) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    server = build_server(ToolGateway.from_settings(settings))

    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"Telegram MCP server started (chat ID: {settings.chat_id})")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
    logger.info("Telegram MCP server stopped")
