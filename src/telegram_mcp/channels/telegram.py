"""
Telegram sender: validates tool arguments and posts them to sendMessage.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError
from telegram.constants import MessageLimit, ParseMode

from telegram_mcp.channels.base import HttpResponse, HttpTransport
from telegram_mcp.channels.http import HttpxTransport
from telegram_mcp.config.schema import Settings
from telegram_mcp.errors import RemoteApiError, TransportError, ValidationError

logger = logging.getLogger(__name__)

# Telegram message length limit, in characters
MAX_MESSAGE_LENGTH = int(MessageLimit.MAX_TEXT_LENGTH)

PARSE_MODES = [ParseMode.HTML.value, ParseMode.MARKDOWN.value, ParseMode.MARKDOWN_V2.value]

# Error types whose message is already user-facing
_PLAIN_ERRORS = {"message_empty", "message_too_long"}


class SendMessageRequest(BaseModel):
    """Arguments of one send_message call."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str
    parse_mode: ParseMode | None = None

    @field_validator("message")
    @classmethod
    def check_length(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("message_empty", "Message cannot be empty")
        if len(v) > MAX_MESSAGE_LENGTH:
            raise PydanticCustomError(
                "message_too_long",
                f"Message exceeds Telegram's {MAX_MESSAGE_LENGTH} character limit",
            )
        return v


def _reason(err: dict[str, Any]) -> str:
    if err["type"] in _PLAIN_ERRORS:
        return err["msg"]
    field = ".".join(str(part) for part in err["loc"])
    return f"{field}: {err['msg']}" if field else err["msg"]


def validate(arguments: Any) -> SendMessageRequest:
    """
    Check raw tool arguments against the send_message schema.

    Args:
        arguments: Mapping received from the MCP client.

    Returns:
        The parsed request.

    Raises:
        ValidationError: With one reason per violation.
    """
    try:
        return SendMessageRequest.model_validate(arguments)
    except PydanticValidationError as e:
        raise ValidationError([_reason(err) for err in e.errors()]) from e


class TelegramSender:
    """
    Sends text to the configured chat via the Bot API sendMessage method.

    Stateless apart from the read-only settings, so concurrent sends are safe.
    """

    validate = staticmethod(validate)

    def __init__(self, settings: Settings, transport: HttpTransport | None = None):
        self.settings = settings
        self.transport = transport or HttpxTransport()

    @property
    def url(self) -> str:
        return f"{self.settings.api_base}/bot{self.settings.bot_token}/sendMessage"

    @property
    def _redacted_url(self) -> str:
        return f"{self.settings.api_base}/bot{self.settings.redacted_token}/sendMessage"

    async def send(
        self, message: str, parse_mode: ParseMode | str | None = None
    ) -> str:
        """
        Post one message. No retries.

        Args:
            message: Text to send (already validated).
            parse_mode: Optional formatting mode; omitted from the request when None.

        Returns:
            Confirmation text including the Telegram message ID.

        Raises:
            RemoteApiError: Telegram rejected the request.
            TransportError: No usable response was received.
        """
        payload: dict[str, Any] = {
            "chat_id": self.settings.chat_id,
            "text": message,
        }
        if parse_mode:
            payload["parse_mode"] = ParseMode(parse_mode).value

        logger.debug(f"Sending to URL: {self._redacted_url}")
        logger.debug(
            f"Chat ID: {self.settings.chat_id}, message length: {len(message)}, "
            f"parse_mode: {payload.get('parse_mode')}"
        )

        response = await self.transport.post_json(self.url, payload)
        logger.debug(f"Response status: {response.status_code}")

        return self._interpret(response)

    def _interpret(self, response: HttpResponse) -> str:
        data = _decode(response)
        description = data.get("description") if data else None

        if not response.is_success:
            raise RemoteApiError(
                description or f"HTTP {response.status_code}", response.status_code
            )
        if data is None:
            raise TransportError("Malformed response body from Telegram")
        if not data.get("ok"):
            raise RemoteApiError(description or "Unknown error", response.status_code)

        result = data.get("result")
        message_id = result.get("message_id") if isinstance(result, dict) else None
        if message_id is None:
            raise TransportError("Telegram response is missing result.message_id")

        logger.info(f"Message {message_id} delivered to chat {self.settings.chat_id}")
        return f"Message sent successfully to Telegram. Message ID: {message_id}"


def _decode(response: HttpResponse) -> dict[str, Any] | None:
    """JSON object in the body, or None if the body isn't one."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
