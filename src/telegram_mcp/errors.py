"""
Error types raised while configuring the server or sending a message.
"""


class TelegramMcpError(Exception):
    """Base class for all telegram-mcp errors."""


class ConfigurationError(TelegramMcpError):
    """Required settings are missing or empty. Fatal at startup."""


class ValidationError(TelegramMcpError):
    """
    Tool arguments failed validation.

    Args:
        reasons: Human-readable violations, in the order they were found.
    """

    def __init__(self, reasons: list[str]):
        self.reasons = list(reasons)
        super().__init__(", ".join(self.reasons))


class SendError(TelegramMcpError):
    """A send attempt failed after validation."""

    PREFIX = "Failed to send Telegram message"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.PREFIX}: {detail}")


class RemoteApiError(SendError):
    """Telegram answered with ok=false or a non-success HTTP status."""

    def __init__(self, description: str, status_code: int | None = None):
        self.description = description
        self.status_code = status_code
        super().__init__(description)


class TransportError(SendError):
    """The request never produced a usable response (network or parse fault)."""
