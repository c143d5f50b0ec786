"""
Configuration schema using Pydantic v2.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


TELEGRAM_API_BASE = "https://api.telegram.org"


class Settings(BaseSettings):
    """
    Process-wide settings, built once at startup.

    Loads from environment variables with the TELEGRAM_ prefix
    (TELEGRAM_BOT_TOKEN, TELEGRAM_CHAT_ID, TELEGRAM_API_BASE) and
    from a .env file in the working directory.
    """

    bot_token: str
    chat_id: str
    api_base: str = TELEGRAM_API_BASE

    model_config = SettingsConfigDict(
        env_prefix="TELEGRAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("bot_token", "chat_id")
    @classmethod
    def require_value(cls, v: str) -> str:
        """Reject empty or whitespace-only credentials."""
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/") or TELEGRAM_API_BASE

    @property
    def redacted_token(self) -> str:
        """Token safe for logs and status output."""
        return f"{self.bot_token[:8]}..."
