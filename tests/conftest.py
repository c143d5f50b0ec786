"""Shared fixtures: settings and a fake HTTP transport."""

import json
from typing import Any

import pytest

from telegram_mcp.channels.base import HttpResponse, HttpTransport
from telegram_mcp.config.schema import Settings

TEST_TOKEN = "123456:TEST-TOKEN-abcdef"
TEST_CHAT_ID = "-1001234567890"


class FakeTransport(HttpTransport):
    """Records requests and replies with a canned response or error."""

    def __init__(
        self,
        body: Any = None,
        status_code: int = 200,
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests: list[tuple[str, dict[str, Any]]] = []

    async def post_json(self, url: str, payload: dict[str, Any]) -> HttpResponse:
        self.requests.append((url, payload))
        if self.error is not None:
            raise self.error
        body = self.body if isinstance(self.body, bytes) else json.dumps(self.body).encode()
        return HttpResponse(status_code=self.status_code, body=body)


@pytest.fixture
def settings() -> Settings:
    return Settings(bot_token=TEST_TOKEN, chat_id=TEST_CHAT_ID, _env_file=None)


@pytest.fixture
def ok_transport() -> FakeTransport:
    return FakeTransport({"ok": True, "result": {"message_id": 42}})


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """No TELEGRAM_* variables and no stray .env file."""
    for name in ("TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID", "TELEGRAM_API_BASE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
