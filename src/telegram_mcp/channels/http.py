"""
HTTP transport backed by httpx.
"""

import logging
from typing import Any

import httpx

from telegram_mcp.channels.base import HttpResponse, HttpTransport
from telegram_mcp.errors import TransportError

logger = logging.getLogger(__name__)


class HttpxTransport(HttpTransport):
    """
    One short-lived httpx.AsyncClient per request, default timeouts.

    Args:
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def post_json(self, url: str, payload: dict[str, Any]) -> HttpResponse:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"HTTP request failed: {type(e).__name__}")
            raise TransportError(str(e) or type(e).__name__) from e

        return HttpResponse(status_code=response.status_code, body=response.content)
