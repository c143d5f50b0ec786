"""
Abstract HTTP transport used by the sender.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HttpResponse:
    """Status and raw body of an HTTP response."""

    status_code: int
    body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON. Raises ValueError if it isn't."""
        return json.loads(self.body)


class HttpTransport(ABC):
    """
    Anything that can POST a JSON payload and hand back status + body.

    Implementations raise TransportError when no response was received.
    Non-success statuses are returned, not raised.
    """

    @abstractmethod
    async def post_json(self, url: str, payload: dict[str, Any]) -> HttpResponse:
        """POST `payload` as JSON to `url`."""
        pass
