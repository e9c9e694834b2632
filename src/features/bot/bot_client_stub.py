from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Iterator

from pydantic import SecretStr

from features.bot.bot_client import BotClient


class BotClientStub(BotClient):
    """A client that records requests instead of sending them; the default response is an empty success."""

    requests: list[tuple[str, dict[str, Any]]]
    response: dict[str, Any]

    def __init__(
        self,
        token: str | SecretStr | None = None,
        username: str | None = None,
        api_base_url: str | None = None,
    ):
        super().__init__(token = token or "stub", username = username, api_base_url = api_base_url)
        self.requests = []
        self.response = {"ok": True, "result": {}}

    def request(self, action: str, body: Mapping[str, Any] | None = None) -> dict[str, Any]:
        self.requests.append((action, dict(body or {})))
        return self.response

    def requests_for(self, action: str) -> list[dict[str, Any]]:
        return [body for name, body in self.requests if name == action]

    def reset(self):
        self.requests = []


@contextmanager
def stub_all(enabled: bool = True) -> Iterator[None]:
    """Makes `BotClient.wrap` build stubs (or real clients, when disabled) until the block exits."""
    previous = BotClient.factory
    BotClient.factory = BotClientStub if enabled else None
    try:
        yield
    finally:
        BotClient.factory = previous
