from collections.abc import Mapping
from typing import Any

from features.bot.botan import Botan
from util import log


class BotanTrackingDecorator:
    """Tracks every bot request as an analytics event; tracking failures never affect the request."""

    __client: Any
    __botan: Botan

    def __init__(self, client: Any, botan: Botan):
        self.__client = client
        self.__botan = botan

    def request(self, action: str, body: Mapping[str, Any] | None = None) -> Any:
        response = self.__client.request(action, body)
        uid = (body or {}).get("chat_id")
        if uid is not None:
            self.__track(action, uid, dict(body or {}))
        else:
            log.t(f"Not tracking '{action}' without a chat")
        return response

    def __track(self, action: str, uid: Any, body: dict[str, Any]):
        try:
            self.__botan.track(action, uid, body)
        except Exception as e:
            log.w(f"Failed to track '{action}'", e)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_BotanTrackingDecorator__"):
            raise AttributeError(name)
        return getattr(self.__client, name)
