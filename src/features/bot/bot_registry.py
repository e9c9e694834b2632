import threading
from typing import Any

from features.bot.bot_client import BotClient
from features.bot.decorators.debug_client_decorator import DebugClientDecorator
from util import error_codes, log
from util.config import config
from util.errors import NotFoundError

DEFAULT_BOT_ID = "default"


class BotRegistry:
    """Bots by their identifier; filled once at start-up and only read while dispatching."""

    __bots: dict[str, Any]
    __lock: threading.Lock

    def __init__(self):
        self.__bots = {}
        self.__lock = threading.Lock()

    def register(self, bot_id: str, bot: Any) -> Any:
        with self.__lock:
            self.__bots[bot_id] = bot
        log.d(f"Registered bot '{bot_id}'")
        return bot

    def by_id(self, bot_id: str) -> Any:
        bot = self.__bots.get(bot_id)
        if bot is None:
            raise NotFoundError(f"Bot '{bot_id}' not found", error_codes.BOT_NOT_FOUND)
        return bot

    def default(self) -> Any:
        with self.__lock:
            if DEFAULT_BOT_ID not in self.__bots:
                self.__bots[DEFAULT_BOT_ID] = self.__create_configured_bot()
            return self.__bots[DEFAULT_BOT_ID]

    @property
    def ids(self) -> list[str]:
        return list(self.__bots.keys())

    @staticmethod
    def __create_configured_bot() -> Any:
        bot = BotClient.wrap({"token": config.bot_token, "username": config.bot_username})
        if config.debug_bot_client:
            return DebugClientDecorator(bot)
        return bot


bot_registry = BotRegistry()
