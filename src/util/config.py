# ruff: noqa: E501

import os
from typing import Callable

from pydantic import SecretStr

from util.singleton import Singleton


class Config(metaclass = Singleton):

    log_level: str
    log_bot_update: bool
    debug_bot_client: bool
    web_timeout_s: int
    bot_api_base_url: str
    bot_username: str
    botan_track_url: str
    webhook_must_auth: bool
    version: str

    bot_token: SecretStr
    botan_token: SecretStr
    webhook_auth_key: SecretStr

    def all_secrets(self) -> list[SecretStr]:
        return [
            self.bot_token,
            self.botan_token,
            self.webhook_auth_key,
        ]

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_log_bot_update: bool = False,
        def_debug_bot_client: bool = False,
        def_web_timeout_s: int = 10,
        def_bot_api_base_url: str = "https://api.telegram.org",
        def_bot_username: str = "dispatch_bot",
        def_botan_track_url: str = "https://api.botan.io/track",
        def_webhook_must_auth: bool = False,
        def_version: str = "dev",

        def_bot_token: SecretStr = SecretStr("invalid"),
        def_botan_token: SecretStr = SecretStr("invalid"),
        def_webhook_auth_key: SecretStr = SecretStr("it_is_really_the_bot_api"),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_bot_update = self.__env("LOG_BOT_UPDATE", lambda: str(def_log_bot_update)).lower() == "true"
        self.debug_bot_client = self.__env("DEBUG_BOT_CLIENT", lambda: str(def_debug_bot_client)).lower() == "true"
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.bot_api_base_url = self.__env("BOT_API_BASE_URL", lambda: def_bot_api_base_url).rstrip("/")
        self.bot_username = self.__env("BOT_USERNAME", lambda: def_bot_username)
        self.botan_track_url = self.__env("BOTAN_TRACK_URL", lambda: def_botan_track_url)
        self.webhook_must_auth = self.__env("WEBHOOK_AUTH_ON", lambda: str(def_webhook_must_auth)).lower() == "true"
        self.version = self.__env("VERSION", lambda: def_version)

        self.bot_token = self.__senv("BOT_TOKEN", lambda: def_bot_token)
        self.botan_token = self.__senv("BOTAN_TOKEN", lambda: def_botan_token)
        self.webhook_auth_key = self.__senv("WEBHOOK_AUTH_KEY", lambda: def_webhook_auth_key)
        # @formatter:on

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
