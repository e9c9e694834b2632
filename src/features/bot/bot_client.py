from collections.abc import Mapping
from typing import Any

import requests
from pydantic import SecretStr
from requests import Response

from util import error_codes, log
from util.config import config
from util.errors import ConfigurationError, ExternalServiceError
from util.functions import mask_secret, normalize_username


class BotClient:
    """https://core.telegram.org/bots/api#making-requests"""

    # replaced with a stub class while `stub_all` is active
    factory: type["BotClient"] | None = None

    token: SecretStr
    username: str | None
    __api_base_url: str

    def __init__(self, token: str | SecretStr | None = None, username: str | None = None, api_base_url: str | None = None):
        if token is None:
            token = config.bot_token
        self.token = token if isinstance(token, SecretStr) else SecretStr(token)
        self.username = normalize_username(username)
        self.__api_base_url = (api_base_url or config.bot_api_base_url).rstrip("/")

    @classmethod
    def wrap(cls, source: Any) -> "BotClient":
        """
        Builds a client from the given source: an existing client (returned as is),
        a token string, or a mapping of constructor arguments (`token`, `username`, ...).
        """
        if isinstance(source, BotClient):
            return source
        target = BotClient.factory or cls
        if isinstance(source, (str, SecretStr)):
            return target(token = source)
        if isinstance(source, Mapping):
            return target(**source)
        raise ConfigurationError(
            f"Can't build a bot client from '{type(source).__name__}'",
            error_codes.INVALID_BOT_CLIENT_SOURCE,
        )

    def request(self, action: str, body: Mapping[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self.__api_base_url}/bot{self.token.get_secret_value()}/{action}"
        response = requests.post(url, json = dict(body or {}), timeout = config.web_timeout_s)
        return self.__parse(action, response)

    def send_message(self, chat_id: int | str, text: str, **params: Any) -> dict[str, Any]:
        return self.request("sendMessage", {"chat_id": chat_id, "text": text, **params})

    def get_me(self) -> dict[str, Any]:
        return self.request("getMe")

    @staticmethod
    def __parse(action: str, response: Response) -> dict[str, Any]:
        if response.status_code < 300:
            return response.json()
        try:
            description = response.json().get("description")
        except ValueError:
            description = None
        message = f"{response.reason}: {description or '-'}"
        log.w(f"Bot API request '{action}' failed with HTTP_{response.status_code}", message)
        raise ExternalServiceError(message, error_codes.BOT_API_REQUEST_FAILED)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(username = {self.username!r}, token = {mask_secret(self.token)!r})"
