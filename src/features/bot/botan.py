import json
from typing import Any

import requests
from pydantic import SecretStr
from requests import Response

from util import error_codes, log
from util.config import config
from util.errors import ExternalServiceError
from util.functions import mask_secret


class Botan:
    """Analytics client: every tracked event is posted to the tracking endpoint with the bot's token."""

    token: SecretStr
    __track_url: str

    def __init__(self, token: str | SecretStr | None = None, track_url: str | None = None):
        if token is None:
            token = config.botan_token
        self.token = token if isinstance(token, SecretStr) else SecretStr(token)
        self.__track_url = track_url or config.botan_track_url

    def track(self, event: str, uid: int | str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.request("post", self.__track_url, {"name": event, "uid": uid}, json.dumps(payload or {}))

    def request(
        self,
        method: str,
        url: str,
        query: dict[str, Any] | None = None,
        body: str | None = None,
    ) -> dict[str, Any]:
        params = {**(query or {}), "token": self.token.get_secret_value()}
        response = requests.request(
            method.upper(),
            url,
            params = params,
            data = body,
            headers = {"Content-Type": "application/json"},
            timeout = config.web_timeout_s,
        )
        return self.__parse(response)

    @staticmethod
    def __parse(response: Response) -> dict[str, Any]:
        if response.status_code < 300:
            return response.json()
        try:
            info = response.json().get("info")
        except ValueError:
            info = None
        message = f"{response.reason}: {info or '-'}"
        log.w(f"Tracking request failed with HTTP_{response.status_code}", message)
        raise ExternalServiceError(message, error_codes.BOTAN_REQUEST_FAILED)

    def __repr__(self) -> str:
        return f"Botan(token = {mask_secret(self.token)!r})"
