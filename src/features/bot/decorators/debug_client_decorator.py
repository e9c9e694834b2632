from typing import Any

from util import log


class DebugClientDecorator:
    """Logs every request going through the wrapped client, together with its outcome."""

    __client: Any

    def __init__(self, client: Any):
        self.__client = client

    def request(self, *args: Any, **kwargs: Any) -> Any:
        log.d(f"{type(self.__client).__name__} request", args, kwargs)
        try:
            response = self.__client.request(*args, **kwargs)
        except Exception as e:
            log.w(f"{type(self.__client).__name__} request failed", e)
            raise
        log.d(f"{type(self.__client).__name__} response", response)
        return response

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_DebugClientDecorator__"):
            raise AttributeError(name)
        return getattr(self.__client, name)
