from fastapi import HTTPException, Security
from fastapi.security import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from util import error_codes, log
from util.config import config
from util.errors import AuthorizationError

webhook_auth_key_header = APIKeyHeader(name = "X-Telegram-Bot-Api-Secret-Token", auto_error = False)


def verify_webhook_auth_key(auth_key: str | None = Security(webhook_auth_key_header)) -> str | None:
    if config.webhook_must_auth and auth_key != config.webhook_auth_key.get_secret_value():
        error = AuthorizationError("Could not validate the webhook auth token", error_codes.INVALID_WEBHOOK_AUTH_KEY)
        log.w("Rejected a webhook update", error)
        raise HTTPException(status_code = HTTP_403_FORBIDDEN, detail = error.to_api_dict())
    return auth_key
