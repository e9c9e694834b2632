from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from api.auth import verify_webhook_auth_key
from features.bot.bot_registry import DEFAULT_BOT_ID, BotRegistry, bot_registry
from features.updates.updates_controller import UpdatesController
from util import log
from util.errors import ServiceError


def create_webhook_router(
    controller_class: type[UpdatesController],
    bot_id: str = DEFAULT_BOT_ID,
    registry: BotRegistry = bot_registry,
) -> APIRouter:
    """
    Creates a router accepting bot updates on `POST /{bot_id}/update`. Each update is dispatched
    synchronously through a fresh instance of the given controller class.
    """
    router = APIRouter()

    @router.post(f"/{bot_id}/update")
    def bot_update(
        update: dict[str, Any],
        _ = Depends(verify_webhook_auth_key),
    ) -> dict:
        try:
            bot = registry.default() if bot_id == DEFAULT_BOT_ID else registry.by_id(bot_id)
            controller_class.dispatch(bot, update)
            return {"status": "ok"}
        except ServiceError as e:
            log.e(f"Failed to dispatch an update for bot '{bot_id}'", e)
            raise HTTPException(status_code = e.http_status, detail = e.to_api_dict())
        except Exception as e:
            raise HTTPException(status_code = 500, detail = {"reason": log.e("Failed to dispatch the update", e)})

    return router
