from typing import Any

from pydantic import BaseModel

from features.telegram.model.callback_query import CallbackQuery
from features.telegram.model.chosen_inline_result import ChosenInlineResult
from features.telegram.model.inline_query import InlineQuery
from features.telegram.model.message import Message
from features.telegram.model.pre_checkout_query import PreCheckoutQuery
from features.telegram.model.shipping_query import ShippingQuery

PAYLOAD_MODELS: dict[str, type[BaseModel]] = {
    "message": Message,
    "edited_message": Message,
    "channel_post": Message,
    "edited_channel_post": Message,
    "inline_query": InlineQuery,
    "chosen_inline_result": ChosenInlineResult,
    "callback_query": CallbackQuery,
    "shipping_query": ShippingQuery,
    "pre_checkout_query": PreCheckoutQuery,
}


def cast_typed_payload(payload_type: str, payload: Any) -> Any:
    model = PAYLOAD_MODELS.get(payload_type)
    if model is None or payload is None or isinstance(payload, model):
        return payload
    return model.model_validate(payload)


class TypedUpdate:
    """Mix into an `UpdatesController` to receive payloads as pydantic models instead of raw mappings."""

    # noinspection PyMethodMayBeStatic
    def cast_payload(self, payload_type: str, payload: Any) -> Any:
        return cast_typed_payload(payload_type, payload)
