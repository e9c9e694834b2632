from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from util import error_codes
from util.errors import ValidationError

# check order matters: the first key present in an update wins
PAYLOAD_TYPES: tuple[str, ...] = (
    "message",
    "edited_message",
    "channel_post",
    "edited_channel_post",
    "inline_query",
    "chosen_inline_result",
    "callback_query",
    "shipping_query",
    "pre_checkout_query",
)
RESERVED_ACTION_NAMES: frozenset[str] = frozenset(PAYLOAD_TYPES)
UNSUPPORTED_PAYLOAD_TYPE = "unsupported_payload_type"


@dataclass(frozen = True)
class Classification:
    payload_type: str | None
    payload: Any

    @property
    def is_supported(self) -> bool:
        return self.payload_type is not None


def classify(update: Mapping[str, Any]) -> Classification:
    if not isinstance(update, Mapping):
        raise ValidationError(f"Update must be a mapping, got '{type(update).__name__}'", error_codes.UPDATE_NOT_A_MAPPING)
    for payload_type in PAYLOAD_TYPES:
        # presence of the key decides, even for empty payloads
        if payload_type in update:
            return Classification(payload_type, update[payload_type])
    return Classification(None, {})
