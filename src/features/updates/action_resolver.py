from dataclasses import dataclass, field
from typing import Any

from features.updates.command_parser import MentionContext, parse_command
from features.updates.payload_type import PAYLOAD_TYPES, RESERVED_ACTION_NAMES, UNSUPPORTED_PAYLOAD_TYPE
from util.functions import field_of

COMMAND_ACTION_PREFIX = "on_"

# only these types may carry a command; their edited variants never do
__COMMAND_PAYLOAD_TYPES = ("message", "channel_post")
# structured payloads pass just their most used fields as arguments
__DESTRUCTURED_FIELDS: dict[str, tuple[str, ...]] = {
    "inline_query": ("query", "offset"),
    "chosen_inline_result": ("result_id", "query"),
    "callback_query": ("data",),
}


@dataclass(frozen = True)
class ResolvedAction:
    is_command: bool
    action: str
    args: list[Any] = field(default_factory = list)


def action_for_command(command_name: str) -> str:
    action = command_name.lower()
    # payload handlers are reserved, and handler names may not start with a digit
    if action in RESERVED_ACTION_NAMES or action[:1].isdigit():
        return f"{COMMAND_ACTION_PREFIX}{action}"
    return action


def action_for_payload(payload_type: str | None, payload: Any, mention: MentionContext = None) -> ResolvedAction:
    if payload_type is None or payload_type not in PAYLOAD_TYPES:
        return ResolvedAction(False, UNSUPPORTED_PAYLOAD_TYPE, [])

    if payload_type in __COMMAND_PAYLOAD_TYPES:
        text = field_of(payload, "text")
        if text is not None:
            command = parse_command(text, mention)
            if command:
                return ResolvedAction(True, command.name, list(command.args))
        return ResolvedAction(False, payload_type, [payload])

    if fields := __DESTRUCTURED_FIELDS.get(payload_type):
        return ResolvedAction(False, payload_type, [field_of(payload, name) for name in fields])

    return ResolvedAction(False, payload_type, [payload])
