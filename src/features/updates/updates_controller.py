from collections.abc import Mapping
from typing import Any, Iterable

from features.updates.action_registry import ActionRegistry
from features.updates.action_resolver import ResolvedAction, action_for_command, action_for_payload
from features.updates.command_parser import MentionContext
from features.updates.hook_chain import BeforeHook, Hook, HookChain
from features.updates.payload_type import classify
from util import error_codes, log
from util.config import config
from util.errors import ConfigurationError
from util.functions import field_of


class UpdatesController:
    """
    Handles a single bot update: classifies its payload, resolves the action to run
    (a command handler, a payload-type handler or `unsupported_payload_type`), and
    runs that action through the before-hooks chain.

    Subclasses declare their handlers with `@action` (optionally protected) and an optional
    `@fallback_action` receiving `(action, *args)` for actions that are not publicly callable.
    """

    action_registry: ActionRegistry = ActionRegistry()
    hook_chain: HookChain = HookChain()
    accept_any_mention: bool = False

    bot: Any
    update: Mapping[str, Any] | None
    payload_type: str | None
    payload: Any
    __from_user: Any
    __chat: Any

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        # each subclass extends its own copies, so parents stay untouched
        cls.action_registry = cls.action_registry.copy()
        cls.action_registry.collect(vars(cls))
        cls.hook_chain = cls.hook_chain.copy()

    def __init__(
        self,
        bot: Any = None,
        update: Mapping[str, Any] | None = None,
        from_user: Any = None,
        chat: Any = None,
    ):
        self.bot = bot
        self.update = update
        self.payload_type = None
        self.payload = None
        if update is not None:
            classification = classify(update)
            self.payload_type = classification.payload_type
            self.payload = classification.payload
            if classification.is_supported:
                self.payload = self.cast_payload(classification.payload_type, classification.payload)
        self.__from_user = from_user
        self.__chat = chat

    @classmethod
    def dispatch(cls, bot: Any, update: Mapping[str, Any]) -> Any:
        if config.log_bot_update:
            log.t(f"Received a bot update: `{update}`")
        return cls(bot, update).dispatch_action()

    @classmethod
    def before_action(
        cls,
        hook: Hook,
        only: Iterable[str] | str | None = None,
        skip: Iterable[str] | str | None = None,
    ) -> BeforeHook:
        # subclasses copy the chain when defined, so base hooks would reach only some of them
        if cls is UpdatesController:
            raise ConfigurationError(
                "Hooks must be registered on an UpdatesController subclass",
                error_codes.HOOK_ON_BASE_CONTROLLER,
            )
        return cls.hook_chain.add(hook, only = only, skip = skip)

    # noinspection PyMethodMayBeStatic
    def cast_payload(self, payload_type: str, payload: Any) -> Any:
        return payload

    @property
    def bot_username(self) -> str | None:
        if self.bot is None:
            return None
        return getattr(self.bot, "username", None)

    @property
    def mention_context(self) -> MentionContext:
        return True if self.accept_any_mention else self.bot_username

    @property
    def from_user(self) -> Any:
        if self.__from_user is not None:
            return self.__from_user
        return field_of(self.payload, "from")

    @property
    def chat(self) -> Any:
        if self.__chat is not None:
            return self.__chat
        chat = field_of(self.payload, "chat")
        if chat is not None:
            return chat
        # callback queries carry the chat on their origin message
        return field_of(field_of(self.payload, "message"), "chat")

    def action_for_payload(self) -> ResolvedAction:
        return action_for_payload(self.payload_type, self.payload, self.mention_context)

    def resolve_action(self) -> tuple[str, list[Any]]:
        resolved = self.action_for_payload()
        if resolved.is_command:
            return action_for_command(resolved.action), resolved.args
        return resolved.action, resolved.args

    def dispatch_action(self) -> Any:
        action, args = self.resolve_action()
        log.d(f"Dispatching '{action}' for a '{self.payload_type}' payload")
        return self.process(action, *args)

    def process(self, action: str, *args: Any) -> Any:
        registry = type(self).action_registry

        halt = type(self).hook_chain.run(self, action)
        if halt is not None:
            return halt.value

        registered = registry.public_action(action)
        if registered:
            return registered.handler(self, *args)

        fallback = registry.public_fallback()
        if fallback:
            log.t(f"Action '{action}' is not public, falling back to '{fallback.name}'")
            return fallback.handler(self, action, *args)

        log.d(f"No public action '{action}' and no fallback, skipping")
        return None

    def respond_with(self, kind: str, **params: Any) -> Any:
        """
        Sends a `send<Kind>` request (e.g. `sendMessage` for "message") to the current chat.

        Parameters:
        kind (str): The snake-case kind of the content to send, e.g. "message" or "chat_action".
        params (Any): The remaining request parameters, e.g. `text`.
        """
        chat_id = field_of(self.chat, "id")
        if self.bot is None or chat_id is None:
            raise ConfigurationError("Can't respond without a bot and a chat", error_codes.MISSING_BOT_CONTEXT)
        request_name = "send" + "".join(part.capitalize() for part in kind.split("_"))
        return self.bot.request(request_name, {"chat_id": chat_id, **params})

    def reply_with(self, kind: str, **params: Any) -> Any:
        message_id = field_of(self.payload, "message_id")
        if message_id is not None:
            params.setdefault("reply_to_message_id", message_id)
        return self.respond_with(kind, **params)
