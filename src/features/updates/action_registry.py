from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

_ACTION_MARKER = "__dispatch_action__"
_FALLBACK_MARKER = "__dispatch_fallback__"


class Visibility(Enum):
    public = "Public"
    protected = "Protected"


@dataclass(frozen = True)
class RegisteredAction:
    name: str
    handler: Callable[..., Any]
    visibility: Visibility

    @property
    def is_public(self) -> bool:
        return self.visibility == Visibility.public


class ActionRegistry:
    """Maps action identifiers to their handlers, and keeps the optional fallback handler."""

    __actions: dict[str, RegisteredAction]
    __fallback: RegisteredAction | None

    def __init__(self, actions: dict[str, RegisteredAction] | None = None, fallback: RegisteredAction | None = None):
        self.__actions = dict(actions or {})
        self.__fallback = fallback

    def register(
        self,
        name: str,
        handler: Callable[..., Any],
        visibility: Visibility = Visibility.public,
    ) -> RegisteredAction:
        registered = RegisteredAction(name, handler, visibility)
        self.__actions[name] = registered
        return registered

    def register_fallback(
        self,
        handler: Callable[..., Any],
        visibility: Visibility = Visibility.public,
    ) -> RegisteredAction:
        self.__fallback = RegisteredAction(handler.__name__, handler, visibility)
        return self.__fallback

    def get(self, name: str) -> RegisteredAction | None:
        return self.__actions.get(name)

    def public_action(self, name: str) -> RegisteredAction | None:
        registered = self.__actions.get(name)
        return registered if registered and registered.is_public else None

    def public_fallback(self) -> RegisteredAction | None:
        return self.__fallback if self.__fallback and self.__fallback.is_public else None

    @property
    def names(self) -> list[str]:
        return list(self.__actions.keys())

    def copy(self) -> "ActionRegistry":
        return ActionRegistry(self.__actions, self.__fallback)

    def collect(self, namespace: dict[str, Any]):
        """
        Registers every function in the given class namespace that was marked by a decorator.
        An unmarked function overriding a registered handler (by attribute name) replaces it,
        keeping the registered action name and visibility.
        """
        for key, attribute in namespace.items():
            if not callable(attribute):
                continue
            action_marker = getattr(attribute, _ACTION_MARKER, None)
            fallback_marker = getattr(attribute, _FALLBACK_MARKER, None)
            if action_marker:
                name, visibility = action_marker
                self.register(name or attribute.__name__, attribute, visibility)
            if fallback_marker:
                self.register_fallback(attribute, fallback_marker)
            if not action_marker and not fallback_marker:
                self.__rebind(key, attribute)

    def __rebind(self, attribute_name: str, handler: Callable[..., Any]):
        for name, registered in list(self.__actions.items()):
            if getattr(registered.handler, "__name__", None) == attribute_name:
                self.__actions[name] = RegisteredAction(name, handler, registered.visibility)
        if self.__fallback and getattr(self.__fallback.handler, "__name__", None) == attribute_name:
            self.__fallback = RegisteredAction(attribute_name, handler, self.__fallback.visibility)


def action(
    func: Callable[..., Any] | None = None,
    *,
    name: str | None = None,
    visibility: Visibility = Visibility.public,
) -> Any:
    def mark(target: Callable[..., Any]) -> Callable[..., Any]:
        setattr(target, _ACTION_MARKER, (name, visibility))
        return target

    return mark(func) if func is not None else mark


def fallback_action(
    func: Callable[..., Any] | None = None,
    *,
    visibility: Visibility = Visibility.public,
) -> Any:
    def mark(target: Callable[..., Any]) -> Callable[..., Any]:
        setattr(target, _FALLBACK_MARKER, visibility)
        return target

    return mark(func) if func is not None else mark
