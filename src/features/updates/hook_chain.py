from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from util import error_codes, log
from util.errors import InternalError, ValidationError


class HaltMarker(Enum):
    halted = "Halted"


# returned by a halted dispatch; never a legitimate action result
HALTED = HaltMarker.halted


@dataclass(frozen = True)
class Continue:
    pass


@dataclass(frozen = True)
class Halt:
    value: Any = HALTED


HookResult = Continue | Halt
CONTINUE = Continue()

Hook = str | Callable[[Any], HookResult | None]


@dataclass(frozen = True)
class BeforeHook:
    hook: Hook
    only: frozenset[str] | None = None
    skip: frozenset[str] | None = None

    def applies_to(self, action: str) -> bool:
        if self.only is not None:
            return action in self.only
        if self.skip is not None:
            return action not in self.skip
        return True

    @property
    def name(self) -> str:
        return self.hook if isinstance(self.hook, str) else getattr(self.hook, "__name__", repr(self.hook))


class HookChain:
    """
    An ordered list of hooks that run before an action. Hooks run strictly in registration order
    and the first one that returns `Halt` stops the chain (later hooks and the action are skipped).
    A hook returning `None` is treated the same as `Continue`.
    """

    __hooks: list[BeforeHook]

    def __init__(self, hooks: Iterable[BeforeHook] = ()):
        self.__hooks = list(hooks)

    @property
    def hooks(self) -> list[BeforeHook]:
        return list(self.__hooks)

    def add(self, hook: Hook, only: Iterable[str] | None = None, skip: Iterable[str] | None = None) -> BeforeHook:
        if only is not None and skip is not None:
            raise ValidationError(f"Hook '{hook}' can't use both 'only' and 'skip'", error_codes.INVALID_HOOK_FILTER)
        before_hook = BeforeHook(
            hook = hook,
            only = self.__to_names(only),
            skip = self.__to_names(skip),
        )
        self.__hooks.append(before_hook)
        return before_hook

    def copy(self) -> "HookChain":
        return HookChain(self.__hooks)

    def run(self, controller: Any, action: str) -> Halt | None:
        for before_hook in self.__hooks:
            if not before_hook.applies_to(action):
                continue
            result = self.__invoke(controller, before_hook.hook)
            if result is None or isinstance(result, Continue):
                continue
            if isinstance(result, Halt):
                log.t(f"Hook '{before_hook.name}' halted the chain for '{action}'")
                return result
            raise InternalError(
                f"Hook '{before_hook.name}' returned '{type(result).__name__}' instead of a hook result",
                error_codes.INVALID_HOOK_RESULT,
            )
        return None

    @staticmethod
    def __invoke(controller: Any, hook: Hook) -> HookResult | None:
        if isinstance(hook, str):
            return getattr(controller, hook)()
        return hook(controller)

    @staticmethod
    def __to_names(actions: Iterable[str] | str | None) -> frozenset[str] | None:
        if actions is None:
            return None
        if isinstance(actions, str):
            return frozenset([actions])
        return frozenset(actions)
