"""Registry of named command handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

Handler = Callable[[Any, "Command"], Any]


@dataclass(frozen=True)
class Command:
    """A command name with the arguments that follow it."""

    name: str
    args: list[str] = field(default_factory=list)


class CommandNotFoundError(LookupError):
    """No handler is registered under the requested name."""


class Commands:
    """Maps command names to handlers and dispatches to them."""

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """Register ``handler`` under ``name``, replacing any earlier one."""
        self._handlers[name] = handler

    def run(self, state: Any, cmd: Command) -> Any:
        """Run the handler registered for ``cmd.name``."""
        try:
            handler = self._handlers[cmd.name]
        except KeyError:
            raise CommandNotFoundError("command not found") from None
        return handler(state, cmd)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)