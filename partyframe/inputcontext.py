"""A small bounded stack of input contexts with enter and exit hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

MAX_CONTEXT_STACK = 5


@dataclass(eq=False)
class InputContext:
    """An input mode; its hooks receive the context itself."""

    on_enter: Optional[Callable[["InputContext"], None]] = None
    on_exit: Optional[Callable[["InputContext"], None]] = None
    data: Any = None


class ContextStack:
    """Holds at most five contexts; pushes beyond that are ignored."""

    def __init__(self) -> None:
        self._stack: list[InputContext] = []

    def push(self, ctx: InputContext) -> bool:
        """Make ``ctx`` current and run its enter hook; return False if the stack is full."""
        if len(self._stack) >= MAX_CONTEXT_STACK:
            return False
        self._stack.append(ctx)
        if ctx.on_enter is not None:
            ctx.on_enter(ctx)
        return True

    def pop(self) -> Optional[InputContext]:
        """Remove the current context, running its exit hook; None when empty."""
        if not self._stack:
            return None
        ctx = self._stack.pop()
        if ctx.on_exit is not None:
            ctx.on_exit(ctx)
        return ctx

    def current(self) -> Optional[InputContext]:
        return self._stack[-1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)