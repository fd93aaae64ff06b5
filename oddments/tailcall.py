"""Run self-recursive functions in constant stack space.

A function decorated with :func:`tailcall` may call itself anywhere in its
body; while it is running, such a call does not nest. The call's arguments
are evaluated, the current invocation is abandoned, and the function starts
again with the new arguments. Whatever the function finally returns is the
result of the outermost call.
"""

from __future__ import annotations

import functools
import threading
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


class _TailCall(BaseException):
    """Carries the arguments of a recursive call back to the running loop.

    It derives from BaseException so that ``except Exception`` in the
    decorated body does not intercept it.
    """

    def __init__(self, target: Callable[..., Any], arguments: tuple, keywords: dict) -> None:
        super().__init__()
        self.target = target
        self.arguments = arguments
        self.keywords = keywords


def tailcall(func: F) -> F:
    """Turn every call ``func`` makes to itself into a jump back to its start."""
    state = threading.local()

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if getattr(state, "active", False):
            raise _TailCall(wrapper, args, kwargs)

        state.active = True
        try:
            while True:
                try:
                    return func(*args, **kwargs)
                except _TailCall as call:
                    if call.target is not wrapper:
                        raise
                    args, kwargs = call.arguments, call.keywords
        finally:
            state.active = False

    return wrapper  # type: ignore[return-value]