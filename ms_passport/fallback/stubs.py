"""
@file: ms_passport/fallback/stubs.py
@description: Builds the per-member descriptors used by dummy entities.
@dependencies: ms_passport.fallback.descriptors
@created: 2025-10-02
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

from .descriptors import MemberKind


def raiser(error: BaseException) -> Callable[..., NoReturn]:
    # Every raise restarts from the load-time traceback and context, so the
    # shared object never keeps frames or chained errors from a caller.
    origin = error.__traceback__
    context = error.__context__

    def _raise(*_args: Any, **_kwargs: Any) -> NoReturn:
        try:
            raise error.with_traceback(origin)
        finally:
            error.__context__ = context

    return _raise


def build_member(
    name: str,
    kind: MemberKind,
    error: BaseException,
    override: Callable[..., Any] | None = None,
    *,
    owner: str = "",
) -> property | staticmethod:
    """Return the class-level descriptor for one member of a dummy entity.

    Accessors become read-only properties, operations become static
    functions. Without an override both raise ``error`` itself; with one they
    return whatever the override returns.
    """

    target: Callable[..., Any] = override if override is not None else raiser(error)
    qualname = f"{owner}.{name}" if owner else name

    if kind is MemberKind.ACCESSOR:

        def _get(_self: Any) -> Any:
            return target()

        _get.__name__ = name
        _get.__qualname__ = qualname
        return property(_get, doc=f"{qualname} (native module unavailable)")

    def _call(*args: Any, **kwargs: Any) -> Any:
        return target(*args, **kwargs)

    _call.__name__ = name
    _call.__qualname__ = qualname
    _call.__doc__ = f"{qualname} (native module unavailable)"
    return staticmethod(_call)


__all__ = ["build_member", "raiser"]
