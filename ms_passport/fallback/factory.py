"""
@file: ms_passport/fallback/factory.py
@description: Result-returning construction of class-shaped entities.
@dependencies: ms_passport.fallback.synthesizer
@created: 2025-10-03
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Union

from .synthesizer import is_dummy


@dataclass(frozen=True, slots=True)
class Constructed:
    instance: Any


@dataclass(frozen=True, slots=True)
class ConstructionFailed:
    error: BaseException


ConstructionOutcome = Union[Constructed, ConstructionFailed]


def construct(entity: Any, *args: Any, **kwargs: Any) -> ConstructionOutcome:
    """Instantiate ``entity`` and report the result instead of raising.

    A dummy class is never called: its captured load failure is returned
    directly. Errors raised by a real constructor are returned the same way.
    Arguments that do not fit the constructor signature raise ``TypeError``
    here, since that is a caller bug rather than a construction outcome.
    """

    if is_dummy(entity):
        return ConstructionFailed(entity.__load_error__)
    if not callable(entity):
        raise TypeError(f"{entity!r} is not constructible")
    try:
        signature = inspect.signature(entity)
    except (TypeError, ValueError):
        signature = None
    if signature is not None:
        signature.bind(*args, **kwargs)
    try:
        instance = entity(*args, **kwargs)
    except Exception as exc:
        return ConstructionFailed(exc)
    return Constructed(instance)


__all__ = ["Constructed", "ConstructionFailed", "ConstructionOutcome", "construct"]
