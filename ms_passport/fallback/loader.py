"""
@file: ms_passport/fallback/loader.py
@description: One-shot load attempt of a native entity, returned as a tagged outcome.
@dependencies: importlib
@created: 2025-10-02
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from importlib import import_module
from types import ModuleType
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Loaded:
    """The native entity was found and is published as is."""

    entity: Any


@dataclass(frozen=True, slots=True)
class Failed:
    """The native entity could not be obtained; ``error`` is the original exception."""

    error: BaseException


LoadOutcome = Union[Loaded, Failed]


class NativeLoader:
    """Fetches entities from a native module by name.

    Only import failures and missing attributes are load failures. Any other
    exception raised while importing the module propagates.
    """

    def __init__(
        self,
        module: str,
        *,
        importer: Callable[[str], ModuleType] = import_module,
    ) -> None:
        self.module = module
        self._importer = importer

    def __call__(self, identifier: str) -> LoadOutcome:
        try:
            native = self._importer(self.module)
            entity = getattr(native, identifier)
        except (ImportError, AttributeError) as exc:
            return Failed(exc)
        return Loaded(entity)

    def __repr__(self) -> str:
        return f"NativeLoader({self.module!r})"


__all__ = ["Failed", "LoadOutcome", "Loaded", "NativeLoader"]
