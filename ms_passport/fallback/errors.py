"""
@file: ms_passport/fallback/errors.py
@description: Error types raised by the fallback machinery itself.
@dependencies: none
@created: 2025-10-02
"""

from __future__ import annotations


class DummyConfigurationError(ValueError):
    """Raised when the descriptor table does not match the declared surface."""


class FrozenEntityError(AttributeError):
    """Raised when code tries to mutate a synthesized entity."""


def is_module_not_found(exc: BaseException | None, module: str | None = None) -> bool:
    """Return True when ``exc`` signals that a native module could not be found.

    ``module`` narrows the check to one module identifier (or its parents).
    """

    if not isinstance(exc, ModuleNotFoundError):
        return False
    if module is None:
        return True
    missing = exc.name or ""
    return bool(missing) and (module == missing or module.startswith(f"{missing}."))


__all__ = ["DummyConfigurationError", "FrozenEntityError", "is_module_not_found"]
