"""
@file: ms_passport/__init__.py
@description: Windows Hello (Passport) bindings importable on every platform.
@dependencies: ms_passport.surface, ms_passport.fallback
@created: 2025-10-02

``Passport``, ``KeyCreationOption``, ``PublicKeyEncoding`` and
``VerificationResult`` come from the native module when it can be loaded.
Otherwise they are stand-ins with the same members: ``Passport.available()``
returns ``False`` and everything else raises the original import error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ms_passport.fallback import (
    Constructed,
    ConstructionFailed,
    DummyConfigurationError,
    construct,
    is_dummy,
    is_module_not_found,
)
from ms_passport.surface import ENTITY_NAMES, get_surface

if TYPE_CHECKING:
    from ms_passport._native import (
        KeyCreationOption,
        Passport,
        PublicKeyEncoding,
        VerificationResult,
    )


def __getattr__(name: str) -> Any:
    if name in ENTITY_NAMES:
        return get_surface()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(ENTITY_NAMES))


def open_passport(account_id: str) -> Constructed | ConstructionFailed:
    """Create a ``Passport`` for ``account_id`` without raising on absence."""

    return construct(get_surface()["Passport"], account_id)


__all__ = [
    "Constructed",
    "ConstructionFailed",
    "DummyConfigurationError",
    "KeyCreationOption",
    "Passport",
    "PublicKeyEncoding",
    "VerificationResult",
    "construct",
    "get_surface",
    "is_dummy",
    "is_module_not_found",
    "open_passport",
]
