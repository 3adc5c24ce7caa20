"""
@file: ms_passport/fallback/overrides.py
@description: Validation of per-member fallback overrides.
@dependencies: ms_passport.fallback.errors
@created: 2025-10-02
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from .errors import DummyConfigurationError


def resolve_overrides(
    identifier: str,
    members: Mapping[str, Any],
    overrides: Mapping[str, Callable[..., Any]] | None,
) -> Mapping[str, Callable[..., Any]]:
    """Check an override table against the declared members of an entity.

    Every override must name a declared member and be callable. The
    validated table is returned as a read-only mapping.
    """

    if not overrides:
        return MappingProxyType({})

    unknown = sorted(name for name in overrides if name not in members)
    if unknown:
        raise DummyConfigurationError(
            f"{identifier}: overrides reference undeclared members: {', '.join(unknown)}"
        )

    not_callable = sorted(name for name, fn in overrides.items() if not callable(fn))
    if not_callable:
        raise DummyConfigurationError(
            f"{identifier}: overrides must be callable: {', '.join(not_callable)}"
        )

    return MappingProxyType(dict(overrides))


__all__ = ["resolve_overrides"]
