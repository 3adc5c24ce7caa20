"""
@file: ms_passport/fallback/descriptors.py
@description: Descriptor records describing the exported shape of a native entity.
@dependencies: ms_passport.fallback.overrides
@created: 2025-10-02
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .overrides import resolve_overrides


class MemberKind(enum.Enum):
    """How a member is used: read as a value or called as a function."""

    ACCESSOR = "accessor"
    OPERATION = "operation"


@dataclass(frozen=True, slots=True)
class EntityDescriptor:
    """Shape of one exported entity of the native module.

    ``members`` maps every exported member name to its kind. ``overrides``
    maps a subset of those names to deterministic fallbacks used instead of
    raising the load failure.
    """

    identifier: str
    members: Mapping[str, MemberKind]
    is_constructible: bool = False
    overrides: Mapping[str, Callable[..., Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        members = MappingProxyType({name: MemberKind(kind) for name, kind in self.members.items()})
        object.__setattr__(self, "members", members)
        object.__setattr__(
            self,
            "overrides",
            resolve_overrides(self.identifier, members, self.overrides),
        )

    @classmethod
    def value_object(
        cls,
        identifier: str,
        accessors: Iterable[str],
        *,
        overrides: Mapping[str, Callable[..., Any]] | None = None,
    ) -> "EntityDescriptor":
        return cls(
            identifier=identifier,
            members=dict.fromkeys(accessors, MemberKind.ACCESSOR),
            overrides=overrides or {},
        )

    @classmethod
    def constructible(
        cls,
        identifier: str,
        operations: Iterable[str],
        *,
        accessors: Iterable[str] = (),
        overrides: Mapping[str, Callable[..., Any]] | None = None,
    ) -> "EntityDescriptor":
        members: dict[str, MemberKind] = dict.fromkeys(operations, MemberKind.OPERATION)
        members.update(dict.fromkeys(accessors, MemberKind.ACCESSOR))
        return cls(
            identifier=identifier,
            members=members,
            is_constructible=True,
            overrides=overrides or {},
        )

    def kind_of(self, name: str) -> MemberKind:
        return self.members[name]


__all__ = ["EntityDescriptor", "MemberKind"]
