"""
@file: ms_passport/fallback/registry.py
@description: Batch driver resolving a descriptor table into the published module surface.
@dependencies: ms_passport.fallback.loader, ms_passport.fallback.synthesizer, ms_passport.logger
@created: 2025-10-02
"""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from ms_passport.logger import logger

from .descriptors import EntityDescriptor
from .errors import DummyConfigurationError
from .loader import Failed, LoadOutcome, Loaded
from .synthesizer import synthesize

Loader = Callable[[str], LoadOutcome]


class EntityState(enum.Enum):
    UNRESOLVED = "unresolved"
    LOADED = "loaded"
    FAILED = "failed"
    PUBLISHED = "published"


@dataclass(frozen=True, slots=True)
class ResolvedEntity:
    """Final record of one entity after its load attempt."""

    descriptor: EntityDescriptor
    outcome: LoadOutcome
    entity: Any
    state: EntityState = EntityState.PUBLISHED

    @property
    def name(self) -> str:
        return self.descriptor.identifier

    @property
    def is_dummy(self) -> bool:
        return isinstance(self.outcome, Failed)

    @property
    def error(self) -> BaseException | None:
        if isinstance(self.outcome, Failed):
            return self.outcome.error
        return None


class ModuleSurface(Mapping[str, Any]):
    """Immutable name → entity mapping published once per process."""

    __slots__ = ("_entities", "_records")

    def __init__(self, records: Iterable[ResolvedEntity]) -> None:
        by_name = {record.name: record for record in records}
        object.__setattr__(self, "_records", MappingProxyType(by_name))
        object.__setattr__(
            self,
            "_entities",
            MappingProxyType({name: record.entity for name, record in by_name.items()}),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ModuleSurface is read-only")

    def __getitem__(self, name: str) -> Any:
        return self._entities[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        status = ", ".join(
            f"{name}={'dummy' if record.is_dummy else 'native'}"
            for name, record in self._records.items()
        )
        return f"ModuleSurface({status})"

    @property
    def records(self) -> Mapping[str, ResolvedEntity]:
        return self._records

    def record(self, name: str) -> ResolvedEntity:
        return self._records[name]

    @property
    def dummies(self) -> tuple[str, ...]:
        return tuple(name for name, record in self._records.items() if record.is_dummy)

    @property
    def native_available(self) -> bool:
        return bool(self._records) and not self.dummies


def _check_unique(descriptors: list[EntityDescriptor]) -> None:
    counts = Counter(descriptor.identifier for descriptor in descriptors)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise DummyConfigurationError(f"duplicate entity identifiers: {', '.join(duplicates)}")


def _transition(identifier: str, state: EntityState, detail: str = "") -> None:
    suffix = f" ({detail})" if detail else ""
    logger.debug(f"{identifier}: -> {state.value}{suffix}")


def _check_shape(descriptor: EntityDescriptor, entity: Any) -> None:
    missing = [name for name in descriptor.members if not hasattr(entity, name)]
    if missing:
        logger.warning(
            f"{descriptor.identifier}: native entity lacks declared members: {', '.join(missing)}"
        )


def resolve_entity(descriptor: EntityDescriptor, loader: Loader) -> ResolvedEntity:
    """Run the load attempt for one descriptor and publish the result."""

    identifier = descriptor.identifier
    _transition(identifier, EntityState.UNRESOLVED)
    outcome = loader(identifier)

    if isinstance(outcome, Loaded):
        _transition(identifier, EntityState.LOADED)
        _check_shape(descriptor, outcome.entity)
        entity = outcome.entity
    else:
        error = outcome.error
        _transition(identifier, EntityState.FAILED, f"{type(error).__name__}: {error}")
        entity = synthesize(descriptor, error)

    _transition(identifier, EntityState.PUBLISHED)
    return ResolvedEntity(descriptor=descriptor, outcome=outcome, entity=entity)


def build_surface(descriptors: Iterable[EntityDescriptor], loader: Loader) -> ModuleSurface:
    """Resolve every descriptor exactly once and freeze the result.

    Entities are independent: one failed load never affects another. Failed
    loads are final; nothing is retried later.
    """

    table = list(descriptors)
    _check_unique(table)

    records = [resolve_entity(descriptor, loader) for descriptor in table]
    surface = ModuleSurface(records)

    if surface.dummies:
        logger.info(
            f"native module unavailable, using dummies for: {', '.join(surface.dummies)}"
        )
    else:
        logger.info(f"native module loaded: {', '.join(surface)}")
    return surface


def create_dummy(descriptor: EntityDescriptor, loader: Loader) -> Any:
    """Resolve a single entity; the one-descriptor case of :func:`build_surface`."""

    return build_surface([descriptor], loader)[descriptor.identifier]


__all__ = [
    "EntityState",
    "Loader",
    "ModuleSurface",
    "ResolvedEntity",
    "build_surface",
    "create_dummy",
    "resolve_entity",
]
