"""
@file: ms_passport/fallback/__init__.py
@description: Shape-preserving stand-ins for entities of an optional native module.
@dependencies: ms_passport.fallback.*
@created: 2025-10-02
"""

from __future__ import annotations

from .descriptors import EntityDescriptor, MemberKind
from .errors import DummyConfigurationError, FrozenEntityError, is_module_not_found
from .factory import Constructed, ConstructionFailed, ConstructionOutcome, construct
from .loader import Failed, LoadOutcome, Loaded, NativeLoader
from .overrides import resolve_overrides
from .registry import (
    EntityState,
    ModuleSurface,
    ResolvedEntity,
    build_surface,
    create_dummy,
    resolve_entity,
)
from .stubs import build_member
from .synthesizer import dummy_members, is_dummy, synthesize

__all__ = [
    "Constructed",
    "ConstructionFailed",
    "ConstructionOutcome",
    "DummyConfigurationError",
    "EntityDescriptor",
    "EntityState",
    "Failed",
    "FrozenEntityError",
    "LoadOutcome",
    "Loaded",
    "MemberKind",
    "ModuleSurface",
    "NativeLoader",
    "ResolvedEntity",
    "build_member",
    "build_surface",
    "construct",
    "create_dummy",
    "dummy_members",
    "is_dummy",
    "is_module_not_found",
    "resolve_entity",
    "resolve_overrides",
    "synthesize",
]
