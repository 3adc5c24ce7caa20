"""
@file: ms_passport/fallback/synthesizer.py
@description: Assembles frozen dummy entities from descriptors and a captured load failure.
@dependencies: ms_passport.fallback.stubs, ms_passport.fallback.descriptors
@created: 2025-10-02
"""

from __future__ import annotations

from typing import Any

from .descriptors import EntityDescriptor
from .errors import FrozenEntityError
from .stubs import build_member, raiser

_MODULE = "ms_passport"


class _FrozenType(type):
    """Metaclass of every generated dummy type; blocks class-level mutation."""

    def __setattr__(cls, name: str, value: Any) -> None:
        raise FrozenEntityError(f"cannot set {name!r} on frozen dummy {cls.__name__}")

    def __delattr__(cls, name: str) -> None:
        raise FrozenEntityError(f"cannot delete {name!r} on frozen dummy {cls.__name__}")


class _DummyValue(metaclass=_FrozenType):
    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenEntityError(f"cannot set {name!r} on frozen dummy {type(self).__name__}")

    def __delattr__(self, name: str) -> None:
        raise FrozenEntityError(f"cannot delete {name!r} on frozen dummy {type(self).__name__}")

    def __dir__(self) -> list[str]:
        return sorted(type(self).__dummy_members__)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} (native module unavailable)>"


class _DummyClassType(_FrozenType):
    """Base metaclass of constructible dummies; members live on the metaclass."""

    def __dir__(cls) -> list[str]:
        return sorted(cls.__dummy_members__)

    def __repr__(cls) -> str:
        return f"<dummy class {cls.__name__!r} (native module unavailable)>"


def _member_namespace(descriptor: EntityDescriptor, error: BaseException) -> dict[str, Any]:
    owner = descriptor.identifier
    return {
        name: build_member(name, kind, error, descriptor.overrides.get(name), owner=owner)
        for name, kind in descriptor.members.items()
    }


def _markers(descriptor: EntityDescriptor, error: BaseException) -> dict[str, Any]:
    return {
        "__module__": _MODULE,
        "__slots__": (),
        "__dummy_members__": descriptor.members,
        "__load_error__": error,
    }


def synthesize(descriptor: EntityDescriptor, error: BaseException) -> Any:
    """Build the frozen stand-in for ``descriptor`` that fails with ``error``.

    Value objects come back as an instance of a generated type; constructible
    entities come back as a generated class whose construction raises
    ``error``. In both cases ``dir()`` lists exactly the declared members.
    """

    members = _member_namespace(descriptor, error)

    if not descriptor.is_constructible:
        # Enum-style enumeration of a value object fails with the load error too.
        fail = raiser(error)
        namespace = {
            **_markers(descriptor, error),
            "__iter__": fail,
            "__members__": property(fail),
            **members,
        }
        dummy_type = _FrozenType(f"Dummy{descriptor.identifier}", (_DummyValue,), namespace)
        return dummy_type()

    # Members sit on the per-entity metaclass so they resolve on the class
    # itself, which is the only object a caller can ever hold.
    meta_namespace = {"__module__": _MODULE, "__call__": raiser(error), **members}
    meta = _FrozenType(f"Dummy{descriptor.identifier}Type", (_DummyClassType,), meta_namespace)
    return meta(descriptor.identifier, (), _markers(descriptor, error))


def is_dummy(entity: Any) -> bool:
    """Return True for objects produced by :func:`synthesize`."""

    return isinstance(entity, (_DummyValue, _DummyClassType))


def dummy_members(entity: Any) -> tuple[str, ...]:
    """Names declared on a dummy entity, in declaration order."""

    if not is_dummy(entity):
        raise TypeError(f"{entity!r} is not a dummy entity")
    return tuple(entity.__dummy_members__)


__all__ = ["dummy_members", "is_dummy", "synthesize"]
