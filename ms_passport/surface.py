"""
@file: ms_passport/surface.py
@description: Descriptor table of the Passport binding and the process-wide surface.
@dependencies: ms_passport.fallback, ms_passport.config
@created: 2025-10-02
"""

from __future__ import annotations

import threading

from ms_passport.config import get_settings
from ms_passport.fallback import EntityDescriptor, ModuleSurface, NativeLoader, build_surface


def _unavailable() -> bool:
    return False


DESCRIPTORS: tuple[EntityDescriptor, ...] = (
    EntityDescriptor.constructible(
        "Passport",
        operations=("account_with_id_exists", "available", "request_verification"),
        overrides={"available": _unavailable},
    ),
    EntityDescriptor.value_object(
        "VerificationResult",
        accessors=(
            "Canceled",
            "DeviceBusy",
            "DeviceNotPresent",
            "DisabledByPolicy",
            "NotConfiguredForUser",
            "RetriesExhausted",
            "Verified",
        ),
    ),
    EntityDescriptor.value_object(
        "PublicKeyEncoding",
        accessors=(
            "X509SubjectPublicKeyInfo",
            "BCryptPublicKey",
            "Capi1PublicKey",
            "BCryptEccFullPublicKey",
            "Pkcs1RsaPublicKey",
        ),
    ),
    EntityDescriptor.value_object(
        "KeyCreationOption",
        accessors=("FailIfExists", "ReplaceExisting"),
    ),
)

ENTITY_NAMES: tuple[str, ...] = tuple(descriptor.identifier for descriptor in DESCRIPTORS)


_surface: ModuleSurface | None = None
_surface_lock = threading.Lock()


def get_surface() -> ModuleSurface:
    """Build the module surface on first use; later calls return the same object."""

    global _surface
    if _surface is None:
        with _surface_lock:
            if _surface is None:
                _surface = build_surface(DESCRIPTORS, NativeLoader(get_settings().native_module))
    return _surface


def reset_surface() -> None:
    """Forget the built surface. Tests only: the published surface is meant to live forever."""

    global _surface
    with _surface_lock:
        _surface = None


__all__ = ["DESCRIPTORS", "ENTITY_NAMES", "get_surface", "reset_surface"]
