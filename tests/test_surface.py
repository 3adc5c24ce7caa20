# @file: test_surface.py
import pytest

import ms_passport
from ms_passport import open_passport
from ms_passport.fallback import ConstructionFailed, Constructed, is_dummy
from ms_passport.surface import DESCRIPTORS, ENTITY_NAMES, get_surface

VALUE_OBJECTS = {
    "KeyCreationOption": ("FailIfExists", "ReplaceExisting"),
    "PublicKeyEncoding": (
        "X509SubjectPublicKeyInfo",
        "Pkcs1RsaPublicKey",
        "BCryptEccFullPublicKey",
        "BCryptPublicKey",
        "Capi1PublicKey",
    ),
    "VerificationResult": (
        "Canceled",
        "Verified",
        "DeviceNotPresent",
        "NotConfiguredForUser",
        "DisabledByPolicy",
        "DeviceBusy",
        "RetriesExhausted",
    ),
}


def test_descriptor_table_declares_the_public_surface():
    assert ENTITY_NAMES == ("Passport", "VerificationResult", "PublicKeyEncoding", "KeyCreationOption")
    passport = DESCRIPTORS[0]
    assert passport.is_constructible
    assert set(passport.members) == {"account_with_id_exists", "available", "request_verification"}
    assert set(passport.overrides) == {"available"}
    for descriptor in DESCRIPTORS[1:]:
        assert not descriptor.is_constructible
        assert set(descriptor.members) == set(VALUE_OBJECTS[descriptor.identifier])
        assert not descriptor.overrides


def test_surface_is_built_once(native_missing):
    assert get_surface() is get_surface()
    assert ms_passport.Passport is ms_passport.Passport


def test_unknown_attribute_still_fails():
    with pytest.raises(AttributeError):
        ms_passport.NotAnEntity


def test_dir_lists_entities():
    assert set(ENTITY_NAMES) <= set(dir(ms_passport))


@pytest.mark.asyncio
async def test_native_present_scenario(native_present):
    Passport = ms_passport.Passport

    assert Passport is native_present.Passport
    assert Passport.available() is True
    assert Passport.account_with_id_exists("test") is False
    result = await Passport.request_verification("Please verify your identity")
    assert result is ms_passport.VerificationResult.Verified

    passport = Passport("test")
    await passport.create_account(ms_passport.KeyCreationOption.ReplaceExisting)
    assert passport.account_exists
    assert Passport.account_with_id_exists("test") is True
    await passport.delete_account()
    assert not passport.account_exists


def test_native_present_value_objects(native_present):
    for entity, members in VALUE_OBJECTS.items():
        real = getattr(ms_passport, entity)
        assert not is_dummy(real)
        for member in members:
            getattr(real, member)


def test_native_present_construct_outcome(native_present):
    outcome = open_passport("test")

    assert isinstance(outcome, Constructed)
    assert outcome.instance.account_id == "test"


def test_native_missing_passport(native_missing):
    Passport = ms_passport.Passport

    with pytest.raises(ModuleNotFoundError) as info:
        Passport("test")
    assert info.value.name == native_missing
    assert str(info.value) == f"No module named '{native_missing}'"
    with pytest.raises(ModuleNotFoundError):
        Passport.account_with_id_exists("test")
    with pytest.raises(ModuleNotFoundError):
        Passport.request_verification("test")
    assert Passport.available() is False


@pytest.mark.parametrize("entity", sorted(VALUE_OBJECTS))
def test_native_missing_value_objects(native_missing, entity):
    dummy = getattr(ms_passport, entity)

    assert set(dir(dummy)) == set(VALUE_OBJECTS[entity])
    for member in VALUE_OBJECTS[entity]:
        with pytest.raises(ModuleNotFoundError) as info:
            getattr(dummy, member)
        assert ms_passport.is_module_not_found(info.value, native_missing)


def test_native_missing_errors_are_stable(native_missing):
    dummy = ms_passport.KeyCreationOption
    errors = []
    for _ in range(3):
        with pytest.raises(ModuleNotFoundError) as info:
            dummy.FailIfExists
        errors.append(info.value)

    assert all(error is errors[0] for error in errors)


def test_native_missing_siblings_still_raise_after_probe(native_missing):
    assert ms_passport.Passport.available() is False

    with pytest.raises(ModuleNotFoundError):
        ms_passport.VerificationResult.Verified
    with pytest.raises(ModuleNotFoundError):
        ms_passport.Passport.account_with_id_exists("test")


def test_native_missing_construct_outcome(native_missing):
    outcome = open_passport("test")

    assert isinstance(outcome, ConstructionFailed)
    assert ms_passport.is_module_not_found(outcome.error)


def test_concurrent_first_access_builds_once(native_missing, monkeypatch):
    import threading
    import time

    from ms_passport import surface as surface_module

    builds = []
    real_build = surface_module.build_surface

    def counting_build(descriptors, loader):
        builds.append(loader)
        time.sleep(0.05)
        return real_build(descriptors, loader)

    monkeypatch.setattr(surface_module, "build_surface", counting_build)

    workers = 8
    barrier = threading.Barrier(workers)
    results = []

    def worker():
        barrier.wait()
        results.append(get_surface())

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(builds) == 1
    assert len(results) == workers
    assert all(result is results[0] for result in results)
