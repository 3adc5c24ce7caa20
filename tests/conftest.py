"""
@file: tests/conftest.py
@description: Fixtures installing a fake native Passport module and resetting cached state
@dependencies: ms_passport.config, ms_passport.surface, pytest
@created: 2025-10-03
"""

from __future__ import annotations

import enum
import pathlib
import sys
import types

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from ms_passport.config import reset_settings_cache
from ms_passport.logger import logger
from ms_passport.surface import reset_surface

FAKE_NATIVE = "tests_fake_passport_native"
MISSING_NATIVE = "tests_missing_passport_native"


def build_fake_native(name: str = FAKE_NATIVE) -> types.ModuleType:
    """Pure-python module with the same exports as the compiled binding."""

    module = types.ModuleType(name)

    class KeyCreationOption(enum.Enum):
        ReplaceExisting = 0
        FailIfExists = 1

    class PublicKeyEncoding(enum.Enum):
        X509SubjectPublicKeyInfo = 0
        Pkcs1RsaPublicKey = 1
        BCryptPublicKey = 2
        Capi1PublicKey = 3
        BCryptEccFullPublicKey = 4

    class VerificationResult(enum.Enum):
        Verified = 0
        DeviceNotPresent = 1
        NotConfiguredForUser = 2
        DisabledByPolicy = 3
        DeviceBusy = 4
        RetriesExhausted = 5
        Canceled = 6

    accounts: set[str] = set()

    class Passport:
        def __init__(self, account_id: str) -> None:
            self.account_id = account_id

        @property
        def account_exists(self) -> bool:
            return self.account_id in accounts

        async def create_account(self, creation_option=None) -> None:
            accounts.add(self.account_id)

        async def delete_account(self) -> None:
            accounts.discard(self.account_id)

        @staticmethod
        def available() -> bool:
            return True

        @staticmethod
        def account_with_id_exists(account_id: str) -> bool:
            return account_id in accounts

        @staticmethod
        async def request_verification(message: str) -> VerificationResult:
            return VerificationResult.Verified

    module.KeyCreationOption = KeyCreationOption
    module.PublicKeyEncoding = PublicKeyEncoding
    module.VerificationResult = VerificationResult
    module.Passport = Passport
    return module


@pytest.fixture(autouse=True)
def _isolated_surface(monkeypatch):
    for key in ("PASSPORT_NATIVE_MODULE", "PASSPORT_LOG_LEVEL", "PASSPORT_LOG_JSON"):
        monkeypatch.delenv(key, raising=False)
    reset_settings_cache()
    reset_surface()
    yield
    reset_settings_cache()
    reset_surface()
    logger.remove()
    logger.disable("ms_passport")


@pytest.fixture
def native_present(monkeypatch) -> types.ModuleType:
    module = build_fake_native()
    monkeypatch.setitem(sys.modules, FAKE_NATIVE, module)
    monkeypatch.setenv("PASSPORT_NATIVE_MODULE", FAKE_NATIVE)
    reset_settings_cache()
    return module


@pytest.fixture
def native_missing(monkeypatch) -> str:
    monkeypatch.delitem(sys.modules, MISSING_NATIVE, raising=False)
    monkeypatch.setenv("PASSPORT_NATIVE_MODULE", MISSING_NATIVE)
    reset_settings_cache()
    return MISSING_NATIVE


@pytest.fixture
def log_records():
    """Collect package log messages emitted through loguru."""

    records: list[dict] = []
    logger.enable("ms_passport")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
