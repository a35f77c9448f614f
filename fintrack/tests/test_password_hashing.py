from __future__ import annotations

import base64

import pytest

from fintrack.application.services.password_hashing import (
    ITERATIONS,
    KEY_BYTES,
    SALT_BYTES,
    Pbkdf2CredentialHasher,
)
from fintrack.domain.users.entities import CredentialRecord

SALT = base64.b64encode(b"0123456789abcdef").decode("ascii")


@pytest.fixture()
def hasher() -> Pbkdf2CredentialHasher:
    return Pbkdf2CredentialHasher(iterations=1_000)


def test_default_iterations() -> None:
    assert ITERATIONS == 100_000


def test_same_password_and_salt_is_deterministic(hasher: Pbkdf2CredentialHasher) -> None:
    first = hasher.hash("pw123", SALT)
    second = hasher.hash("pw123", SALT)

    assert first == second
    assert first.salt == SALT
    assert len(base64.b64decode(first.hash)) == KEY_BYTES


def test_different_passwords_produce_different_hashes(hasher: Pbkdf2CredentialHasher) -> None:
    assert hasher.hash("pw123", SALT).hash != hasher.hash("pw124", SALT).hash


def test_fresh_salt_is_random(hasher: Pbkdf2CredentialHasher) -> None:
    first = hasher.hash("pw123")
    second = hasher.hash("pw123")

    assert len(base64.b64decode(first.salt)) == SALT_BYTES
    assert first.salt != second.salt
    assert first.hash != second.hash


def test_verify_accepts_matching_password(hasher: Pbkdf2CredentialHasher) -> None:
    record = hasher.hash("correct horse")

    assert hasher.verify("correct horse", record) is True
    assert hasher.verify("correct horsE", record) is False
    assert hasher.verify("", record) is False


def test_verify_rejects_corrupt_record(hasher: Pbkdf2CredentialHasher) -> None:
    record = hasher.hash("pw123")

    assert hasher.verify("pw123", CredentialRecord(hash=record.hash, salt="not base64!")) is False
    assert hasher.verify("pw123", CredentialRecord(hash="@@@", salt=record.salt)) is False


def test_invalid_salt_propagates(hasher: Pbkdf2CredentialHasher) -> None:
    with pytest.raises(ValueError):
        hasher.hash("pw123", "not base64!")


def test_unicode_password(hasher: Pbkdf2CredentialHasher) -> None:
    record = hasher.hash("pässwörd ✓")

    assert hasher.verify("pässwörd ✓", record)
    assert not hasher.verify("passwort", record)
