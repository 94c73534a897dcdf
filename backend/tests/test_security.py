from datetime import timedelta

import pytest

from app.core.security import create_access_token, decode_token, hash_password, verify_password


def test_hash_and_verify_round_trip() -> None:
    hashed = hash_password("correct horse")

    assert hashed.startswith("$pbkdf2-sha256$")
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


@pytest.mark.parametrize("stored", [None, "", "plaintext-password"])
def test_verify_rejects_missing_or_foreign_hashes(stored) -> None:
    assert not verify_password("plaintext-password", stored)


def test_token_carries_subject() -> None:
    token = create_access_token({"sub": "42"})

    assert decode_token(token)["sub"] == "42"


def test_expired_token_is_invalid() -> None:
    token = create_access_token({"sub": "42"}, expires_delta=timedelta(seconds=-10))

    with pytest.raises(ValueError):
        decode_token(token)
