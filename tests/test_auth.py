from __future__ import annotations

from codecraft.services.auth import (
    USERNAME_TAKEN,
    authenticate_user,
    create_user,
    hash_password,
    verify_password,
)
from codecraft.storage import MemStorage


def test_hash_is_salted_and_verifiable() -> None:
    first = hash_password("pw")
    second = hash_password("pw")

    assert first != second
    assert verify_password("pw", first)
    assert not verify_password("other", first)


def test_verify_rejects_malformed_hash() -> None:
    assert not verify_password("pw", "no-separator")
    assert not verify_password("pw", "zz:zz")


def test_create_user_strips_username_and_hashes_password() -> None:
    storage = MemStorage(seed_sample_data=False)

    user, error = create_user(storage, "  bob ", "pw")

    assert error is None
    assert user is not None
    assert user.username == "bob"
    assert user.password_hash != "pw"
    assert storage.get_user(user.id) == user


def test_create_user_validation() -> None:
    storage = MemStorage(seed_sample_data=False)
    create_user(storage, "bob", "pw")

    assert create_user(storage, "bob", "pw2") == (None, USERNAME_TAKEN)
    assert create_user(storage, "", "pw")[1] == "Username cannot be empty."
    assert create_user(storage, "carol", "")[1] == "Password cannot be empty."


def test_authenticate_user() -> None:
    storage = MemStorage(seed_sample_data=False)
    create_user(storage, "bob", "pw")

    assert authenticate_user(storage, "bob", "pw") == (True, None)
    assert authenticate_user(storage, "bob", "nope") == (False, "Invalid username or password.")
    assert authenticate_user(storage, "ghost", "pw")[0] is False
    assert authenticate_user(storage, "", "")[1] == "Username and password are required."
