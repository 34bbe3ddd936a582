"""Unit tests for password hashing."""

from peerrate.util.password import hash_password, verify_password


def test_hash_verifies_plain_password():
    encoded = hash_password("Secret1!", iterations=1_000)

    assert encoded.startswith("pbkdf2_sha256$1000$")
    assert verify_password("Secret1!", encoded)
    assert not verify_password("Secret2!", encoded)


def test_hashes_are_salted():
    assert hash_password("Secret1!", 1_000) != hash_password("Secret1!", 1_000)


def test_malformed_hash_never_verifies():
    assert not verify_password("Secret1!", "plaintext")
    assert not verify_password("Secret1!", "md5$1$salt$abc")
    assert not verify_password("Secret1!", "pbkdf2_sha256$many$salt$abc")


def test_hash_without_positive_rounds_never_verifies():
    assert not verify_password("Secret1!", "pbkdf2_sha256$0$salt$abc")
    assert not verify_password("Secret1!", "pbkdf2_sha256$-5$salt$abc")
