import hashlib

import pytest

from modules.auth.credentials import (
    generate_session_key,
    hash_password,
    needs_rehash,
    sha256_digest,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_is_salted(self):
        """Same password should give different digests."""
        first = hash_password("pw1", rounds=4)
        second = hash_password("pw1", rounds=4)
        assert first != second
        assert verify_password("pw1", first)
        assert verify_password("pw1", second)

    def test_wrong_password(self):
        assert verify_password("pw2", hash_password("pw1", rounds=4)) is False

    def test_empty_password_cannot_be_hashed(self):
        with pytest.raises(ValueError):
            hash_password("")

    def test_empty_inputs_never_verify(self):
        assert verify_password("", hash_password("pw1", rounds=4)) is False
        assert verify_password("pw1", "") is False

    def test_garbage_digest_does_not_verify(self):
        assert verify_password("pw1", "not-a-hash") is False

    def test_bcrypt_digest_needs_no_rehash(self):
        assert needs_rehash(hash_password("pw1", rounds=4)) is False

    def test_password_longer_than_72_bytes(self):
        """Long passwords hash and verify instead of being refused."""
        password = "p" * 200
        digest = hash_password(password, rounds=4)
        assert verify_password(password, digest) is True

    def test_multibyte_password_longer_than_72_bytes(self):
        password = "é" * 40
        assert verify_password(password, hash_password(password, rounds=4)) is True

    def test_bytes_past_72_still_count(self):
        """Passwords sharing their first 72 bytes must not share a digest."""
        prefix = "a" * 72
        digest = hash_password(prefix + "one", rounds=4)
        assert verify_password(prefix + "one", digest) is True
        assert verify_password(prefix + "two", digest) is False
        assert verify_password(prefix, digest) is False

    def test_long_legacy_digest_verifies(self):
        password = "p" * 100
        assert verify_password(password, sha256_digest(password)) is True
        assert needs_rehash(sha256_digest(password)) is True


class TestLegacyDigest:
    def test_sha256_digest_matches_hashlib(self):
        assert sha256_digest("pw1") == hashlib.sha256(b"pw1").hexdigest()

    def test_legacy_digest_verifies(self):
        assert verify_password("pw1", sha256_digest("pw1")) is True
        assert verify_password("pw2", sha256_digest("pw1")) is False

    def test_legacy_digest_needs_rehash(self):
        assert needs_rehash(sha256_digest("pw1")) is True


class TestSessionKey:
    def test_key_is_hex_of_256_bits(self):
        key = generate_session_key()
        assert len(key) == 64
        int(key, 16)

    def test_keys_are_unique(self):
        keys = {generate_session_key() for _ in range(1000)}
        assert len(keys) == 1000
