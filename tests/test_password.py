"""
Tests for bcrypt password hashing.
"""

from auth.password import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("pw", rounds=4)
        assert hashed != "pw"
        assert hashed.startswith("$2")

    def test_hash_uses_requested_cost(self):
        assert hash_password("pw", rounds=5).split("$")[2] == "05"

    def test_hashes_are_salted(self):
        assert hash_password("pw", rounds=4) != hash_password("pw", rounds=4)

    def test_verify_roundtrip(self):
        hashed = hash_password("correct horse", rounds=4)
        assert verify_password("correct horse", hashed)
        assert not verify_password("wrong horse", hashed)

    def test_verify_against_garbage_hash(self):
        assert verify_password("pw", "not-a-bcrypt-hash") is False
