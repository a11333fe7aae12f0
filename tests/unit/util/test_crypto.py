"""Unit tests for EntryCipher."""

import pytest

from newsdesk.util.crypto import DecryptionError, EntryCipher


class TestEntryCipher:
    """Tests for EntryCipher."""

    def test_decrypts_what_it_encrypts(self):
        cipher = EntryCipher("entry-secret")

        token = cipher.encrypt("secret1")

        assert token != "secret1"
        assert cipher.decrypt(token) == "secret1"

    def test_encryption_is_randomized(self):
        cipher = EntryCipher("entry-secret")

        assert cipher.encrypt("secret1") != cipher.encrypt("secret1")

    def test_wrong_key_fails(self):
        token = EntryCipher("entry-secret").encrypt("secret1")

        with pytest.raises(DecryptionError):
            EntryCipher("other-secret").decrypt(token)

    def test_garbage_fails(self):
        with pytest.raises(DecryptionError):
            EntryCipher("entry-secret").decrypt("not-a-token")
