"""Unit tests for PasswordHasher."""

import pytest

from newsdesk.util.password import PasswordHasher


class TestPasswordHasher:
    """Tests for PasswordHasher."""

    @pytest.mark.asyncio
    async def test_verifies_own_hash(self):
        hasher = PasswordHasher(rounds=4)

        hashed = await hasher.hash("secret1")

        assert await hasher.verify("secret1", hashed) is True
        assert await hasher.verify("secret2", hashed) is False

    @pytest.mark.asyncio
    async def test_empty_password_rejected(self):
        with pytest.raises(ValueError):
            await PasswordHasher(rounds=4).hash("")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stored", ["", "not-a-bcrypt-hash"])
    async def test_bad_stored_hash_does_not_verify(self, stored):
        assert await PasswordHasher(rounds=4).verify("secret1", stored) is False
