"""Symmetric encryption for secrets stored at rest."""

import base64

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from newsdesk.util.error import UtilError


class DecryptionError(UtilError):
    """Ciphertext could not be decrypted with the configured key."""

    pass


class EntryCipher:
    """Fernet (AES-128-CBC + HMAC) cipher keyed from an arbitrary secret.

    Fernet needs 32 url-safe base64 bytes, so the configured secret is
    stretched with PBKDF2.
    """

    _DEFAULT_SALT = b"newsdesk_entry_salt"

    def __init__(self, secret_key: str, salt: bytes | None = None) -> None:
        """Initialize cipher.

        Args:
            secret_key: Secret of any length
            salt: Optional KDF salt
        """
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt or self._DEFAULT_SALT,
            iterations=100_000,
        )
        key = base64.urlsafe_b64encode(kdf.derive(secret_key.encode("utf-8")))
        self._fernet = Fernet(key)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt text, returning a url-safe token string."""
        return self._fernet.encrypt(plaintext.encode("utf-8")).decode("utf-8")

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a token produced by encrypt().

        Raises:
            DecryptionError: If the token is malformed or the key is wrong
        """
        try:
            return self._fernet.decrypt(ciphertext.encode("utf-8")).decode("utf-8")
        except InvalidToken:
            raise DecryptionError("Decryption failed: invalid token or wrong key")
