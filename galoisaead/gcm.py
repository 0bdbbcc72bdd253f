"""AES in Galois/Counter Mode: authenticated encryption with associated data."""

from __future__ import annotations

import hmac

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from galoisaead.ghash import BLOCK_SIZE, GHash

A_MAX = 1 << 36
"""Maximum length of associated data."""

P_MAX = 1 << 36
"""Maximum length of plaintext."""

C_MAX = (1 << 36) + 16
"""Maximum length of ciphertext."""

TAG_SIZE = 16


class AeadError(Exception):
    """Encryption or decryption failed (limits exceeded or authentication failed)."""


def _xor(a: bytes, b: bytes) -> bytes:
    return (int.from_bytes(a, "big") ^ int.from_bytes(b, "big")).to_bytes(len(a), "big")


class AesGcm:
    """AES-GCM with a configurable nonce size (96 bits recommended)."""

    def __init__(self, key: bytes, nonce_size: int = 12) -> None:
        key = bytes(key)
        if len(key) not in (16, 24, 32):
            raise ValueError(f"AES key must be 16, 24 or 32 bytes, got {len(key)}")
        if nonce_size < 1:
            raise ValueError("nonce size must be positive")
        self.nonce_size = nonce_size
        self._encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
        self._ghash = GHash(self._encryptor.update(bytes(BLOCK_SIZE)))

    def _check_nonce(self, nonce: bytes) -> bytes:
        nonce = bytes(nonce)
        if len(nonce) != self.nonce_size:
            raise ValueError(f"nonce must be {self.nonce_size} bytes, got {len(nonce)}")
        return nonce

    def _initial_counter(self, nonce: bytes) -> bytes:
        """Derive J0 as described in NIST SP800-38D section 7.2."""
        if len(nonce) == 12:
            return nonce + b"\x00\x00\x00\x01"
        ghash = self._ghash.copy()
        ghash.update_padded(nonce)
        ghash.update((len(nonce) * 8).to_bytes(16, "big"))
        return ghash.finalize()

    def _keystream(self, j0: bytes, start_block: int, length: int) -> bytes:
        prefix = j0[:12]
        counter = int.from_bytes(j0[12:], "big")
        count = -(-length // BLOCK_SIZE)
        blocks = b"".join(
            prefix + ((counter + start_block + i) & 0xFFFFFFFF).to_bytes(4, "big")
            for i in range(count)
        )
        return self._encryptor.update(blocks)[:length]

    def _compute_tag(self, associated_data: bytes, ciphertext: bytes) -> bytes:
        ghash = self._ghash.copy()
        ghash.update_padded(associated_data)
        ghash.update_padded(ciphertext)
        lengths = (len(associated_data) * 8).to_bytes(8, "big") + (
            len(ciphertext) * 8
        ).to_bytes(8, "big")
        ghash.update(lengths)
        return ghash.finalize()

    def encrypt_detached(
        self, nonce: bytes, plaintext: bytes, associated_data: bytes = b""
    ) -> tuple[bytes, bytes]:
        """Encrypt and return (ciphertext, tag)."""
        nonce = self._check_nonce(nonce)
        plaintext = bytes(plaintext)
        associated_data = bytes(associated_data)
        if len(plaintext) > P_MAX or len(associated_data) > A_MAX:
            raise AeadError("input exceeds AES-GCM length limits")
        j0 = self._initial_counter(nonce)
        ciphertext = _xor(plaintext, self._keystream(j0, 1, len(plaintext)))
        tag = _xor(
            self._compute_tag(associated_data, ciphertext),
            self._keystream(j0, 0, TAG_SIZE),
        )
        return ciphertext, tag

    def decrypt_detached(
        self, nonce: bytes, ciphertext: bytes, tag: bytes, associated_data: bytes = b""
    ) -> bytes:
        """Verify the tag and return the plaintext."""
        nonce = self._check_nonce(nonce)
        ciphertext = bytes(ciphertext)
        associated_data = bytes(associated_data)
        if len(ciphertext) > C_MAX or len(associated_data) > A_MAX:
            raise AeadError("input exceeds AES-GCM length limits")
        j0 = self._initial_counter(nonce)
        expected = _xor(
            self._compute_tag(associated_data, ciphertext),
            self._keystream(j0, 0, TAG_SIZE),
        )
        if not hmac.compare_digest(expected, bytes(tag)):
            raise AeadError("authentication failed")
        return _xor(ciphertext, self._keystream(j0, 1, len(ciphertext)))

    def encrypt(self, nonce: bytes, plaintext: bytes, associated_data: bytes = b"") -> bytes:
        """Encrypt and return ciphertext with the tag appended."""
        ciphertext, tag = self.encrypt_detached(nonce, plaintext, associated_data)
        return ciphertext + tag

    def decrypt(self, nonce: bytes, ciphertext: bytes, associated_data: bytes = b"") -> bytes:
        """Decrypt ciphertext that carries its tag at the end."""
        ciphertext = bytes(ciphertext)
        if len(ciphertext) < TAG_SIZE:
            raise AeadError("ciphertext shorter than the tag")
        body, tag = ciphertext[:-TAG_SIZE], ciphertext[-TAG_SIZE:]
        return self.decrypt_detached(nonce, body, tag, associated_data)


class Aes128Gcm(AesGcm):
    """AES-GCM with a 128-bit key and 96-bit nonce."""

    def __init__(self, key: bytes) -> None:
        if len(bytes(key)) != 16:
            raise ValueError("AES-128-GCM key must be 16 bytes")
        super().__init__(key, 12)


class Aes256Gcm(AesGcm):
    """AES-GCM with a 256-bit key and 96-bit nonce."""

    def __init__(self, key: bytes) -> None:
        if len(bytes(key)) != 32:
            raise ValueError("AES-256-GCM key must be 32 bytes")
        super().__init__(key, 12)