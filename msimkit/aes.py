"""AES-CBC encryption helpers with PKCS#5/PKCS#7 padding."""

from __future__ import annotations

import base64
import binascii
from typing import Callable

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK_SIZE = 16
_KEY_SIZES = (16, 24, 32)

Padding = Callable[[bytes, int], bytes]
Unpadding = Callable[[bytes], bytes]


def _as_bytes(value) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _cipher(key, iv) -> Cipher:
    key = _as_bytes(key)
    if len(key) not in _KEY_SIZES:
        raise ValueError(f"invalid AES key size {len(key)}")
    iv = _as_bytes(iv)
    if len(iv) != _BLOCK_SIZE:
        raise ValueError(f"IV length must equal block size {_BLOCK_SIZE}")
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def pkcs5_padding(data: bytes, block_size: int) -> bytes:
    """Pad ``data`` to a multiple of ``block_size``; a full block is added when aligned."""
    padding = block_size - len(data) % block_size
    return bytes(data) + bytes([padding]) * padding


def pkcs5_unpadding(data: bytes) -> bytes:
    """Strip the padding; returns ``b"unpadding error"`` if the pad length is impossible."""
    if not data:
        raise ValueError("cannot unpad empty data")
    unpadding = data[-1]
    if len(data) < unpadding:
        return b"unpadding error"
    return bytes(data[: len(data) - unpadding])


def pkcs7_padding(data: bytes, block_size: int) -> bytes:
    """Pad ``data`` to a multiple of ``block_size`` (PKCS#7)."""
    return pkcs5_padding(data, block_size)


def pkcs7_unpadding(data: bytes) -> bytes:
    """Strip PKCS#7 padding; same rules as :func:`pkcs5_unpadding`."""
    return pkcs5_unpadding(data)


def aes_encrypt(data: bytes, key, iv, padding: Padding) -> bytes:
    """Pad ``data`` with ``padding`` and encrypt it with AES in CBC mode."""
    cipher = _cipher(key, iv)
    padded = padding(bytes(data), _BLOCK_SIZE)
    encryptor = cipher.encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def aes_decrypt(data: bytes, key, iv, unpadding: Unpadding) -> bytes:
    """Decrypt AES-CBC ``data`` and remove padding with ``unpadding``."""
    cipher = _cipher(key, iv)
    decryptor = cipher.decryptor()
    plain = decryptor.update(bytes(data)) + decryptor.finalize()
    return unpadding(plain)


def aes_encrypt_simple(data: bytes, key: str, iv: str) -> bytes:
    """String-keyed helper; it applies PKCS#5 decryption to ``data``."""
    return aes_decrypt_pkcs5(data, key, iv)


def aes_encrypt_pkcs5(data: bytes, key, iv) -> bytes:
    return aes_encrypt(data, key, iv, pkcs5_padding)


def aes_encrypt_pkcs7(data: bytes, key, iv) -> bytes:
    return aes_encrypt(data, key, iv, pkcs7_padding)


def aes_encrypt_pkcs7_base64(data: bytes, key, iv) -> bytes:
    """Encrypt with PKCS#7 padding and return the standard base64 text as bytes."""
    return base64.b64encode(aes_encrypt(data, key, iv, pkcs7_padding))


def aes_decrypt_simple(data: bytes, key: str, iv: str) -> bytes:
    """Decrypt with PKCS#5 unpadding using string key and IV."""
    return aes_decrypt_pkcs5(data, key, iv)


def aes_decrypt_pkcs5(data: bytes, key, iv) -> bytes:
    return aes_decrypt(data, key, iv, pkcs5_unpadding)


def aes_decrypt_pkcs7(data: bytes, key, iv) -> bytes:
    return aes_decrypt(data, key, iv, pkcs7_unpadding)


def aes_decrypt_pkcs7_base64(data, key, iv) -> bytes:
    """Decode standard base64 ``data`` and decrypt it with PKCS#7 unpadding."""
    try:
        raw = base64.b64decode(_as_bytes(data), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 input: {exc}") from exc
    return aes_decrypt(raw, key, iv, pkcs7_unpadding)