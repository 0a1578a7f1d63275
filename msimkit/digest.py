"""Hashes, identifiers and Curve25519 key agreement."""

from __future__ import annotations

import hashlib
import os
import uuid
import zlib

from cryptography.hazmat.primitives.asymmetric.x25519 import (
    X25519PrivateKey,
    X25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat


def md5(text: str) -> str:
    """Hex MD5 digest of the UTF-8 encoding of ``text``."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def md5_bytes(data: bytes) -> str:
    """Hex MD5 digest of ``data``."""
    return hashlib.md5(bytes(data)).hexdigest()


def hash_crc32(text: str) -> int:
    """IEEE CRC-32 of the UTF-8 encoding of ``text``."""
    return zlib.crc32(text.encode("utf-8")) & 0xFFFFFFFF


def gen_uuid() -> str:
    """Random UUID as 32 hex characters without dashes."""
    return uuid.uuid4().hex


def curve25519_key_pair() -> tuple[bytes, bytes]:
    """Return a fresh (private, public) Curve25519 key pair, 32 bytes each."""
    private = os.urandom(32)
    public = (
        X25519PrivateKey.from_private_bytes(private)
        .public_key()
        .public_bytes(Encoding.Raw, PublicFormat.Raw)
    )
    return private, public


def curve25519_key(private: bytes, public: bytes) -> bytes:
    """Shared secret from our private key and the peer's public key."""
    ours = X25519PrivateKey.from_private_bytes(bytes(private))
    theirs = X25519PublicKey.from_public_bytes(bytes(public))
    return ours.exchange(theirs)