"""
Format tags and generated key shapes shared by the engine and its callers
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .exceptions import UnsupportedFormat


class _FormatTag(Enum):
    # tags parse from and print as their lowercase string value

    @classmethod
    def from_str(cls, value: str):
        for tag in cls:
            if tag.value == value:
                return tag
        raise UnsupportedFormat(f"Invalid format: {value}")

    def __str__(self) -> str:
        return self.value


class TextSignFormat(_FormatTag):
    # signing tag set; CHACHA20POLY1305 only selects a key generator
    BLAKE3 = "blake3"
    ED25519 = "ed25519"
    CHACHA20POLY1305 = "chacha20poly1305"


class TextEncryptFormat(_FormatTag):
    CHACHA20POLY1305 = "chacha20poly1305"


class Base64Format(_FormatTag):
    STANDARD = "standard"
    URL_SAFE = "urlsafe"


@dataclass(frozen=True)
class SingleKey:
    """One secret shared by both sides (MAC key, AEAD key)."""

    key: bytes

    def blobs(self) -> Tuple[bytes, ...]:
        return (self.key,)

    def __repr__(self) -> str:
        return f"SingleKey(<{len(self.key)} bytes>)"


@dataclass(frozen=True)
class KeyPair:
    """Private seed for the signer and the public key for the verifier."""

    private_key: bytes
    public_key: bytes

    def blobs(self) -> Tuple[bytes, ...]:
        return (self.private_key, self.public_key)

    def __repr__(self) -> str:
        # keep the seed out of logs and tracebacks
        return f"KeyPair(public_key={self.public_key.hex()})"
