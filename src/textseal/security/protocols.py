"""Capability contracts implemented selectively by each scheme.

Schemes only implement what they can do: the BLAKE3 MAC signs and verifies,
Ed25519 splits signing and verifying across two key holders, and
ChaCha20-Poly1305 encrypts and decrypts. The dispatcher in
:mod:`textseal.security.text` checks capabilities with ``isinstance``.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from textseal.core.models import KeyPair, SingleKey
from .keys import KeyResource


@runtime_checkable
class TextSigner(Protocol):
    def sign(self, reader: BinaryIO) -> bytes:
        """Sign the content of the reader and return the raw signature."""
        ...


@runtime_checkable
class TextVerifier(Protocol):
    def verify(self, reader: BinaryIO, signature: bytes) -> bool:
        """Verify the content of the reader against a raw signature."""
        ...


@runtime_checkable
class TextEncryptor(Protocol):
    def encrypt(self, reader: BinaryIO) -> bytes:
        """Encrypt the content of the reader and return the raw envelope."""
        ...


@runtime_checkable
class TextDecryptor(Protocol):
    def decrypt(self, reader: BinaryIO) -> bytes:
        """Decrypt the wire-encoded envelope read from the reader."""
        ...


class KeyLoader(Protocol):
    @classmethod
    def load(cls, resource: KeyResource) -> "KeyLoader":
        ...


class KeyGenerator(Protocol):
    @staticmethod
    def generate() -> SingleKey | KeyPair:
        ...
