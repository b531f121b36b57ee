"""Ed25519 signatures.

Signing and verifying are separate key holders: :class:`Ed25519Signer` loads
the 32-byte private seed, :class:`Ed25519Verifier` the 32-byte public key.
Both key files must hold exactly 32 bytes, and the public key must decode to
a point on edwards25519 (checked with libsodium) or KeyParseError is raised.
"""

from __future__ import annotations

from typing import BinaryIO

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519
from nacl.bindings import crypto_core_ed25519_is_valid_point

from textseal.core.exceptions import KeyParseError, SignatureFormatError
from textseal.core.models import KeyPair
from .keys import KEY_SIZE, KeyResource, load_key, take_key


SIGNATURE_SIZE = 64


class Ed25519Signer:
    def __init__(self, seed: bytes):
        seed = take_key(seed, KEY_SIZE, exact=True)
        try:
            self._key = ed25519.Ed25519PrivateKey.from_private_bytes(seed)
        except ValueError:
            raise KeyParseError("Invalid Ed25519 private key") from None

    @classmethod
    def load(cls, resource: KeyResource) -> "Ed25519Signer":
        return cls(load_key(resource, KEY_SIZE, exact=True))

    @staticmethod
    def generate() -> KeyPair:
        signing_key = ed25519.Ed25519PrivateKey.generate()
        return KeyPair(
            private_key=signing_key.private_bytes_raw(),
            public_key=signing_key.public_key().public_bytes_raw(),
        )

    def verifying_key(self) -> "Ed25519Verifier":
        return Ed25519Verifier(self._key.public_key().public_bytes_raw())

    def sign(self, reader: BinaryIO) -> bytes:
        return self._key.sign(reader.read())


class Ed25519Verifier:
    def __init__(self, public_key: bytes):
        public_key = take_key(public_key, KEY_SIZE, exact=True)
        if not crypto_core_ed25519_is_valid_point(public_key):
            raise KeyParseError("Invalid Ed25519 public key: not a valid curve point")
        try:
            self._key = ed25519.Ed25519PublicKey.from_public_bytes(public_key)
        except ValueError:
            raise KeyParseError("Invalid Ed25519 public key") from None

    @classmethod
    def load(cls, resource: KeyResource) -> "Ed25519Verifier":
        return cls(load_key(resource, KEY_SIZE, exact=True))

    def verify(self, reader: BinaryIO, signature: bytes) -> bool:
        if len(signature) != SIGNATURE_SIZE:
            raise SignatureFormatError(
                f"Ed25519 signature must be {SIGNATURE_SIZE} bytes, got {len(signature)}"
            )
        try:
            self._key.verify(signature, reader.read())
        except InvalidSignature:
            return False
        return True
