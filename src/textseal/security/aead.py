"""ChaCha20-Poly1305 text encryption.

Envelope layout (raw bytes, before wire encoding):
- 12 bytes: nonce, fresh from os.urandom for every call
- N bytes: ciphertext
- 16 bytes: Poly1305 tag (appended by the primitive)

The decryptor reads the wire-encoded envelope text and splits the nonce back
off the front. Failures are reported as a bare DecryptError.
"""

from __future__ import annotations

import os
from typing import BinaryIO

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from textseal.core.codec import decode_wire
from textseal.core.exceptions import DecryptError, EncryptError
from textseal.core.models import SingleKey
from .keys import KEY_SIZE, KeyResource, load_key, take_key


NONCE_SIZE = 12
TAG_SIZE = 16


class ChaCha20Poly1305Encryptor:
    def __init__(self, key: bytes):
        self._cipher = ChaCha20Poly1305(take_key(key, KEY_SIZE, exact=True))

    @classmethod
    def load(cls, resource: KeyResource) -> "ChaCha20Poly1305Encryptor":
        return cls(load_key(resource, KEY_SIZE))

    @staticmethod
    def generate() -> SingleKey:
        return SingleKey(ChaCha20Poly1305.generate_key())

    def encrypt(self, reader: BinaryIO) -> bytes:
        nonce = os.urandom(NONCE_SIZE)
        try:
            ct = self._cipher.encrypt(nonce, reader.read(), None)
        except (OverflowError, ValueError):
            raise EncryptError() from None
        return nonce + ct


class ChaCha20Poly1305Decryptor:
    def __init__(self, key: bytes):
        self._cipher = ChaCha20Poly1305(take_key(key, KEY_SIZE, exact=True))

    @classmethod
    def load(cls, resource: KeyResource) -> "ChaCha20Poly1305Decryptor":
        return cls(load_key(resource, KEY_SIZE))

    def decrypt_envelope(self, envelope: bytes) -> bytes:
        """Decrypt a raw ``nonce || ciphertext || tag`` envelope."""
        if len(envelope) < NONCE_SIZE + TAG_SIZE:
            raise DecryptError()
        nonce, ct = envelope[:NONCE_SIZE], envelope[NONCE_SIZE:]
        try:
            return self._cipher.decrypt(nonce, ct, None)
        except InvalidTag:
            raise DecryptError() from None

    def decrypt(self, reader: BinaryIO) -> bytes:
        # EncodingError from a bad transport text propagates as is
        return self.decrypt_envelope(decode_wire(reader.read()))
