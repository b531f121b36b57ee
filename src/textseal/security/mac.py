"""BLAKE3 keyed-hash MAC: 32-byte key, 32-byte tag."""

from __future__ import annotations

import hmac
from typing import BinaryIO

import blake3

from textseal.core.exceptions import SignatureFormatError
from textseal.core.models import SingleKey
from textseal.core.passgen import generate_password
from .keys import KEY_SIZE, KeyResource, load_key, take_key


TAG_SIZE = 32


class Blake3:
    def __init__(self, key: bytes):
        self._key = take_key(key, KEY_SIZE, exact=True)

    @classmethod
    def load(cls, resource: KeyResource) -> "Blake3":
        return cls(load_key(resource, KEY_SIZE))

    @staticmethod
    def generate() -> SingleKey:
        # the key is a printable password so it can live in a text file
        key = generate_password(KEY_SIZE, upper=True, lower=True, number=True, symbol=True)
        return SingleKey(key.encode("ascii"))

    def _tag(self, data: bytes) -> bytes:
        return blake3.blake3(data, key=self._key).digest()

    def sign(self, reader: BinaryIO) -> bytes:
        return self._tag(reader.read())

    def verify(self, reader: BinaryIO, signature: bytes) -> bool:
        if len(signature) != TAG_SIZE:
            raise SignatureFormatError(
                f"BLAKE3 tag must be {TAG_SIZE} bytes, got {len(signature)}"
            )
        return hmac.compare_digest(self._tag(reader.read()), signature)
