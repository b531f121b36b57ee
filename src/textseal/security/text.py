"""Format dispatch for the text sign/verify/generate/encrypt/decrypt operations.

Every call is independent: a scheme object is built from the key resource,
used once and dropped. Raw signatures and envelopes leave through the wire
codec (URL-safe base64 without padding).
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Dict, Type

from textseal.core.codec import decode_wire, encode_wire
from textseal.core.exceptions import UnsupportedOperation
from textseal.core.models import KeyPair, SingleKey, TextEncryptFormat, TextSignFormat
from .aead import ChaCha20Poly1305Decryptor, ChaCha20Poly1305Encryptor
from .keys import KeyResource
from .mac import Blake3
from .protocols import KeyGenerator, KeyLoader, TextDecryptor, TextEncryptor, TextSigner, TextVerifier
from .signature import Ed25519Signer, Ed25519Verifier


logger = logging.getLogger(__name__)

_SIGNERS: Dict[TextSignFormat, Type[KeyLoader]] = {
    TextSignFormat.BLAKE3: Blake3,
    TextSignFormat.ED25519: Ed25519Signer,
}

_VERIFIERS: Dict[TextSignFormat, Type[KeyLoader]] = {
    TextSignFormat.BLAKE3: Blake3,
    TextSignFormat.ED25519: Ed25519Verifier,
}

_GENERATORS: Dict[TextSignFormat, Type[KeyGenerator]] = {
    TextSignFormat.BLAKE3: Blake3,
    TextSignFormat.ED25519: Ed25519Signer,
    TextSignFormat.CHACHA20POLY1305: ChaCha20Poly1305Encryptor,
}

_ENCRYPTORS: Dict[TextEncryptFormat, Type[KeyLoader]] = {
    TextEncryptFormat.CHACHA20POLY1305: ChaCha20Poly1305Encryptor,
}

_DECRYPTORS: Dict[TextEncryptFormat, Type[KeyLoader]] = {
    TextEncryptFormat.CHACHA20POLY1305: ChaCha20Poly1305Decryptor,
}


def _resolve(table: Dict, fmt, verb: str) -> Type:
    try:
        return table[fmt]
    except KeyError:
        raise UnsupportedOperation("%s does not support %s" % (fmt, verb)) from None


def _load(table: Dict, fmt, verb: str, key: KeyResource):
    # every class in a table implements the capability for that verb
    return _resolve(table, fmt, verb).load(key)


def get_signer(key: KeyResource, fmt: TextSignFormat) -> TextSigner:
    return _load(_SIGNERS, fmt, "sign", key)


def get_verifier(key: KeyResource, fmt: TextSignFormat) -> TextVerifier:
    return _load(_VERIFIERS, fmt, "verify", key)


def get_encryptor(key: KeyResource, fmt: TextEncryptFormat) -> TextEncryptor:
    return _load(_ENCRYPTORS, fmt, "encrypt", key)


def get_decryptor(key: KeyResource, fmt: TextEncryptFormat) -> TextDecryptor:
    return _load(_DECRYPTORS, fmt, "decrypt", key)


def process_text_sign(key: KeyResource, reader: BinaryIO, fmt: TextSignFormat) -> str:
    """Sign everything readable from ``reader``; returns the wire-encoded signature."""
    logger.debug("sign format=%s", fmt)
    signer = get_signer(key, fmt)
    return encode_wire(signer.sign(reader))


def process_text_verify(key: KeyResource, reader: BinaryIO, signature: str, fmt: TextSignFormat) -> bool:
    """
    Check a wire-encoded signature against the content of ``reader``.

    A mismatch returns False. Undecodable text raises EncodingError and a
    wrong-length signature raises SignatureFormatError.
    """
    logger.debug("verify format=%s", fmt)
    verifier = get_verifier(key, fmt)
    result = verifier.verify(reader, decode_wire(signature))
    logger.debug("verify format=%s valid=%s", fmt, result)
    return result


def process_text_generate(fmt: TextSignFormat) -> SingleKey | KeyPair:
    logger.debug("generate format=%s", fmt)
    return _resolve(_GENERATORS, fmt, "generate").generate()


def process_text_encrypt(key: KeyResource, reader: BinaryIO, fmt: TextEncryptFormat) -> str:
    logger.debug("encrypt format=%s", fmt)
    encryptor = get_encryptor(key, fmt)
    return encode_wire(encryptor.encrypt(reader))


def process_text_decrypt(key: KeyResource, reader: BinaryIO, fmt: TextEncryptFormat) -> bytes:
    """``reader`` yields the wire-encoded envelope produced by process_text_encrypt."""
    logger.debug("decrypt format=%s", fmt)
    decryptor = get_decryptor(key, fmt)
    return decryptor.decrypt(reader)
