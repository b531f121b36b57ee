"""Unit tests for format dispatch."""

import io
from unittest.mock import patch

import pytest

from textseal.core.codec import decode_wire, encode_wire
from textseal.core.exceptions import (
    EncodingError,
    InvalidKeyLength,
    KeyParseError,
    SignatureFormatError,
    UnsupportedOperation,
)
from textseal.core.models import KeyPair, SingleKey, TextEncryptFormat, TextSignFormat
from textseal.security import text
from textseal.security.mac import Blake3
from textseal.security.protocols import TextDecryptor, TextEncryptor, TextSigner, TextVerifier
from textseal.security.signature import Ed25519Signer, Ed25519Verifier


# ==============================================================================
# Fixtures
# ==============================================================================

@pytest.fixture
def blake3_key(tmp_path):
    path = tmp_path / "blake3.txt"
    path.write_bytes(text.process_text_generate(TextSignFormat.BLAKE3).key)
    return path


@pytest.fixture
def ed25519_keys(tmp_path):
    pair = text.process_text_generate(TextSignFormat.ED25519)
    sk = tmp_path / "ed25519.sk"
    pk = tmp_path / "ed25519.pk"
    sk.write_bytes(pair.private_key)
    pk.write_bytes(pair.public_key)
    return sk, pk


@pytest.fixture
def chacha_key(tmp_path):
    path = tmp_path / "chacha20poly1305.key"
    path.write_bytes(text.process_text_generate(TextSignFormat.CHACHA20POLY1305).key)
    return path


# ==============================================================================
# Tests: Dispatch
# ==============================================================================

def test_get_signer_and_verifier_types(blake3_key, ed25519_keys):
    sk, pk = ed25519_keys
    assert isinstance(text.get_signer(blake3_key, TextSignFormat.BLAKE3), Blake3)
    assert isinstance(text.get_verifier(blake3_key, TextSignFormat.BLAKE3), Blake3)
    assert isinstance(text.get_signer(sk, TextSignFormat.ED25519), Ed25519Signer)
    assert isinstance(text.get_verifier(pk, TextSignFormat.ED25519), Ed25519Verifier)


def test_generate_variants():
    assert isinstance(text.process_text_generate(TextSignFormat.BLAKE3), SingleKey)
    assert isinstance(text.process_text_generate(TextSignFormat.ED25519), KeyPair)
    chacha = text.process_text_generate(TextSignFormat.CHACHA20POLY1305)
    assert isinstance(chacha, SingleKey)
    assert len(chacha.key) == 32


def test_sign_with_aead_tag_is_unsupported(chacha_key):
    with pytest.raises(UnsupportedOperation):
        text.process_text_sign(chacha_key, io.BytesIO(b"m"), TextSignFormat.CHACHA20POLY1305)


def test_verify_with_aead_tag_is_unsupported(chacha_key):
    with pytest.raises(UnsupportedOperation):
        text.process_text_verify(
            chacha_key, io.BytesIO(b"m"), encode_wire(b"\x00" * 32), TextSignFormat.CHACHA20POLY1305
        )


def test_unsupported_tag_does_not_read_key():
    with patch("textseal.security.keys.read_key_bytes") as read:
        with pytest.raises(UnsupportedOperation):
            text.process_text_sign("unused", io.BytesIO(b"m"), TextSignFormat.CHACHA20POLY1305)
    read.assert_not_called()


# ==============================================================================
# Tests: Sign / Verify
# ==============================================================================

def test_blake3_sign_verify(blake3_key):
    sig = text.process_text_sign(blake3_key, io.BytesIO(b"hello"), TextSignFormat.BLAKE3)
    assert "=" not in sig
    assert len(decode_wire(sig)) == 32
    assert text.process_text_verify(blake3_key, io.BytesIO(b"hello"), sig, TextSignFormat.BLAKE3)


def test_ed25519_sign_verify(ed25519_keys):
    sk, pk = ed25519_keys
    sig = text.process_text_sign(sk, io.BytesIO(b"hello"), TextSignFormat.ED25519)
    assert len(decode_wire(sig)) == 64
    assert text.process_text_verify(pk, io.BytesIO(b"hello"), sig, TextSignFormat.ED25519)
    assert not text.process_text_verify(pk, io.BytesIO(b"hellO"), sig, TextSignFormat.ED25519)


def test_verify_undecodable_signature(blake3_key):
    with pytest.raises(EncodingError):
        text.process_text_verify(blake3_key, io.BytesIO(b"hello"), "!!!", TextSignFormat.BLAKE3)


def test_verify_wrong_length_signature(ed25519_keys):
    _, pk = ed25519_keys
    with pytest.raises(SignatureFormatError):
        text.process_text_verify(pk, io.BytesIO(b"hello"), encode_wire(b"\x00" * 32), TextSignFormat.ED25519)


@pytest.mark.parametrize("fmt", [TextSignFormat.BLAKE3, TextSignFormat.ED25519])
def test_sign_short_key(tmp_path, fmt):
    path = tmp_path / "short.key"
    path.write_bytes(b"\x00" * 8)
    with pytest.raises(InvalidKeyLength):
        text.process_text_sign(path, io.BytesIO(b"m"), fmt)


# ==============================================================================
# Tests: Encrypt / Decrypt
# ==============================================================================

def test_encrypt_decrypt(chacha_key):
    envelope = text.process_text_encrypt(chacha_key, io.BytesIO(b"secret"), TextEncryptFormat.CHACHA20POLY1305)
    assert "=" not in envelope
    plaintext = text.process_text_decrypt(
        chacha_key, io.BytesIO(envelope.encode("ascii")), TextEncryptFormat.CHACHA20POLY1305
    )
    assert plaintext == b"secret"


def test_encrypt_short_key(tmp_path):
    path = tmp_path / "short.key"
    path.write_bytes(b"\x00" * 31)
    with pytest.raises(InvalidKeyLength):
        text.process_text_encrypt(path, io.BytesIO(b"m"), TextEncryptFormat.CHACHA20POLY1305)
    with pytest.raises(InvalidKeyLength):
        text.process_text_decrypt(path, io.BytesIO(b"AAAA"), TextEncryptFormat.CHACHA20POLY1305)


def test_dispatch_tables_provide_capabilities(blake3_key, ed25519_keys, chacha_key):
    """Each table only holds classes that can load keys and perform their verb."""
    sk, pk = ed25519_keys
    for table in (text._SIGNERS, text._VERIFIERS, text._ENCRYPTORS, text._DECRYPTORS):
        assert all(callable(getattr(cls, "load", None)) for cls in table.values())
    assert all(callable(getattr(cls, "generate", None)) for cls in text._GENERATORS.values())

    assert isinstance(text.get_signer(sk, TextSignFormat.ED25519), TextSigner)
    assert isinstance(text.get_verifier(pk, TextSignFormat.ED25519), TextVerifier)
    assert isinstance(text.get_signer(blake3_key, TextSignFormat.BLAKE3), TextSigner)
    assert isinstance(text.get_encryptor(chacha_key, TextEncryptFormat.CHACHA20POLY1305), TextEncryptor)
    assert isinstance(text.get_decryptor(chacha_key, TextEncryptFormat.CHACHA20POLY1305), TextDecryptor)


def test_verify_off_curve_public_key(tmp_path):
    path = tmp_path / "ed25519.pk"
    path.write_bytes((2).to_bytes(32, "little"))
    with pytest.raises(KeyParseError):
        text.process_text_verify(path, io.BytesIO(b"m"), encode_wire(b"\x00" * 64), TextSignFormat.ED25519)
