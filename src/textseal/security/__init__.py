"""Security helpers: key loading, the three text schemes and format dispatch.

This package provides:
- BLAKE3 keyed-hash signing and verification
- Ed25519 signing and verification
- ChaCha20-Poly1305 encryption and decryption with a ``nonce || ciphertext`` envelope
- Key generation per format
"""

from .keys import load_key, read_key_bytes, take_key
from .mac import Blake3
from .signature import Ed25519Signer, Ed25519Verifier
from .aead import ChaCha20Poly1305Encryptor, ChaCha20Poly1305Decryptor
from .text import (
    process_text_sign,
    process_text_verify,
    process_text_generate,
    process_text_encrypt,
    process_text_decrypt,
)

__all__ = [
    "load_key",
    "read_key_bytes",
    "take_key",
    "Blake3",
    "Ed25519Signer",
    "Ed25519Verifier",
    "ChaCha20Poly1305Encryptor",
    "ChaCha20Poly1305Decryptor",
    "process_text_sign",
    "process_text_verify",
    "process_text_generate",
    "process_text_encrypt",
    "process_text_decrypt",
]
