""" Base64 text codec used for signatures, envelopes and the base64 command. """

import base64
import binascii
import re

from .exceptions import EncodingError
from .models import Base64Format


_ALPHABETS = {
    Base64Format.STANDARD: re.compile(r"[A-Za-z0-9+/]*"),
    Base64Format.URL_SAFE: re.compile(r"[A-Za-z0-9_-]*"),
}


def encode(data: bytes, fmt: Base64Format = Base64Format.URL_SAFE, no_padding: bool = True) -> str:
    if fmt is Base64Format.URL_SAFE:
        encoded = base64.urlsafe_b64encode(data)
    else:
        encoded = base64.b64encode(data)
    if no_padding:
        encoded = encoded.rstrip(b"=")
    return encoded.decode("ascii")


def decode(text, fmt: Base64Format = Base64Format.URL_SAFE, no_padding: bool = True) -> bytes:
    """
    Decode base64 text, rejecting anything that ``encode`` would not produce.

    Leading/trailing whitespace is ignored. Wrong alphabet, unexpected or
    missing padding, truncated input and non-zero trailing bits all raise
    EncodingError.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError:
            raise EncodingError("base64 input is not ASCII") from None
    text = text.strip()

    body = text
    if not no_padding:
        if len(text) % 4 != 0:
            raise EncodingError("padded base64 length must be a multiple of 4")
        body = text.rstrip("=")
        if len(text) - len(body) > 2:
            raise EncodingError("too much base64 padding")

    if not _ALPHABETS[fmt].fullmatch(body):
        raise EncodingError(f"invalid character for {fmt} base64")
    if len(body) % 4 == 1:
        raise EncodingError("truncated base64 input")

    padded = body + "=" * (-len(body) % 4)
    altchars = b"-_" if fmt is Base64Format.URL_SAFE else None
    try:
        data = base64.b64decode(padded, altchars=altchars, validate=True)
    except binascii.Error:
        raise EncodingError("malformed base64 input") from None

    # trailing bits of the last symbol must be zero
    if encode(data, fmt, no_padding=True) != body:
        raise EncodingError("non-canonical base64 input")
    return data


def encode_wire(data: bytes) -> str:
    # transport form for tags, signatures and envelopes
    return encode(data, Base64Format.URL_SAFE, no_padding=True)


def decode_wire(text) -> bytes:
    return decode(text, Base64Format.URL_SAFE, no_padding=True)
