"""Key material loading.

A key resource is anything path-like. The whole resource is read into memory
once; schemes then slice out the fixed-size key they need. Resolving special
names such as ``-`` is left to the caller.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from textseal.core.exceptions import InvalidKeyLength


KeyResource = Union[str, "os.PathLike[str]"]

KEY_SIZE = 32


def read_key_bytes(resource: KeyResource) -> bytes:
    """Return every byte stored at ``resource``; OSError propagates."""
    return Path(resource).read_bytes()


def take_key(raw: bytes, size: int = KEY_SIZE, exact: bool = False) -> bytes:
    """
    Return the first ``size`` bytes of ``raw``.

    With ``exact`` the resource must hold exactly ``size`` bytes. Either way a
    short resource raises InvalidKeyLength before any cryptographic call.
    """
    if len(raw) < size or (exact and len(raw) != size):
        raise InvalidKeyLength(size, len(raw))
    return bytes(raw[:size])


def load_key(resource: KeyResource, size: int = KEY_SIZE, exact: bool = False) -> bytes:
    return take_key(read_key_bytes(resource), size=size, exact=exact)
