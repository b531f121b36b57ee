"""Runtime settings and input helpers for the command line."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Mapping, Optional
import logging
import os
import sys


@dataclass
class CliContext:
    """Settings the commands need, read from the environment."""

    log_level: int = logging.WARNING
    key_dir: Path = Path("fixtures")


def _parse_level(value: Optional[str]) -> int:
    if not value:
        return logging.WARNING
    level = logging.getLevelName(value.strip().upper())
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def build_context(environ: Optional[Mapping[str, str]] = None) -> CliContext:
    """
    Build a CliContext from environment variables.

    - ``TEXTSEAL_LOG_LEVEL``: logging level name (default WARNING)
    - ``TEXTSEAL_KEY_DIR``: default directory for generated keys and
      encrypt/decrypt output files (default ``fixtures``)
    """
    env = os.environ if environ is None else environ
    return CliContext(
        log_level=_parse_level(env.get("TEXTSEAL_LOG_LEVEL")),
        key_dir=Path(env.get("TEXTSEAL_KEY_DIR") or "fixtures"),
    )


@contextmanager
def open_input(name: str) -> Iterator[BinaryIO]:
    # "-" means stdin, which is left open; anything else is a file path
    if name == "-":
        yield sys.stdin.buffer
        return
    with open(name, "rb") as f:
        yield f
