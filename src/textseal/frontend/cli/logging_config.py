"""Lightweight logging setup for the command line."""

import logging
import sys


def configure_logging(level: int = logging.WARNING) -> None:
    # Configure root logger once; stderr keeps stdout clean for signatures and plaintext.
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
