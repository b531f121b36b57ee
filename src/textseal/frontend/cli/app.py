"""
Command line entry point for textseal.

Subcommands mirror the engine operations:

    textseal text sign -k fixtures/blake3.txt -i message.txt
    textseal text verify -k fixtures/ed25519.pk -f ed25519 --sign=<sig> -i message.txt
    textseal text generate -f ed25519 -o fixtures
    textseal text encrypt -k fixtures/chacha20poly1305.key -i message.txt
    textseal text decrypt -k fixtures/chacha20poly1305.key -i fixtures/encrypted.txt
    textseal base64 encode -i file --format urlsafe --no-padding
    textseal genpass --length 24
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from textseal.core import codec
from textseal.core.exceptions import TextSealError
from textseal.core.models import Base64Format, TextEncryptFormat, TextSignFormat
from textseal.core.passgen import generate_password
from textseal.security.text import (
    process_text_decrypt,
    process_text_encrypt,
    process_text_generate,
    process_text_sign,
    process_text_verify,
)
from .context import CliContext, build_context, open_input
from .logging_config import configure_logging


logger = logging.getLogger(__name__)

# file names written by `text generate`, in the order of the generated blobs
KEY_FILE_NAMES = {
    TextSignFormat.BLAKE3: ("blake3.txt",),
    TextSignFormat.ED25519: ("ed25519.sk", "ed25519.pk"),
    TextSignFormat.CHACHA20POLY1305: ("chacha20poly1305.key",),
}


def verify_key_file(value: str) -> str:
    if Path(value).is_file():
        return value
    raise argparse.ArgumentTypeError(f"File does not exist: {value}")


def verify_file(value: str) -> str:
    # "-" is stdin
    if value == "-":
        return value
    return verify_key_file(value)


def verify_path(value: str) -> Path:
    path = Path(value)
    if path.is_dir():
        return path
    raise argparse.ArgumentTypeError(f"Path does not exist or is not a directory: {value}")


def _write_output(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


# ----------------------------------------------------------------------
# text
# ----------------------------------------------------------------------

def cmd_text_sign(args: argparse.Namespace, ctx: CliContext) -> int:
    with open_input(args.input) as reader:
        signature = process_text_sign(args.key, reader, args.format)
    print(signature)
    return 0


def cmd_text_verify(args: argparse.Namespace, ctx: CliContext) -> int:
    with open_input(args.input) as reader:
        valid = process_text_verify(args.key, reader, args.sign, args.format)
    print("Signature is valid" if valid else "Signature is invalid")
    return 0 if valid else 1


def cmd_text_generate(args: argparse.Namespace, ctx: CliContext) -> int:
    output = args.output if args.output is not None else ctx.key_dir
    output.mkdir(parents=True, exist_ok=True)
    keys = process_text_generate(args.format)
    for name, blob in zip(KEY_FILE_NAMES[args.format], keys.blobs()):
        path = output / name
        path.write_bytes(blob)
        logger.info("wrote %s", path)
    print(f"Key generated in {output}")
    return 0


def cmd_text_encrypt(args: argparse.Namespace, ctx: CliContext) -> int:
    output = args.output if args.output is not None else ctx.key_dir / "encrypted.txt"
    with open_input(args.input) as reader:
        envelope = process_text_encrypt(args.key, reader, args.format)
    _write_output(output, envelope.encode("ascii"))
    print(envelope)
    return 0


def cmd_text_decrypt(args: argparse.Namespace, ctx: CliContext) -> int:
    output = args.output if args.output is not None else ctx.key_dir / "decrypted.txt"
    with open_input(args.input) as reader:
        plaintext = process_text_decrypt(args.key, reader, args.format)
    _write_output(output, plaintext)
    logger.info("wrote %d bytes to %s", len(plaintext), output)
    return 0


# ----------------------------------------------------------------------
# base64 / genpass
# ----------------------------------------------------------------------

def cmd_base64_encode(args: argparse.Namespace, ctx: CliContext) -> int:
    with open_input(args.input) as reader:
        data = reader.read()
    print(codec.encode(data, args.format, no_padding=args.no_padding))
    return 0


def cmd_base64_decode(args: argparse.Namespace, ctx: CliContext) -> int:
    with open_input(args.input) as reader:
        text = reader.read()
    data = codec.decode(text, args.format, no_padding=args.no_padding)
    sys.stdout.buffer.write(data)
    sys.stdout.flush()
    return 0


def cmd_genpass(args: argparse.Namespace, ctx: CliContext) -> int:
    password = generate_password(
        args.length,
        upper=args.uppercase,
        lower=args.lowercase,
        number=args.number,
        symbol=args.symbol,
    )
    print(password)
    return 0


def _add_input_key(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-i", "--input", type=verify_file, default="-", help="Input file, '-' for stdin (default: -)")
    parser.add_argument("-k", "--key", type=verify_key_file, required=True, help="Key file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textseal",
        description="Sign, verify, encrypt and decrypt text.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    # text
    text = commands.add_parser("text", help="Text signing and encryption")
    text_cmds = text.add_subparsers(dest="text_command", required=True)

    sign = text_cmds.add_parser("sign", help="Sign a message with a private/shared key")
    _add_input_key(sign)
    sign.add_argument("-f", "--format", type=TextSignFormat.from_str, default=TextSignFormat.BLAKE3,
                      help="blake3 or ed25519 (default: blake3)")
    sign.set_defaults(handler=cmd_text_sign)

    verify = text_cmds.add_parser("verify", help="Verify a signed message")
    _add_input_key(verify)
    verify.add_argument("-s", "--sign", required=True, help="Signature, URL-safe base64 without padding (pass as --sign=VALUE if it starts with '-')")
    verify.add_argument("-f", "--format", type=TextSignFormat.from_str, default=TextSignFormat.BLAKE3,
                        help="blake3 or ed25519 (default: blake3)")
    verify.set_defaults(handler=cmd_text_verify)

    generate = text_cmds.add_parser("generate", help="Generate a new key")
    generate.add_argument("-f", "--format", type=TextSignFormat.from_str, default=TextSignFormat.BLAKE3,
                          help="blake3, ed25519 or chacha20poly1305 (default: blake3)")
    generate.add_argument("-o", "--output", type=verify_path, default=None,
                          help="Output directory (default: $TEXTSEAL_KEY_DIR or fixtures)")
    generate.set_defaults(handler=cmd_text_generate)

    encrypt = text_cmds.add_parser("encrypt", help="Encrypt a message with a shared key")
    _add_input_key(encrypt)
    encrypt.add_argument("-f", "--format", type=TextEncryptFormat.from_str,
                         default=TextEncryptFormat.CHACHA20POLY1305, help="chacha20poly1305 (default)")
    encrypt.add_argument("-o", "--output", type=Path, default=None,
                         help="Output file (default: <key dir>/encrypted.txt)")
    encrypt.set_defaults(handler=cmd_text_encrypt)

    decrypt = text_cmds.add_parser("decrypt", help="Decrypt a message with a shared key")
    _add_input_key(decrypt)
    decrypt.add_argument("-f", "--format", type=TextEncryptFormat.from_str,
                         default=TextEncryptFormat.CHACHA20POLY1305, help="chacha20poly1305 (default)")
    decrypt.add_argument("-o", "--output", type=Path, default=None,
                         help="Output file (default: <key dir>/decrypted.txt)")
    decrypt.set_defaults(handler=cmd_text_decrypt)

    # base64
    b64 = commands.add_parser("base64", help="Base64 encode/decode")
    b64_cmds = b64.add_subparsers(dest="base64_command", required=True)
    for name, handler in (("encode", cmd_base64_encode), ("decode", cmd_base64_decode)):
        sub = b64_cmds.add_parser(name, help=f"Base64 {name}")
        sub.add_argument("-i", "--input", type=verify_file, default="-", help="Input file, '-' for stdin")
        sub.add_argument("--format", type=Base64Format.from_str, default=Base64Format.STANDARD,
                         help="standard or urlsafe (default: standard)")
        sub.add_argument("--no-padding", action="store_true", help="Omit '=' padding")
        sub.set_defaults(handler=handler)

    # genpass
    genpass = commands.add_parser("genpass", help="Generate a random password")
    genpass.add_argument("-l", "--length", type=int, default=16)
    genpass.add_argument("--no-uppercase", dest="uppercase", action="store_false")
    genpass.add_argument("--no-lowercase", dest="lowercase", action="store_false")
    genpass.add_argument("--no-number", dest="number", action="store_false")
    genpass.add_argument("--no-symbol", dest="symbol", action="store_false")
    genpass.set_defaults(handler=cmd_genpass)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    ctx = build_context()
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else ctx.log_level)

    try:
        return args.handler(args, ctx)
    except (TextSealError, OSError) as exc:
        logger.debug("command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
