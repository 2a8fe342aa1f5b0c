"""
Command line front end: print the 256-bit pengyhash of files or stdin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from .pengyhash import Pengyhash256

logger = logging.getLogger(__name__)

DEFAULT_SEED = 1
CHUNK_SIZE = 64 * 1024
_PROG = "pengyhash256"


def _parse_seed(text: str) -> int:
    try:
        seed = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed: {text!r}")
    if seed < 0 or seed > 0xFFFFFFFFFFFFFFFF:
        raise argparse.ArgumentTypeError(f"seed out of range: {text!r}")
    return seed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=_PROG,
        description="Print the 256-bit pengyhash digest of each input.",
    )
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=DEFAULT_SEED,
        help=f"hash function seed (default {DEFAULT_SEED})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("files", nargs="*", help="input files, '-' for stdin")
    return parser


def hash_stream(stream: BinaryIO, seed: int = DEFAULT_SEED) -> Pengyhash256:
    """Feed a binary stream through a fresh Pengyhash256 in fixed-size chunks."""
    h = Pengyhash256(seed)
    total = 0
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        total += h.write(chunk)
    logger.debug("hashed %d bytes with seed %#x", total, seed)
    return h


def run(filename: str, seed: int) -> str:
    if filename == "-":
        h = hash_stream(sys.stdin.buffer, seed)
    else:
        with open(filename, "rb") as f:
            h = hash_stream(f, seed)
    return f"{h.hexdigest()}  {filename}"


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    for filename in args.files or ["-"]:
        try:
            line = run(filename, args.seed)
        except OSError as exc:
            print(f"{_PROG}: {exc}", file=sys.stderr)
            return 1
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
