#!/usr/bin/env python3
"""
Splicer.py — lean CLI over the character-indexed operations

- `len PATH`: count code points
- `split PATH INDEX`: split at a character offset
- `replace PATH INDEX LENGTH TEXT`: replace a character range (optionally in place)
- PATH `-` reads raw bytes from stdin
- `--strict` rejects ranges past the end instead of clamping
- Prints a concise JSON summary to stdout
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from boundary import byte_index
from char_fns import CharIndexError, char_len, char_replace, char_split

logger = logging.getLogger("splicer")

EXIT_OK = 0
EXIT_FAILED = 2


def _env_value(name: str) -> str:
    return (os.environ.get(name) or "").strip()


def _resolve_log_level(verbose: bool) -> int:
    """DEBUG with --verbose, otherwise SPLICER_LOG_LEVEL (default INFO)."""
    if verbose:
        return logging.DEBUG
    name = _env_value("SPLICER_LOG_LEVEL").upper() or "INFO"
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown SPLICER_LOG_LEVEL %r, using INFO", name)
        return logging.INFO
    return level


def _read_input(path: str) -> bytes:
    """Return the raw bytes of `path`, or of stdin when `path` is '-'.

    Raises:
        OSError: when the file cannot be read.
    """
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _text(data: bytes) -> str:
    # Output is for humans; keep going if the caller handed us malformed bytes.
    return bytes(data).decode("utf-8", errors="replace")


def _run_len(data: bytes) -> Dict[str, Any]:
    count = char_len(data)
    logger.debug("Counted %d characters in %d bytes", count, len(data))
    return {"chars": count, "bytes": len(data)}


def _run_split(data: bytes, index: int, strict: bool) -> Dict[str, Any]:
    before, after = char_split(data, index, strict=strict)
    logger.debug("Split at char %d -> byte %d", index, len(before))
    return {
        "index": index,
        "byte_offset": len(before),
        "before": _text(before),
        "after": _text(after),
    }


def _run_replace(
    data: bytes,
    index: int,
    length: int,
    text: str,
    strict: bool,
    target: Optional[Path],
) -> Dict[str, Any]:
    result = char_replace(data, index, length, text.encode("utf-8"), strict=strict)
    start = byte_index(data, index)
    end = start + byte_index(data[start:], length)
    logger.debug("Replaced chars [%d, %d) -> bytes [%d, %d)", index, index + length, start, end)
    if target is not None:
        target.write_bytes(result)
        logger.info("Wrote %d bytes to %s", len(result), target)
    return {
        "index": index,
        "length": length,
        "byte_range": {"start": start, "end": end},
        "result": _text(result),
        "written": str(target) if target is not None else None,
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Character-indexed operations over UTF-8 files.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_len = sub.add_parser("len", help="Count characters.")
    p_len.add_argument("path", help="Input file, or '-' for stdin")

    p_split = sub.add_parser("split", help="Split at a character offset.")
    p_split.add_argument("path", help="Input file, or '-' for stdin")
    p_split.add_argument("index", type=int)
    p_split.add_argument("--strict", action="store_true", help="Fail instead of clamping past the end.")

    p_rep = sub.add_parser("replace", help="Replace a character range.")
    p_rep.add_argument("path", help="Input file, or '-' for stdin")
    p_rep.add_argument("index", type=int)
    p_rep.add_argument("length", type=int)
    p_rep.add_argument("text", help="Replacement text")
    p_rep.add_argument("--strict", action="store_true", help="Fail instead of clamping past the end.")
    p_rep.add_argument("--in-place", action="store_true", help="Write the result back to PATH.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint.

    - Parses the subcommand and its operands
    - Reads the input bytes
    - Runs the operation and prints a JSON summary
    - Returns 0 on success, 2 on out-of-range indices or I/O failure
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=_resolve_log_level(args.verbose), format="%(levelname)s %(name)s: %(message)s")

    if args.command != "len" and args.index < 0:
        parser.error("index must be non-negative")
    if args.command == "replace":
        if args.length < 0:
            parser.error("length must be non-negative")
        if args.in_place and args.path == "-":
            parser.error("--in-place needs a file path")

    try:
        data = _read_input(args.path)
        if args.command == "len":
            result = _run_len(data)
        elif args.command == "split":
            result = _run_split(data, args.index, args.strict)
        else:
            target = Path(args.path) if args.in_place else None
            result = _run_replace(data, args.index, args.length, args.text, args.strict, target)
    except CharIndexError as e:
        logger.error("%s failed: %s", args.command, e)
        return EXIT_FAILED
    except OSError as e:
        logger.error("Cannot access %s: %s", args.path, e)
        return EXIT_FAILED

    summary = {"command": args.command, "path": args.path, **result}
    print(json.dumps(summary, ensure_ascii=False))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
