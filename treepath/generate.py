"""Writers for sample tree descriptions (node lines without the count header)."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator

DEFAULT_PATH = "sequencia.txt"
DEFAULT_COUNT = 50000
DEFAULT_LEAF_START = 20001
DEFAULT_LEAF_STOP = 40000


def branch_lines(start: int, stop: int) -> Iterator[str]:
    """Yield ``"i 2 2i 2i+1"`` for each i from start to stop inclusive."""
    for i in range(start, stop + 1):
        yield f"{i} 2 {2 * i} {2 * i + 1}"


def leaf_lines(start: int, stop: int) -> Iterator[str]:
    """Yield ``"i 0"`` for each i from start to stop inclusive."""
    for i in range(start, stop + 1):
        yield f"{i} 0"


def _write(path: str | Path, mode: str, lines: Iterator[str]) -> None:
    with open(path, mode, encoding="ascii") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def write_sequence(path: str | Path = DEFAULT_PATH, count: int = DEFAULT_COUNT) -> None:
    """Create or truncate ``path`` with branch lines for nodes 1..count."""
    _write(path, "w", branch_lines(1, count))


def append_leaves(
    path: str | Path = DEFAULT_PATH,
    start: int = DEFAULT_LEAF_START,
    stop: int = DEFAULT_LEAF_STOP,
) -> None:
    """Append leaf lines for nodes start..stop to ``path``."""
    _write(path, "a", leaf_lines(start, stop))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="treepath-generate", description="Write sample tree node lines."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    write = commands.add_parser("write", help="write branch nodes 1..count")
    write.add_argument("--path", default=DEFAULT_PATH)
    write.add_argument("--count", type=int, default=DEFAULT_COUNT)

    append = commands.add_parser("append", help="append leaf nodes start..stop")
    append.add_argument("--path", default=DEFAULT_PATH)
    append.add_argument("--start", type=int, default=DEFAULT_LEAF_START)
    append.add_argument("--stop", type=int, default=DEFAULT_LEAF_STOP)

    args = parser.parse_args(argv)
    try:
        if args.command == "write":
            write_sequence(args.path, args.count)
            print(f"File '{args.path}' generated successfully.")
        else:
            append_leaves(args.path, args.start, args.stop)
            print(f"Sequence {args.start} to {args.stop} appended to '{args.path}'.")
    except OSError as exc:
        print(f"error opening file: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())