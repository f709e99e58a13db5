"""Command that reads a tree and prints its heaviest root-to-leaf path."""

from __future__ import annotations

import argparse
import sys

from treepath.parallel import max_path_threaded
from treepath.tree import TreeFormatError, format_result, max_path, parse_tree


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="treepath",
        description="Print the root-to-leaf path with the largest sum of values.",
    )
    parser.add_argument("file", nargs="?", help="tree description (default: stdin)")
    parser.add_argument(
        "--threads",
        type=int,
        default=None,
        help="threads to start per node (default: search serially)",
    )
    args = parser.parse_args(argv)
    if args.threads is not None and args.threads < 0:
        parser.error("--threads must not be negative")

    try:
        if args.file is None:
            text = sys.stdin.read()
        else:
            with open(args.file, encoding="utf-8") as handle:
                text = handle.read()
        tree = parse_tree(text)
        if args.threads is None:
            result = max_path(tree)
        else:
            result = max_path_threaded(tree, 0, args.threads)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (TreeFormatError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())