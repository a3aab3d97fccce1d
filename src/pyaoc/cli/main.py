"""CLI entry point for pyAOC.

Usage::

    pyaoc info  -c context.txt
    pyaoc cover -c context.txt --object 3
    pyaoc cover -c context.txt --attribute A --trace
    pyaoc bench -c a.txt b.txt --samples 100 --seed 1
"""

from __future__ import annotations

import argparse
import sys

from pyaoc._version import __version__


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ``pyaoc`` CLI."""
    parser = argparse.ArgumentParser(
        prog="pyaoc",
        description="pyAOC — local generation of AOC-poset neighbourhoods",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- info ---
    info_parser = subparsers.add_parser("info", help="Describe a formal context")
    info_parser.add_argument("-c", "--context", required=True, help="Path to context file (.txt or .json)")
    info_parser.add_argument("--json", action="store_true", help="Emit JSON")

    # --- cover ---
    cover_parser = subparsers.add_parser("cover", help="Compute the covers of a concept")
    cover_parser.add_argument("-c", "--context", required=True, help="Path to context file (.txt or .json)")
    pivot = cover_parser.add_mutually_exclusive_group(required=True)
    pivot.add_argument("--object", type=int, help="Use the object-concept of this object id")
    pivot.add_argument("--attribute", help="Use the attribute-concept of this attribute")
    cover_parser.add_argument("--trace", action="store_true", help="Print the phase trace")
    cover_parser.add_argument("--json", action="store_true", help="Emit JSON")

    # --- bench ---
    bench_parser = subparsers.add_parser("bench", help="Time neighbourhood generation on random objects")
    bench_parser.add_argument("-c", "--context", required=True, nargs="+", help="Context files")
    bench_parser.add_argument("--samples", type=int, default=100, help="Objects sampled per file (default: 100)")
    bench_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    bench_parser.add_argument("--json", action="store_true", help="Emit JSON, one line per file")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "info":
        from pyaoc.cli.info import run_info
        return run_info(args)
    elif args.command == "cover":
        from pyaoc.cli.cover import run_cover
        return run_cover(args)
    elif args.command == "bench":
        from pyaoc.cli.bench import run_bench
        return run_bench(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
