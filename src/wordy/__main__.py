from __future__ import annotations
import argparse
import logging
import sys
from . import config as CFG
from .engine import Engine
from .loader import InputError, UsageError, open_source
from .report import format_report

USAGE = "Usage: wordy [-debug] [FILE]\nwordy accepts from stdin as well."

def _positive(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1 (got {n})")
    return n

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="wordy", description="Report the most frequent word groupings")
    p.add_argument("-debug", "--debug", action="store_true", help="Print debug messages")
    p.add_argument("-grouping", "--grouping", type=_positive, default=CFG.GROUPING,
                   help="Number of words per group")
    p.add_argument("-top", "--top", type=_positive, default=CFG.TOP,
                   help="Number of groupings to return")
    p.add_argument("file", nargs="?", default=None, help="Text file (stdin when omitted)")
    return p

def main(argv: list[str] | None = None, stdin=None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    out = stdout or sys.stdout

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source = open_source(args.file, stdin=stdin)
    except UsageError:
        print(USAGE, file=out)
        return 1
    except InputError as e:
        print(e, file=out)
        return 1

    eng = Engine(group_size=args.grouping, top=args.top)
    try:
        eng.feed_stream(source)
    except (OSError, ValueError) as e:
        print(f"reading input: {e}", file=sys.stderr)
    finally:
        if args.file:
            source.close()

    for line in format_report(eng.top()):
        print(line, file=out)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
