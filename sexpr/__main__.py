"""CLI: python -m sexpr [-v] [FILE]"""

import logging
import sys
from pathlib import Path

from .errors import SExprError
from .nodes import render
from .parser import parse

USAGE = "Usage: python -m sexpr [-v|--verbose] [FILE]"


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    verbose = False
    for flag in ("-v", "--verbose"):
        while flag in args:
            args.remove(flag)
            verbose = True
    if len(args) > 1 or any(a.startswith("-") and a != "-" for a in args):
        print(USAGE, file=sys.stderr)
        return 2

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not args or args[0] == "-":
        src = sys.stdin.read()
    else:
        src = Path(args[0]).read_text()

    try:
        ast = parse(src)
    except SExprError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(render(ast))
    return 0


if __name__ == "__main__":
    sys.exit(main())
