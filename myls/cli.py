"""Command-line entry point for the directory lister."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TextIO

from myls.listing import ListingError, list_all, list_long, list_plain

EXIT_FAILURE = 84

_FLAGS: dict[str, Callable[[str, TextIO | None], None]] = {
    "a": list_all,
    "l": list_long,
}


def run_flag(flag: str, path: str, out: TextIO | None = None) -> bool:
    """Run the listing a flag letter selects; False when the letter is unknown."""
    handler = _FLAGS.get(flag)
    if handler is None:
        return False
    handler(path, out)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """List directories as the arguments ask and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        try:
            list_plain(".")
        except ListingError:
            pass
        return 0

    has_flag = False
    for index, arg in enumerate(args):
        if not arg.startswith("-"):
            continue
        has_flag = True
        target = args[index + 1] if index + 1 < len(args) else "."
        try:
            run_flag(arg[1:2], target)
        except ListingError:
            pass

    try:
        if has_flag:
            list_long(args[0])
        else:
            list_plain(args[0])
    except ListingError:
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())