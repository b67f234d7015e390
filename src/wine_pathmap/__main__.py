"""Command-line entry point, accepting Wine's ``winepath`` flags."""

import argparse
import logging
import os
import sys

import uvicorn

from wine_pathmap.config import settings
from wine_pathmap.main import app, configure_logging
from wine_pathmap.mapping import TranslationError, Translator

PROG = "wine-pathmap"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Convert paths between Wine (guest) and host form without running winepath.",
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "-u",
        "--unix",
        dest="action",
        action="store_const",
        const="unix",
        help="convert guest paths to host paths (default)",
    )
    action.add_argument(
        "-w",
        "--windows",
        dest="action",
        action="store_const",
        const="windows",
        help="convert host paths to guest paths",
    )
    action.add_argument(
        "-l",
        "--list-drives",
        dest="action",
        action="store_const",
        const="drives",
        help="print the drive mappings of the prefix",
    )
    action.add_argument(
        "--serve",
        dest="action",
        action="store_const",
        const="serve",
        help="run the HTTP API",
    )
    parser.set_defaults(action="unix")
    parser.add_argument("--prefix", help="Wine prefix to use (default: $WINEPREFIX or ~/.wine)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail when a guest path does not exist instead of passing the tail through",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("paths", nargs="*", metavar="PATH")
    return parser


def _translate(translator: Translator, action: str, path: str, strict: bool) -> str:
    if action == "windows":
        # symlinked spellings of a drive root only match once canonicalized
        return translator.host_to_guest(os.path.realpath(path))
    return translator.guest_to_host(path, strict=strict)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.action == "serve":
        configure_logging(logging.DEBUG if args.verbose else settings.log_level)
        uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")
        return 0

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    if args.action != "drives" and not args.paths:
        parser.error("at least one PATH is required")

    try:
        translator = Translator.from_env(args.prefix)
    except TranslationError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    if args.action == "drives":
        for mapping in translator.drives.mappings():
            print(f"{mapping.letter}: {mapping.host_root}")
        return 0

    status = 0
    for path in args.paths:
        try:
            print(_translate(translator, args.action, path, args.strict))
        except TranslationError as exc:
            print(f"{PROG}: {exc}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
