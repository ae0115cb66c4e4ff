"""Command-line front end for lstree."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Sequence

from lstree.models import RenderConfig, TreeError
from lstree.renderer import format_summary, render_tree

logger = logging.getLogger(__name__)

PROG = "lstree"
VERSION = "1.0"

_TRUE_TOKENS = frozenset({"true", "yes", "on", "1"})
_FALSE_TOKENS = frozenset({"false", "no", "off", "0"})


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parse_bool(value: str) -> bool:
    token = value.strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got '{value}'")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Print a directory tree with box-drawing connectors.",
    )
    parser.add_argument(
        "directory_path",
        nargs="?",
        default=".",
        help="Path to the directory to visualize. Defaults to the current directory.",
    )
    parser.add_argument(
        "-x",
        "--x_spacing",
        type=_non_negative_int,
        default=3,
        metavar="N",
        help="Horizontal spacing (number of spaces). Defaults to 3.",
    )
    parser.add_argument(
        "-y",
        "--y_spacing",
        type=_non_negative_int,
        default=1,
        metavar="N",
        help="Vertical spacing (number of lines). Defaults to 1.",
    )
    parser.add_argument(
        "-s",
        "--sort",
        type=_parse_bool,
        default=True,
        metavar="{true,false}",
        help="Sort entries by name. Defaults to true.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        nargs="+",
        action="extend",
        default=[],
        metavar="NAME",
        help=(
            "Names to leave out (exact match). May be repeated. "
            "Put directory_path before -i, or separate it with --."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log traversal details to stderr.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"{PROG} {VERSION}")
    return parser


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig(
        x_spacing=args.x_spacing,
        y_spacing=args.y_spacing,
        sort=args.sort,
        ignore=frozenset(args.ignore),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run lstree and return the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = config_from_args(args)
    logger.debug("Rendering %s with %s", args.directory_path, config)

    # Undecodable file names arrive as lone surrogates; emit the raw bytes.
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")

    try:
        counters = render_tree(args.directory_path, config, sys.stdout)
    except (TreeError, OSError) as exc:
        sys.stdout.flush()
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print()
    print(format_summary(counters))
    return 0


if __name__ == "__main__":
    sys.exit(main())
