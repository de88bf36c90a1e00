from __future__ import annotations
import argparse
import logging
import os
import stat as statmod
import sys
from typing import List, Optional

from . import __version__
from .analyzer import analyze
from .drives import volume_lines
from .log import setup_logging
from .models import AnalyzeError

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        n = 0
    if n <= 0:
        raise argparse.ArgumentTypeError("-n must be a positive number")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="diskusage",
        description="Show the largest entries of a directory by total size.",
        epilog="Example:\n  diskusage -n 10 /home/user",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-n", dest="limit", type=positive_int, default=0, metavar="NUMBER",
                        help="Show top N entries (default: all)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Report unreadable entries inside subdirectories too")
    parser.add_argument("--disk", action="store_true",
                        help="Also show capacity of the volume holding the directory")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("directory", nargs="?", default=".",
                        help="Directory to analyze (default: current directory)")
    return parser


def resolve_path(path: str) -> str:
    """Canonical absolute form of ``path``, or ``path`` itself if that fails."""
    try:
        return os.path.realpath(path, strict=True)
    except (OSError, ValueError):
        return path


def check_directory(path: str) -> bool:
    try:
        st = os.stat(path)
    except OSError as e:
        logger.error("Cannot access '%s': %s", path, e.strerror or e)
        return False
    if not statmod.S_ISDIR(st.st_mode):
        logger.error("'%s' is not a directory", path)
        return False
    return True


def tolerate_raw_names(*streams) -> None:
    """Write undecodable file names back as their original bytes."""
    for s in streams or (sys.stdout, sys.stderr):
        reconfigure = getattr(s, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def main(argv: Optional[List[str]] = None) -> int:
    tolerate_raw_names()
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if not check_directory(args.directory):
        return 1

    target = resolve_path(args.directory)
    extra = (lambda b: volume_lines(b.path)) if args.disk else None
    try:
        analyze(target, limit=args.limit, verbose=args.verbose, extra_lines=extra)
    except AnalyzeError as e:
        logger.error("%s", e)
        return 1
    return 0
