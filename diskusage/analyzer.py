from __future__ import annotations
import os
import sys
import stat as statmod
import logging
from typing import Callable, Iterable, List, Optional, TextIO, Tuple

from .models import AnalyzeError, Breakdown, DirEntry
from .scanner import compute_size, path_too_long
from .utils import format_size, truncate_name, percent_of, NAME_WIDTH

logger = logging.getLogger(__name__)

SIZE_WIDTH = 15
PERCENT_WIDTH = 10

ExtraLines = Callable[[Breakdown], Iterable[str]]


def _sort_key(entry: DirEntry):
    # largest first, equal sizes by name so output is reproducible
    return (-entry.size, entry.name)


def collect_entries(path: str, it, verbose: bool = False) -> Tuple[List[DirEntry], int, int]:
    """Size every immediate child from an open ``os.scandir`` iterator.

    Returns ``(entries, total_size, skipped)``. Subdirectories are summed with
    :func:`compute_size`; any other entry counts its own ``st_size``.
    """
    entries: List[DirEntry] = []
    total = 0
    skipped = 0

    while True:
        try:
            entry = next(it)
        except StopIteration:
            break
        except OSError as e:
            logger.warning("Cannot read directory: %s (%s)", path, e.strerror or e)
            break

        full_path = entry.path
        if path_too_long(full_path):
            logger.warning("Path too long, skipping: %s", full_path)
            skipped += 1
            continue

        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as e:
            logger.warning("Cannot stat: %s (%s)", full_path, e.strerror or e)
            skipped += 1
            continue

        is_dir = statmod.S_ISDIR(st.st_mode)
        if is_dir:
            size = compute_size(full_path, verbose)
        else:
            size = int(st.st_size)

        try:
            entries.append(DirEntry(name=entry.name, size=size, is_dir=is_dir))
        except MemoryError as e:
            raise AnalyzeError("Memory allocation failed") from e
        total += size

    return entries, total, skipped


def render_report(breakdown: Breakdown) -> List[str]:
    lines = [f"Total size: {format_size(breakdown.total_size)}", ""]
    if not breakdown.entries:
        lines.append("No entries found.")
        return lines

    lines.append("Top entries by size:")
    lines.append(f"{'Name':<{NAME_WIDTH}} {'Size':>{SIZE_WIDTH}} {'Percent':>{PERCENT_WIDTH}}")
    lines.append(f"{'----':<{NAME_WIDTH}} {'----':>{SIZE_WIDTH}} {'-------':>{PERCENT_WIDTH}}")
    for e in breakdown.displayed:
        pct = percent_of(e.size, breakdown.total_size)
        lines.append(f"{truncate_name(e.name):<{NAME_WIDTH}} "
                     f"{format_size(e.size):>{SIZE_WIDTH}} "
                     f"{pct:>{PERCENT_WIDTH - 1}.2f}%")
    return lines


def analyze(path: Optional[str],
            limit: int = 0,
            verbose: bool = False,
            stream: Optional[TextIO] = None,
            extra_lines: Optional[ExtraLines] = None) -> Breakdown:
    """Print the top-level size breakdown of ``path`` and return it.

    ``limit`` caps the number of rows shown (0 shows all). ``extra_lines``
    takes the finished :class:`Breakdown` and returns lines printed right
    after the total.

    Raises :class:`AnalyzeError` when ``path`` is empty or cannot be opened
    (nothing is printed), or when entries cannot be collected (the report
    is not printed).
    """
    if not path:
        raise AnalyzeError("NULL path provided")
    out = stream if stream is not None else sys.stdout

    try:
        it = os.scandir(path)
    except OSError as e:
        raise AnalyzeError(f"Cannot open directory: {path} ({e.strerror or e})") from e

    with it:
        print(f"Analyzing directory: {path}", file=out)
        print("Scanning...", file=out)
        print(file=out)
        out.flush()
        entries, total, skipped = collect_entries(path, it, verbose)

    entries.sort(key=_sort_key)
    breakdown = Breakdown(path=path, entries=entries, total_size=total,
                          limit=max(0, limit or 0), skipped=skipped)

    report = render_report(breakdown)
    lines = [report[0]]
    if extra_lines is not None:
        lines.extend(extra_lines(breakdown))
    lines.extend(report[1:])
    for line in lines:
        print(line, file=out)
    return breakdown
