from __future__ import annotations

NAME_WIDTH = 50
NAME_TRUNCATE_AT = 47
NAME_KEEP = 44
ELLIPSIS = "..."


def format_size(num: int) -> str:
    units = ["B", "KB", "MB", "GB", "TB"]
    x = float(num)
    for u in units:
        if x < 1024.0 or u == units[-1]:
            return f"{x:.2f} {u}" if u != "B" else f"{int(num)} {u}"
        x /= 1024.0


def truncate_name(name: str) -> str:
    """Fit a directory-entry name into the report's name column."""
    if len(name) > NAME_TRUNCATE_AT:
        return name[:NAME_KEEP] + ELLIPSIS
    return name[:NAME_WIDTH]


def percent_of(part: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return part / total * 100.0
