from __future__ import annotations
import logging
from typing import Dict, Optional

import psutil

from .utils import format_size

logger = logging.getLogger(__name__)


def volume_usage(path: str) -> Optional[Dict[str, float]]:
    """Capacity of the filesystem holding ``path``, or None if unavailable."""
    try:
        u = psutil.disk_usage(path)
    except OSError as e:
        logger.warning("Cannot read volume usage: %s (%s)", path, e.strerror or e)
        return None
    return {
        "total": int(u.total),
        "used": int(u.used),
        "free": int(u.free),
        "percent": float(u.percent),
    }


def volume_lines(path: str):
    u = volume_usage(path)
    if u is None:
        return []
    return [f"Volume: {format_size(u['used'])} used of {format_size(u['total'])} "
            f"({u['percent']:.1f}%), {format_size(u['free'])} free"]
