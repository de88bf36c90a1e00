"""diskusage: top-level disk space breakdown of a directory."""
__version__ = "0.1.0"

from .analyzer import analyze, collect_entries, render_report
from .models import AnalyzeError, Breakdown, DirEntry
from .scanner import compute_size
from .utils import format_size

__all__ = [
    "analyze",
    "collect_entries",
    "render_report",
    "compute_size",
    "format_size",
    "AnalyzeError",
    "Breakdown",
    "DirEntry",
]
