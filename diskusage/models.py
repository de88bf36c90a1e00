from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


class AnalyzeError(Exception):
    """Fatal condition: the breakdown is aborted and nothing is reported."""


@dataclass
class DirEntry:
    name: str
    size: int = 0
    is_dir: bool = False


@dataclass
class Breakdown:
    path: str
    entries: List[DirEntry] = field(default_factory=list)  # sorted, largest first
    total_size: int = 0
    limit: int = 0          # 0 -> show everything
    skipped: int = 0

    @property
    def displayed(self) -> List[DirEntry]:
        if self.limit > 0:
            return self.entries[:self.limit]
        return list(self.entries)
