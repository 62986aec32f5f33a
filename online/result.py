# online/result.py
from dataclasses import dataclass, field
from typing import Dict, Hashable

from online.palette import count_distinct


@dataclass(frozen=True)
class ColoringResult:
    """Coloring of the revealed prefix plus the number of distinct colors it uses."""
    coloring: Dict[Hashable, str] = field(default_factory=dict)
    total_colors: int = 0

    @classmethod
    def from_coloring(cls, coloring: Dict[Hashable, str]) -> "ColoringResult":
        return cls(coloring=coloring, total_colors=count_distinct(coloring))
