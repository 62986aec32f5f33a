# graph/loader.py
import re
from pathlib import Path
from typing import Dict, List, Tuple

_ORDER_LINE = re.compile(r"^\s*#\s*order\s*:\s*(.*)$", re.IGNORECASE)


def load_edgelist(path, strict: bool = False) -> Tuple[List[str], List[Dict[str, str]]]:
    """
    Undirected edge list, one "u v" pair per line; '#' starts a comment.
    Arrival order is first appearance, unless a line "# order: A B C ..." fixes it
    (vertices not listed there are appended in first-appearance order).
    Malformed lines are skipped, or raise ValueError when strict=True.
    """
    path = Path(path)
    order: List[str] = []
    seen_order = set()
    first_seen: List[str] = []
    edges: List[Dict[str, str]] = []

    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for lineno, line in enumerate(f, start=1):
            mo = _ORDER_LINE.match(line)
            if mo:
                for v in mo.group(1).split():
                    if v not in seen_order:
                        seen_order.add(v)
                        order.append(v)
                continue
            s = line.split("#", 1)[0].strip()
            if not s:
                continue
            parts = s.split()
            if len(parts) != 2:
                if strict:
                    raise ValueError(f"Invalid edge on line {lineno} in {path}: {line.strip()!r}")
                continue
            u, v = parts
            for x in (u, v):
                if x not in first_seen:
                    first_seen.append(x)
            edges.append({"source": u, "target": v})

    vertices = order + [v for v in first_seen if v not in seen_order]
    return vertices, edges
