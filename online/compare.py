# online/compare.py
from typing import Any, Dict, Hashable, Optional, Sequence

from graph.model import revealed_edges
from graph.verify import count_conflicts
from online.registry import ALGORITHMS


def compare_all(
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    k: int,
    palette: Optional[Sequence[str]] = None,
) -> Dict[str, Dict[str, int]]:
    """
    Run every registered algorithm on the same (vertices, edges, k), each from scratch.
    Returns {algo_key: {"total_colors": .., "conflicts": ..}} in registry order.
    """
    E = revealed_edges(vertices, edges, k)
    stats: Dict[str, Dict[str, int]] = {}
    for key, spec in ALGORITHMS.items():
        res = spec.fn(vertices, edges, k, palette=palette)
        stats[key] = {
            "total_colors": res.total_colors,
            "conflicts": count_conflicts(res.coloring, E),
        }
    return stats


def print_comparison(stats: Dict[str, Dict[str, int]], k: int, prefix: str = "[Compare] ") -> None:
    parts = [
        f"{ALGORITHMS[key].name}: colors={s['total_colors']} conflicts={s['conflicts']}"
        for key, s in stats.items()
    ]
    print(f"{prefix}k={k} | " + " | ".join(parts))
