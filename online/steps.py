# online/steps.py
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Sequence

from graph.verify import evaluate_step
from online.palette import resolve_palette
from online.registry import get_algorithm


@dataclass(frozen=True)
class StepRecord:
    k: int
    revealed: Optional[Hashable]  # vertex that arrived at this step (None for k=0)
    coloring: Dict[Hashable, str] = field(default_factory=dict)
    total_colors: int = 0
    conflicts: int = 0
    recolored: List[Hashable] = field(default_factory=list)


def count_recolorings(
    prev: Dict[Hashable, str],
    curr: Dict[Hashable, str],
) -> List[Hashable]:
    """
    Vertices colored in `prev` whose color differs in `curr` (including losing the color).
    Full recomputation per step makes this non-empty for the degree-sorted algorithms.
    """
    return [v for v, c in prev.items() if curr.get(v) != c]


def legend_colors(total_colors: int, palette: Optional[Sequence[str]] = None) -> List[str]:
    pal = resolve_palette(palette)
    return pal[:max(0, total_colors)]


def run_steps(
    algo: str,
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    palette: Optional[Sequence[str]] = None,
    verbose: bool = False,
) -> List[StepRecord]:
    """
    Replay the arrival sequence: one fresh engine call per k = 0..len(vertices).
    """
    spec = get_algorithm(algo)
    records: List[StepRecord] = []
    prev: Dict[Hashable, str] = {}
    for k in range(len(vertices) + 1):
        res = spec.fn(vertices, edges, k, palette=palette)
        conflicts = evaluate_step(vertices, edges, k, res.coloring)
        rec = StepRecord(
            k=k,
            revealed=vertices[k - 1] if k > 0 else None,
            coloring=res.coloring,
            total_colors=res.total_colors,
            conflicts=conflicts,
            recolored=count_recolorings(prev, res.coloring),
        )
        records.append(rec)
        prev = res.coloring
        if verbose:
            print_step_summary(rec, prefix=f"[{spec.name}] ")
    return records


def print_step_summary(rec: StepRecord, prefix: str = "[Step] ") -> None:
    line = f"{prefix}k={rec.k} colors={rec.total_colors} conflicts={rec.conflicts}"
    if rec.revealed is not None:
        line += f" | +{rec.revealed} -> {rec.coloring.get(rec.revealed, 'uncolored')}"
    if rec.recolored:
        line += f" | recolored={rec.recolored}"
    print(line)
