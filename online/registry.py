# online/registry.py
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence

from online.cbip import cbip_coloring
from online.firstfit import first_fit_coloring
from online.greedy import greedy_coloring
from online.result import ColoringResult
from online.welsh_powell import welsh_powell_coloring

ColoringFn = Callable[..., ColoringResult]


@dataclass(frozen=True)
class AlgoSpec:
    key: str
    name: str
    description: str
    fn: ColoringFn


# comparison order
ALGORITHMS: Dict[str, AlgoSpec] = {
    "firstfit": AlgoSpec(
        "firstfit", "First Fit",
        "Arrival order; first color unused by neighbors that arrived earlier.",
        first_fit_coloring,
    ),
    "CBIP": AlgoSpec(
        "CBIP", "CBIP",
        "Arrival order; first color unused on the opposite side of the vertex's component bipartition.",
        cbip_coloring,
    ),
    "greedy": AlgoSpec(
        "greedy", "Greedy",
        "Descending degree; first color unused by already-colored neighbors.",
        greedy_coloring,
    ),
    "welshpowell": AlgoSpec(
        "welshpowell", "Welsh-Powell",
        "Descending degree; one sweep per color class.",
        welsh_powell_coloring,
    ),
}


def algorithm_names() -> List[str]:
    return list(ALGORITHMS.keys())


def get_algorithm(name: str) -> AlgoSpec:
    if name in ALGORITHMS:
        return ALGORITHMS[name]
    # accept case-insensitive keys ("cbip", "FirstFit")
    for key, spec in ALGORITHMS.items():
        if key.lower() == str(name).lower():
            return spec
    raise ValueError(f"Unknown algo: {name} (expected one of {algorithm_names()})")


def run_algorithm(
    name: str,
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    k: int,
    palette: Optional[Sequence[str]] = None,
) -> ColoringResult:
    return get_algorithm(name).fn(vertices, edges, k, palette=palette)
