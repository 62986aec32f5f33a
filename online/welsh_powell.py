# online/welsh_powell.py
from typing import Any, Dict, Hashable, Optional, Sequence

from graph.model import induced_graph
from online.greedy import degree_order
from online.palette import resolve_palette
from online.result import ColoringResult


def welsh_powell_coloring(
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    k: int,
    palette: Optional[Sequence[str]] = None,
) -> ColoringResult:
    """
    Welsh-Powell on the revealed prefix: one sweep per palette color over the
    degree-sorted vertex list, giving the color to every still-uncolored vertex
    with no neighbor in that color class yet.

    With the same degree/arrival tie-break this yields the same coloring as
    greedy_coloring; it stays a separate entry point for side-by-side reports.
    """
    pal = resolve_palette(palette)
    G = induced_graph(vertices, edges, k)
    order = degree_order(G)

    coloring: Dict[Hashable, str] = {}
    for c in pal:
        if len(coloring) == len(order):
            break
        for v in order:
            if v in coloring:
                continue
            if any(coloring.get(u) == c for u in G.neighbors(v)):
                continue
            coloring[v] = c
    return ColoringResult.from_coloring(coloring)
