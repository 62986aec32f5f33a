# online/greedy.py
from typing import Any, Dict, Hashable, List, Optional, Sequence

import networkx as nx

from graph.model import induced_graph
from online.palette import first_free_color, resolve_palette
from online.result import ColoringResult


def degree_order(G: nx.Graph) -> List[Hashable]:
    """
    Vertices by descending degree in G. sorted() is stable, so ties keep
    node insertion order, which induced_graph() sets to arrival order.
    """
    return sorted(G.nodes(), key=lambda v: G.degree(v), reverse=True)


def greedy_coloring(
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    k: int,
    palette: Optional[Sequence[str]] = None,
) -> ColoringResult:
    """
    Degree-sorted greedy coloring of the revealed prefix.
    The constraint set is "neighbors already colored in this pass", not "arrived earlier".
    """
    pal = resolve_palette(palette)
    G = induced_graph(vertices, edges, k)

    coloring: Dict[Hashable, str] = {}
    for v in degree_order(G):
        used = {coloring[u] for u in G.neighbors(v) if u in coloring}
        c = first_free_color(pal, used)
        if c is not None:
            coloring[v] = c
    return ColoringResult.from_coloring(coloring)
