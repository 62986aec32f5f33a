# online/cbip.py
from typing import Any, Dict, Hashable, Optional, Sequence, Set, Tuple

import networkx as nx

from graph.model import induced_graph, revealed_vertices
from online.palette import first_free_color, resolve_palette
from online.result import ColoringResult


def bipartition_from(G: nx.Graph, root: Hashable) -> Tuple[Set[Hashable], Set[Hashable]]:
    """
    Split the connected component of `root` by BFS depth parity:
    even depth -> side A (contains root), odd depth -> side B.
    Odd cycles are not detected; the split is returned as-is.
    """
    depth = nx.single_source_shortest_path_length(G, root)
    side_a = {v for v, d in depth.items() if d % 2 == 0}
    side_b = {v for v, d in depth.items() if d % 2 == 1}
    return side_a, side_b


def cbip_coloring(
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    k: int,
    palette: Optional[Sequence[str]] = None,
) -> ColoringResult:
    """
    CBIP for online bipartite coloring. For each revealed vertex v in arrival order:
      1) take v's connected component H in the revealed sub-graph,
      2) bipartition H by BFS from v (v lands in side A),
      3) give v the first palette color not used so far on side B.
    """
    pal = resolve_palette(palette)
    G = induced_graph(vertices, edges, k)

    coloring: Dict[Hashable, str] = {}
    for v in revealed_vertices(vertices, k):
        _, side_b = bipartition_from(G, v)
        used = {coloring[u] for u in side_b if u in coloring}
        c = first_free_color(pal, used)
        if c is not None:
            coloring[v] = c
    return ColoringResult.from_coloring(coloring)
