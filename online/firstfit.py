# online/firstfit.py
from typing import Any, Dict, Hashable, Optional, Sequence

from graph.model import arrival_index, induced_graph, revealed_vertices
from online.palette import first_free_color, resolve_palette
from online.result import ColoringResult


def first_fit_coloring(
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    k: int,
    palette: Optional[Sequence[str]] = None,
) -> ColoringResult:
    """
    Online First-Fit over the arrival prefix vertices[0:k].
    Each vertex takes the first palette color not used by its pre-neighborhood
    (revealed neighbors that arrived before it). Vertices that find the palette
    exhausted stay uncolored.
    """
    pal = resolve_palette(palette)
    G = induced_graph(vertices, edges, k)
    pos = arrival_index(vertices, k)

    coloring: Dict[Hashable, str] = {}
    for i, v in enumerate(revealed_vertices(vertices, k)):
        pre = [u for u in G.neighbors(v) if pos[u] < i]
        used = {coloring[u] for u in pre if u in coloring}
        c = first_free_color(pal, used)
        if c is not None:
            coloring[v] = c
    return ColoringResult.from_coloring(coloring)
