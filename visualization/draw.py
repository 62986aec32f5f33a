# visualization/draw.py
from __future__ import annotations
import os, re
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from graph.model import induced_graph, revealed_edges
from graph.verify import conflict_edges

UNCOLORED = "#DDDDDD"

# layout cache per graph signature, so successive steps keep node positions
_POS_CACHE: Dict[int, Dict] = {}


def _graph_signature(vertices: Sequence[Hashable], edges: Sequence[Any]) -> int:
    """Stable signature of the full vertex/edge sets."""
    G = induced_graph(vertices, edges, len(vertices))
    nodes_sig = tuple(sorted(map(str, G.nodes())))
    edges_sig = tuple(sorted(tuple(sorted(map(str, e))) for e in G.edges()))
    return hash((nodes_sig, edges_sig))


def _sanitize_step(step: str) -> str:
    """Lowercase, keep [a-z0-9-_], collapse repeated dashes."""
    s = step.strip().lower()
    s = re.sub(r"[^a-z0-9\-_]+", "-", s)
    s = re.sub(r"-+", "-", s).strip("-")
    return s or "step"


def ensure_outdir(out_dir: str) -> None:
    os.makedirs(out_dir, exist_ok=True)


def get_layout(vertices: Sequence[Hashable], edges: Sequence[Any], seed: int = 42) -> Dict:
    """Spring layout of the whole graph, cached so every reveal step reuses the same positions."""
    sig = _graph_signature(vertices, edges)
    if sig in _POS_CACHE:
        return _POS_CACHE[sig]
    G = induced_graph(vertices, edges, len(vertices))
    pos = nx.spring_layout(G, seed=seed)
    _POS_CACHE[sig] = pos
    return pos


def clear_layout_cache() -> None:
    """Drop cached layouts; call once per run so a long sweep does not keep every graph."""
    _POS_CACHE.clear()


def visualize_step(
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    k: int,
    coloring: Dict[Hashable, str],
    algo: str,
    out_dir: str = "visualization/picture",
    layout_seed: int = 42,
    pos: Optional[Dict] = None,
    show_labels: bool = True,
    figure_size: Tuple[float, float] = (8.0, 6.0),
    dpi: int = 150,
) -> str:
    """
    Draw the revealed sub-graph at step k and save it as PNG.
      - nodes filled with their color token; uncolored nodes light grey
      - edges between same-colored neighbors drawn black and thick
      - vertices not yet revealed are not drawn
    Returns the written file path.
    """
    ensure_outdir(out_dir)
    algo_clean = _sanitize_step(algo)

    G = induced_graph(vertices, edges, k)
    E = revealed_edges(vertices, edges, k)
    bad = conflict_edges(coloring, E)
    bad_keys = {frozenset(e) for e in bad}
    ok_edges = [e for e in E if frozenset(e) not in bad_keys]

    if pos is None:
        pos = get_layout(vertices, edges, seed=layout_seed)

    plt.figure(figsize=figure_size, dpi=dpi)

    if ok_edges:
        nx.draw_networkx_edges(G, pos, edgelist=ok_edges, width=1.0, alpha=0.5, edge_color="#999999")
    if bad:
        nx.draw_networkx_edges(G, pos, edgelist=bad, width=2.2, alpha=0.95, edge_color="black")

    nodes: List[Hashable] = list(G.nodes())
    if nodes:
        nx.draw_networkx_nodes(
            G, pos,
            nodelist=nodes,
            node_color=[coloring.get(v, UNCOLORED) for v in nodes],
            edgecolors="#555555",
            linewidths=0.8,
            node_size=420,
        )
    if show_labels and nodes:
        nx.draw_networkx_labels(G, pos, labels={v: str(v) for v in nodes}, font_size=9)

    n_colors = len(set(coloring.get(v) for v in nodes if v in coloring))
    plt.title(f"{algo} | step {k}/{len(vertices)} | colors={n_colors} | conflicts={len(bad)}")
    plt.axis("off")
    plt.tight_layout()

    fname = f"algo-{algo_clean}_k-{k:03d}_conflicts-{len(bad):03d}.png"
    fpath = os.path.join(out_dir, fname)

    plt.savefig(fpath, bbox_inches="tight")
    plt.close()
    return fpath
