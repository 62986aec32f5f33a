# graph/model.py
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple
import networkx as nx

Edge = Tuple[Hashable, Hashable]


def endpoint_id(endpoint: Any) -> Hashable:
    """
    Resolve one edge endpoint to its vertex id.
    Accepts a bare id, a mapping carrying "id", or an object with an .id attribute.
    """
    if isinstance(endpoint, dict):
        return endpoint.get("id")
    if hasattr(endpoint, "id"):
        return endpoint.id
    return endpoint


def edge_endpoints(edge: Any) -> Optional[Edge]:
    """
    Normalize an edge record to a (source, target) id pair.
    Supports {"source": .., "target": ..}, objects with .source/.target and 2-tuples.
    Returns None for shapes that cannot be read or ids that are not hashable.
    """
    if isinstance(edge, dict):
        if "source" not in edge or "target" not in edge:
            return None
        s, t = edge["source"], edge["target"]
    elif hasattr(edge, "source") and hasattr(edge, "target"):
        s, t = edge.source, edge.target
    elif isinstance(edge, (tuple, list)) and len(edge) == 2:
        s, t = edge
    else:
        return None
    u, v = endpoint_id(s), endpoint_id(t)
    try:
        hash(u), hash(v)
    except TypeError:
        return None
    return u, v


def clamp_reveal(vertices: Sequence[Hashable], k: int) -> int:
    return max(0, min(int(k), len(vertices)))


def revealed_vertices(vertices: Sequence[Hashable], k: int) -> List[Hashable]:
    return list(vertices[:clamp_reveal(vertices, k)])


def revealed_edges(vertices: Sequence[Hashable], edges: Sequence[Any], k: int) -> List[Edge]:
    """
    Edges whose both endpoints are among vertices[0:k], as normalized id pairs.
    Unknown/unrevealed endpoints, unreadable shapes and self-loops are dropped;
    (u, v) and (v, u) are kept once, in first-seen order.
    """
    present = set(revealed_vertices(vertices, k))
    out: List[Edge] = []
    seen = set()
    for e in edges:
        pair = edge_endpoints(e)
        if pair is None:
            continue
        u, v = pair
        if u == v or u not in present or v not in present:
            continue
        key = frozenset((u, v))
        if key in seen:
            continue
        seen.add(key)
        out.append((u, v))
    return out


def induced_graph(vertices: Sequence[Hashable], edges: Sequence[Any], k: int) -> nx.Graph:
    """Induced sub-graph on the revealed prefix; node insertion order = arrival order."""
    G = nx.Graph()
    G.add_nodes_from(revealed_vertices(vertices, k))
    G.add_edges_from(revealed_edges(vertices, edges, k))
    return G


def arrival_index(vertices: Sequence[Hashable], k: int) -> Dict[Hashable, int]:
    # first position wins if an id is repeated
    idx: Dict[Hashable, int] = {}
    for i, v in enumerate(revealed_vertices(vertices, k)):
        idx.setdefault(v, i)
    return idx
