# graph/builder.py
from typing import Dict, List, Optional, Sequence, Tuple


class GraphBuilder:
    """Editable vertex/edge lists; vertex order is arrival order."""

    def __init__(self, vertices: Optional[Sequence[str]] = None, edges: Optional[Sequence[Dict[str, str]]] = None):
        self.vertices: List[str] = []
        self.edges: List[Dict[str, str]] = []
        for v in vertices or []:
            self.add_vertex(v)
        for e in edges or []:
            self.add_edge(e["source"], e["target"])

    def add_vertex(self, vertex_id: str) -> bool:
        vid = str(vertex_id).strip() if vertex_id is not None else ""
        if not vid or vid in self.vertices:
            return False
        self.vertices.append(vid)
        return True

    def remove_vertex(self, vertex_id: str) -> None:
        self.vertices = [v for v in self.vertices if v != vertex_id]
        self.edges = [e for e in self.edges if e["source"] != vertex_id and e["target"] != vertex_id]

    def has_edge(self, u: str, v: str) -> bool:
        return any(
            (e["source"] == u and e["target"] == v) or (e["source"] == v and e["target"] == u)
            for e in self.edges
        )

    def add_edge(self, source: str, target: str) -> bool:
        """Add an undirected edge; self-loops and duplicates (either orientation) are ignored."""
        for x in (source, target):
            if x not in self.vertices:
                raise ValueError(f"Unknown vertex in edge ({source}, {target}): {x}")
        if source == target or self.has_edge(source, target):
            return False
        self.edges.append({"source": source, "target": target})
        return True

    def remove_edge(self, index: int) -> None:
        if not (0 <= index < len(self.edges)):
            raise ValueError(f"Edge index {index} out of range (0..{len(self.edges) - 1})")
        del self.edges[index]

    def build(self) -> Tuple[List[str], List[Dict[str, str]]]:
        return list(self.vertices), [dict(e) for e in self.edges]
