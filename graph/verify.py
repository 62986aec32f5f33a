from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from graph.model import edge_endpoints, revealed_edges, revealed_vertices


def conflict_edges(
    coloring: Dict[Hashable, str],
    edges: Sequence[Any],
) -> List[Tuple[Hashable, Hashable]]:
    """Edges whose two endpoints are both colored and share the color; one entry per supplied edge."""
    out: List[Tuple[Hashable, Hashable]] = []
    for e in edges:
        pair = edge_endpoints(e)
        if pair is None:
            continue
        u, v = pair
        cu = coloring.get(u)
        cv = coloring.get(v)
        if cu is not None and cv is not None and cu == cv:
            out.append((u, v))
    return out


def count_conflicts(coloring: Dict[Hashable, str], edges: Sequence[Any]) -> int:
    # diagnostic only; none of the algorithms consult it
    return len(conflict_edges(coloring, edges))


def evaluate_step(
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    k: int,
    coloring: Dict[Hashable, str],
) -> int:
    """Conflicts of `coloring` over the edges revealed at step k."""
    return count_conflicts(coloring, revealed_edges(vertices, edges, k))


def verify_coloring(
    vertices: Sequence[Hashable],
    edges: Sequence[Any],
    k: int,
    coloring: Dict[Hashable, str],
    palette: Optional[Sequence[str]] = None,
    sample_conflicts: int = 10,
) -> Dict[str, Any]:

    report: Dict[str, Any] = {}

    present = revealed_vertices(vertices, k)
    E = revealed_edges(vertices, edges, k)

    # uncolored revealed vertices (palette exhaustion)
    uncolored = [v for v in present if v not in coloring]
    report["uncolored_nodes"] = uncolored

    used_colors = sorted(set(coloring[v] for v in present if v in coloring))
    report["used_colors"] = used_colors
    report["num_used_colors"] = len(used_colors)

    # colors outside the palette
    out_of_palette: List[Hashable] = []
    if palette is not None:
        allowed = set(palette)
        out_of_palette = [v for v in present if v in coloring and coloring[v] not in allowed]
    report["out_of_palette_nodes"] = out_of_palette

    conflicts = conflict_edges(coloring, E)
    report["num_conflicts"] = len(conflicts)
    report["conflicts_sample"] = conflicts[:sample_conflicts]

    report["proper"] = (
        len(uncolored) == 0 and
        len(out_of_palette) == 0 and
        len(conflicts) == 0
    )
    return report


def print_check_summary(report: Dict[str, Any], prefix: str = "[Check] ") -> None:

    proper = report.get("proper", False)
    num_conflicts = report.get("num_conflicts", -1)
    num_used = report.get("num_used_colors", -1)
    print(f"{prefix}proper={proper}|used_colors={num_used}|conflicts={num_conflicts}")
    if not proper:
        unc = report.get("uncolored_nodes", [])
        oop = report.get("out_of_palette_nodes", [])
        sample = report.get("conflicts_sample", [])
        if unc:
            print(f"{prefix}uncolored_nodes(sample) ={unc[:10]}")
        if oop:
            print(f"{prefix}out_of_palette_nodes(sample) ={oop[:10]}")
        if num_conflicts > 0:
            print(f"{prefix}conflicts_sample ={sample}")
