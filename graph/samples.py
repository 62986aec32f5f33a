# graph/samples.py
import random
import string
from typing import Dict, List, Optional, Tuple

Graph = Tuple[List[str], List[Dict[str, str]]]


def _edges(pairs: str) -> List[Dict[str, str]]:
    # "AB AC BC" -> [{"source": "A", "target": "B"}, ...]
    return [{"source": p[0], "target": p[1]} for p in pairs.split()]


_SAMPLES: Dict[int, Tuple[str, str]] = {
    # order matters: FirstFit may use more colors
    5: ("ABCDE", "AB AC AD BC BE CD DE"),
    7: ("ABCDEFG", "BA DB DG EA EC ED FB FC FE GE GF"),
    8: ("ABCDEFGH", "AB AC AD AE AF BC BD BG CE CH DF DG EH FG FH GH"),
    10: ("ABCDEFGHIJ", "AB AC AD AE BF BG CH DI EJ FG FH GI HJ IJ AF BH CI"),
    12: ("ABCDEFGHIJKL", "AB AC AD AE BF BG CH DI EJ FK GL HI HJ IK JL KL AF BH CI DJ EK FG"),
    16: (
        "ABCDEFGHIJKLMNOP",
        "AB AC AD AE AF BC BG BH BI CD CJ CK DE DL DM EF EN EO FG FP FH "
        "GH GI GJ HK HL IJ IM IN JK JO KL KP LM LN MN MO NP OP "
        "AG BJ CL DN EP FI GK HM IO JL KN LO MP",
    ),
}

_DEFAULT = ("ABCDE", "AB BC CD DE")


def sample_sizes() -> List[int]:
    return sorted(_SAMPLES)


def sample_graph(n: int) -> Graph:
    """Built-in sample graph with n vertices; any other n gives the 5-vertex path."""
    names, pairs = _SAMPLES.get(int(n), _DEFAULT)
    return list(names), _edges(pairs)


def vertex_names(n: int) -> List[str]:
    # A..Z, then v26, v27, ...
    letters = string.ascii_uppercase
    return [letters[i] if i < len(letters) else f"v{i}" for i in range(n)]


def random_online_graph(n: int, seed: Optional[int] = None) -> Graph:
    """
    Connected random graph for arrival-order demos: spine path v_i - v_{i+1}
    plus, for each vertex, a random number of extra edges to later vertices.
    """
    if n < 0:
        raise ValueError(f"Number of vertices must be >= 0, got {n}")
    rng = random.Random(seed)
    vertices = vertex_names(n)
    pairs = [(vertices[i], vertices[i + 1]) for i in range(n - 1)]
    seen = set(pairs)

    for i in range(n - 1):
        later = vertices[i + 1:]
        want = rng.randrange(len(later))
        candidates = [t for t in later if (vertices[i], t) not in seen]
        for t in rng.sample(candidates, min(want, len(candidates))):
            pairs.append((vertices[i], t))
            seen.add((vertices[i], t))

    return vertices, [{"source": s, "target": t} for s, t in pairs]
