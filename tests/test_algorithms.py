# tests/test_algorithms.py
import copy
from types import SimpleNamespace

import pytest

from graph.samples import sample_graph, sample_sizes
from graph.verify import evaluate_step
from online.cbip import bipartition_from, cbip_coloring
from online.firstfit import first_fit_coloring
from online.greedy import greedy_coloring
from online.palette import DEFAULT_PALETTE
from online.registry import ALGORITHMS
from online.welsh_powell import welsh_powell_coloring
from graph.model import induced_graph

P = DEFAULT_PALETTE
ALL_FNS = [spec.fn for spec in ALGORITHMS.values()]


def E(*pairs):
    return [{"source": p[0], "target": p[1]} for p in pairs]


def test_first_fit_uses_pre_neighborhood_only():
    res = first_fit_coloring(["A", "B", "C"], E("AB", "BC"), 3)
    assert res.coloring == {"A": P[0], "B": P[1], "C": P[0]}
    assert res.total_colors == 2


def test_first_fit_ignores_later_arrivals():
    # C is adjacent to A but arrives later, so A keeps palette[0]
    res = first_fit_coloring(["A", "B", "C"], E("AC", "BC"), 3)
    assert res.coloring == {"A": P[0], "B": P[0], "C": P[1]}


def test_greedy_processes_highest_degree_first():
    vertices, edges = ["A", "B", "C"], E("AB", "AC")
    res = greedy_coloring(vertices, edges, 3)
    assert res.coloring == {"A": P[0], "B": P[1], "C": P[1]}
    assert res.total_colors == 2
    assert evaluate_step(vertices, edges, 3, res.coloring) == 0


def test_greedy_ties_keep_arrival_order():
    res = greedy_coloring(["B", "A"], E("AB"), 2)
    assert res.coloring == {"B": P[0], "A": P[1]}


def test_greedy_degree_counts_only_revealed_edges():
    # at k=2 the edge to C does not exist yet, so A and B tie and A goes first
    vertices, edges = ["A", "B", "C"], E("AB", "BC")
    assert greedy_coloring(vertices, edges, 2).coloring == {"A": P[0], "B": P[1]}
    assert greedy_coloring(vertices, edges, 3).coloring == {"B": P[0], "A": P[1], "C": P[1]}


@pytest.mark.parametrize("n", sample_sizes())
def test_welsh_powell_matches_greedy(n):
    vertices, edges = sample_graph(n)
    for k in range(len(vertices) + 1):
        assert welsh_powell_coloring(vertices, edges, k) == greedy_coloring(vertices, edges, k)


def test_cbip_two_colors_path():
    vertices, edges = ["A", "B", "C", "D"], E("AB", "BC", "CD")
    res = cbip_coloring(vertices, edges, 4)
    assert res.coloring == {"A": P[0], "B": P[1], "C": P[0], "D": P[1]}
    assert res.total_colors == 2
    assert evaluate_step(vertices, edges, 4, res.coloring) == 0


def test_cbip_singletons_take_first_color():
    res = cbip_coloring(["A", "B", "C"], [], 3)
    assert res.coloring == {"A": P[0], "B": P[0], "C": P[0]}
    assert res.total_colors == 1


def test_cbip_odd_cycle_not_detected():
    vertices = ["A", "B", "C", "D", "E"]
    edges = E("AB", "BC", "CD", "DE", "EA")
    side_a, side_b = bipartition_from(induced_graph(vertices, edges, 5), "A")
    # BFS parity split of C5: the two depth-2 vertices are adjacent but both land in A
    assert side_a == {"A", "C", "D"}
    assert side_b == {"B", "E"}
    res = cbip_coloring(vertices, edges, 5)
    assert res.total_colors == 3


def test_cbip_component_is_per_vertex():
    # A and B are separate components until C arrives and joins them
    vertices, edges = ["A", "B", "C"], E("AC", "BC")
    res = cbip_coloring(vertices, edges, 3)
    assert res.coloring == {"A": P[0], "B": P[0], "C": P[1]}


@pytest.mark.parametrize("fn", ALL_FNS)
def test_empty_reveal(fn):
    vertices, edges = sample_graph(8)
    res = fn(vertices, edges, 0)
    assert res.coloring == {}
    assert res.total_colors == 0


@pytest.mark.parametrize("fn", ALL_FNS)
def test_reveal_count_is_clamped(fn):
    vertices, edges = sample_graph(5)
    assert fn(vertices, edges, 99) == fn(vertices, edges, len(vertices))
    assert fn(vertices, edges, -3).coloring == {}


@pytest.mark.parametrize("fn", ALL_FNS)
def test_deterministic_and_non_mutating(fn):
    vertices, edges = sample_graph(12)
    v0, e0 = copy.deepcopy(vertices), copy.deepcopy(edges)
    first = fn(vertices, edges, 9)
    second = fn(vertices, edges, 9)
    assert first == second
    assert vertices == v0
    assert edges == e0


@pytest.mark.parametrize("fn", ALL_FNS)
def test_endpoint_records_match_bare_ids(fn):
    vertices = ["A", "B", "C", "D"]
    plain = E("AB", "BC", "CD", "AD")
    mixed = [
        {"source": {"id": "A"}, "target": "B"},
        SimpleNamespace(source=SimpleNamespace(id="B"), target=SimpleNamespace(id="C")),
        ("C", "D"),
        {"source": "A", "target": {"id": "D"}},
    ]
    assert fn(vertices, mixed, 4) == fn(vertices, plain, 4)


@pytest.mark.parametrize("fn", ALL_FNS)
def test_unknown_and_unrevealed_endpoints_are_ignored(fn):
    vertices = ["A", "B", "C"]
    noisy = E("AB", "AZ", "ZQ", "BB") + [
        {"source": "A"},
        42,
        ("A", ["B"]),
        {"source": "A", "target": {"id": ["B"]}},
    ]
    assert fn(vertices, noisy, 3) == fn(vertices, E("AB"), 3)


@pytest.mark.parametrize("fn", ALL_FNS)
def test_palette_exhaustion_leaves_vertex_uncolored(fn):
    vertices, edges = ["A", "B", "C"], E("AB", "BC", "AC")
    res = fn(vertices, edges, 3, palette=["x", "y"])
    assert len(res.coloring) == 2
    assert res.total_colors == 2
    assert set(res.coloring.values()) == {"x", "y"}
    # the uncolored vertex never counts as a conflict
    assert evaluate_step(vertices, edges, 3, res.coloring) == 0


@pytest.mark.parametrize("fn", ALL_FNS)
def test_synthetic_palette_tokens(fn):
    res = fn(["A", "B"], E("AB"), 2, palette=["c0", "c1", "c2"])
    assert sorted(res.coloring.values()) == ["c0", "c1"]


def test_bad_palette_rejected():
    with pytest.raises(ValueError):
        first_fit_coloring(["A"], [], 1, palette=[])
    with pytest.raises(ValueError):
        greedy_coloring(["A"], [], 1, palette=["x", "x"])
