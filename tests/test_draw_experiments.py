# tests/test_draw_experiments.py
import os

import pandas as pd
import pytest

from experiments.compare_samples import run_samples, step_rows, summarize
from graph.samples import sample_graph
from online.firstfit import first_fit_coloring
from visualization import draw
from visualization.draw import clear_layout_cache, get_layout, visualize_step


def test_visualize_step_writes_png(tmp_path):
    vertices, edges = sample_graph(5)
    res = first_fit_coloring(vertices, edges, 3)
    path = visualize_step(vertices, edges, 3, res.coloring, "First Fit", out_dir=str(tmp_path))
    assert os.path.isfile(path)
    assert os.path.basename(path) == "algo-first-fit_k-003_conflicts-000.png"


def test_visualize_step_marks_conflicts(tmp_path):
    vertices = ["A", "B", "C"]
    edges = [("A", "B"), ("B", "C")]
    path = visualize_step(vertices, edges, 3, {"A": "#ef4444", "B": "#ef4444"}, "manual", out_dir=str(tmp_path))
    assert path.endswith("conflicts-001.png")


def test_visualize_empty_step(tmp_path):
    vertices, edges = sample_graph(5)
    path = visualize_step(vertices, edges, 0, {}, "CBIP", out_dir=str(tmp_path))
    assert os.path.isfile(path)


def test_layout_is_shared_across_steps():
    vertices, edges = sample_graph(8)
    assert get_layout(vertices, edges) is get_layout(list(vertices), list(edges))


def test_summary_per_algorithm():
    vertices, edges = sample_graph(5)
    rows = step_rows("sample5", vertices, edges)
    assert len(rows) == 4 * (len(vertices) + 1)
    summary = summarize(rows)
    assert list(summary["algo"]) == ["firstfit", "CBIP", "greedy", "welshpowell"]
    ff = summary[summary["algo"] == "firstfit"].iloc[0]
    assert ff["recolorings"] == 0
    assert (summary["max_conflicts"] == 0).all()


def test_run_samples_writes_csvs(tmp_path):
    summary = run_samples(out_dir=str(tmp_path), sizes=[5, 7], verbose=False)
    assert len(summary) == 8
    steps = pd.read_csv(tmp_path / "compare_steps.csv")
    assert set(steps["instance"]) == {"sample5", "sample7"}
    assert (tmp_path / "compare_summary.csv").exists()


def test_clear_layout_cache():
    vertices, edges = sample_graph(10)
    get_layout(vertices, edges)
    assert draw._POS_CACHE
    clear_layout_cache()
    assert draw._POS_CACHE == {}


def test_run_samples_rejects_unknown_size(tmp_path):
    with pytest.raises(ValueError):
        run_samples(out_dir=str(tmp_path), sizes=[3], verbose=False)
    assert not (tmp_path / "compare_steps.csv").exists()
