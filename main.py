# main.py
import argparse

from graph.loader import load_edgelist
from graph.samples import random_online_graph, sample_graph, sample_sizes
from graph.verify import verify_coloring, print_check_summary
from online.compare import compare_all, print_comparison
from online.registry import ALGORITHMS, algorithm_names, get_algorithm
from online.steps import legend_colors, run_steps
from visualization.draw import clear_layout_cache, visualize_step


def load_graph(args):
    if args.edgelist:
        return load_edgelist(args.edgelist, strict=args.strict)
    if args.random is not None:
        return random_online_graph(args.random, seed=args.seed)
    if args.graph not in sample_sizes():
        raise ValueError(f"Unknown sample graph size: {args.graph} (expected one of {sample_sizes()})")
    return sample_graph(args.graph)


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--algo", default="firstfit", choices=algorithm_names() + ["all"])
    ap.add_argument("--graph", type=int, default=5, help="built-in sample graph size")
    ap.add_argument("--edgelist", default=None, help="path to a 'u v' edge-list file")
    ap.add_argument("--strict", action="store_true", help="fail on malformed edge-list lines")
    ap.add_argument("--random", type=int, default=None, help="random online graph with N vertices")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--k", type=int, default=None, help="single reveal count (default: sweep 0..n)")
    ap.add_argument("--viz-out", default=None, help="write one PNG per step into this directory")
    ap.add_argument("--viz-layout-seed", type=int, default=42)
    args = ap.parse_args()

    vertices, edges = load_graph(args)
    clear_layout_cache()
    print(f"[Main] graph: |V|={len(vertices)} |E|={len(edges)} | algo={args.algo}")

    if args.algo == "all":
        ks = [args.k] if args.k is not None else range(len(vertices) + 1)
        for k in ks:
            print_comparison(compare_all(vertices, edges, k), k)

    elif args.k is not None:
        spec = get_algorithm(args.algo)
        res = spec.fn(vertices, edges, args.k)
        rep = verify_coloring(vertices, edges, args.k, res.coloring)
        print(f"[{spec.name}] k={args.k} colors={res.total_colors} coloring={res.coloring}")
        print_check_summary(rep, prefix=f"[{spec.name}] ")
        if args.viz_out:
            path = visualize_step(vertices, edges, args.k, res.coloring, spec.name,
                                  out_dir=args.viz_out, layout_seed=args.viz_layout_seed)
            print(f"[Viz] {path}")

    else:
        spec = ALGORITHMS[args.algo]
        records = run_steps(args.algo, vertices, edges, verbose=True)
        if args.viz_out:
            for rec in records:
                path = visualize_step(vertices, edges, rec.k, rec.coloring, spec.name,
                                      out_dir=args.viz_out, layout_seed=args.viz_layout_seed)
                print(f"[Viz] {path}")
        final = records[-1]
        print(f"[Main] Done. colors={final.total_colors} conflicts={final.conflicts} "
              f"legend={legend_colors(final.total_colors)}")
