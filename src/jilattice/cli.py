"""jilattice command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .export import graph_payload
from .graph import LatticeGraph

PRESETS = ("kraig-grady", "scott-dakota", "prime-ring", "wgp", "prime-sphere")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="jilattice CLI")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    lattice = sub.add_parser("lattice", help="Span a just intonation lattice")
    lattice.add_argument(
        "--monzos", dest="monzos_path", required=True,
        help="JSON file with a list of monzos, or - for stdin",
    )
    lattice.add_argument("--preset", choices=PRESETS, default="kraig-grady")
    lattice.add_argument("--equave-index", type=int, default=0)
    lattice.add_argument("--max-distance", type=int, default=1)
    lattice.add_argument(
        "--edge-monzo", dest="edge_monzos", action="append", type=json.loads,
        help="Extra connection vector as JSON, e.g. '[0,-2,-1]' (repeatable)",
    )
    lattice.add_argument("--merge", action="store_true")
    lattice.add_argument("--out", dest="output_path")

    grid = sub.add_parser("grid", help="Span an equal temperament grid")
    grid.add_argument("--steps", type=int, nargs="*", default=[])
    grid.add_argument("--modulus", type=int, required=True)
    grid.add_argument("--delta1", type=float, nargs=3, required=True, metavar=("STEPS", "X", "Y"))
    grid.add_argument("--delta2", type=float, nargs=3, required=True, metavar=("STEPS", "X", "Y"))
    grid.add_argument(
        "--bounds", type=float, nargs=4, required=True,
        metavar=("MIN_X", "MAX_X", "MIN_Y", "MAX_Y"),
    )
    grid.add_argument(
        "--edge-vector", dest="edge_vectors", type=float, nargs=2, action="append",
        metavar=("X", "Y"),
    )
    grid.add_argument(
        "--gridlines", default="",
        help="Comma separated subset of delta1,delta2,diagonal1,diagonal2",
    )
    grid.add_argument("--merge", action="store_true")
    grid.add_argument("--range", dest="search_range", type=int, default=100)
    grid.add_argument("--out", dest="output_path")

    val = sub.add_parser("val", help="Print a unique step mapping of the primes")
    val.add_argument("--divisions", type=int, required=True)
    val.add_argument("--count", type=int, help="Number of primes (default: divisions)")
    val.add_argument("--search-resolution", type=int, default=0)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        if args.command == "lattice":
            _cmd_lattice(args)
        elif args.command == "grid":
            _cmd_grid(args)
        elif args.command == "val":
            _cmd_val(args)
    except (ValueError, LookupError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1)


def _read_monzos(path: str) -> list:
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _preset(name: str, equave_index: int):
    from . import presets

    if name == "kraig-grady":
        return presets.kraig_grady_9(equave_index)
    if name == "scott-dakota":
        return presets.scott_dakota_24()
    if name == "prime-ring":
        return presets.prime_ring_72()
    if name == "wgp":
        return presets.wgp_9(equave_index)
    return presets.prime_sphere(equave_index)


def _write_graph(graph: LatticeGraph, output_path: Optional[str]) -> None:
    text = json.dumps(graph_payload(graph), indent=2, sort_keys=True)
    if output_path:
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        print(f"Saved {out}")
    else:
        print(text)


def _cmd_lattice(args) -> None:
    from .lattice import span_lattice
    from .lattice_3d import LatticeConfig3D, span_lattice_3d

    monzos = _read_monzos(args.monzos_path)
    config = _preset(args.preset, args.equave_index)
    config.max_distance = args.max_distance
    config.edge_monzos = args.edge_monzos
    config.merge_edges = args.merge
    if isinstance(config, LatticeConfig3D):
        graph = span_lattice_3d(monzos, config)
    else:
        graph = span_lattice(monzos, config)
    _write_graph(graph, args.output_path)


def _cmd_grid(args) -> None:
    from .grid import GridConfig, GridLineOptions, span_grid

    families = [name for name in args.gridlines.split(",") if name]
    unknown = set(families) - {"delta1", "delta2", "diagonal1", "diagonal2"}
    if unknown:
        raise ValueError(f"Unknown gridline families: {sorted(unknown)}")

    min_x, max_x, min_y, max_y = args.bounds
    config = GridConfig(
        modulus=args.modulus,
        delta1=int(args.delta1[0]),
        delta1_x=args.delta1[1],
        delta1_y=args.delta1[2],
        delta2=int(args.delta2[0]),
        delta2_x=args.delta2[1],
        delta2_y=args.delta2[2],
        min_x=min_x,
        max_x=max_x,
        min_y=min_y,
        max_y=max_y,
        edge_vectors=args.edge_vectors,
        grid_lines=GridLineOptions(**{name: True for name in families}) if families else None,
        merge_edges=args.merge,
        range=args.search_range,
    )
    _write_graph(span_grid(args.steps, config), args.output_path)


def _cmd_val(args) -> None:
    from .val import mod_val
    from .vectors import LOG_PRIMES

    count = args.count if args.count is not None else args.divisions
    if count > len(LOG_PRIMES):
        raise ValueError(f"Only the first {len(LOG_PRIMES)} primes are available")
    val = mod_val(LOG_PRIMES[:count], args.divisions, args.search_resolution)
    print(" ".join(str(v) for v in val))


if __name__ == "__main__":
    main()
