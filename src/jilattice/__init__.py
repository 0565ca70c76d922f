"""jilattice — lattice and grid layouts for musical scales.

Public API is organised into layers:

- **Core** — models, vector helpers, graph container
- **Connecting** — projection, unit-step connector, edge merging
- **Spanning** — 2D/3D just intonation lattices and equal temperament grids
- **Presets** — reference coordinate systems and unique step mappings
- **Export** — JSON payloads for renderers (validation requires jsonschema)
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import (
    EDGE_TYPES,
    Connection,
    Edge,
    Edge3D,
    EdgeType,
    GridVertex,
    Vertex,
    Vertex3D,
)
from .vectors import LOG_PRIMES, PRIMES, dot, mmod, sub, vectors_equal
from .graph import LatticeGraph

# ── Connecting ──────────────────────────────────────────────────────
from .projection import project, unproject
from .connector import ConnectResult, connect, taxicab_distance
from .merge import merge_edges, merge_edges_3d

# ── Spanning ────────────────────────────────────────────────────────
from .lattice import LatticeConfig, align, span_lattice
from .lattice_3d import LatticeConfig3D, span_lattice_3d
from .grid import GridConfig, GridLineOptions, shortest_edge, span_grid

# ── Presets ─────────────────────────────────────────────────────────
from .val import mod_val
from .presets import kraig_grady_9, prime_ring_72, prime_sphere, scott_dakota_24, wgp_9

# ── Export ──────────────────────────────────────────────────────────
from .export import GRAPH_SCHEMA, graph_payload, validate_graph_payload

__all__ = [
    # Core
    "EDGE_TYPES",
    "Connection",
    "Edge",
    "Edge3D",
    "EdgeType",
    "GridVertex",
    "Vertex",
    "Vertex3D",
    "LOG_PRIMES",
    "PRIMES",
    "dot",
    "mmod",
    "sub",
    "vectors_equal",
    "LatticeGraph",
    # Connecting
    "project",
    "unproject",
    "ConnectResult",
    "connect",
    "taxicab_distance",
    "merge_edges",
    "merge_edges_3d",
    # Spanning
    "LatticeConfig",
    "align",
    "span_lattice",
    "LatticeConfig3D",
    "span_lattice_3d",
    "GridConfig",
    "GridLineOptions",
    "shortest_edge",
    "span_grid",
    # Presets
    "mod_val",
    "kraig_grady_9",
    "prime_ring_72",
    "prime_sphere",
    "scott_dakota_24",
    "wgp_9",
    # Export
    "GRAPH_SCHEMA",
    "graph_payload",
    "validate_graph_payload",
]
