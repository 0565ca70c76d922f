"""Planar lattice graphs of just intonation scales.

A scale is given as monzos (prime exponent vectors).  Each screen axis
maps a monzo to a coordinate through a dot product with one row of
per-prime coefficients, and monzos one prime step apart are joined.

Usage
-----
>>> from jilattice import kraig_grady_9, span_lattice
>>> vertices, edges = span_lattice([[0], [-1, 1], [-2, 0, 1]], kraig_grady_9())
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .connector import connect
from .graph import LatticeGraph, edge_between
from .merge import merge_edges
from .models import Edge, Vertex
from .projection import project, unproject
from .vectors import dot, pad, sub, vectors_equal

Link = Tuple[int, int, str]


@dataclass
class LatticeConfig:
    """Screen mapping and connection rules for :func:`span_lattice`.

    Attributes
    ----------
    horizontal_coordinates : list of float
        x-coordinate of one step along each prime.
    vertical_coordinates : list of float
        y-coordinate of one step along each prime (SVG orientation,
        positive y points down).
    max_distance : int
        Maximum prime-wise distance for connecting two inputs (0-2).
    edge_monzos : list of monzos, optional
        Extra connection vectors in addition to the primes.
    merge_edges : bool
        Fuse collinear edges into long ones wherever possible.
    """

    horizontal_coordinates: List[float]
    vertical_coordinates: List[float]
    max_distance: int = 1
    edge_monzos: Optional[List[List[float]]] = None
    merge_edges: bool = False

    @property
    def axis_mappings(self) -> List[List[float]]:
        return [self.horizontal_coordinates, self.vertical_coordinates]


def span_points(
    monzos: Sequence[Sequence[float]],
    axis_mappings: Sequence[Sequence[float]],
    max_distance: int,
    edge_monzos: Optional[Sequence[Sequence[float]]] = None,
) -> Tuple[List[Tuple[float, ...]], List[Link]]:
    """Dimension-agnostic core shared by the 2D and 3D spanners.

    Returns the coordinates of every input monzo followed by every
    auxiliary monzo, and the links between them as
    ``(index1, index2, edge_type)`` triples.
    """
    projected = project(monzos, axis_mappings)
    connected = connect(projected, max_distance)
    auxiliaries = unproject(connected.auxiliary_monzos, axis_mappings)

    points = [
        tuple(dot(monzo, coords) for coords in axis_mappings)
        for monzo in list(monzos) + auxiliaries
    ]
    links: List[Link] = [(c.index1, c.index2, c.type) for c in connected.connections]

    if edge_monzos:
        combined = projected + connected.auxiliary_monzos
        displacements = project(edge_monzos, axis_mappings)
        # A displacement and its inverse describe the same connection.
        displacements += [[-e for e in d] for d in displacements]
        primary_count = len(monzos)
        for i in range(len(combined)):
            for j in range(i + 1, len(combined)):
                diff = sub(combined[i], combined[j])
                for displacement in displacements:
                    if vectors_equal(diff, displacement):
                        edge_type = "custom" if j < primary_count else "auxiliary"
                        links.append((i, j, edge_type))

    return points, links


def span_lattice(monzos: Sequence[Sequence[float]], config: LatticeConfig) -> LatticeGraph:
    """Compute vertices and edges of a 2D graph of a just intonation scale.

    Parameters
    ----------
    monzos : sequence of sequences
        Prime exponents of the intervals in the scale.
    config : LatticeConfig
        Per-prime screen coordinates and connection options.

    Returns
    -------
    LatticeGraph
        One vertex per input monzo (in input order, carrying its index)
        followed by the auxiliary vertices, and the connecting edges.
    """
    points, links = span_points(
        monzos, config.axis_mappings, config.max_distance, config.edge_monzos,
    )
    primary_count = len(monzos)
    vertices = [
        Vertex(x, y, n if n < primary_count else None)
        for n, (x, y) in enumerate(points)
    ]
    edges: List[Edge] = [edge_between(vertices, i, j, t) for i, j, t in links]
    if config.merge_edges:
        edges = merge_edges(edges)
    return LatticeGraph(vertices, edges, {"dimensions": 2, "merged": config.merge_edges})


# ═══════════════════════════════════════════════════════════════════
# Alignment
# ═══════════════════════════════════════════════════════════════════

def align(
    config: LatticeConfig,
    horizontal_index: int,
    tonnetz_index: Optional[int] = None,
) -> None:
    """Transform *config* in place so a chosen prime lies horizontally.

    Without *tonnetz_index* all prime vectors are rotated so that prime
    *horizontal_index* points along +x, keeping its length.  With
    *tonnetz_index* the unique linear map is applied that also sends that
    second prime to 60 degrees above the first (a triangular Tonnetz
    layout with y pointing down), at the same length.
    """
    length = max(len(config.horizontal_coordinates), len(config.vertical_coordinates),
                 horizontal_index + 1, (tonnetz_index or 0) + 1)
    xs = pad(config.horizontal_coordinates, length)
    ys = pad(config.vertical_coordinates, length)

    hx, hy = xs[horizontal_index], ys[horizontal_index]
    unit = math.hypot(hx, hy)
    if not unit:
        raise ValueError(f"Prime {horizontal_index} has no screen displacement to align")

    if tonnetz_index is None:
        # Rotation taking (hx, hy) onto (unit, 0).
        a, b = hx / unit, hy / unit
        c, d = -hy / unit, hx / unit
    else:
        tx, ty = xs[tonnetz_index], ys[tonnetz_index]
        det = hx * ty - tx * hy
        if not det:
            raise ValueError(
                f"Primes {horizontal_index} and {tonnetz_index} are collinear on screen"
            )
        # Targets for the two primes as columns of T; M = T * P^-1.
        t11, t12 = unit, unit / 2
        t21, t22 = 0.0, -unit * math.sqrt(3) / 2
        p11, p12, p21, p22 = ty / det, -tx / det, -hy / det, hx / det
        a = t11 * p11 + t12 * p21
        b = t11 * p12 + t12 * p22
        c = t21 * p11 + t22 * p21
        d = t21 * p12 + t22 * p22

    config.horizontal_coordinates = [a * x + b * y for x, y in zip(xs, ys)]
    config.vertical_coordinates = [c * x + d * y for x, y in zip(xs, ys)]
