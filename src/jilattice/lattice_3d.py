"""Spatial lattice graphs — the 3D counterpart of :mod:`lattice`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .graph import LatticeGraph, edge_between_3d
from .lattice import span_points
from .merge import merge_edges_3d
from .models import Edge3D, Vertex3D


@dataclass
class LatticeConfig3D:
    """Screen mapping and connection rules for :func:`span_lattice_3d`.

    Same fields as :class:`~lattice.LatticeConfig` plus
    *depthwise_coordinates* for the z-axis.
    """

    horizontal_coordinates: List[float]
    vertical_coordinates: List[float]
    depthwise_coordinates: List[float]
    max_distance: int = 1
    edge_monzos: Optional[List[List[float]]] = None
    merge_edges: bool = False

    @property
    def axis_mappings(self) -> List[List[float]]:
        return [
            self.horizontal_coordinates,
            self.vertical_coordinates,
            self.depthwise_coordinates,
        ]


def span_lattice_3d(
    monzos: Sequence[Sequence[float]],
    config: LatticeConfig3D,
) -> LatticeGraph:
    """Compute vertices and edges of a 3D graph of a just intonation scale."""
    points, links = span_points(
        monzos, config.axis_mappings, config.max_distance, config.edge_monzos,
    )
    primary_count = len(monzos)
    vertices = [
        Vertex3D(x, y, z, n if n < primary_count else None)
        for n, (x, y, z) in enumerate(points)
    ]
    edges: List[Edge3D] = [edge_between_3d(vertices, i, j, t) for i, j, t in links]
    if config.merge_edges:
        edges = merge_edges_3d(edges)
    return LatticeGraph(vertices, edges, {"dimensions": 3, "merged": config.merge_edges})
