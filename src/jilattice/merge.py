"""Fuse chains of collinear edges into single long edges.

Dense lattices and grids contain many short segments that line up end to
end.  Merging them is a rendering optimisation only: connectivity (the
set of covered points and the type of every segment) is unchanged.

Endpoints are compared exactly.  Inputs are expected to come from the
same dot products so that shared endpoints are bit-identical.
"""

from __future__ import annotations

from typing import Iterable, List, Set, Union

from .models import Edge, Edge3D


def _orient(edge: Edge) -> Edge:
    """Point *edge* from its lexicographically smaller endpoint."""
    if edge.end < edge.start:
        return edge.reversed()
    return edge


def _orient_3d(edge: Edge3D) -> Edge3D:
    if edge.end < edge.start:
        return edge.reversed()
    return edge


def _sort_key(edge: Union[Edge, Edge3D]) -> tuple:
    """Total order on oriented edges so the result ignores input order."""
    return (edge.start, edge.end, edge.type)


def merge_edges(edges: Iterable[Edge]) -> List[Edge]:
    """Combine edges that share an endpoint, a slope and a type.

    Edges are oriented canonically, sorted by start, end and type, then
    greedily extended: each unconsumed edge absorbs every later edge
    that starts at its current end and continues in the same direction.
    """
    oriented = sorted((_orient(e) for e in edges), key=_sort_key)
    result: List[Edge] = []
    spent: Set[int] = set()
    for i, edge in enumerate(oriented):
        if i in spent:
            continue
        x2, y2 = edge.x2, edge.y2
        dx = x2 - edge.x1
        dy = y2 - edge.y1
        if dx or dy:
            for j in range(i + 1, len(oriented)):
                if j in spent:
                    continue
                other = oriented[j]
                if other.x1 != x2 or other.y1 != y2 or other.type != edge.type:
                    continue
                odx = other.x2 - other.x1
                ody = other.y2 - other.y1
                if odx * dy == dx * ody:
                    x2, y2 = other.x2, other.y2
                    spent.add(j)
        result.append(Edge(edge.x1, edge.y1, x2, y2, edge.type))
    return result


def merge_edges_3d(edges: Iterable[Edge3D]) -> List[Edge3D]:
    """3D analogue of :func:`merge_edges`.

    Collinearity is tested on all three coordinate planes.
    """
    oriented = sorted((_orient_3d(e) for e in edges), key=_sort_key)
    result: List[Edge3D] = []
    spent: Set[int] = set()
    for i, edge in enumerate(oriented):
        if i in spent:
            continue
        x2, y2, z2 = edge.x2, edge.y2, edge.z2
        dx = x2 - edge.x1
        dy = y2 - edge.y1
        dz = z2 - edge.z1
        if dx or dy or dz:
            for j in range(i + 1, len(oriented)):
                if j in spent:
                    continue
                other = oriented[j]
                if other.start != (x2, y2, z2) or other.type != edge.type:
                    continue
                odx = other.x2 - other.x1
                ody = other.y2 - other.y1
                odz = other.z2 - other.z1
                if odx * dy == dx * ody and odx * dz == dx * odz and ody * dz == dy * odz:
                    x2, y2, z2 = other.x2, other.y2, other.z2
                    spent.add(j)
        result.append(Edge3D(edge.x1, edge.y1, edge.z1, x2, y2, z2, edge.type))
    return result
