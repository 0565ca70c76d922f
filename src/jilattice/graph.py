from __future__ import annotations

import json
from collections import Counter
from dataclasses import asdict
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from .models import EDGE_TYPES, Edge, Edge3D, GridVertex, Vertex, Vertex3D

AnyVertex = Union[Vertex, Vertex3D, GridVertex]
AnyEdge = Union[Edge, Edge3D]


class LatticeGraph:
    """Vertices and edges produced by one spanning call.

    The container holds screen-space records only; it knows nothing of
    the monzos or steps they were computed from.  It unpacks like a
    pair so ``vertices, edges = span_lattice(...)`` reads naturally.
    """

    VERSION = "1.0"

    def __init__(
        self,
        vertices: Iterable[AnyVertex],
        edges: Iterable[AnyEdge],
        metadata: Optional[dict] = None,
    ) -> None:
        self.vertices: List[AnyVertex] = list(vertices)
        self.edges: List[AnyEdge] = list(edges)
        self.metadata = metadata or {}

    def __iter__(self) -> Iterator[list]:
        return iter((self.vertices, self.edges))

    def __repr__(self) -> str:
        return f"LatticeGraph({len(self.vertices)} vertices, {len(self.edges)} edges)"

    @property
    def dimensions(self) -> int:
        if any(isinstance(v, Vertex3D) for v in self.vertices):
            return 3
        if any(isinstance(e, Edge3D) for e in self.edges):
            return 3
        return 2

    def primary_vertices(self) -> List[AnyVertex]:
        return [v for v in self.vertices if getattr(v, "index", 0) is not None]

    def auxiliary_vertices(self) -> List[AnyVertex]:
        return [v for v in self.vertices if isinstance(v, (Vertex, Vertex3D)) and v.index is None]

    def edge_counts(self) -> Counter:
        """Number of edges per edge type."""
        return Counter(edge.type for edge in self.edges)

    def validate(self, strict: bool = False) -> list[str]:
        """Return a list of consistency problems (empty when valid).

        Unmerged vertex-to-vertex edges must start and end on vertex
        positions.  Gridlines, and edges of a merged graph, may extend
        past vertices and are only checked in *strict* mode for being
        non-degenerate.
        """
        errors: list[str] = []
        positions = {v.position for v in self.vertices}
        merged = bool(self.metadata.get("merged"))

        seen_indices: set[int] = set()
        for n, vertex in enumerate(self.vertices):
            index = getattr(vertex, "index", None)
            if index is None:
                continue
            if index in seen_indices:
                errors.append(f"Vertex {n} repeats input index {index}")
            seen_indices.add(index)

        for n, edge in enumerate(self.edges):
            if edge.type not in EDGE_TYPES:
                errors.append(f"Edge {n} has unknown type {edge.type!r}")
                continue
            if strict and edge.start == edge.end:
                errors.append(f"Edge {n} has zero length")
            if edge.type == "gridline" or merged:
                continue
            for label, point in (("start", edge.start), ("end", edge.end)):
                if point not in positions:
                    errors.append(f"Edge {n} {label} {point} is not a vertex position")

        return errors

    def to_dict(self) -> dict:
        return {
            "version": self.VERSION,
            "metadata": self.metadata,
            "vertices": [_vertex_payload(v) for v in self.vertices],
            "edges": [asdict(e) for e in self.edges],
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "LatticeGraph":
        vertices = [_vertex_from_payload(v) for v in payload.get("vertices", [])]
        edges: List[AnyEdge] = []
        for edge in payload.get("edges", []):
            if "z1" in edge:
                edges.append(Edge3D(**edge))
            else:
                edges.append(Edge(**edge))
        return cls(vertices, edges, payload.get("metadata", {}))

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)

    @classmethod
    def from_json(cls, json_data: str) -> "LatticeGraph":
        return cls.from_dict(json.loads(json_data))


def _vertex_payload(vertex: AnyVertex) -> dict:
    payload = asdict(vertex)
    if isinstance(vertex, GridVertex):
        payload["indices"] = list(vertex.indices)
    return payload


def _vertex_from_payload(payload: dict) -> AnyVertex:
    if "indices" in payload:
        return GridVertex(payload["x"], payload["y"], tuple(payload["indices"]))
    if "z" in payload:
        return Vertex3D(payload["x"], payload["y"], payload["z"], payload.get("index"))
    return Vertex(payload["x"], payload["y"], payload.get("index"))


def edge_between(vertices: Sequence[Vertex], index1: int, index2: int, edge_type: str) -> Edge:
    """Build the 2D edge joining two entries of *vertices*."""
    a = vertices[index1]
    b = vertices[index2]
    return Edge(a.x, a.y, b.x, b.y, edge_type)


def edge_between_3d(
    vertices: Sequence[Vertex3D], index1: int, index2: int, edge_type: str,
) -> Edge3D:
    a = vertices[index1]
    b = vertices[index2]
    return Edge3D(a.x, a.y, a.z, b.x, b.y, b.z, edge_type)
