"""Screen-space records shared by the lattice and grid spanners."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

EdgeType = Literal["primary", "custom", "auxiliary", "gridline"]
"""Kind of connection drawn between two points.

``"primary"``: prime-wise step between two input vertices.
``"custom"``: user-declared connection between two input vertices.
``"auxiliary"``: connection where at least one vertex was synthesized.
``"gridline"``: construction line extending across the viewport.
"""

EDGE_TYPES: Tuple[str, ...] = ("primary", "custom", "auxiliary", "gridline")


def _check_edge_type(edge_type: str) -> None:
    if edge_type not in EDGE_TYPES:
        raise ValueError(f"Unknown edge type {edge_type!r}. Allowed: {list(EDGE_TYPES)}")


@dataclass(frozen=True)
class Connection:
    """Unordered pair of indices into a combined (primary + auxiliary) vertex list."""

    index1: int
    index2: int
    type: EdgeType = "primary"

    def __post_init__(self) -> None:
        _check_edge_type(self.type)
        if self.index1 >= self.index2:
            raise ValueError(
                f"Connection indices must be increasing, got {self.index1} >= {self.index2}"
            )


@dataclass(frozen=True)
class Vertex:
    """A point of a 2D lattice graph.

    *index* refers back to the input monzo; auxiliary vertices have none.
    """

    x: float
    y: float
    index: Optional[int] = None

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def is_auxiliary(self) -> bool:
        return self.index is None


@dataclass(frozen=True)
class Vertex3D:
    x: float
    y: float
    z: float
    index: Optional[int] = None

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def is_auxiliary(self) -> bool:
        return self.index is None


@dataclass(frozen=True)
class GridVertex:
    """A point of an equal-tempered grid.

    Several scale degrees can land on the same grid point, so *indices*
    holds every input step index that maps there, ascending.
    """

    x: float
    y: float
    indices: tuple[int, ...] = field(default_factory=tuple)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Edge:
    x1: float
    y1: float
    x2: float
    y2: float
    type: EdgeType = "primary"

    def __post_init__(self) -> None:
        _check_edge_type(self.type)

    @property
    def start(self) -> tuple[float, float]:
        return (self.x1, self.y1)

    @property
    def end(self) -> tuple[float, float]:
        return (self.x2, self.y2)

    def reversed(self) -> "Edge":
        return Edge(self.x2, self.y2, self.x1, self.y1, self.type)

    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)


@dataclass(frozen=True)
class Edge3D:
    x1: float
    y1: float
    z1: float
    x2: float
    y2: float
    z2: float
    type: EdgeType = "primary"

    def __post_init__(self) -> None:
        _check_edge_type(self.type)

    @property
    def start(self) -> tuple[float, float, float]:
        return (self.x1, self.y1, self.z1)

    @property
    def end(self) -> tuple[float, float, float]:
        return (self.x2, self.y2, self.z2)

    def reversed(self) -> "Edge3D":
        return Edge3D(self.x2, self.y2, self.z2, self.x1, self.y1, self.z1, self.type)

    def length(self) -> float:
        return math.dist(self.start, self.end)
