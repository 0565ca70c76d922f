"""Periodic grids of equally tempered scales.

Two generators, each a step count together with a screen displacement,
span a 2D lattice of points.  A point ``i * g1 + j * g2`` represents the
step ``i * delta1 + j * delta2`` modulo the division, so every scale
degree shows up repeatedly across the viewport.

All enumeration is bounded by ``range`` (the largest generator
coefficient tried) and by the ``max_vertices`` / ``max_edges`` ceilings,
which stop every nested search loop at once when reached.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .graph import LatticeGraph
from .models import Edge, GridVertex
from .vectors import mmod

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


# ═══════════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════════


@dataclass
class GridLineOptions:
    """Which families of gridlines to draw.

    *delta1* / *delta2* run along the generators; *diagonal1* runs along
    ``g1 - g2`` and *diagonal2* along ``g1 + g2``.
    """

    delta1: bool = False
    delta2: bool = False
    diagonal1: bool = False
    diagonal2: bool = False


@dataclass
class GridConfig:
    """Generators, viewport and limits for :func:`span_grid`.

    Attributes
    ----------
    modulus : int
        Number of steps in the equal division.
    delta1, delta2 : int
        Step counts of the two generators.
    delta1_x, delta1_y, delta2_x, delta2_y : float
        Screen displacement of each generator.
    min_x, max_x, min_y, max_y : float
        Viewport, inclusive on all sides.
    edge_vectors : list of (x, y), optional
        Screen displacements to connect vertices along.
    grid_lines : GridLineOptions, optional
        Gridline families to draw across the viewport.
    merge_edges : bool
        Chain runs of custom edges into single long edges.
    range : int
        Largest absolute generator coefficient searched.
    max_vertices, max_edges : int
        Output ceilings.
    """

    modulus: int
    delta1: int
    delta1_x: float
    delta1_y: float
    delta2: int
    delta2_x: float
    delta2_y: float
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    edge_vectors: Optional[List[Sequence[float]]] = None
    grid_lines: Optional[GridLineOptions] = None
    merge_edges: bool = False
    range: int = 100
    max_vertices: int = 1000
    max_edges: int = 2000

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError(f"modulus must be positive, got {self.modulus}")
        if self.range < 0:
            raise ValueError(f"range must be >= 0, got {self.range}")
        if self.max_vertices < 0 or self.max_edges < 0:
            raise ValueError("max_vertices and max_edges must be >= 0")
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Empty viewport [{self.min_x}, {self.max_x}] x [{self.min_y}, {self.max_y}]"
            )

    @property
    def generator1(self) -> Point:
        return (self.delta1_x, self.delta1_y)

    @property
    def generator2(self) -> Point:
        return (self.delta2_x, self.delta2_y)

    def contains(self, x: float, y: float, scale: float = 1) -> bool:
        """Whether ``(x, y)`` lies in the viewport grown by *scale*."""
        return (
            scale * self.min_x <= x <= scale * self.max_x
            and scale * self.min_y <= y <= scale * self.max_y
        )

    def position(self, i: int, j: int) -> Point:
        return (
            self.delta1_x * i + self.delta2_x * j,
            self.delta1_y * i + self.delta2_y * j,
        )

    def step(self, i: int, j: int) -> int:
        return mmod(self.delta1 * i + self.delta2 * j, self.modulus)


def _is_degenerate(vector: Point) -> bool:
    return not vector[0] and not vector[1]


# ═══════════════════════════════════════════════════════════════════
# Vertices
# ═══════════════════════════════════════════════════════════════════


def _group_steps(steps: Sequence[int], modulus: int) -> Dict[int, Tuple[int, ...]]:
    groups: Dict[int, List[int]] = defaultdict(list)
    for index, step in enumerate(steps):
        groups[mmod(step, modulus)].append(index)
    return {step: tuple(indices) for step, indices in groups.items()}


def _grid_vertices(steps: Sequence[int], config: GridConfig) -> List[GridVertex]:
    if _is_degenerate(config.generator1) or _is_degenerate(config.generator2):
        logger.debug("Generator without screen displacement; no vertices enumerated")
        return []

    groups = _group_steps(steps, config.modulus)
    vertices: List[GridVertex] = []
    if not groups or not config.max_vertices:
        return vertices
    for i in range(-config.range, config.range + 1):
        for j in range(-config.range, config.range + 1):
            x, y = config.position(i, j)
            if not config.contains(x, y):
                continue
            indices = groups.get(config.step(i, j))
            if indices is None:
                continue
            vertices.append(GridVertex(x, y, indices))
            if len(vertices) >= config.max_vertices:
                logger.debug("Vertex ceiling of %d reached", config.max_vertices)
                return vertices
    return vertices


# ═══════════════════════════════════════════════════════════════════
# Custom edges
# ═══════════════════════════════════════════════════════════════════


def _custom_edges(
    vertices: Sequence[GridVertex],
    vectors: Sequence[Sequence[float]],
    max_edges: int,
) -> List[Edge]:
    """Connect every vertex pair that differs by one of *vectors* (either sign)."""
    displacements = [(vx, vy) for vx, vy in vectors]
    displacements += [(-vx, -vy) for vx, vy in vectors]
    edges: List[Edge] = []
    if not max_edges:
        return edges
    for i in range(len(vertices)):
        a = vertices[i]
        for j in range(i + 1, len(vertices)):
            b = vertices[j]
            dx = a.x - b.x
            dy = a.y - b.y
            for vx, vy in displacements:
                if dx == vx and dy == vy:
                    edges.append(Edge(a.x, a.y, b.x, b.y, "custom"))
                    if len(edges) >= max_edges:
                        logger.debug("Edge ceiling of %d reached by custom edges", max_edges)
                        return edges
    return edges


def _merged_custom_edges(
    vertices: Sequence[GridVertex],
    vectors: Sequence[Sequence[float]],
    max_edges: int,
) -> List[Edge]:
    """Chain consecutive steps along each vector into maximal runs."""
    occupied = {v.position for v in vertices}
    edges: List[Edge] = []
    if not max_edges:
        return edges
    for vx, vy in vectors:
        if _is_degenerate((vx, vy)):
            continue
        visited: set[Point] = set()
        for vertex in vertices:
            if vertex.position in visited:
                continue
            visited.add(vertex.position)
            start = end = vertex.position
            while True:
                nxt = (end[0] + vx, end[1] + vy)
                if nxt not in occupied or nxt in visited:
                    break
                visited.add(nxt)
                end = nxt
            while True:
                prev = (start[0] - vx, start[1] - vy)
                if prev not in occupied or prev in visited:
                    break
                visited.add(prev)
                start = prev
            if start == end:
                continue
            edges.append(Edge(start[0], start[1], end[0], end[1], "custom"))
            if len(edges) >= max_edges:
                logger.debug("Edge ceiling of %d reached by merged edges", max_edges)
                return edges
    return edges


# ═══════════════════════════════════════════════════════════════════
# Gridlines
# ═══════════════════════════════════════════════════════════════════


def _clip_line(
    origin: Point,
    direction: Point,
    config: GridConfig,
) -> Optional[Edge]:
    """Clip the line ``origin + j * direction`` to the viewport.

    The returned segment runs from the last lattice point before the
    line enters the viewport to the first one after it leaves, so
    gridlines reach just past the visible area.
    """
    ox, oy = origin
    dx, dy = direction
    j = -config.range - 1
    while not config.contains(ox + j * dx, oy + j * dy):
        j += 1
        if j > config.range:
            return None
    start = j - 1
    while config.contains(ox + j * dx, oy + j * dy) and j <= config.range:
        j += 1
    return Edge(
        ox + start * dx, oy + start * dy,
        ox + j * dx, oy + j * dy,
        "gridline",
    )


def _gridlines(config: GridConfig, max_edges: int) -> List[Edge]:
    options = config.grid_lines
    g1 = config.generator1
    g2 = config.generator2
    # (direction, offset generator) per requested family.
    families: List[Tuple[Point, Point]] = []
    if options.delta1:
        families.append((g1, g2))
    if options.delta2:
        families.append((g2, g1))
    if options.diagonal1:
        families.append(((g1[0] - g2[0], g1[1] - g2[1]), g1))
    if options.diagonal2:
        families.append(((g1[0] + g2[0], g1[1] + g2[1]), g1))
    drawable = [(d, o) for d, o in families if not _is_degenerate(d)]
    if len(drawable) < len(families):
        logger.debug("Skipping %d gridline families without direction", len(families) - len(drawable))
    families = drawable

    edges: List[Edge] = []
    if not families or not max_edges:
        return edges
    for i in range(-config.range, config.range + 1):
        for direction, offset in families:
            # Without an offset every i yields the line through the origin.
            if i and _is_degenerate(offset):
                continue
            line = _clip_line((offset[0] * i, offset[1] * i), direction, config)
            if line is None:
                continue
            edges.append(line)
            if len(edges) >= max_edges:
                logger.debug("Edge ceiling reached by gridlines at offset %d", i)
                return edges
    return edges


# ═══════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════


def span_grid(steps: Sequence[int], config: GridConfig) -> LatticeGraph:
    """Compute vertices, custom edges and gridlines of a periodic grid.

    Parameters
    ----------
    steps : sequence of int
        Scale degrees in steps of the division; reduced modulo
        ``config.modulus``.
    config : GridConfig
        Generators, viewport, edge options and ceilings.

    Returns
    -------
    LatticeGraph
        :class:`GridVertex` entries in enumeration order, followed in the
        edge list by custom edges and then gridlines.
    """
    vertices = _grid_vertices(steps, config)

    edges: List[Edge] = []
    if config.edge_vectors:
        if config.merge_edges:
            edges = _merged_custom_edges(vertices, config.edge_vectors, config.max_edges)
        else:
            edges = _custom_edges(vertices, config.edge_vectors, config.max_edges)

    if config.grid_lines is not None:
        edges.extend(_gridlines(config, config.max_edges - len(edges)))

    return LatticeGraph(
        vertices,
        edges,
        {"dimensions": 2, "modulus": config.modulus, "merged": config.merge_edges},
    )


def shortest_edge(step: int, config: GridConfig) -> Tuple[float, float]:
    """Shortest screen vector from the origin to a point of *step*'s class.

    The search covers twice the viewport in every direction so that
    vectors spanning corner to corner are found.

    Raises
    ------
    LookupError
        If the step never appears within the searched range.
    """
    step = mmod(step, config.modulus)
    best: Optional[Point] = None
    norm = float("inf")
    for i in range(-config.range, config.range + 1):
        for j in range(-config.range, config.range + 1):
            x, y = config.position(i, j)
            if not config.contains(x, y, scale=2):
                continue
            if config.step(i, j) != step:
                continue
            l2 = x * x + y * y
            if l2 < norm:
                norm = l2
                best = (x, y)
    if best is None:
        raise LookupError(f"Step {step} not found on grid.")
    return best
