"""Unit-step connections between monzos, with distance-2 bridging.

Two monzos are connected when they differ by exactly one prime step.
When a larger *max_distance* is requested, pairs two steps apart are
bridged by synthesizing auxiliary monzos half-way between them, which
then connect to both ends through ordinary unit steps.

Only two distance-2 geometries are bridged:

- a gap of ±2 on a single axis (one midpoint is inserted), and
- gaps of ±1 on two axes (both corners of the unit square are inserted).

Any other shape is left unconnected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .models import Connection
from .vectors import pad, vectors_equal

logger = logging.getLogger(__name__)

EPSILON = 1e-6
"""Tolerance for accepting near-integer steps between fractional coordinates."""

MAX_SUPPORTED_DISTANCE = 2


@dataclass
class ConnectResult:
    """Output of :func:`connect`.

    *connections* index into ``monzos + auxiliary_monzos``.
    """

    connections: List[Connection] = field(default_factory=list)
    auxiliary_monzos: List[List[float]] = field(default_factory=list)


def taxicab_distance(
    a: Sequence[float],
    b: Sequence[float],
    tolerance: float = EPSILON,
) -> Optional[int]:
    """Manhattan distance between two monzos in whole steps.

    Each coordinate difference must be within *tolerance* of an integer;
    otherwise no sequence of whole steps joins the two and ``None`` is
    returned.
    """
    length = max(len(a), len(b))
    result = 0
    for x, y in zip(pad(a, length), pad(b, length)):
        distance = abs(x - y)
        move = round(distance)
        if abs(distance - move) > tolerance:
            return None
        result += move
    return result


def _contains(candidates: Sequence[Sequence[float]], vector: Sequence[float]) -> bool:
    return any(vectors_equal(vector, existing) for existing in candidates)


def _bridge(
    a: Sequence[float],
    b: Sequence[float],
    existing: Sequence[Sequence[float]],
) -> List[List[float]]:
    """Return the new auxiliary monzos that bridge *a* and *b*.

    Auxiliaries are built from *b* and deduplicated against *existing*.
    """
    length = max(len(a), len(b))
    a = pad(a, length)
    base = pad(b, length)
    for k in range(length):
        gap = a[k] - base[k]
        if abs(gap) == 2:
            midpoint = list(base)
            midpoint[k] += gap / 2
            if _contains(existing, midpoint):
                return []
            return [midpoint]
        if abs(gap) == 1:
            for other in range(k + 1, length):
                other_gap = a[other] - base[other]
                if not other_gap:
                    continue
                one_way = list(base)
                one_way[k] += gap
                other_way = list(base)
                other_way[other] += other_gap
                found: List[List[float]] = []
                if not _contains(existing, one_way):
                    found.append(one_way)
                if not _contains(existing, other_way):
                    found.append(other_way)
                return found
    return []


def connect(monzos: Sequence[Sequence[float]], max_distance: int) -> ConnectResult:
    """Connect monzos that are already projected onto the used axes.

    Parameters
    ----------
    monzos : sequence of sequences
        Prime exponents of the scale (usually without the equave).
    max_distance : int
        0 disables connecting, 1 joins unit steps, 2 also bridges
        distance-2 pairs with auxiliary monzos.

    Returns
    -------
    ConnectResult
        Connections with ``index1 < index2`` plus the synthesized
        auxiliary monzos in discovery order.
    """
    if max_distance > MAX_SUPPORTED_DISTANCE:
        raise ValueError(
            f"Only up to max distance = {MAX_SUPPORTED_DISTANCE} is supported, got {max_distance}"
        )

    result = ConnectResult()
    if max_distance < 1:
        return result

    originals = [list(m) for m in monzos]

    if max_distance > 1:
        for i in range(len(originals)):
            for j in range(i + 1, len(originals)):
                distance = taxicab_distance(originals[i], originals[j])
                if distance is None or not 1 < distance <= max_distance:
                    continue
                bridge = _bridge(
                    originals[i], originals[j], originals + result.auxiliary_monzos,
                )
                result.auxiliary_monzos.extend(bridge)

    primary_count = len(originals)
    extended = originals + result.auxiliary_monzos
    for i in range(len(extended)):
        for j in range(i + 1, len(extended)):
            if taxicab_distance(extended[i], extended[j]) == 1:
                edge_type = "primary" if j < primary_count else "auxiliary"
                result.connections.append(Connection(i, j, edge_type))

    logger.debug(
        "Connected %d monzos with %d auxiliaries into %d connections",
        primary_count, len(result.auxiliary_monzos), len(result.connections),
    )
    return result
