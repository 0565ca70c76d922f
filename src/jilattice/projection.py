"""Drop and restore prime axes that no screen axis uses.

A prime whose coefficient is zero on every screen axis contributes
nothing to a vertex position, so it must not contribute to the distance
between two vertices either.  :func:`project` removes such columns before
connecting, and :func:`unproject` reinserts them (as zeros) for vectors
synthesized in the projected space.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .vectors import pad

logger = logging.getLogger(__name__)


def _unused_axes(axis_mappings: Sequence[Sequence[float]]) -> List[bool]:
    """Flag, per prime, whether every axis mapping ignores it."""
    limit = max((len(coords) for coords in axis_mappings), default=0)
    unused: List[bool] = []
    for i in range(limit):
        unused.append(not any(coords[i] for coords in axis_mappings if i < len(coords)))
    return unused


def project(
    vectors: Sequence[Sequence[float]],
    axis_mappings: Sequence[Sequence[float]],
) -> List[List[float]]:
    """Return copies of *vectors* restricted to the axes that are mapped.

    Every vector is first padded or truncated to the longest axis mapping,
    then the columns that all mappings leave at zero are removed.  The
    relative order of the remaining columns is preserved.
    """
    unused = _unused_axes(axis_mappings)
    limit = len(unused)
    kept = [i for i in range(limit) if not unused[i]]
    if limit - len(kept):
        logger.debug("Projecting out %d of %d axes", limit - len(kept), limit)

    projected: List[List[float]] = []
    for vector in vectors:
        full = pad(vector, limit)[:limit]
        projected.append([full[i] for i in kept])
    return projected


def unproject(
    vectors: Sequence[Sequence[float]],
    axis_mappings: Sequence[Sequence[float]],
) -> List[List[float]]:
    """Inverse of :func:`project`: reinsert zeros at the dropped columns."""
    if not vectors:
        return []
    unused = _unused_axes(axis_mappings)

    unprojected: List[List[float]] = []
    for vector in vectors:
        restored: List[float] = []
        source = iter(vector)
        for flag in unused:
            restored.append(0 if flag else next(source, 0))
        # Anything beyond the mapped width rides along unchanged.
        restored.extend(source)
        unprojected.append(restored)
    return unprojected
