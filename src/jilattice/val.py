"""Injective step mappings ("vals") of logarithms modulo an equal division.

Circular coordinate presets place every prime at an angle given by its
step count in some equal division of the equave.  For the picture to be
readable no two primes may share an angle, so the mapping is forced to
be injective.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .vectors import mmod, round_half_up

logger = logging.getLogger(__name__)


def _all_unique(steps: Sequence[int]) -> bool:
    return len(set(steps)) == len(steps)


def _rounded_val(logs: Sequence[float], normalizer: float, divisions: int) -> List[int]:
    return [mmod(round_half_up(log * normalizer), divisions) for log in logs]


def mod_val(
    logs: Sequence[float],
    divisions: int,
    search_resolution: int = 0,
) -> List[int]:
    """Map logarithms to pairwise distinct steps modulo *divisions*.

    Parameters
    ----------
    logs : sequence of float
        Logarithms of (formal) primes, the equave first.
    divisions : int
        Number of divisions of the equave.
    search_resolution : int
        When positive, first look for a generalized patent val: the
        normalizer ``divisions / logs[0]`` is nudged by offsets of
        ``±0.5 * i / search_resolution`` steps (smallest first, positive
        before negative) and the first injective mapping wins.

    Returns
    -------
    list of int
        Step of each logarithm in ``[0, divisions)``.

    If the search is disabled or fails, the plain rounded mapping is
    repaired left to right: a colliding step walks outwards, up to half
    the division, towards the side suggested by its rounding residual
    until it finds a free step.
    """
    if len(logs) > divisions:
        raise ValueError(f"Too many logarithms to fit into {divisions} notes.")
    if not logs:
        return []

    for i in range(search_resolution):
        offset = 0.5 * i / search_resolution
        candidate = _rounded_val(logs, (divisions + offset) / logs[0], divisions)
        if _all_unique(candidate):
            logger.debug("Found generalized patent val at offset %+g", offset)
            return candidate
        if i:
            candidate = _rounded_val(logs, (divisions - offset) / logs[0], divisions)
            if _all_unique(candidate):
                logger.debug("Found generalized patent val at offset %+g", -offset)
                return candidate

    normalizer = divisions / logs[0]
    val = [round_half_up(log * normalizer) for log in logs]
    for i in range(1, len(val)):
        reserved = {mmod(v, divisions) for v in val[:i]}
        if mmod(val[i], divisions) not in reserved:
            continue
        sign = -1 if logs[i] * divisions - val[i] < 0 else 1
        for j in range(1, divisions // 2 + 1):
            if mmod(val[i] + j * sign, divisions) not in reserved:
                val[i] += j * sign
                break
            if mmod(val[i] - j * sign, divisions) not in reserved:
                val[i] -= j * sign
                break
    logger.debug("Forced unique val for %d logarithms into %d steps", len(logs), divisions)
    return [mmod(v, divisions) for v in val]
