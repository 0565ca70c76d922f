"""Reference coordinate systems for lattice graphs.

Coordinates are for SVG, so the positive y-direction points down.

Presets
-------
- :func:`kraig_grady_9` — Kraig Grady's 2D lattice for the primes up to 23
  (https://anaphoria.com/wilsontreasure.html), prime 2 by Lumi Pakkanen
- :func:`scott_dakota_24` — prime ring with 24 quantized directions
- :func:`prime_ring_72` — prime ring with 72 directions
- :func:`wgp_9` — Wilson-Grady-Pakkanen 3D lattice for the primes up to 23
- :func:`prime_sphere` — 3D coordinates on a sphere, from prime sizes

Every call returns a fresh config whose lists the caller may mutate.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from .lattice import LatticeConfig
from .lattice_3d import LatticeConfig3D
from .val import mod_val
from .vectors import LOG_PRIMES, mmod, round_half_up

# X-coordinates for every prime up to 23.
KRAIG_GRADY_X = (-23, 40, 0, 13, -14, -8, -5, 7, 20)
# Y-coordinates for every prime up to 23.
KRAIG_GRADY_Y = (-45, 0, -40, -11, -18, -4, -32, -25, -6)

# Sine quantized to integers according to Scott Dakota.
SCOTT_DAKOTA_SINE = (
    0,    5,   9,   12,  14,  16,
    17,   16,  14,  12,  9,   5,
    0,   -5,  -9,  -12, -14, -16,
    -17, -16, -14, -12, -9,  -5,
)

WGP_X = (23, 40, 0, 0, -14, -8, -5, 0, 20)
WGP_Y = (-45, 0, -40, 0, -18, -4, -32, -25, -3)
WGP_Z = (19, 0, 0, 40, 13, 2, 5, 9, 15)

_SPHERE_EPSILON = 1e-6


def kraig_grady_9(equave_index: int = 0) -> LatticeConfig:
    """Kraig Grady's coordinates for the first 9 primes.

    The prime at *equave_index* is the interval of equivalence; its
    coordinates are zeroed so that it drops out of the picture.
    """
    horizontal = list(KRAIG_GRADY_X)
    vertical = list(KRAIG_GRADY_Y)
    horizontal[equave_index] = 0
    vertical[equave_index] = 0
    return LatticeConfig(horizontal, vertical)


def scott_dakota_24(logs: Optional[Sequence[float]] = None) -> LatticeConfig:
    """Prime ring 24 coordinates based on Scott Dakota's conventions.

    *logs* are logarithms of (formal) primes with the equave first;
    defaults to the first 24 actual primes.
    """
    if logs is None:
        logs = LOG_PRIMES[:24]
    horizontal: List[float] = []
    vertical: List[float] = []
    for steps in mod_val(logs, 24):
        horizontal.append(17 - SCOTT_DAKOTA_SINE[mmod(steps + 6, 24)])
        vertical.append(-SCOTT_DAKOTA_SINE[steps])
    return LatticeConfig(horizontal, vertical)


def prime_ring_72(logs: Optional[Sequence[float]] = None) -> LatticeConfig:
    """Prime ring 72 coordinates; *logs* default to the first 72 primes."""
    if logs is None:
        logs = LOG_PRIMES[:72]
    horizontal: List[float] = []
    vertical: List[float] = []
    for steps in mod_val(logs, 72):
        theta = math.pi * steps / 36
        horizontal.append(37 - round_half_up(math.cos(theta) * 36.7))
        vertical.append(-round_half_up(math.sin(theta) * 36.7))
    return LatticeConfig(horizontal, vertical)


def wgp_9(equave_index: int = 0) -> LatticeConfig3D:
    """Wilson-Grady-Pakkanen coordinates for the first 9 primes."""
    horizontal = list(WGP_X)
    vertical = list(WGP_Y)
    depthwise = list(WGP_Z)
    horizontal[equave_index] = 0
    vertical[equave_index] = 0
    depthwise[equave_index] = 0
    return LatticeConfig3D(horizontal, vertical, depthwise)


def prime_sphere(
    equave_index: int = 0,
    logs: Optional[Sequence[float]] = None,
    search_resolution: int = 1024,
) -> LatticeConfig3D:
    """Coordinates from prime sizes on a sphere offset along the x-axis.

    Each prime sits at the angle its size makes as a fraction of the
    equave, on a unit circle through the origin.  From the third prime
    on, that circle is rotated about the x-axis to the position (out of
    *search_resolution* candidates) most orthogonal to the primes placed
    before it.

    *logs* default to the first 24 actual primes.
    """
    try:
        import numpy as np
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "prime_sphere requires numpy. Install with `pip install numpy`."
        ) from exc

    if logs is None:
        logs = LOG_PRIMES[:24]
    phis = 2 * math.pi / search_resolution * np.arange(search_resolution)
    cos_phis = np.cos(phis)
    sin_phis = np.sin(-phis)
    dt = 2 * math.pi / logs[equave_index]

    horizontal: List[float] = []
    vertical: List[float] = []
    depthwise: List[float] = []
    for log in logs:
        theta = log * dt
        x = 1 - math.cos(theta)
        u = math.sin(theta)
        y = -u
        z = 0.0
        if len(horizontal) > 1:
            ycs = cos_phis * u
            zcs = sin_phis * u
            errors = np.zeros(search_resolution)
            for px, py, pz in zip(horizontal, vertical, depthwise):
                errors += (x * px + ycs * py + zcs * pz) ** 2
            best = math.inf
            for j, error in enumerate(errors):
                if error + _SPHERE_EPSILON < best:
                    best = error
                    y = float(ycs[j])
                    z = float(zcs[j])
        horizontal.append(x)
        vertical.append(y)
        depthwise.append(z)
    # sin(2 pi) is not exactly zero; the equave axis must project out.
    horizontal[equave_index] = 0
    vertical[equave_index] = 0
    depthwise[equave_index] = 0
    return LatticeConfig3D(horizontal, vertical, depthwise)
