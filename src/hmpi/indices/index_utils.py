"""Numeric helpers shared by the index engine.

Centralized helper functions for:
- Converting a sparse concentration set into aligned arrays
- Unit weights normalized over the measured metals
- Sub-index quality ratings
- Geometric mean with zero dominance

All helpers work on 1-D numpy arrays of equal length, one entry per
measured metal. None of them validate inputs: the overlay guarantees
``standard > 0`` and the input contract guarantees finite, non-negative
concentrations.
"""

from typing import Mapping, Tuple

import numpy as np

__all__ = [
    'aligned_arrays',
    'concentration_ratios',
    'unit_weights',
    'quality_ratings',
    'geometric_mean',
]


def aligned_arrays(concentrations: Mapping[str, float],
                   standards: Mapping[str, float],
                   ideals: Mapping[str, float]) -> Tuple[list, np.ndarray, np.ndarray, np.ndarray]:
    """Build (symbols, C, S, I) for the measured metals only.

    Metals absent from ``concentrations`` are not measured and take no
    part in any index; they are never filled with zero.

    Returns
    -------
    symbols : list of str
        Measured symbols, in the caller's order.
    C, S, I : np.ndarray
        Concentration, standard and ideal per measured metal (float64).
    """
    symbols = list(concentrations)
    c = np.array([concentrations[s] for s in symbols], dtype=np.float64)
    s = np.array([standards[m] for m in symbols], dtype=np.float64)
    i = np.array([ideals[m] for m in symbols], dtype=np.float64)
    return symbols, c, s, i


def concentration_ratios(c: np.ndarray, s: np.ndarray) -> np.ndarray:
    """Per-metal pollution ratio ``C / S``."""
    return c / s


def unit_weights(s: np.ndarray) -> np.ndarray:
    """Unit weights ``W = K / S`` with ``K = 1 / sum(1 / S)``.

    The weights sum to 1 over whichever subset of metals was measured.

    Examples
    --------
    >>> unit_weights(np.array([0.01, 2.0]))
    array([0.99502488, 0.00497512])
    """
    inverse = 1.0 / s
    k = 1.0 / np.sum(inverse)
    return k * inverse


def quality_ratings(c: np.ndarray, s: np.ndarray, i: np.ndarray) -> np.ndarray:
    """Sub-index ``Q = 100 (C - I) / (S - I)``.

    Undefined where ``S == I``; callers must drop those metals first.
    """
    return 100.0 * (c - i) / (s - i)


def geometric_mean(values: np.ndarray) -> float:
    """Geometric mean of non-negative values.

    Any zero makes the result exactly zero. Otherwise it is computed in log
    space, ``exp(mean(log(x)))``, which equals ``prod(x) ** (1/n)`` without
    overflowing for many large ratios.
    """
    values = np.asarray(values, dtype=np.float64)
    if np.any(values == 0.0):
        return 0.0
    return float(np.exp(np.mean(np.log(values))))
