"""Index computation.

- engine: the seven pollution indices for one sample
- index_utils: array helpers (ratios, unit weights, geometric mean)
"""

from hmpi.indices.engine import IndexEngine

__all__ = [
    "IndexEngine",
]
