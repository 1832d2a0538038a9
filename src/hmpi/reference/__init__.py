"""Reference data.

- registry: read-only catalog of known metals and their default standards
- overlay: per-sample standard/ideal overrides on top of the registry
"""

from hmpi.reference.registry import (
    REGISTRY_VERSION,
    REFERENCE_REGISTRY,
    get_metal,
    metals_by_category,
    normalize_symbol,
    normalize_concentrations,
)
from hmpi.reference.overlay import StandardsOverlay, ResolvedStandards

__all__ = [
    "REGISTRY_VERSION",
    "REFERENCE_REGISTRY",
    "get_metal",
    "metals_by_category",
    "normalize_symbol",
    "normalize_concentrations",
    "StandardsOverlay",
    "ResolvedStandards",
]
