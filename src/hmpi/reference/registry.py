"""Reference registry of known metals.

Static catalog of the metals the engine understands, each with its default
regulatory standard (WHO drinking-water guideline) and ideal background
value. The table is built once at import time and exposed as a read-only
mapping, so it can be shared across concurrent evaluations without locking.

Callers never mutate the registry; per-sample overrides go through
:class:`hmpi.reference.overlay.StandardsOverlay`.
"""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from hmpi.contracts.failure import InputError
from hmpi.schemas.metal import Metal, MetalCategory

__all__ = [
    'REGISTRY_VERSION',
    'REFERENCE_REGISTRY',
    'get_metal',
    'metals_by_category',
    'normalize_symbol',
    'normalize_concentrations',
]

logger = logging.getLogger(__name__)

REGISTRY_VERSION = "who-gdwq-2017.1"

# (symbol, name, standard mg/L, ideal mg/L, category)
_METAL_TABLE = (
    ("Pb", "Lead", 0.01, 0.0, MetalCategory.TOXIC),
    ("Cd", "Cadmium", 0.003, 0.0, MetalCategory.TOXIC),
    ("Cr", "Chromium", 0.05, 0.0, MetalCategory.TOXIC),
    ("As", "Arsenic", 0.01, 0.0, MetalCategory.TOXIC),
    ("Hg", "Mercury", 0.001, 0.0, MetalCategory.TOXIC),
    ("Ni", "Nickel", 0.07, 0.0, MetalCategory.TOXIC),
    ("Cu", "Copper", 2.0, 0.0, MetalCategory.ESSENTIAL),
    ("Zn", "Zinc", 3.0, 0.0, MetalCategory.ESSENTIAL),
    # Fe and Mn guideline values equal their background level
    ("Fe", "Iron", 0.3, 0.3, MetalCategory.ESSENTIAL),
    ("Mn", "Manganese", 0.1, 0.1, MetalCategory.ESSENTIAL),
    ("Co", "Cobalt", 0.05, 0.0, MetalCategory.TRACE),
)


def _build_registry() -> Mapping[str, Metal]:
    metals = {}
    for symbol, name, standard, ideal, category in _METAL_TABLE:
        if symbol in metals:
            raise RuntimeError(f"Duplicate metal symbol in registry: {symbol}")
        metals[symbol] = Metal(
            symbol=symbol,
            name=name,
            standard=standard,
            ideal=ideal,
            category=category,
        )
    logger.debug("Reference registry %s built: %d metals", REGISTRY_VERSION, len(metals))
    return MappingProxyType(metals)


REFERENCE_REGISTRY: Mapping[str, Metal] = _build_registry()


def get_metal(symbol: str) -> Metal:
    """Look up a registry metal by symbol.

    Raises
    ------
    InputError
        If the symbol is not in the registry.
    """
    try:
        return REFERENCE_REGISTRY[symbol]
    except KeyError:
        raise InputError(
            f"Unknown metal symbol '{symbol}' (registry {REGISTRY_VERSION} "
            f"knows: {', '.join(REFERENCE_REGISTRY)})"
        ) from None


def metals_by_category(category) -> Tuple[Metal, ...]:
    """Registry metals of one category, in registry order."""
    category = MetalCategory(category)
    return tuple(m for m in REFERENCE_REGISTRY.values() if m.category == category)


def normalize_symbol(symbol: str, registry: Optional[Mapping[str, Metal]] = None) -> str:
    """Map user spellings like ``"pb"`` or ``" PB "`` to the registry key.

    Unknown symbols are returned stripped but otherwise unchanged so the
    caller's validation can report them verbatim.
    """
    registry = REFERENCE_REGISTRY if registry is None else registry
    cleaned = str(symbol).strip()
    for known in registry:
        if known.lower() == cleaned.lower():
            return known
    return cleaned


def normalize_concentrations(concentrations: Mapping[str, float],
                             registry: Optional[Mapping[str, Metal]] = None) -> Dict[str, float]:
    """Re-key a concentration set by registry symbol.

    Raises
    ------
    InputError
        If two keys name the same metal, e.g. ``"Pb"`` and ``"pb"``.
    """
    normalized = {}
    spelled = {}
    for symbol, value in concentrations.items():
        key = normalize_symbol(symbol, registry)
        if key in normalized:
            raise InputError(
                f"Input contract violated: metal {key} given more than once "
                f"('{spelled[key]}', '{symbol}')"
            )
        normalized[key] = value
        spelled[key] = symbol
    return normalized
