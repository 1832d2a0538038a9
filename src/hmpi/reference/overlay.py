"""Standards overlay: per-metal standard and ideal overrides.

The overlay stacks override layers on top of the reference registry
defaults. A later layer replaces an earlier value for the keys it names
only; every other metal keeps the value from below. Resolution yields a
total, immutable ResolvedStandards covering every registry metal.

Typical stacking order::

    registry defaults < config file overrides < per-sample overrides

All domain checks on overrides happen when a layer is added, so a zero
standard can never reach the index engine.
"""

import logging
import math
import numbers
from typing import Mapping, Optional, TYPE_CHECKING

from pydantic import Field

from hmpi.contracts import InputError, require
from hmpi.reference.registry import REFERENCE_REGISTRY, REGISTRY_VERSION, normalize_symbol
from hmpi.schemas.base import FrozenModel, ReadOnlyDict
from hmpi.schemas.metal import Metal

if TYPE_CHECKING:
    from hmpi.schemas import InternalConfig

__all__ = ['StandardsOverlay', 'ResolvedStandards']

logger = logging.getLogger(__name__)


class ResolvedStandards(FrozenModel):
    """Standard and ideal value for every registry metal (mg/L)."""
    standards: ReadOnlyDict[str, float]
    ideals: ReadOnlyDict[str, float]
    registry_version: str = REGISTRY_VERSION
    overridden: tuple[str, ...] = Field(default=(), description="Symbols changed by any layer")

    def standard(self, symbol: str) -> float:
        return self.standards[symbol]

    def ideal(self, symbol: str) -> float:
        return self.ideals[symbol]


class StandardsOverlay:
    """Merge caller overrides onto registry defaults.

    Parameters
    ----------
    standards : Mapping[str, float], optional
        First override layer for regulatory standards.
    ideals : Mapping[str, float], optional
        First override layer for ideal (background) values.
    registry : Mapping[str, Metal], optional
        Registry to resolve against. Defaults to the process-wide
        REFERENCE_REGISTRY.

    Raises
    ------
    InputError
        On unknown metal symbols, non-positive or non-finite standards, or
        negative or non-finite ideals.

    Examples
    --------
    >>> overlay = StandardsOverlay(standards={"Pb": 0.015})
    >>> overlay.add_layer(ideals={"Cu": 0.05})
    >>> resolved = overlay.resolve()
    >>> resolved.standard("Pb"), resolved.standard("Cu")
    (0.015, 2.0)
    """

    def __init__(self, standards: Optional[Mapping[str, float]] = None,
                 ideals: Optional[Mapping[str, float]] = None,
                 registry: Optional[Mapping[str, Metal]] = None):
        self.registry = REFERENCE_REGISTRY if registry is None else registry
        self._layers = []
        if standards or ideals:
            self.add_layer(standards, ideals)

    @classmethod
    def from_config(cls, config: "InternalConfig") -> "StandardsOverlay":
        """Overlay seeded with the overrides of a resolved configuration."""
        return cls(standards=config.overlay.standards, ideals=config.overlay.ideals)

    @property
    def layer_count(self) -> int:
        return len(self._layers)

    def add_layer(self, standards: Optional[Mapping[str, float]] = None,
                  ideals: Optional[Mapping[str, float]] = None) -> "StandardsOverlay":
        """Validate and push one override layer. Returns self for chaining."""
        layer_standards = {}
        for symbol, value in (standards or {}).items():
            key = self._known_symbol(symbol)
            self._check_number(key, "standard", value)
            require(
                value > 0,
                f"Standard for {key} must be > 0, got {value}",
                InputError,
            )
            layer_standards[key] = float(value)

        layer_ideals = {}
        for symbol, value in (ideals or {}).items():
            key = self._known_symbol(symbol)
            self._check_number(key, "ideal value", value)
            require(
                value >= 0,
                f"Ideal value for {key} must be >= 0, got {value}",
                InputError,
            )
            layer_ideals[key] = float(value)

        self._layers.append((layer_standards, layer_ideals))
        logger.debug("Overlay layer %d: %d standard(s), %d ideal(s)",
                     len(self._layers), len(layer_standards), len(layer_ideals))
        return self

    def resolve(self) -> ResolvedStandards:
        """Collapse registry defaults and all layers into ResolvedStandards."""
        standards = {s: m.standard for s, m in self.registry.items()}
        ideals = {s: m.ideal for s, m in self.registry.items()}
        overridden = set()

        for layer_standards, layer_ideals in self._layers:
            standards.update(layer_standards)
            ideals.update(layer_ideals)
            overridden.update(layer_standards)
            overridden.update(layer_ideals)

        for symbol in sorted(overridden):
            if ideals[symbol] > standards[symbol]:
                logger.warning(
                    "Ideal value of %s (%g mg/L) exceeds its standard (%g mg/L); "
                    "quality rating denominator is negative",
                    symbol, ideals[symbol], standards[symbol],
                )

        return ResolvedStandards(
            standards=standards,
            ideals=ideals,
            overridden=tuple(sorted(overridden)),
        )

    def _known_symbol(self, symbol: str) -> str:
        key = normalize_symbol(symbol, self.registry)
        require(
            key in self.registry,
            f"Override for unknown metal symbol '{symbol}'",
            InputError,
        )
        return key

    @staticmethod
    def _check_number(symbol: str, what: str, value) -> None:
        require(
            isinstance(value, numbers.Real) and not isinstance(value, bool),
            f"{what.capitalize()} for {symbol} must be a number, got {value!r}",
            InputError,
        )
        require(
            math.isfinite(value),
            f"{what.capitalize()} for {symbol} must be finite, got {value}",
            InputError,
        )
