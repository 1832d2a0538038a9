# src/hmpi/indices/engine.py
"""Compute heavy-metal pollution indices for one sample.

The engine turns a sparse concentration set plus resolved standards into
seven indices:

- HPI  : weighted mean of quality ratings, weights ``W = K / S``
- HMPI : same weighted construction as HPI, exposed as the headline score
- HEI  : sum of ``C / S``
- HCI  : HEI divided by the number of measured metals
- Cd   : sum of positive excesses ``max(C / S - 1, 0)``
- PI   : arithmetic mean of ``C / S``
- PLI  : geometric mean of ``C / S`` (zero if any ratio is zero)

Only measured metals take part in any formula. Metals whose standard
equals their ideal value have an undefined quality rating and are dropped
from the HPI/HMPI aggregate; if nothing remains, those two indices raise
ComputationError while the others still compute.

The engine is pure: no I/O, no shared mutable state. One instance may be
used from several threads at once.
"""

import logging
from typing import Mapping, Optional, Tuple

import numpy as np

from hmpi.contracts import ComputationError, require
from hmpi.indices.index_utils import (
    aligned_arrays,
    concentration_ratios,
    geometric_mean,
    quality_ratings,
    unit_weights,
)
from hmpi.reference.overlay import ResolvedStandards
from hmpi.schemas import IndexValues

__all__ = ['IndexEngine']

logger = logging.getLogger(__name__)


class IndexEngine:
    """Pure computation of the seven indices.

    Parameters
    ----------
    standards : ResolvedStandards
        Standards and ideals used for every index.
    hmpi_standards : ResolvedStandards, optional
        Separate standards for the HMPI pass. When omitted HMPI uses
        ``standards`` and ``HPI == HMPI`` holds exactly.

    Examples
    --------
    >>> engine = IndexEngine(StandardsOverlay().resolve())
    >>> values = engine.compute({"Pb": 0.02, "Cu": 1.0})
    >>> values.HEI, values.Cd, values.PI, values.PLI
    (2.5, 1.0, 1.25, 1.0)
    """

    def __init__(self, standards: ResolvedStandards,
                 hmpi_standards: Optional[ResolvedStandards] = None):
        self.standards = standards
        self.hmpi_standards = standards if hmpi_standards is None else hmpi_standards

    def compute(self, concentrations: Mapping[str, float]) -> IndexValues:
        """Compute all seven indices.

        Raises
        ------
        ComputationError
            If the set is empty, or HPI/HMPI have no metal with
            ``standard != ideal``.
        """
        values = IndexValues(
            HPI=self.hpi(concentrations),
            HEI=self.hei(concentrations),
            HMPI=self.hmpi(concentrations),
            HCI=self.hci(concentrations),
            Cd=self.cd(concentrations),
            PI=self.pi(concentrations),
            PLI=self.pli(concentrations),
        )
        logger.debug("Indices over %d metal(s): %s", len(concentrations), values.model_dump())
        return values

    # ------------------------------------------------------------------
    # Weighted indices
    # ------------------------------------------------------------------

    def hpi(self, concentrations: Mapping[str, float]) -> float:
        """Heavy-metal Pollution Index."""
        return self._weighted_index("HPI", concentrations, self.standards)

    def hmpi(self, concentrations: Mapping[str, float]) -> float:
        """Heavy Metal Pollution Index, the headline composite score."""
        return self._weighted_index("HMPI", concentrations, self.hmpi_standards)

    def exclusions(self, concentrations: Mapping[str, float],
                   standards: Optional[ResolvedStandards] = None) -> Tuple[str, ...]:
        """Measured metals dropped from a weighted index because ``standard == ideal``.

        Checked against ``standards``, by default the HPI standards.
        """
        standards = self.standards if standards is None else standards
        return tuple(
            s for s in concentrations
            if standards.standard(s) == standards.ideal(s)
        )

    def _weighted_index(self, label: str, concentrations: Mapping[str, float],
                        standards: ResolvedStandards) -> float:
        symbols, c, s, i = self._arrays(label, concentrations, standards)

        # weights are normalized over every measured metal, before exclusion
        weights = unit_weights(s)
        defined = s != i

        excluded = [sym for sym, ok in zip(symbols, defined) if not ok]
        if excluded:
            logger.debug("%s: excluding %s (standard equals ideal value)",
                         label, ", ".join(excluded))

        require(
            bool(np.any(defined)),
            f"{label} is undefined: every measured metal has standard == ideal "
            f"({', '.join(excluded)})",
            ComputationError,
        )

        q = quality_ratings(c[defined], s[defined], i[defined])
        w = weights[defined]
        return float(np.sum(w * q) / np.sum(w))

    # ------------------------------------------------------------------
    # Ratio indices
    # ------------------------------------------------------------------

    def hei(self, concentrations: Mapping[str, float]) -> float:
        """Heavy-metal Evaluation Index, ``sum(C / S)``."""
        return float(np.sum(self._ratios("HEI", concentrations)))

    def hci(self, concentrations: Mapping[str, float]) -> float:
        """Heavy-metal Contamination Index, ``sum(C / S) / n``."""
        ratios = self._ratios("HCI", concentrations)
        return float(np.sum(ratios) / ratios.size)

    def cd(self, concentrations: Mapping[str, float]) -> float:
        """Degree of contamination; only metals above their standard count."""
        ratios = self._ratios("Cd", concentrations)
        return float(np.sum(np.maximum(ratios - 1.0, 0.0)))

    def pi(self, concentrations: Mapping[str, float]) -> float:
        """Pollution Index, ``mean(C / S)``."""
        return float(np.mean(self._ratios("PI", concentrations)))

    def pli(self, concentrations: Mapping[str, float]) -> float:
        """Pollution Load Index, geometric mean of ``C / S``."""
        return geometric_mean(self._ratios("PLI", concentrations))

    def _ratios(self, label: str, concentrations: Mapping[str, float]) -> np.ndarray:
        _, c, s, _ = self._arrays(label, concentrations, self.standards)
        return concentration_ratios(c, s)

    @staticmethod
    def _arrays(label: str, concentrations: Mapping[str, float],
                standards: ResolvedStandards):
        require(
            len(concentrations) > 0,
            f"{label} is undefined: no measured metals",
            ComputationError,
        )
        return aligned_arrays(concentrations, standards.standards, standards.ideals)
