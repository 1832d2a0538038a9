"""Closed enumerations shared by the classifier and the result schema."""

from enum import Enum


class QualityLevel(str, Enum):
    """Ordinal water-quality level. Member order is the rank order."""
    GOOD = "Good"
    ACCEPTABLE = "Acceptable"
    POOR = "Poor"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        """Good=0 < Acceptable=1 < Poor=2 < Critical=3."""
        return _RANKS[self]


_RANKS = {level: i for i, level in enumerate(QualityLevel)}


class IndexName(str, Enum):
    """Indices that carry a quality classification.

    Declaration order is the scan order used for the overall level.
    """
    HMPI = "HMPI"
    HPI = "HPI"
    HEI = "HEI"
    PLI = "PLI"
