"""Quality thresholds per classified index.

Each index maps to three ascending upper bounds (exclusive). A value below
the first bound is Good, below the second Acceptable, below the third
Poor, and anything else Critical.

Level descriptions and guidance are the wording shown next to each level
in the sample report.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from hmpi.contracts import InputError
from hmpi.schemas.levels import IndexName, QualityLevel

__all__ = [
    'THRESHOLDS',
    'LEVEL_DESCRIPTIONS',
    'LEVEL_GUIDANCE',
    'GAUGE_MAXIMUM',
    'as_index_name',
    'thresholds_for',
]

THRESHOLDS: Mapping[IndexName, Tuple[float, float, float]] = MappingProxyType({
    IndexName.HMPI: (25.0, 50.0, 100.0),
    IndexName.HPI: (25.0, 50.0, 100.0),
    IndexName.HEI: (10.0, 20.0, 40.0),
    IndexName.PLI: (1.0, 2.0, 5.0),
})

LEVEL_DESCRIPTIONS: Mapping[QualityLevel, str] = MappingProxyType({
    QualityLevel.GOOD: "Water quality is excellent for consumption",
    QualityLevel.ACCEPTABLE: "Water quality is acceptable with minor concerns",
    QualityLevel.POOR: "Water quality is poor and requires treatment",
    QualityLevel.CRITICAL: "Water quality is critical and unsafe for consumption",
})

LEVEL_GUIDANCE: Mapping[QualityLevel, str] = MappingProxyType({
    QualityLevel.GOOD: "Safe for consumption",
    QualityLevel.ACCEPTABLE: "Monitor regularly",
    QualityLevel.POOR: "Treatment required",
    QualityLevel.CRITICAL: "Immediate action needed",
})

# Full-scale value of the report gauge per index
GAUGE_MAXIMUM: Mapping[IndexName, float] = MappingProxyType({
    IndexName.HMPI: 150.0,
    IndexName.HPI: 150.0,
    IndexName.HEI: 150.0,
    IndexName.PLI: 10.0,
})


def as_index_name(index) -> IndexName:
    """Coerce ``"HPI"`` or ``IndexName.HPI`` to IndexName.

    Raises
    ------
    InputError
        If ``index`` is not one of the classified indices.
    """
    try:
        return IndexName(index)
    except ValueError:
        raise InputError(
            f"Unknown index '{index}'; classified indices are "
            f"{', '.join(i.value for i in IndexName)}"
        ) from None


def thresholds_for(index) -> Tuple[float, float, float]:
    return THRESHOLDS[as_index_name(index)]


def _check_table() -> None:
    missing = set(IndexName) - set(THRESHOLDS)
    if missing:
        raise RuntimeError(f"No thresholds for {sorted(i.value for i in missing)}")
    for index, bounds in THRESHOLDS.items():
        if len(bounds) != 3 or not bounds[0] < bounds[1] < bounds[2]:
            raise RuntimeError(f"Thresholds for {index.value} must be 3 ascending bounds: {bounds}")


_check_table()
