"""Water-quality classification.

- thresholds: fixed per-index threshold table and level wording
- classifier: per-index levels and worst-case overall level
"""

from hmpi.classification.thresholds import (
    THRESHOLDS,
    LEVEL_DESCRIPTIONS,
    LEVEL_GUIDANCE,
    GAUGE_MAXIMUM,
    thresholds_for,
)
from hmpi.classification.classifier import (
    classify_value,
    classify_indices,
    WaterQualityClassifier,
)

__all__ = [
    "THRESHOLDS",
    "LEVEL_DESCRIPTIONS",
    "LEVEL_GUIDANCE",
    "GAUGE_MAXIMUM",
    "thresholds_for",
    "classify_value",
    "classify_indices",
    "WaterQualityClassifier",
]
