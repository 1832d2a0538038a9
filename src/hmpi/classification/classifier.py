"""Map index values to quality levels and derive the overall level.

Overall rule: worst case wins. Indices are scanned in the fixed order
HMPI, HPI, HEI, PLI. The first index to reach a rank holds it; a later
index replaces it only with a strictly greater rank. On a tie the earliest
index is therefore reported as the binding one.
"""

import logging
from typing import Mapping

from hmpi.classification.thresholds import THRESHOLDS, as_index_name
from hmpi.contracts import InputError, require
from hmpi.schemas import Classification, IndexValues, IndexName, QualityLevel

__all__ = ['classify_value', 'classify_indices', 'WaterQualityClassifier']

logger = logging.getLogger(__name__)


def classify_value(index, value: float) -> QualityLevel:
    """Quality level of one index reading.

    Examples
    --------
    >>> classify_value("HEI", 12.0)
    <QualityLevel.ACCEPTABLE: 'Acceptable'>
    >>> classify_value("PLI", 5.0)
    <QualityLevel.CRITICAL: 'Critical'>
    """
    good, acceptable, poor = THRESHOLDS[as_index_name(index)]
    if value < good:
        return QualityLevel.GOOD
    if value < acceptable:
        return QualityLevel.ACCEPTABLE
    if value < poor:
        return QualityLevel.POOR
    return QualityLevel.CRITICAL


def classify_indices(values: Mapping) -> Classification:
    """Classify every index and pick the binding one.

    Parameters
    ----------
    values : Mapping
        Reading for each of HMPI, HPI, HEI and PLI, keyed by IndexName or
        its string value. Extra keys are rejected.

    Raises
    ------
    InputError
        On an unknown index name or a missing classified index.
    """
    readings = {as_index_name(k): float(v) for k, v in values.items()}
    missing = [i.value for i in IndexName if i not in readings]
    require(
        not missing,
        f"Cannot classify: missing reading for {', '.join(missing)}",
        InputError,
    )

    per_index = {}
    binding = None
    for index in IndexName:
        level = classify_value(index, readings[index])
        per_index[index] = level
        if binding is None or level.rank > per_index[binding].rank:
            binding = index

    logger.debug("Classification: %s -> %s (binding %s)",
                 {i.value: l.value for i, l in per_index.items()},
                 per_index[binding].value, binding.value)

    return Classification(
        per_index=per_index,
        overall=per_index[binding],
        binding_index=binding,
    )


class WaterQualityClassifier:
    """Classification stage of the evaluation pipeline."""

    def classify(self, values: IndexValues) -> Classification:
        return classify_indices(values.classified())
