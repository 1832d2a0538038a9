"""Presentation of engine results.

The engine returns full-precision floats; rounding happens here and only
here, at display or export time. Output is either text lines (for the CLI
runner and logs) or a pandas DataFrame with one row per sample (for
export collaborators).
"""

import logging
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from hmpi.classification import GAUGE_MAXIMUM, LEVEL_DESCRIPTIONS, LEVEL_GUIDANCE
from hmpi.classification.thresholds import as_index_name
from hmpi.schemas import IndexName, Result
from hmpi.schemas.result import INDEX_FIELDS

__all__ = [
    'format_value',
    'format_indices',
    'gauge_percentage',
    'report_lines',
    'results_to_frame',
]

logger = logging.getLogger(__name__)

INDEX_LABELS = {
    "HPI": "Heavy Metal Pollution Index",
    "HEI": "Heavy Metal Evaluation Index",
    "HMPI": "Heavy Metal Pollution Index",
    "HCI": "Heavy Metal Contamination Index",
    "Cd": "Degree of Contamination",
    "PI": "Pollution Index",
    "PLI": "Pollution Load Index",
}


def format_value(value: float, precision: int = 2) -> str:
    """Fixed-point text with ``precision`` decimals, e.g. ``75.50``."""
    return f"{value:.{precision}f}"


def format_indices(result: Result, precision: int = 2) -> dict:
    """The seven indices as display strings keyed by their stable names."""
    return {name: format_value(value, precision) for name, value in result.indices().items()}


def gauge_percentage(index, value: float) -> float:
    """Fill of the report gauge for a classified index, capped at 100.

    Full scale is 10 for PLI and 150 for the other indices. There is no
    lower cap: a negative HPI or HMPI gives a negative fill.
    """
    maximum = GAUGE_MAXIMUM[as_index_name(index)]
    return float(np.minimum(value / maximum * 100.0, 100.0))


def report_lines(result: Result, precision: int = 2) -> List[str]:
    """Human-readable report for one result."""
    overall = result.classification
    lines = [
        f"Sample: {result.sample_id or '-'}",
        f"Measured metals: {', '.join(result.measured_metals) or '-'}",
    ]
    if result.excluded_from_hpi == result.excluded_from_hmpi:
        excluded = [("HPI/HMPI", result.excluded_from_hpi)]
    else:
        excluded = [("HPI", result.excluded_from_hpi), ("HMPI", result.excluded_from_hmpi)]
    for label, symbols in excluded:
        if symbols:
            lines.append(f"Excluded from {label} (standard = ideal): {', '.join(symbols)}")

    lines.append("")
    for name, text in format_indices(result, precision).items():
        lines.append(f"  {name:<5} {text:>12}  {INDEX_LABELS[name]}")

    lines.append("")
    lines.append(f"Water quality: {overall.value} - {LEVEL_DESCRIPTIONS[overall]}")
    lines.append(f"Binding index: {result.binding_index.value}")
    for index in IndexName:
        level = result.per_index_level[index]
        value = getattr(result, index.value)
        lines.append(
            f"  {index.value:<5} {level.value:<10} {gauge_percentage(index, value):5.1f}%  "
            f"{LEVEL_GUIDANCE[level]}"
        )
    return lines


def results_to_frame(results: Iterable[Result], precision: Optional[int] = None) -> pd.DataFrame:
    """Tabulate results, one row per sample.

    Columns: ``sample_id``, the seven indices, ``classification``,
    ``binding_index``, ``<INDEX>_level`` for each classified index, and
    ``measured_metals`` (comma-joined). When ``precision`` is given, index
    columns are rounded for export; otherwise full precision is kept.
    """
    rows = []
    for result in results:
        row = {"sample_id": result.sample_id}
        row.update(result.indices())
        row["classification"] = result.classification.value
        row["binding_index"] = result.binding_index.value
        for index in IndexName:
            row[f"{index.value}_level"] = result.per_index_level[index].value
        row["measured_metals"] = ",".join(result.measured_metals)
        rows.append(row)

    columns = (["sample_id", *INDEX_FIELDS, "classification", "binding_index"]
               + [f"{i.value}_level" for i in IndexName] + ["measured_metals"])
    df = pd.DataFrame(rows, columns=columns)

    if precision is not None:
        df[list(INDEX_FIELDS)] = df[list(INDEX_FIELDS)].round(precision)

    logger.debug("Tabulated %d result(s)", len(df))
    return df
