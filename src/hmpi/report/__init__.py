"""Presentation helpers: rounding, report text, gauges and tables."""

from hmpi.report.formatting import (
    format_value,
    format_indices,
    gauge_percentage,
    report_lines,
    results_to_frame,
)

__all__ = [
    "format_value",
    "format_indices",
    "gauge_percentage",
    "report_lines",
    "results_to_frame",
]
