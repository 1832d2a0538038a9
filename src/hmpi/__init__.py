"""`hmpi` - Heavy-metal pollution indices for water samples.

Turns a sample's measured heavy-metal concentrations, reference standards
and ideal values into seven pollution indices (HPI, HEI, HMPI, HCI, Cd,
PI, PLI) and an overall water-quality classification.

Subpackages:
- reference: Metal registry and standards overlay
- indices: Index engine
- classification: Quality thresholds and overall level
- pipeline: Single-sample and batch evaluation
- report: Rounding, report text, tables
"""

__version__ = "0.1.0"

from hmpi.contracts import InputError, ComputationError
from hmpi.pipeline import evaluate_sample, evaluate_batch, SampleEvaluator
from hmpi.schemas import SampleMeta, SampleInput, Result, QualityLevel, IndexName

__all__ = [
    "InputError",
    "ComputationError",
    "evaluate_sample",
    "evaluate_batch",
    "SampleEvaluator",
    "SampleMeta",
    "SampleInput",
    "Result",
    "QualityLevel",
    "IndexName",
]
