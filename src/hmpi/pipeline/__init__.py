"""Pipeline modules.

- evaluator: one sample through overlay, indices and classification
- batch: concurrent evaluation of independent samples
"""

from hmpi.pipeline.evaluator import SampleEvaluator, evaluate_sample
from hmpi.pipeline.batch import BatchEvaluator, BatchReport, SampleFailure, evaluate_batch

__all__ = [
    "SampleEvaluator",
    "evaluate_sample",
    "BatchEvaluator",
    "BatchReport",
    "SampleFailure",
    "evaluate_batch",
]
