"""Parallel evaluation of independent samples.

Each sample is a pure function of its own inputs plus the read-only
registry, so samples are evaluated concurrently in a thread pool with no
locking. A failing sample never produces placeholder numbers: it is
reported in ``failures`` with its error, and every other sample still
gets its Result.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, TYPE_CHECKING

from hmpi.contracts import HmpiError
from hmpi.pipeline.evaluator import SampleEvaluator
from hmpi.schemas import Result, SampleInput
from hmpi.schemas.base import FrozenModel

if TYPE_CHECKING:
    from hmpi.schemas import InternalConfig

__all__ = ['BatchEvaluator', 'BatchReport', 'SampleFailure', 'evaluate_batch']

logger = logging.getLogger(__name__)


class SampleFailure(FrozenModel):
    """Why one sample has no result."""
    sample_id: str
    error_type: str
    message: str


class BatchReport(FrozenModel):
    """Outcome of a batch: results and failures, both in input order."""
    results: tuple[Result, ...]
    failures: tuple[SampleFailure, ...]

    @property
    def total(self) -> int:
        return len(self.results) + len(self.failures)


class BatchEvaluator:
    """Evaluates many samples with a shared SampleEvaluator.

    Parameters
    ----------
    config : InternalConfig, optional
        Runtime configuration; ``config.batch.max_workers`` sizes the pool.
    max_workers : int, optional
        Overrides the configured pool size.
    """

    def __init__(self, config: Optional["InternalConfig"] = None,
                 max_workers: Optional[int] = None):
        self.evaluator = SampleEvaluator(config)
        self.max_workers = max_workers or self.evaluator.config.batch.max_workers

    def run(self, samples: Iterable[SampleInput]) -> BatchReport:
        samples = list(samples)
        logger.info("Evaluating %d sample(s) with %d worker(s)",
                    len(samples), self.max_workers)

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            outcomes = list(pool.map(self._evaluate_one, samples))

        results: List[Result] = []
        failures: List[SampleFailure] = []
        for outcome in outcomes:
            if isinstance(outcome, SampleFailure):
                failures.append(outcome)
            else:
                results.append(outcome)

        if failures:
            logger.warning("%d of %d sample(s) failed: %s", len(failures), len(samples),
                           ", ".join(f.sample_id for f in failures))
        return BatchReport(results=tuple(results), failures=tuple(failures))

    def _evaluate_one(self, sample: SampleInput):
        try:
            return self.evaluator.evaluate(sample)
        except HmpiError as e:
            logger.error("Sample %s: %s: %s", sample.sample_id, type(e).__name__, e)
            return SampleFailure(
                sample_id=sample.sample_id,
                error_type=type(e).__name__,
                message=str(e),
            )


def evaluate_batch(samples: Iterable[SampleInput],
                   config: Optional["InternalConfig"] = None,
                   max_workers: Optional[int] = None) -> BatchReport:
    """Evaluate independent samples concurrently.

    Examples
    --------
    >>> report = evaluate_batch([sample_a, sample_b])
    >>> [r.sample_id for r in report.results]
    ['A', 'B']
    """
    return BatchEvaluator(config, max_workers).run(samples)
