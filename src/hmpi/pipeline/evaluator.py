"""Single-sample evaluation pipeline.

Runs one sample through every stage, in order:

1. Symbol normalization and input contract (InputError before anything is computed)
2. Standards overlay: registry < config overrides < per-sample overrides
3. Index engine: seven indices at full precision
4. Classification: per-index levels and overall level
5. Result contract, then the immutable Result is returned

Any error aborts the whole evaluation; no partial Result exists.
"""

import logging
from typing import Mapping, Optional, TYPE_CHECKING

from hmpi.classification import WaterQualityClassifier
from hmpi.contracts import assert_result, assert_valid_concentrations
from hmpi.indices import IndexEngine
from hmpi.reference import StandardsOverlay, normalize_concentrations
from hmpi.schemas import Result, SampleInput, SampleMeta, resolve_config

if TYPE_CHECKING:
    from hmpi.schemas import InternalConfig

__all__ = ['SampleEvaluator', 'evaluate_sample']

logger = logging.getLogger(__name__)


class SampleEvaluator:
    """Evaluates samples against one resolved configuration.

    The evaluator holds no per-sample state, so a single instance may be
    shared by worker threads.

    Parameters
    ----------
    config : InternalConfig, optional
        Fully validated runtime configuration. Defaults to the expert
        defaults (no overrides).

    Examples
    --------
    >>> evaluator = SampleEvaluator()
    >>> sample = SampleInput(meta=SampleMeta(sample_id="WQ-001"),
    ...                      concentrations={"Pb": 0.02, "Cu": 1.0})
    >>> evaluator.evaluate(sample).PI
    1.25
    """

    def __init__(self, config: Optional["InternalConfig"] = None):
        self.config = resolve_config() if config is None else config
        self.classifier = WaterQualityClassifier()

    def evaluate(self, sample: SampleInput,
                 standards: Optional[Mapping[str, float]] = None,
                 ideals: Optional[Mapping[str, float]] = None,
                 hmpi_standards: Optional[Mapping[str, float]] = None,
                 hmpi_ideals: Optional[Mapping[str, float]] = None) -> Result:
        """Evaluate one sample.

        Parameters
        ----------
        sample : SampleInput
            Metadata plus sparse concentration set (mg/L).
        standards, ideals : Mapping[str, float], optional
            Per-sample overrides, applied on top of the config overrides.
        hmpi_standards, hmpi_ideals : Mapping[str, float], optional
            Extra overrides for the HMPI pass only. Without them HMPI is
            computed from the same standards as HPI and the two are equal.

        Raises
        ------
        InputError
            Invalid concentrations or overrides.
        ComputationError
            HPI/HMPI undefined because every measured metal has
            ``standard == ideal``.
        """
        overlay = StandardsOverlay.from_config(self.config)
        concentrations = normalize_concentrations(sample.concentrations, overlay.registry)
        assert_valid_concentrations(concentrations, overlay.registry)

        if standards or ideals:
            overlay.add_layer(standards, ideals)
        resolved = overlay.resolve()

        hmpi_resolved = None
        if hmpi_standards or hmpi_ideals:
            hmpi_resolved = overlay.add_layer(hmpi_standards, hmpi_ideals).resolve()

        engine = IndexEngine(resolved, hmpi_resolved)
        values = engine.compute(concentrations)
        classification = self.classifier.classify(values)

        result = Result.from_parts(
            values,
            classification,
            sample_id=sample.sample_id,
            measured_metals=sorted(concentrations),
            excluded_from_hpi=sorted(engine.exclusions(concentrations)),
            excluded_from_hmpi=sorted(
                engine.exclusions(concentrations, engine.hmpi_standards)
            ),
        )
        assert_result(result)

        logger.info("Sample %s: %d metal(s), HMPI=%.4g, overall=%s (binding %s)",
                    result.sample_id, len(concentrations), result.HMPI,
                    result.classification.value, result.binding_index.value)
        return result


def evaluate_sample(meta, concentrations: Mapping[str, float],
                    standards: Optional[Mapping[str, float]] = None,
                    ideals: Optional[Mapping[str, float]] = None,
                    config: Optional["InternalConfig"] = None) -> Result:
    """Convenience wrapper: evaluate one sample with a throwaway evaluator.

    ``meta`` may be a SampleMeta, a dict of its fields, or a bare sample ID.

    Examples
    --------
    >>> result = evaluate_sample("WQ-001", {"Pb": 0.02, "Cu": 1.0})
    >>> result.HEI, result.Cd
    (2.5, 1.0)
    """
    if isinstance(meta, str):
        meta = SampleMeta(sample_id=meta)
    elif not isinstance(meta, SampleMeta):
        meta = SampleMeta.model_validate(meta)

    sample = SampleInput(meta=meta, concentrations=dict(concentrations))
    return SampleEvaluator(config).evaluate(sample, standards=standards, ideals=ideals)
