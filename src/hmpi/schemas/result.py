"""Engine output schemas.

All three models are frozen: once the pipeline returns a Result it is owned
by the caller and never changes. Numeric fields carry full float precision;
rounding is a presentation concern (see :mod:`hmpi.report`).

Field names ``HPI, HEI, HMPI, HCI, Cd, PI, PLI, classification`` are the
stable output contract consumed by display and export components.
"""

from typing import Optional

from pydantic import Field

from hmpi.schemas.base import FrozenModel, ReadOnlyDict
from hmpi.schemas.levels import IndexName, QualityLevel

INDEX_FIELDS = ("HPI", "HEI", "HMPI", "HCI", "Cd", "PI", "PLI")


class IndexValues(FrozenModel):
    """The seven numeric indices of one sample."""
    HPI: float
    HEI: float = Field(ge=0)
    HMPI: float
    HCI: float = Field(ge=0)
    Cd: float = Field(ge=0)
    PI: float = Field(ge=0)
    PLI: float = Field(ge=0)

    def classified(self) -> dict[IndexName, float]:
        """Values of the classified indices, in scan order."""
        return {name: getattr(self, name.value) for name in IndexName}


class Classification(FrozenModel):
    """Per-index levels plus the overall level and the index that set it."""
    per_index: ReadOnlyDict[IndexName, QualityLevel]
    overall: QualityLevel
    binding_index: IndexName


class Result(FrozenModel):
    """Immutable record of one evaluation.

    Examples
    --------
    >>> result = evaluate_sample(meta, {"Pb": 0.02, "Cu": 1.0})
    >>> result.HEI
    2.5
    >>> result.classification
    <QualityLevel.ACCEPTABLE: 'Acceptable'>
    """
    HPI: float
    HEI: float
    HMPI: float
    HCI: float
    Cd: float
    PI: float
    PLI: float
    classification: QualityLevel
    per_index_level: ReadOnlyDict[IndexName, QualityLevel]
    binding_index: IndexName
    sample_id: Optional[str] = None
    measured_metals: tuple[str, ...] = ()
    excluded_from_hpi: tuple[str, ...] = ()
    excluded_from_hmpi: tuple[str, ...] = ()

    @classmethod
    def from_parts(cls, values: IndexValues, classification: Classification,
                   sample_id: Optional[str] = None,
                   measured_metals: tuple = (),
                   excluded_from_hpi: tuple = (),
                   excluded_from_hmpi: tuple = ()) -> "Result":
        return cls(
            **values.model_dump(),
            classification=classification.overall,
            per_index_level=dict(classification.per_index),
            binding_index=classification.binding_index,
            sample_id=sample_id,
            measured_metals=tuple(measured_metals),
            excluded_from_hpi=tuple(excluded_from_hpi),
            excluded_from_hmpi=tuple(excluded_from_hmpi),
        )

    def indices(self) -> dict[str, float]:
        """The seven numeric indices keyed by their stable names."""
        return {name: getattr(self, name) for name in INDEX_FIELDS}
