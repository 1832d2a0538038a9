"""Sample input schemas.

SampleMeta carries the descriptive fields the caller collects before
invoking the engine. Field-level validation (non-empty ID, coordinate
ranges) happens here, at construction time, and raises pydantic's
``ValidationError``.

Concentrations are only type-checked here. Domain rules (non-empty set,
known symbols, non-negative values) are enforced by
:func:`hmpi.contracts.assert_valid_concentrations` so that they surface
as ``InputError`` just before computation.
"""

from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from hmpi.schemas.base import FrozenModel, ReadOnlyDict


class SampleMeta(FrozenModel):
    """Descriptive metadata of one water sample.

    Examples
    --------
    >>> SampleMeta(sample_id="WQ-001", latitude=40.7128, longitude=-74.006)
    """
    sample_id: str = Field(min_length=1, alias="sampleId")
    latitude: Optional[float] = Field(None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(None, ge=-180.0, le=180.0)
    well_depth: Optional[float] = Field(None, ge=0.0, alias="wellDepth")
    sampling_date: Optional[date] = Field(None, alias="samplingDate")

    model_config = FrozenModel.model_config.copy()
    model_config.update({"populate_by_name": True})

    @field_validator("latitude", "longitude", "well_depth", "sampling_date", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Form fields left empty arrive as ``""``; treat them as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SampleInput(FrozenModel):
    """A sample's metadata plus its sparse concentration set (mg/L).

    Metals that were not measured are absent from ``concentrations``;
    they are never filled with zero.
    """
    meta: SampleMeta
    concentrations: ReadOnlyDict[str, float]

    model_config = FrozenModel.model_config.copy()
    # non-finite values are reported by the input contract as InputError
    model_config.update({"allow_inf_nan": True})

    @property
    def sample_id(self) -> str:
        return self.meta.sample_id
