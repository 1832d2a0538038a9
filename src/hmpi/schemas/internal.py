"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains NO optional fields that processing code depends on.
"""

from typing import Literal
from pydantic import Field, ConfigDict
from hmpi.schemas.base import HmpiBaseModel, ReadOnlyDict


class InternalOverlayConfig(HmpiBaseModel):
    """Runtime standards/ideal overrides (symbol -> mg/L)."""
    standards: ReadOnlyDict[str, float]
    ideals: ReadOnlyDict[str, float]


class InternalReportConfig(HmpiBaseModel):
    """Runtime presentation settings."""
    precision: int = Field(ge=0, le=10)


class InternalBatchConfig(HmpiBaseModel):
    """Runtime batch settings."""
    max_workers: int = Field(ge=1, le=64)


class InternalLoggingConfig(HmpiBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InternalConfig(HmpiBaseModel):
    """Authoritative runtime configuration.

    Usage
    -----
    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.precision = config.report.precision  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation

    All of that happens during config resolution, not in runtime code.
    """

    overlay: InternalOverlayConfig
    report: InternalReportConfig
    batch: InternalBatchConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=True,
        allow_inf_nan=False,
        frozen=True,  # Immutable after construction
    )
