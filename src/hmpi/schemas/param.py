"""ParamConfig: Expert defaults for the hmpi engine.

This module defines the complete default configuration. Every tunable
parameter must have a default here; no runtime code defines fallback values.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.

Reference standards and ideal values are NOT configured here: their defaults
live in the reference registry, and the overlay sections below only hold
overrides on top of it.
"""

from typing import Literal
from pydantic import Field
from hmpi.schemas.base import HmpiBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class OverlayConfig(HmpiBaseModel):
    """Per-metal overrides applied on top of the reference registry."""
    standards: dict[str, float] = Field(default_factory=dict)
    ideals: dict[str, float] = Field(default_factory=dict)


class ReportConfig(HmpiBaseModel):
    """Presentation settings. The engine itself never rounds."""
    precision: int = Field(2, ge=0, le=10, description="Decimal places shown")


class BatchConfig(HmpiBaseModel):
    """Parallel evaluation of independent samples."""
    max_workers: int = Field(4, ge=1, le=64)


class LoggingConfig(HmpiBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(HmpiBaseModel):
    """Complete expert configuration with all defaults.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg)
    """

    overlay: OverlayConfig = Field(default_factory=OverlayConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
