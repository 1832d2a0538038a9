"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs with uppercase aliases
(e.g., STANDARDS → standards, DISPLAY_PRECISION → precision).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults. A user config file may also carry
the sample to evaluate (SAMPLE, CONCENTRATIONS); those keys are read by the
CLI runner and are not configuration overrides.
"""

from typing import Literal, Optional, Any
from pydantic import Field, field_validator
from hmpi.schemas.base import HmpiBaseModel


class UserOverlayConfig(HmpiBaseModel):
    """User-facing nested overlay config."""
    standards: Optional[dict[str, float]] = None
    ideals: Optional[dict[str, float]] = None


class UserConfig(HmpiBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(
            STANDARDS={"Pb": 0.015},
            DISPLAY_PRECISION=3,
        )

        internal = resolve_config(param_cfg, user_cfg)
    """

    # Standards overlay (flat aliases)
    standards: Optional[dict[str, float]] = Field(None, alias="STANDARDS")
    ideal_values: Optional[dict[str, float]] = Field(None, alias="IDEAL_VALUES")

    # Operational settings
    precision: Optional[int] = Field(None, alias="DISPLAY_PRECISION")
    max_workers: Optional[int] = Field(None, alias="MAX_WORKERS")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )

    # Sample carried by runner config files
    sample: Optional[dict[str, Any]] = Field(None, alias="SAMPLE")
    concentrations: Optional[dict[str, Optional[float]]] = Field(None, alias="CONCENTRATIONS")

    # Nested overrides (advanced users)
    overlay: Optional[UserOverlayConfig] = None

    model_config = HmpiBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept 'debug', ' Info ', etc."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("standards", "ideal_values", "concentrations", mode="before")
    @classmethod
    def strip_symbol_keys(cls, v):
        """Strip whitespace around metal symbols; values are left to pydantic."""
        if isinstance(v, dict):
            return {str(k).strip(): val for k, val in v.items()}
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Overlay section
        overlay = {}
        if self.standards is not None:
            overlay["standards"] = dict(self.standards)
        if self.ideal_values is not None:
            overlay["ideals"] = dict(self.ideal_values)

        # Merge with explicit overlay config
        if self.overlay is not None:
            nested = self.overlay.model_dump(exclude_none=True)
            for key, values in nested.items():
                overlay.setdefault(key, {}).update(values)

        if overlay:
            overrides["overlay"] = overlay

        if self.precision is not None:
            overrides["report"] = {"precision": self.precision}

        if self.max_workers is not None:
            overrides["batch"] = {"max_workers": self.max_workers}

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
