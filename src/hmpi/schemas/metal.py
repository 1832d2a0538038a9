"""Metal reference schema."""

from enum import Enum

from pydantic import Field

from hmpi.schemas.base import FrozenModel


class MetalCategory(str, Enum):
    """Informational grouping of metals. Formulas treat all categories alike."""
    TOXIC = "toxic"
    ESSENTIAL = "essential"
    TRACE = "trace"


class Metal(FrozenModel):
    """A registry entry. Concentrations, standard and ideal are in mg/L."""
    symbol: str = Field(min_length=1)
    name: str = Field(min_length=1)
    standard: float = Field(gt=0, description="Maximum permissible concentration (mg/L)")
    ideal: float = Field(ge=0, description="Natural background concentration (mg/L)")
    category: MetalCategory
