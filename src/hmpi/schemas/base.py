"""Base Pydantic model with strict defaults for hmpi schemas.

All hmpi schemas inherit from this base to ensure consistent validation
behavior across sample, reference, result and configuration models.
"""

from types import MappingProxyType
from typing import Annotated, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, WrapSerializer


class HmpiBaseModel(BaseModel):
    """Base model for all hmpi schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Rejects NaN and infinity in float fields
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',            # Reject unknown fields
        validate_assignment=True,  # Validate on field mutation
        use_enum_values=False,     # Keep enum members (levels carry a rank)
        str_strip_whitespace=True, # Strip whitespace from strings
        allow_inf_nan=False,       # Concentrations and indices are finite
    )


class FrozenModel(HmpiBaseModel):
    """Immutable variant for values shared across computations."""

    model_config = ConfigDict(
        extra='forbid',
        use_enum_values=False,
        str_strip_whitespace=True,
        allow_inf_nan=False,
        frozen=True,
    )


def _read_only(value):
    return MappingProxyType(value)


def _as_plain_dict(value, handler):
    return handler(dict(value))


K = TypeVar("K")
V = TypeVar("V")

# Mapping field of a frozen model: validated as a dict, stored read-only,
# dumped back as a plain dict.
ReadOnlyDict = Annotated[
    dict[K, V],
    AfterValidator(_read_only),
    WrapSerializer(_as_plain_dict),
]
