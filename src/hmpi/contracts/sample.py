"""Input contract.

Enforces the domain invariants of a concentration set before any index is
computed. Field-level checks (numeric parsing, non-empty sample ID) belong
to the caller and to :class:`hmpi.schemas.SampleMeta`.
"""

import math
import numbers
from typing import Iterable, Mapping

from hmpi.contracts.base import require
from hmpi.contracts.failure import InputError


def assert_valid_concentrations(concentrations: Mapping[str, float],
                                known_symbols: Iterable[str]) -> None:
    """Enforce the concentration set contract.

    Parameters
    ----------
    concentrations : Mapping[str, float]
        Sparse metal symbol -> concentration (mg/L).

    known_symbols : iterable of str
        Symbols present in the reference registry.

    Raises
    ------
    InputError
        If the set is empty, names an unknown metal, or holds a negative or
        non-finite concentration.
    """
    require(
        len(concentrations) > 0,
        "Input contract violated: at least one metal concentration is required",
        InputError,
    )

    known = set(known_symbols)
    for symbol, value in concentrations.items():
        require(
            symbol in known,
            f"Input contract violated: unknown metal symbol '{symbol}'",
            InputError,
        )
        require(
            isinstance(value, numbers.Real) and not isinstance(value, bool),
            f"Input contract violated: concentration of {symbol} is {value!r}, expected a number",
            InputError,
        )
        require(
            math.isfinite(value),
            f"Input contract violated: concentration of {symbol} is not finite ({value})",
            InputError,
        )
        require(
            value >= 0,
            f"Input contract violated: concentration of {symbol} is negative ({value})",
            InputError,
        )
