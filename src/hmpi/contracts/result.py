"""Result contract.

Enforces the guarantee that a produced Result is well-formed: every index
finite, sums of non-negative terms non-negative, every classified index
has a level. We do NOT re-derive the numbers here.
"""

import math
from typing import TYPE_CHECKING

from hmpi.contracts.base import require

if TYPE_CHECKING:
    from hmpi.schemas import Result


def assert_result(result: "Result") -> None:
    """Enforce result contract.

    Called by the evaluator right before a Result is handed to the caller.

    Raises
    ------
    ContractViolation
        If structural requirements are violated
    """
    for name, value in result.indices().items():
        require(
            math.isfinite(value),
            f"Result contract violated: {name} is not finite ({value})"
        )

    for name in ("HEI", "Cd", "PI", "PLI", "HCI"):
        value = getattr(result, name)
        require(
            value >= 0,
            f"Result contract violated: {name} must be >= 0, got {value}"
        )

    missing = [i.value for i in type(result.binding_index) if i not in result.per_index_level]
    require(
        not missing,
        f"Result contract violated: no level for {', '.join(missing)}"
    )
    require(
        result.per_index_level[result.binding_index] == result.classification,
        "Result contract violated: overall level differs from the binding index level"
    )
