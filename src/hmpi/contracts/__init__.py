"""Engine contracts: fail-fast enforcement of input and output invariants.

Key principle:
- Pydantic validates field and config correctness
- Contracts validate domain invariants (InputError) and engine output (ContractViolation)
- The index engine reports undefined indices (ComputationError)
"""

from hmpi.contracts.failure import (
    HmpiError,
    InputError,
    ComputationError,
    ContractViolation,
)
from hmpi.contracts.base import require
from hmpi.contracts.sample import assert_valid_concentrations
from hmpi.contracts.result import assert_result

__all__ = [
    "HmpiError",
    "InputError",
    "ComputationError",
    "ContractViolation",
    "require",
    "assert_valid_concentrations",
    "assert_result",
]
