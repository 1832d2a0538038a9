"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for all contracts,
input checks included.
"""

from typing import Type

from hmpi.contracts.failure import ContractViolation


def require(condition: bool, message: str,
            error: Type[Exception] = ContractViolation) -> None:
    """Enforce an invariant.

    Fail-fast: no recovery, no fallback, no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.

    message : str
        Error message explaining the violation.

    error : type, optional
        Exception class to raise. Defaults to ContractViolation; input
        checks pass InputError, engine checks pass ComputationError.

    Raises
    ------
    Exception
        Instance of ``error`` if condition is False.

    Examples
    --------
    >>> require(len(concentrations) > 0, "No measured metals", InputError)
    >>> require(result.HEI >= 0, "Result contract: HEI is negative")
    """
    if not condition:
        raise error(message)
