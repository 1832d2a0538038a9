"""Error taxonomy for the index engine.

Every failure is terminal for the single sample being evaluated. Nothing
is retried and no partial result is ever returned.

Key distinction:
- InputError: bad sample or override data, detected before computing
- ComputationError: an index is undefined for the data that survived validation
- ContractViolation: the engine produced something it promised not to (bug)
"""


class HmpiError(Exception):
    """Base class for all errors raised by ``hmpi``."""


class InputError(HmpiError, ValueError):
    """Raised when a sample, concentration set or override is invalid.

    Examples: empty concentration set, unknown metal symbol, negative
    concentration, non-positive standard, unknown index identifier.
    """


class ComputationError(HmpiError, ArithmeticError):
    """Raised when an index cannot be computed from validated inputs.

    The typical case is HPI/HMPI where every measured metal has
    ``standard == ideal`` and is therefore excluded from the aggregate.
    """


class ContractViolation(RuntimeError):
    """Raised when a produced result breaks a documented invariant.

    This indicates a bug in engine logic, not bad user input.
    """
    pass
