"""
Defines the exceptions raised by learners, predictors, and policies. Failures
are never recovered locally: they are raised at the offending call and left to
the driver to handle.

* `NotInitializedError`: a component was used before `initialize()`.
* `DimensionMismatchError`: parameter blocks and traces/persisted vectors
disagree in number or size.
* `PolicyInvariantError`: a policy sampled an action it assigned zero
probability.
* `BoundednessError`: an importance ratio or TD error is not a finite, in-bound
number.
"""



class RLControlError(Exception):
    """
    Base class for all errors raised by `rlcontrol`.
    """



class NotInitializedError(RLControlError, RuntimeError):
    pass



class DimensionMismatchError(RLControlError, ValueError):
    pass



class PolicyInvariantError(RLControlError, RuntimeError):
    pass



class BoundednessError(RLControlError, ArithmeticError):
    """
    Raised when a scalar driving an update (importance ratio, TD error) is NaN,
    infinite, negative where it must not be, or larger in magnitude than the
    configured bound.

    Args:
    * name: The name of the offending quantity, e.g. 'rho_t'.
    * value: The offending value.
    """

    def __init__(self, name: str, value: float, reason: str):
        self.name = name
        self.value = value
        super().__init__('{} = {!r} {}'.format(name, value, reason))
