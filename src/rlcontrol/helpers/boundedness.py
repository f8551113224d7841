"""
Validity checks for the scalars that drive off-policy updates. A single NaN or
infinite importance ratio or TD error poisons every weight it touches, so
these are checked right after they are computed and the step is aborted.
"""

import numpy as np

from ..errors import BoundednessError
from ..logging import get_logger

logger = get_logger(__name__)



def check_value(value: float, bound: float=np.inf, name: str='value') -> float:
    """
    Checks that a value is finite and no larger than `bound` in magnitude.

    Args:
    * value: The scalar to check.
    * bound: The largest allowed absolute value. Default infinity.
    * name: Name used in the error message.

    Returns:
    * `value`, if valid.

    Raises:
    * BoundednessError.
    """
    if not np.isfinite(value):
        _fail(name, value, 'is not finite')
    if abs(value) > bound:
        _fail(name, value, 'exceeds bound {}'.format(bound))
    return value



def check_ratio(value: float, bound: float=np.inf, name: str='rho') -> float:
    """
    Checks an importance sampling ratio: finite, non-negative and within
    `bound`.

    Raises:
    * BoundednessError.
    """
    check_value(value, bound, name)
    if value < 0:
        _fail(name, value, 'is negative')
    return value



def _fail(name: str, value: float, reason: str):
    error = BoundednessError(name, value, reason)
    logger.error(str(error))
    raise error
