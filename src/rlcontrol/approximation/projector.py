"""
Implements the base Projector class. A projector maps an observation onto a
fixed-size feature vector.
"""

import numpy as np



class Projector:
    """
    Base class. Sub-classes implement `project` and `dimension`. Calling a
    projector is the same as calling `project`.
    """

    def project(self, x) -> np.ndarray:
        raise NotImplementedError


    def dimension(self) -> int:
        raise NotImplementedError


    def __call__(self, x) -> np.ndarray:
        return self.project(x)



class IdentityProjector(Projector):
    """
    Uses the observation itself as the feature vector.

    Args:
    * dimension: Number of variables in an observation.
    * bias: Whether to append a constant feature of 1.
    """

    def __init__(self, dimension: int, bias: bool=False):
        self.ninputs = dimension
        self.bias = bias


    def dimension(self) -> int:
        return self.ninputs + int(self.bias)


    def project(self, x) -> np.ndarray:
        x = np.asarray(x, dtype=float).ravel()
        return np.append(x, 1.) if self.bias else x.copy()
