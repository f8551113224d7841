"""
Implements a polynomial feature projection.
"""

import numpy as np
from sklearn.preprocessing import PolynomialFeatures

from .projector import Projector



class PolynomialProjector(Projector):
    """
    Expands an observation into all monomials of its variables up to `order`.
    For e.g. with order 2 and variables (x, y): [1, x, y, x^2, xy, y^2].

    Args:
    * order (int): The order of the polynomial (>=1).
    * ninputs (int): Number of variables in an observation.
    * bias (bool): Whether to include the constant term.
    """

    def __init__(self, order: int, ninputs: int, bias: bool=True):
        self.order = order
        self.ninputs = ninputs
        self.transformer = PolynomialFeatures(degree=order, include_bias=bias)
        # fitting only records the number of inputs and output powers
        self.transformer.fit(np.zeros((1, ninputs)))


    def dimension(self) -> int:
        return int(self.transformer.n_output_features_)


    def project(self, x) -> np.ndarray:
        x = np.asarray(x, dtype=float).reshape(1, -1)
        return self.transformer.transform(x).ravel()
