"""
The uniformly random policy, typically used as an exploratory behaviour.
"""

import numpy as np

from ..approximation import Representations
from .policy import Policy



class Uniform(Policy):
    """
    Every action is equally likely in every state.
    """

    def compute_probabilities(self, representations: Representations) -> np.ndarray:
        return np.full(len(self.actions), 1. / len(self.actions))
