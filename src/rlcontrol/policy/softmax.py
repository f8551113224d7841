"""
Boltzmann (softmax) policies.
"""

from typing import Union

import numpy as np
from numpy.random import RandomState
from scipy.special import softmax

from ..actions import Action, ActionList
from ..approximation import Predictor, Representations, Vectors
from .greedy import Greedy
from .policy import PolicyDistribution



class SoftMax(Greedy):
    """
    Selects actions with probability proportional to `exp(Q(s, a) / temperature)`.

    Args:
    * predictor: Predicts the value of state-action features.
    * actions: The list of discrete actions.
    * temperature: Higher values flatten the distribution. Must be positive.
    * random_state: Integer seed or `np.random.RandomState` instance.
    """

    def __init__(self, predictor: Predictor, actions: ActionList, temperature: float=1.,\
        random_state: Union[int, RandomState]=None):
        if temperature <= 0:
            raise ValueError('temperature must be positive, got {}.'.format(temperature))
        super().__init__(predictor, actions, random_state)
        self.temperature = temperature


    def compute_probabilities(self, representations: Representations) -> np.ndarray:
        return softmax(self.action_values(representations) / self.temperature)



class BoltzmannDistribution(PolicyDistribution):
    """
    A linear softmax policy, `pi(a) ~ exp(u . phi(s, a))`, with a single
    parameter block `u`. The gradient of its log-probability is

        grad log pi(a) = phi(s, a) - sum_b pi(b) phi(s, b)

    Args:
    * actions: The list of discrete actions.
    * dimension: Size of the state-action feature vectors.
    * random_state: Integer seed or `np.random.RandomState` instance.
    """

    def __init__(self, actions: ActionList, dimension: int,\
        random_state: Union[int, RandomState]=None):
        super().__init__(actions, random_state)
        self.u = Vectors((dimension,))
        self.grad_log = Vectors((dimension,))
        self.expected = np.zeros(dimension)


    def parameters(self) -> Vectors:
        return self.u


    def compute_probabilities(self, representations: Representations) -> np.ndarray:
        return softmax(representations.features.dot(self.u[0]))


    def compute_grad_log(self, representations: Representations, action: Action) -> Vectors:
        probs = self.compute_probabilities(representations)
        np.dot(probs, representations.features, out=self.expected)
        np.subtract(representations[action], self.expected, out=self.grad_log[0])
        return self.grad_log
