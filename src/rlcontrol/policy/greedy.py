"""
Policies derived from an action-value predictor.
"""

from typing import Union

import numpy as np
from numpy.random import RandomState

from ..actions import ActionList
from ..approximation import Predictor, Representations
from .policy import Policy



class Greedy(Policy):
    """
    Always takes the action with the highest value. Ties go to the lowest id.

    Args:
    * predictor: Predicts the value of state-action features.
    * actions: The list of discrete actions.
    * random_state: Integer seed or `np.random.RandomState` instance.
    """

    def __init__(self, predictor: Predictor, actions: ActionList,\
        random_state: Union[int, RandomState]=None):
        super().__init__(actions, random_state)
        self.predictor = predictor


    def action_values(self, representations: Representations) -> np.ndarray:
        return np.array([self.predictor.predict(representations[a]) \
                        for a in self.actions])


    def compute_probabilities(self, representations: Representations) -> np.ndarray:
        probs = np.zeros(len(self.actions))
        probs[np.argmax(self.action_values(representations))] = 1.
        return probs



class EpsilonGreedy(Greedy):
    """
    Takes the highest valued action with probability `1 - epsilon`, otherwise
    a uniformly random one.

    Args:
    * predictor: Predicts the value of state-action features.
    * actions: The list of discrete actions.
    * epsilon: Exploration rate in [0, 1].
    * random_state: Integer seed or `np.random.RandomState` instance.
    """

    def __init__(self, predictor: Predictor, actions: ActionList, epsilon: float,\
        random_state: Union[int, RandomState]=None):
        if not 0 <= epsilon <= 1:
            raise ValueError('epsilon must be in [0, 1], got {}.'.format(epsilon))
        super().__init__(predictor, actions, random_state)
        self.epsilon = epsilon


    def compute_probabilities(self, representations: Representations) -> np.ndarray:
        probs = np.full(len(self.actions), self.epsilon / len(self.actions))
        probs[np.argmax(self.action_values(representations))] += 1 - self.epsilon
        return probs
