"""
The base `Policy` and `PolicyDistribution` classes. A policy keeps a cache of
action probabilities for the last state it was updated with. Learners refresh
that cache with `update(representations)` and then query or sample it.
"""

from typing import Union

import numpy as np
from numpy.random import RandomState

from ..actions import Action, ActionList
from ..approximation import Representations, Vectors
from ..errors import NotInitializedError

UNIFORM = 'uniform'
GREEDY = 'greedy'
SOFTMAX = 'softmax'



class Policy:
    """
    A distribution over a discrete list of actions, conditioned on the state
    whose `Representations` it was last updated with.

    Args:
    * actions: The list of discrete actions.
    * random_state: Integer seed or `np.random.RandomState` instance.

    Attributes:
    * probs (np.ndarray): Probability of each action, indexed by action id.
    """

    def __init__(self, actions: ActionList, random_state: Union[int, RandomState]=None):
        self.random = random_state if isinstance(random_state, RandomState)\
                      else RandomState(random_state)
        self.actions = actions
        self.probs = np.zeros(len(actions))
        self.updated = False


    def __str__(self):
        return self.__class__.__name__


    def compute_probabilities(self, representations: Representations) -> np.ndarray:
        """
        Calculates the probability of each action in a state. Must not modify
        the policy.
        """
        raise NotImplementedError


    def update(self, representations: Representations):
        """
        Refreshes the probability cache for the state described by
        `representations`.
        """
        self.probs[:] = self.compute_probabilities(representations)
        self.updated = True


    def _check_updated(self):
        if not self.updated:
            raise NotInitializedError('{} queried before update().'.format(self))


    def pi(self, action: Action) -> float:
        self._check_updated()
        return float(self.probs[action.id])


    def distribution(self) -> np.ndarray:
        self._check_updated()
        return self.probs


    def sample_action(self) -> Action:
        """
        Draws an action from the cached distribution. Actions with zero
        probability are never drawn.
        """
        self._check_updated()
        return self.actions[self.random.choice(len(self.actions), p=self.probs)]


    def sample_best_action(self) -> Action:
        """
        Returns the most probable action. Ties go to the lowest id.
        """
        self._check_updated()
        return self.actions[int(np.argmax(self.probs))]



class PolicyDistribution(Policy):
    """
    A parameterized policy that can be improved by gradient ascent.
    Sub-classes implement `parameters` and `compute_grad_log`.
    """

    def parameters(self) -> Vectors:
        """
        Returns the parameter blocks. Actors modify these in place.
        """
        raise NotImplementedError


    def compute_grad_log(self, representations: Representations, action: Action) -> Vectors:
        """
        Calculates the gradient of `log pi(action)` with respect to each
        parameter block, in the state described by `representations`.
        """
        raise NotImplementedError



def sample_action(policy: Policy, representations: Representations) -> Action:
    policy.update(representations)
    return policy.sample_action()



def sample_best_action(policy: Policy, representations: Representations) -> Action:
    policy.update(representations)
    return policy.sample_best_action()
