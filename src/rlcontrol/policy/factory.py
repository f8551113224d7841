"""
Creates value-based action selection policies by name.
"""

from typing import Union

from numpy.random import RandomState

from ..actions import ActionList
from ..approximation import Predictor
from .greedy import EpsilonGreedy
from .policy import Policy, UNIFORM, GREEDY, SOFTMAX
from .softmax import SoftMax
from .uniform import Uniform



def make_policy(policy: str, actions: ActionList, predictor: Predictor=None,\
    epsilon: float=0., temperature: float=1.,\
    random_state: Union[int, RandomState]=None) -> Policy:
    """
    Creates a policy for selecting actions from a learned value function.

    Args:
    * policy (str): One of [UNIFORM | GREEDY | SOFTMAX].
    * actions: The list of discrete actions.
    * predictor: Action-value predictor. Required for GREEDY and SOFTMAX.
    * epsilon (float): Exploration rate for GREEDY [0, 1].
    * temperature (float): Temperature for SOFTMAX.
    * random_state: Integer seed or `np.random.RandomState` instance.

    Returns:
    * The `Policy` instance.
    """
    if policy == UNIFORM:
        return Uniform(actions, random_state)

    elif policy in (GREEDY, SOFTMAX) and predictor is None:
        raise ValueError('Policy {} needs a predictor.'.format(policy))

    elif policy == GREEDY:
        return EpsilonGreedy(predictor, actions, epsilon, random_state)

    elif policy == SOFTMAX:
        return SoftMax(predictor, actions, temperature, random_state)

    else:
        raise ValueError('Policy does not exist.')
