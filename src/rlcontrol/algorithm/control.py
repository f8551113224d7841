"""
The contracts shared by control learners and actors.

A driver calls `initialize(x_0)` at the start of each episode and then
`step(x_t, a_t, x_tp1, r_tp1, z_tp1)` for every transition, executing the
action each call returns. `z_tp1` is the continuation of the episode: 1 while
it goes on, 0 when `x_tp1` is terminal.

Learners made of a critic and an actor persist them under `name + CRITIC`
and `name + ACTOR`. Learners with a single predictor persist it under `name`.
"""

from typing import Generic, TypeVar

from ..actions import Action
from ..approximation import Representations
from ..errors import NotInitializedError
from ..policy import PolicyDistribution

O = TypeVar('O')

CRITIC = '.critic'
ACTOR = '.actor'



class ControlLearner(Generic[O]):
    """
    Learns to act from a stream of transitions. Generic over the observation
    type `O`, which is only ever handed to projectors.
    """

    def __init__(self):
        self.initialized = False


    def __str__(self):
        return self.__class__.__name__


    def check_initialized(self):
        if not self.initialized:
            raise NotInitializedError('{} stepped before initialize().'.format(self))


    def initialize(self, x_0: O) -> Action:
        """
        Starts an episode from observation `x_0`.

        Returns:
        * The first action to take.
        """
        raise NotImplementedError


    def step(self, x_t: O, a_t: Action, x_tp1: O, r_tp1: float, z_tp1: float) -> Action:
        """
        Learns from one transition.

        Args:
        * x_t: The observation the action was taken from.
        * a_t: The action taken, as returned by the previous call.
        * x_tp1: The resulting observation.
        * r_tp1: The reward received.
        * z_tp1: Continuation of the episode, 0 if `x_tp1` is terminal.

        Returns:
        * The next action to take.
        """
        raise NotImplementedError


    def reset(self):
        """
        Forgets all learned parameters. `initialize()` must be called again.
        """
        raise NotImplementedError


    def propose_action(self, x: O) -> Action:
        """
        Returns the best action at `x` according to what has been learned,
        without exploration.
        """
        raise NotImplementedError


    def compute_value_function(self, x: O) -> float:
        raise NotImplementedError


    def persist(self, name: str):
        raise NotImplementedError


    def resurrect(self, name: str):
        raise NotImplementedError



class OnPolicyControlLearner(ControlLearner[O]):
    """
    A learner that evaluates and improves the same policy it acts with.
    """



class OffPolicyControlLearner(ControlLearner[O]):
    """
    A learner that acts with a behaviour policy while learning about a
    different target policy.
    """



class ActorOnPolicy:
    """
    Improves a `PolicyDistribution` along the gradient of its log-probability,
    weighted by the TD error of a critic.
    """

    def initialize(self):
        raise NotImplementedError


    def reset(self):
        raise NotImplementedError


    def update(self, phi_t: Representations, a_t: Action, delta: float):
        raise NotImplementedError


    def policy(self) -> PolicyDistribution:
        raise NotImplementedError


    def propose_action(self, phi: Representations) -> Action:
        raise NotImplementedError


    def persist(self, name: str):
        raise NotImplementedError


    def resurrect(self, name: str):
        raise NotImplementedError



class ActorOffPolicy(ActorOnPolicy):
    """
    An actor learning about its target policy from actions chosen by another
    policy. `update` also takes the importance ratio and the discount.
    """

    def update(self, phi_t: Representations, a_t: Action, rho_t: float,\
        gamma_t: float, delta_t: float):
        raise NotImplementedError


    def pi(self, a: Action) -> float:
        raise NotImplementedError
