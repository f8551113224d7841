"""
On-policy actor-critic control. A TD critic learns state values and its TD
error tells the actor whether the last action turned out better or worse than
expected.

The control loop lives in `AbstractActorCritic`; how the critic is updated is
a strategy passed to it:

* `TDCriticUpdate`: discounted reward (`ActorCritic`),
* `AverageRewardCriticUpdate`: reward relative to a running average, for
continuing tasks (`AverageRewardActorCritic`).
"""

from typing import Callable

import numpy as np

from ..actions import Action
from ..approximation import Predictor, Projector, StateToStateAction
from ..logging import get_logger
from ..policy import PolicyDistribution
from .control import ActorOnPolicy, OnPolicyControlLearner, O, CRITIC, ACTOR

logger = get_logger(__name__)

# (x_t, a_t, x_tp1, r_tp1, z_tp1) -> delta_t
CriticUpdate = Callable[[O, Action, O, float, float], float]



class TDCriticUpdate:
    """
    Projects both observations and updates an on-policy TD critic with the
    reward as received.

    Args:
    * critic: A predictor with `update(phi_t, phi_tp1, r_tp1) -> delta`.
    * projector: Maps observations to the critic's features.
    """

    def __init__(self, critic: Predictor, projector: Projector):
        self.critic = critic
        self.projector = projector
        self.phi_t = np.zeros(projector.dimension())
        self.phi_tp1 = np.zeros(projector.dimension())


    def project(self, x_t: O, x_tp1: O):
        np.copyto(self.phi_t, self.projector.project(x_t))
        np.copyto(self.phi_tp1, self.projector.project(x_tp1))


    def __call__(self, x_t: O, a_t: Action, x_tp1: O, r_tp1: float, z_tp1: float) -> float:
        self.project(x_t, x_tp1)
        return self.critic.update(self.phi_t, self.phi_tp1, r_tp1)



class AverageRewardCriticUpdate(TDCriticUpdate):
    """
    Updates the critic with the reward minus the running average reward, then
    moves the average by `alpha_r * delta_t`. The absolute reward level of a
    continuing task carries no information about actions, only the difference
    from the average does.

    Args:
    * critic: A predictor with `update(phi_t, phi_tp1, r_tp1) -> delta`.
    * projector: Maps observations to the critic's features.
    * alpha_r: Step size of the average reward.
    """

    def __init__(self, critic: Predictor, projector: Projector, alpha_r: float):
        super().__init__(critic, projector)
        self.alpha_r = alpha_r
        self.average_reward = 0.


    def __call__(self, x_t: O, a_t: Action, x_tp1: O, r_tp1: float, z_tp1: float) -> float:
        self.project(x_t, x_tp1)
        delta_t = self.critic.update(self.phi_t, self.phi_tp1, r_tp1 - self.average_reward)
        self.average_reward += self.alpha_r * delta_t
        return delta_t



class AbstractActorCritic(OnPolicyControlLearner[O]):
    """
    Actor-critic control loop. Each step updates the critic, then the actor
    with the critic's TD error at `x_t`, and samples the next action from the
    actor's policy at `x_tp1`.

    Args:
    * critic: The state-value predictor.
    * actor: The on-policy actor.
    * projector: Maps observations to the critic's features.
    * to_state_action: Maps observations to the policy's state-action features.
    * update_critic: Called as `update_critic(x_t, a_t, x_tp1, r_tp1, z_tp1)`,
    updates the critic and returns the TD error.
    """

    def __init__(self, critic: Predictor, actor: ActorOnPolicy, projector: Projector,\
        to_state_action: StateToStateAction, update_critic: CriticUpdate):
        super().__init__()
        self.critic = critic
        self.actor = actor
        self.projector = projector
        self.to_state_action = to_state_action
        self.update_critic = update_critic


    def policy(self) -> PolicyDistribution:
        return self.actor.policy()


    def initialize(self, x_0: O) -> Action:
        self.critic.initialize()
        self.actor.initialize()
        self.policy().update(self.to_state_action.state_actions(x_0))
        self.initialized = True
        logger.debug('%s initialized', self)
        return self.policy().sample_action()


    def update_actor(self, x_t: O, a_t: Action, delta_t: float):
        phi_t = self.to_state_action.state_actions(x_t)
        self.policy().update(phi_t)
        self.actor.update(phi_t, a_t, delta_t)


    def step(self, x_t: O, a_t: Action, x_tp1: O, r_tp1: float, z_tp1: float) -> Action:
        self.check_initialized()
        delta_t = self.update_critic(x_t, a_t, x_tp1, r_tp1, z_tp1)
        self.update_actor(x_t, a_t, delta_t)
        self.policy().update(self.to_state_action.state_actions(x_tp1))
        return self.policy().sample_action()


    def reset(self):
        self.critic.reset()
        self.actor.reset()
        self.initialized = False
        logger.debug('%s reset', self)


    def propose_action(self, x: O) -> Action:
        return self.actor.propose_action(self.to_state_action.state_actions(x))


    def compute_value_function(self, x: O) -> float:
        return self.critic.predict(self.projector.project(x))


    def persist(self, name: str):
        self.critic.persist(name + CRITIC)
        self.actor.persist(name + ACTOR)
        logger.debug('%s persisted to %s', self, name)


    def resurrect(self, name: str):
        self.critic.resurrect(name + CRITIC)
        self.actor.resurrect(name + ACTOR)
        logger.debug('%s resurrected from %s', self, name)



class ActorCritic(AbstractActorCritic[O]):
    """
    Actor-critic for discounted tasks. See `AbstractActorCritic`.
    """

    def __init__(self, critic: Predictor, actor: ActorOnPolicy, projector: Projector,\
        to_state_action: StateToStateAction):
        super().__init__(critic, actor, projector, to_state_action,\
                        TDCriticUpdate(critic, projector))



class AverageRewardActorCritic(AbstractActorCritic[O]):
    """
    Actor-critic for continuing tasks, maximizing the average reward per step.
    See `AverageRewardCriticUpdate`.

    Args:
    * alpha_r: Step size of the average reward.
    """

    def __init__(self, critic: Predictor, actor: ActorOnPolicy, projector: Projector,\
        to_state_action: StateToStateAction, alpha_r: float):
        super().__init__(critic, actor, projector, to_state_action,\
                        AverageRewardCriticUpdate(critic, projector, alpha_r))


    @property
    def average_reward(self) -> float:
        return self.update_critic.average_reward
