"""
Off-policy actor-critic (Off-PAC). A behaviour policy explores, a GTD(lambda)
critic learns the state values of the actor's target policy, and the actor
follows the importance-weighted TD error.
"""

import numpy as np

from ..actions import Action
from ..approximation import GTDLambda, Projector, StateToStateAction
from ..helpers.boundedness import check_ratio, check_value
from ..logging import get_logger
from ..policy import Policy, sample_action
from .control import ActorOffPolicy, OffPolicyControlLearner, O, CRITIC, ACTOR

logger = get_logger(__name__)



class OffPAC(OffPolicyControlLearner[O]):
    """
    Off-policy actor-critic control. Each step:

    1. `rho_t = actor.pi(a_t) / behavior.pi(a_t)` at `x_t`,
    2. `delta_t = critic.update(phi_t, phi_tp1, rho_t, gamma_t, r_tp1, z_tp1)`,
    3. `actor.update(xas_t, a_t, rho_t, gamma_t, delta_t)`,
    4. returns the behaviour policy's action at `x_tp1`.

    `rho_t` and `delta_t` are checked as soon as they are computed. If either is
    not finite or exceeds `bound`, `BoundednessError` is raised before the
    critic's weights, its trace or the actor change.

    Args:
    * behavior: The policy actions are sampled from.
    * critic: The GTD(lambda) state-value predictor.
    * actor: The off-policy actor.
    * to_state_action: Maps observations to the policies' state-action features.
    * projector: Maps observations to the critic's features.
    * gamma_t: Discount factor in [0, 1].
    * bound: Largest magnitude allowed for `rho_t` and `delta_t`.

    Attributes:
    * rho_t (float): The last importance ratio.
    * delta_t (float): The last TD error.
    """

    def __init__(self, behavior: Policy, critic: GTDLambda, actor: ActorOffPolicy,\
        to_state_action: StateToStateAction, projector: Projector, gamma_t: float,\
        bound: float=np.inf):
        super().__init__()
        self.behavior = behavior
        self.critic = critic
        self.actor = actor
        self.to_state_action = to_state_action
        self.projector = projector
        self.gamma_t = gamma_t
        self.bound = bound
        self.rho_t = 0.
        self.delta_t = 0.
        self.phi_t = np.zeros(projector.dimension())
        self.phi_tp1 = np.zeros(projector.dimension())


    def initialize(self, x_0: O) -> Action:
        self.critic.initialize()
        self.actor.initialize()
        self.initialized = True
        logger.debug('%s initialized', self)
        return sample_action(self.behavior, self.to_state_action.state_actions(x_0))


    def check_delta(self, delta_t: float) -> float:
        return check_value(delta_t, self.bound, 'delta_t')


    def step(self, x_t: O, a_t: Action, x_tp1: O, r_tp1: float, z_tp1: float) -> Action:
        self.check_initialized()
        np.copyto(self.phi_t, self.projector.project(x_t))
        np.copyto(self.phi_tp1, self.projector.project(x_tp1))

        xas_t = self.to_state_action.state_actions(x_t)
        self.actor.policy().update(xas_t)
        self.behavior.update(xas_t)
        with np.errstate(divide='ignore', invalid='ignore'):
            rho_t = np.float64(self.actor.pi(a_t)) / self.behavior.pi(a_t)
        self.rho_t = check_ratio(rho_t, self.bound, 'rho_t')

        self.delta_t = self.critic.update(self.phi_t, self.phi_tp1, self.rho_t, self.gamma_t,\
                                          r_tp1, z_tp1, check=self.check_delta)
        self.actor.update(xas_t, a_t, self.rho_t, self.gamma_t, self.delta_t)

        return sample_action(self.behavior, self.to_state_action.state_actions(x_tp1))


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
