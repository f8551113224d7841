"""
Gradient off-policy control with GQ(lambda):

* `GreedyGQ`: learns the action values of a target policy (usually greedy in
those values) while following a separate behaviour policy,
* `GQOnPolicyControl`: the same algorithm following its target policy.
"""

import numpy as np

from ..actions import Action, ActionList
from ..approximation import GQ, StateToStateAction
from ..helpers.boundedness import check_ratio, check_value
from ..logging import get_logger
from ..policy import Policy, sample_action, sample_best_action
from .control import OffPolicyControlLearner, O

logger = get_logger(__name__)



class GreedyGQ(OffPolicyControlLearner[O]):
    """
    Greedy-GQ control. Each step:

    1. weights the executed action by `rho_t = target.pi(a_t) / behavior.pi(a_t)`,
    2. bootstraps from the target policy's expected next features,
    `phi_bar_tp1 = sum_a target.pi(s_tp1, a) * phi(s_tp1, a)`,
    3. returns the next action sampled from the behaviour policy.

    A `rho_t` or `delta_t` that is not finite or exceeds `bound` raises
    `BoundednessError` before the weights or the trace change.

    Args:
    * target: The policy being learned about.
    * behavior: The policy actions are sampled from.
    * actions: The list of discrete actions.
    * to_state_action: Maps observations to state-action features.
    * gq: The GQ(lambda) predictor.
    * bound: Largest magnitude allowed for `rho_t` and `delta_t`.

    Attributes:
    * rho_t (float): The last importance ratio.
    * delta_t (float): The last TD error.
    """

    def __init__(self, target: Policy, behavior: Policy, actions: ActionList,\
        to_state_action: StateToStateAction, gq: GQ, bound: float=np.inf):
        super().__init__()
        self.target = target
        self.behavior = behavior
        self.actions = actions
        self.to_state_action = to_state_action
        self.gq = gq
        self.bound = bound
        self.rho_t = 0.
        self.delta_t = 0.
        self.phi_t = np.zeros(to_state_action.dimension())
        self.phi_bar_tp1 = np.zeros(to_state_action.dimension())


    def initialize(self, x_0: O) -> Action:
        self.gq.initialize()
        phi = self.to_state_action.state_actions(x_0)
        self.target.update(phi)
        a_t = sample_action(self.behavior, phi)
        np.copyto(self.phi_t, phi[a_t])
        self.initialized = True
        logger.debug('%s initialized', self)
        return a_t


    def compute_rho(self, a_t: Action) -> float:
        """
        Calculates the importance ratio of an action from the policies' cached
        distributions. Zero behaviour probability yields inf or nan.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.float64(self.target.pi(a_t)) / self.behavior.pi(a_t)


    def check_delta(self, delta_t: float) -> float:
        return check_value(delta_t, self.bound, 'delta_t')


    def step(self, x_t: O, a_t: Action, x_tp1: O, r_tp1: float, z_tp1: float) -> Action:
        self.check_initialized()
        xas_t = self.to_state_action.state_actions(x_t)
        self.target.update(xas_t)
        self.behavior.update(xas_t)
        np.copyto(self.phi_t, xas_t[a_t])
        self.rho_t = check_ratio(self.compute_rho(a_t), self.bound, 'rho_t')

        xas_tp1 = self.to_state_action.state_actions(x_tp1)
        self.target.update(xas_tp1)
        self.phi_bar_tp1.fill(0.)
        for a in self.actions:
            pi = self.target.pi(a)
            if pi == 0:
                continue
            self.phi_bar_tp1 += pi * xas_tp1[a]

        self.delta_t = self.gq.update(self.phi_t, self.phi_bar_tp1, self.rho_t, r_tp1, z_tp1,\
                                      check=self.check_delta)
        # the target policy moved with the weights
        self.target.update(xas_tp1)
        return sample_action(self.behavior, xas_tp1)


    def reset(self):
        self.gq.reset()
        self.initialized = False
        logger.debug('%s reset', self)


    def propose_action(self, x: O) -> Action:
        return sample_best_action(self.target, self.to_state_action.state_actions(x))


    def compute_value_function(self, x: O) -> float:
        """
        Computes `V(s) = sum_a target.pi(s, a) * Q(s, a)`.
        """
        phis = self.to_state_action.state_actions(x)
        self.target.update(phis)
        return sum(self.target.pi(a) * self.gq.predict(phis[a]) for a in self.actions)


    def persist(self, name: str):
        self.gq.persist(name)
        logger.debug('%s persisted to %s', self, name)


    def resurrect(self, name: str):
        self.gq.resurrect(name)
        logger.debug('%s resurrected from %s', self, name)



class GQOnPolicyControl(GreedyGQ[O]):
    """
    GQ(lambda) control acting with its target policy. No importance
    correction is needed, so `rho_t` is always 1.

    Args:
    * acting: The policy acted with and learned about.
    * actions: The list of discrete actions.
    * to_state_action: Maps observations to state-action features.
    * gq: The GQ(lambda) predictor.
    """

    def __init__(self, acting: Policy, actions: ActionList,\
        to_state_action: StateToStateAction, gq: GQ, bound: float=np.inf):
        super().__init__(acting, acting, actions, to_state_action, gq, bound)


    def compute_rho(self, a_t: Action) -> float:
        return 1.
