"""
On-policy temporal difference control:

* `SarsaControl`: bootstraps from the next action actually sampled,
* `ExpectedSarsaControl`: bootstraps from the expectation over next actions.

Note: the acting policy is usually derived from the same `Sarsa` predictor
(e.g. `EpsilonGreedy`), so improving the value function improves the policy.
"""

import numpy as np

from ..actions import Action, ActionList
from ..approximation import Representations, Sarsa, StateToStateAction
from ..errors import PolicyInvariantError
from ..logging import get_logger
from ..policy import Policy, sample_action, sample_best_action
from .control import OnPolicyControlLearner, O

logger = get_logger(__name__)



class SarsaControl(OnPolicyControlLearner[O]):
    """
    Sarsa control. Each step samples `a_tp1` from the acting policy and
    updates

        Q(s_t, a_t) <- r_tp1 + gamma * Q(s_tp1, a_tp1)

    Args:
    * acting: The policy actions are sampled from.
    * to_state_action: Maps observations to state-action features.
    * sarsa: The action-value predictor.

    Attributes:
    * xa_t (np.ndarray): Features of the current state-action pair.
    """

    def __init__(self, acting: Policy, to_state_action: StateToStateAction, sarsa: Sarsa):
        super().__init__()
        self.acting = acting
        self.to_state_action = to_state_action
        self.sarsa = sarsa
        self.xa_t = np.zeros(to_state_action.dimension())


    def initialize(self, x_0: O) -> Action:
        self.sarsa.initialize()
        phi_t = self.to_state_action.state_actions(x_0)
        a_t = sample_action(self.acting, phi_t)
        np.copyto(self.xa_t, phi_t[a_t])
        self.initialized = True
        logger.debug('%s initialized', self)
        return a_t


    def next_features(self, phi_tp1: Representations, a_tp1: Action) -> np.ndarray:
        """
        The features the update bootstraps from.
        """
        return phi_tp1[a_tp1]


    def step(self, x_t: O, a_t: Action, x_tp1: O, r_tp1: float, z_tp1: float) -> Action:
        self.check_initialized()
        phi_tp1 = self.to_state_action.state_actions(x_tp1)
        a_tp1 = sample_action(self.acting, phi_tp1)
        self.sarsa.update(self.xa_t, self.next_features(phi_tp1, a_tp1), r_tp1)
        np.copyto(self.xa_t, phi_tp1[a_tp1])
        return a_tp1


    def reset(self):
        self.sarsa.reset()
        self.xa_t.fill(0.)
        self.initialized = False
        logger.debug('%s reset', self)


    def propose_action(self, x: O) -> Action:
        return sample_best_action(self.acting, self.to_state_action.state_actions(x))


    def compute_value_function(self, x: O) -> float:
        """
        Computes `V(s) = sum_a pi(s, a) * Q(s, a)` under the acting policy.
        """
        phis = self.to_state_action.state_actions(x)
        self.acting.update(phis)
        return sum(self.acting.pi(a) * self.sarsa.predict(phis[a]) \
                    for a in self.to_state_action.action_list())


    def persist(self, name: str):
        self.sarsa.persist(name)
        logger.debug('%s persisted to %s', self, name)


    def resurrect(self, name: str):
        self.sarsa.resurrect(name)
        logger.debug('%s resurrected from %s', self, name)



class ExpectedSarsaControl(SarsaControl[O]):
    """
    Expected Sarsa control. Bootstraps from the expected next features under
    the acting policy instead of those of the single sampled action:

        phi_bar_tp1 = sum_a pi(s_tp1, a) * phi(s_tp1, a)

    which removes the variance due to sampling `a_tp1`. Actions with zero
    probability are skipped. The acting policy must never sample one of them;
    if it does, `PolicyInvariantError` is raised.

    Args:
    * acting: The policy actions are sampled from.
    * to_state_action: Maps observations to state-action features.
    * sarsa: The action-value predictor.
    * actions: The actions to take the expectation over.
    """

    def __init__(self, acting: Policy, to_state_action: StateToStateAction,\
        sarsa: Sarsa, actions: ActionList):
        super().__init__(acting, to_state_action, sarsa)
        self.actions = actions
        self.phi_bar_tp1 = np.zeros(to_state_action.dimension())


    def next_features(self, phi_tp1: Representations, a_tp1: Action) -> np.ndarray:
        """
        Builds the expected next features in place. Assumes the acting policy
        was last updated with `phi_tp1`.
        """
        self.phi_bar_tp1.fill(0.)
        for a in self.actions:
            pi = self.acting.pi(a)
            if pi == 0:
                if a.id == a_tp1.id:
                    raise PolicyInvariantError('{} sampled {} with zero probability.'\
                                                .format(self.acting, a_tp1))
                continue
            self.phi_bar_tp1 += pi * phi_tp1[a]
        return self.phi_bar_tp1
