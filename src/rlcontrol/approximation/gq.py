"""
Implements the GQ(lambda) action-value predictor.
"""

from typing import Callable

import numpy as np

from .predictor import Predictor
from .vectors import Vectors, Trace, Traces



class GQ(Predictor):
    """
    GQ(lambda): off-policy gradient TD for action values. The bootstrap target
    is the expected features of the next state under the target policy,
    `phi_bar_tp1`, so the learned `Q` is that of the target policy regardless
    of which behaviour generated the data.

        delta = r + gamma * z * v.phi_bar_tp1 - v.phi_t
        e     = gamma * z * lambda * rho * e + phi_t
        v    += alpha_v * (delta * e - gamma * z * (1 - lambda) * (w.e) * phi_bar_tp1)
        w    += alpha_w * (delta * e - (w.phi_t) * phi_t)

    Args:
    * alpha_v: Step size of the value weights.
    * alpha_w: Step size of the auxiliary weights.
    * gamma: Discount factor in [0, 1].
    * lambda_: Trace decay in [0, 1].
    * trace: The eligibility trace. Its size is the number of features.
    """

    def __init__(self, alpha_v, alpha_w, gamma: float, lambda_: float, trace: Trace):
        dimension = trace.dimension()
        super().__init__(Vectors((dimension, dimension)), Traces(), \
                        alpha_v=alpha_v, alpha_w=alpha_w)
        self.traces.append(trace)
        self.gamma = gamma
        self.lambda_ = lambda_
        self.e = trace


    @property
    def w(self) -> np.ndarray:
        return self.weights[1]


    def update(self, phi_t: np.ndarray, phi_bar_tp1: np.ndarray, rho_t: float,\
        r_tp1: float, z_tp1: float, check: Callable=None) -> float:
        """
        Args:
        * phi_t: Features of the current state and executed action.
        * phi_bar_tp1: Target-policy expectation of the next features.
        * rho_t: Importance ratio of the executed action.
        * r_tp1: Reward for the transition.
        * z_tp1: Continuation of the episode, 0 at termination.
        * check: Called with the TD error before the trace or any weights
        change. It returns the error to apply, or raises to reject it.

        Returns:
        * The TD error.
        """
        self.check_initialized()
        v, w = self.v, self.w
        gamma_tp1 = self.gamma * z_tp1
        delta = r_tp1 + gamma_tp1 * v.dot(phi_bar_tp1) - v.dot(phi_t)
        if check is not None:
            delta = check(delta)
        self.e.update(gamma_tp1 * self.lambda_ * rho_t, phi_t)
        correction = gamma_tp1 * (1 - self.lambda_) * w.dot(self.e.vect)
        w_phi_t = w.dot(phi_t)
        v += self.alpha_v * (delta * self.e.vect - correction * phi_bar_tp1)
        w += self.alpha_w * (delta * self.e.vect - w_phi_t * phi_t)
        return delta
