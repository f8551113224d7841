"""
State-value predictors used as critics:

* `TD`: TD(0),
* `TDLambda`: TD(lambda) with an accumulating trace,
* `GTDLambda`: off-policy gradient TD(lambda).
"""

from typing import Callable

import numpy as np

from .predictor import Predictor
from .vectors import Vectors, Trace, Traces



class TD(Predictor):
    """
    On-policy TD(0). New estimate of the value of `phi_t` is
    `r_tp1 + gamma * V(phi_tp1)`.

    Args:
    * alpha_v: Step size, number or `Schedule`.
    * gamma: Discount factor in [0, 1].
    * dimension: Number of features.
    """

    def __init__(self, alpha_v, gamma: float, dimension: int, traces: Traces=None):
        super().__init__(Vectors((dimension,)), traces, alpha_v=alpha_v)
        self.gamma = gamma


    def update(self, phi_t: np.ndarray, phi_tp1: np.ndarray, r_tp1: float) -> float:
        """
        Args:
        * phi_t, phi_tp1: Features of the current and next states.
        * r_tp1: Reward for the transition.

        Returns:
        * The TD error.
        """
        self.check_initialized()
        v = self.v
        delta = r_tp1 + self.gamma * v.dot(phi_tp1) - v.dot(phi_t)
        v += self.alpha_v * delta * phi_t
        return delta



class TDLambda(TD):
    """
    On-policy TD(lambda). Credit for the TD error is assigned to past states
    through the trace `e = gamma * lambda * e + phi_t`.

    Args:
    * alpha_v: Step size, number or `Schedule`.
    * gamma: Discount factor in [0, 1].
    * lambda_: Trace decay in [0, 1].
    * trace: The eligibility trace. Its size is the number of features.
    """

    def __init__(self, alpha_v, gamma: float, lambda_: float, trace: Trace):
        super().__init__(alpha_v, gamma, trace.dimension(), Traces())
        self.traces.append(trace)
        self.lambda_ = lambda_
        self.e = trace


    def update(self, phi_t: np.ndarray, phi_tp1: np.ndarray, r_tp1: float) -> float:
        self.check_initialized()
        v = self.v
        delta = r_tp1 + self.gamma * v.dot(phi_tp1) - v.dot(phi_t)
        self.e.update(self.gamma * self.lambda_, phi_t)
        v += self.alpha_v * delta * self.e.vect
        return delta



class GTDLambda(Predictor):
    """
    Off-policy gradient TD(lambda) (GTD(lambda)/TDC with traces). Learns the
    value of a target policy from transitions generated by a behaviour policy,
    with auxiliary weights `w` estimating the expected TD update.

    Args:
    * alpha_v: Step size of the value weights.
    * alpha_w: Step size of the auxiliary weights.
    * lambda_: Trace decay in [0, 1].
    * trace: The eligibility trace. Its size is the number of features.
    """

    def __init__(self, alpha_v, alpha_w, lambda_: float, trace: Trace):
        dimension = trace.dimension()
        super().__init__(Vectors((dimension, dimension)), Traces(), \
                        alpha_v=alpha_v, alpha_w=alpha_w)
        self.traces.append(trace)
        self.lambda_ = lambda_
        self.e = trace


    @property
    def w(self) -> np.ndarray:
        return self.weights[1]


    def update(self, phi_t: np.ndarray, phi_tp1: np.ndarray, rho_t: float,\
        gamma_t: float, r_tp1: float, z_tp1: float, check: Callable=None) -> float:
        """
        Args:
        * phi_t, phi_tp1: Features of the current and next states.
        * rho_t: Importance ratio of the executed action.
        * gamma_t: Discount factor.
        * r_tp1: Reward for the transition.
        * z_tp1: Continuation of the episode, 0 at termination.
        * check: Called with the TD error before the trace or any weights
        change. It returns the error to apply, or raises to reject it.

        Returns:
        * The TD error.
        """
        self.check_initialized()
        v, w = self.v, self.w
        gamma_tp1 = gamma_t * z_tp1
        delta = r_tp1 + gamma_tp1 * v.dot(phi_tp1) - v.dot(phi_t)
        if check is not None:
            delta = check(delta)
        self.e.update(gamma_t * self.lambda_, phi_t)
        self.e.multiply(rho_t)
        correction = gamma_tp1 * (1 - self.lambda_) * w.dot(self.e.vect)
        w_phi_t = w.dot(phi_t)
        v += self.alpha_v * (delta * self.e.vect - correction * phi_tp1)
        w += self.alpha_w * (delta * self.e.vect - w_phi_t * phi_t)
        return delta
