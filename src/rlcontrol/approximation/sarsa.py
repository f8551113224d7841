"""
Implements the Sarsa(lambda) action-value predictor.
"""

from .td import TDLambda



class Sarsa(TDLambda):
    """
    Sarsa(lambda): TD(lambda) over state-action features, so `predict` returns
    `Q(s, a)` for the features of `(s, a)`. The policy the next action is drawn
    from determines the value being learned.

    `update(xa_t, xa_tp1, r_tp1)` takes the features of the current and next
    state-action pairs (or, for Expected Sarsa, the expected next features).

    Args:
    * alpha: Step size, number or `Schedule`.
    * gamma: Discount factor in [0, 1].
    * lambda_: Trace decay in [0, 1].
    * trace: The eligibility trace. Its size is the number of features.
    """

    def __init__(self, alpha, gamma: float, lambda_: float, trace):
        super().__init__(alpha, gamma, lambda_, trace)
