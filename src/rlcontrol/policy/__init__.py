"""
Defines `Policy` classes: distributions over discrete actions conditioned on
the `Representations` of a state.

All `Policy`s have the following API:

* Methods:
  * update(representations): refreshes the cached action probabilities.
  * pi(action): probability of an action in the last updated state.
  * sample_action(): draws an action from the cached distribution.
  * sample_best_action(): the most probable action.

`PolicyDistribution`s additionally expose `parameters()` and
`compute_grad_log(representations, action)` for policy-gradient actors.
"""

from .policy import Policy, PolicyDistribution, sample_action, sample_best_action
from .policy import UNIFORM, GREEDY, SOFTMAX
from .greedy import Greedy, EpsilonGreedy
from .softmax import SoftMax, BoltzmannDistribution
from .uniform import Uniform
from .factory import make_policy
