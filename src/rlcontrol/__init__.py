"""
Linear control learning for reinforcement learning agents: temporal
difference control, gradient off-policy control, and (off-policy)
actor-critic methods over feature vectors.

Sub-packages:

* `approximation`: weight vectors, traces, projectors, and TD predictors,
* `policy`: action-selection policies and parameterized distributions,
* `algorithm`: the control learners,
* `helpers`: gym space utilities, step-size schedules, boundedness checks.
"""

__version__ = '0.1.0'

from .errors import RLControlError, NotInitializedError, DimensionMismatchError
from .errors import PolicyInvariantError, BoundednessError
from .logging import get_logger, set_log_level
from .actions import Action, ActionList
from .algorithm import SarsaControl, ExpectedSarsaControl, GreedyGQ, GQOnPolicyControl
from .algorithm import Actor, ActorLambda, ActorNatural, ActorLambdaOffPolicy
from .algorithm import ActorCritic, AverageRewardActorCritic, OffPAC
