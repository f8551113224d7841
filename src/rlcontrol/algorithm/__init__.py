"""
Control learners. Each turns a stream of `(x_t, a_t, x_tp1, r_tp1, z_tp1)`
transitions into updates of a value function and/or a policy:

* on-policy TD control: `SarsaControl`, `ExpectedSarsaControl`,
* gradient off-policy control: `GreedyGQ`, `GQOnPolicyControl`,
* policy-gradient actors: `Actor`, `ActorLambda`, `ActorNatural`,
`ActorLambdaOffPolicy`,
* actor-critic: `ActorCritic`, `AverageRewardActorCritic`, `OffPAC`.

All `ControlLearner`s have the following API:

* Methods:
  * initialize(x_0): starts an episode and returns the first action.
  * step(x_t, a_t, x_tp1, r_tp1, z_tp1): learns from a transition and returns
  the next action.
  * propose_action(x): the best action learned so far, without exploration.
  * compute_value_function(x): the estimated value of an observation.
  * reset(): forgets everything learned.
  * persist(name) / resurrect(name): saves / restores learned parameters.
"""

from .control import ControlLearner, OnPolicyControlLearner, OffPolicyControlLearner
from .control import ActorOnPolicy, ActorOffPolicy, CRITIC, ACTOR
from .sarsa import SarsaControl, ExpectedSarsaControl
from .greedygq import GreedyGQ, GQOnPolicyControl
from .actor import Actor, ActorLambda, ActorNatural
from .actoroffpolicy import AbstractActorOffPolicy, ActorLambdaOffPolicy
from .actorcritic import AbstractActorCritic, ActorCritic, AverageRewardActorCritic
from .actorcritic import TDCriticUpdate, AverageRewardCriticUpdate
from .offpac import OffPAC
