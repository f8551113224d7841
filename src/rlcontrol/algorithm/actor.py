"""
On-policy policy-gradient actors:

* `Actor`: steps along `delta * grad log pi`,
* `ActorLambda`: accumulates `grad log pi` in eligibility traces,
* `ActorNatural`: steps along a natural-gradient estimate learned as a
compatible advantage function.
"""

from ..actions import Action
from ..approximation import Representations, Traces, Vectors
from ..errors import DimensionMismatchError, NotInitializedError
from ..helpers.parameters import ScheduledParameters
from ..policy import PolicyDistribution
from .control import ActorOnPolicy



class Actor(ActorOnPolicy, ScheduledParameters):
    """
    Policy-gradient actor. `update` moves each parameter block of the policy:

        u <- u + alpha_u * delta * grad log pi(s_t, a_t)

    Args:
    * alpha_u: Step size, number or `Schedule`.
    * policy_distribution: The policy whose parameters are learned.
    """

    def __init__(self, alpha_u, policy_distribution: PolicyDistribution):
        self.initialized = False
        self.policy_distribution = policy_distribution
        self.u: Vectors = policy_distribution.parameters()
        self.schedule(alpha_u=alpha_u)


    def __str__(self):
        return self.__class__.__name__


    def check_initialized(self):
        if not self.initialized:
            raise NotInitializedError('{} updated before initialize().'.format(self))


    def initialize(self):
        self.advance_schedules()
        self.initialized = True


    def reset(self):
        self.u.clear()
        self.restart_schedules()
        self.initialized = False


    def update(self, phi_t: Representations, a_t: Action, delta: float):
        self.check_initialized()
        grad_log = self.policy_distribution.compute_grad_log(phi_t, a_t)
        for u, g in zip(self.u, grad_log):
            u += self.alpha_u * delta * g


    def policy(self) -> PolicyDistribution:
        return self.policy_distribution


    def propose_action(self, phi: Representations) -> Action:
        self.policy_distribution.update(phi)
        return self.policy_distribution.sample_best_action()


    def persist(self, name: str):
        self.u.persist(name)


    def resurrect(self, name: str):
        self.u.resurrect(name)



def check_traces(traces: Traces, parameters: Vectors):
    """
    Raises `DimensionMismatchError` unless there is one trace of the right size
    per parameter block.
    """
    if traces.dimension() != parameters.dimension():
        raise DimensionMismatchError('{} traces for {} parameter blocks.'\
                                    .format(traces.dimension(), parameters.dimension()))
    for i, (e, u) in enumerate(zip(traces, parameters)):
        if e.dimension() != u.size:
            raise DimensionMismatchError('Trace {} has size {}, parameters {}.'\
                                        .format(i, e.dimension(), u.size))



class ActorLambda(Actor):
    """
    Policy-gradient actor with eligibility traces:

        e <- gamma * lambda * e + grad log pi(s_t, a_t)
        u <- u + alpha_u * delta * e

    Args:
    * alpha_u: Step size, number or `Schedule`.
    * gamma: Discount factor in [0, 1].
    * lambda_: Trace decay in [0, 1].
    * policy_distribution: The policy whose parameters are learned.
    * traces: One trace per parameter block of the policy.
    """

    def __init__(self, alpha_u, gamma: float, lambda_: float,\
        policy_distribution: PolicyDistribution, traces: Traces):
        super().__init__(alpha_u, policy_distribution)
        check_traces(traces, self.u)
        self.gamma = gamma
        self.lambda_ = lambda_
        self.e = traces


    def initialize(self):
        super().initialize()
        self.e.clear()


    def reset(self):
        super().reset()
        self.e.clear()


    def update(self, phi_t: Representations, a_t: Action, delta: float):
        self.check_initialized()
        grad_log = self.policy_distribution.compute_grad_log(phi_t, a_t)
        for e, u, g in zip(self.e, self.u, grad_log):
            e.update(self.gamma * self.lambda_, g)
            u += self.alpha_u * delta * e.vect



class ActorNatural(Actor):
    """
    Natural actor-critic actor. Weights `w` of the compatible advantage
    function `A(s, a) = w . grad log pi(s, a)` are fit to the TD error, and the
    policy moves along `w`, which estimates the natural gradient:

        A     = sum_i w_i . grad log pi_i
        w_i  <- w_i + alpha_v * (delta - A) * grad log pi_i
        u_i  <- u_i + alpha_u * w_i

    Args:
    * alpha_u: Step size of the policy parameters.
    * alpha_v: Step size of the advantage weights.
    * policy_distribution: The policy whose parameters are learned.
    """

    def __init__(self, alpha_u, alpha_v, policy_distribution: PolicyDistribution):
        super().__init__(alpha_u, policy_distribution)
        self.schedule(alpha_u=alpha_u, alpha_v=alpha_v)
        self.w = Vectors.like(self.u)
        self.advantage = 0.


    def reset(self):
        super().reset()
        self.w.clear()


    def update(self, phi_t: Representations, a_t: Action, delta: float):
        self.check_initialized()
        grad_log = self.policy_distribution.compute_grad_log(phi_t, a_t)
        self.advantage = sum(float(g.dot(w)) for g, w in zip(grad_log, self.w))
        for u, w, g in zip(self.u, self.w, grad_log):
            w += self.alpha_v * (delta - self.advantage) * g
            u += self.alpha_u * w
