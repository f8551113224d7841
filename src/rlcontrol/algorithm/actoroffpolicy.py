"""
Off-policy policy-gradient actors. These learn about a target policy from
actions sampled by a different behaviour policy, correcting with the
importance ratio `rho_t` of each executed action.
"""

from ..actions import Action
from ..approximation import Representations, Traces
from ..errors import NotInitializedError
from ..helpers.parameters import ScheduledParameters
from ..policy import PolicyDistribution, sample_best_action
from .actor import check_traces
from .control import ActorOffPolicy



class AbstractActorOffPolicy(ActorOffPolicy):
    """
    Holds the target policy and its parameters. Sub-classes implement `update`.

    Args:
    * target_policy: The policy whose parameters are learned.
    """

    def __init__(self, target_policy: PolicyDistribution):
        self.initialized = False
        self.target_policy = target_policy
        self.u = target_policy.parameters()


    def __str__(self):
        return self.__class__.__name__


    def check_initialized(self):
        if not self.initialized:
            raise NotInitializedError('{} updated before initialize().'.format(self))


    def initialize(self):
        self.initialized = True


    def reset(self):
        self.u.clear()
        self.initialized = False


    def policy(self) -> PolicyDistribution:
        return self.target_policy


    def pi(self, a: Action) -> float:
        return self.target_policy.pi(a)


    def propose_action(self, phi: Representations) -> Action:
        return sample_best_action(self.target_policy, phi)


    def persist(self, name: str):
        self.u.persist(name)


    def resurrect(self, name: str):
        self.u.resurrect(name)



class ActorLambdaOffPolicy(AbstractActorOffPolicy, ScheduledParameters):
    """
    Off-policy actor with eligibility traces. The correction is applied to the
    traces, so it carries over to later updates:

        e <- rho_t * (gamma_t * lambda * e + grad log pi(s_t, a_t))
        u <- u + alpha_u * delta_t * e

    Args:
    * alpha_u: Step size, number or `Schedule`.
    * lambda_: Trace decay in [0, 1].
    * target_policy: The policy whose parameters are learned.
    * traces: One trace per parameter block of the policy.
    """

    def __init__(self, alpha_u, lambda_: float, target_policy: PolicyDistribution,\
        traces: Traces):
        super().__init__(target_policy)
        check_traces(traces, self.u)
        self.lambda_ = lambda_
        self.e = traces
        self.schedule(alpha_u=alpha_u)


    def initialize(self):
        super().initialize()
        self.advance_schedules()
        self.e.clear()


    def reset(self):
        super().reset()
        self.restart_schedules()
        self.e.clear()


    def update(self, phi_t: Representations, a_t: Action, rho_t: float,\
        gamma_t: float, delta_t: float):
        self.check_initialized()
        grad_log = self.target_policy.compute_grad_log(phi_t, a_t)
        for e, u, g in zip(self.e, self.u, grad_log):
            e.update(gamma_t * self.lambda_, g)
            e.multiply(rho_t)
            u += self.alpha_u * delta_t * e.vect
