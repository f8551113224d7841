import os
import tempfile
import unittest

import numpy as np

from . import *
from ..actions import ActionList
from ..approximation import BlockStateAction, IdentityProjector, Trace, Traces
from ..approximation import TD, Sarsa, GQ, GTDLambda
from ..errors import BoundednessError, DimensionMismatchError
from ..errors import NotInitializedError, PolicyInvariantError
from ..helpers import LinearSchedule
from ..policy import BoltzmannDistribution, EpsilonGreedy, Greedy, Uniform

# Two-state chain: S0 -> S1 (reward 0) -> terminal (reward 1), whatever the action.
S0 = np.array([1., 0.])
S1 = np.array([0., 1.])
TERMINAL = np.zeros(2)

# One-step bandit: action 1 pays 1, action 0 pays nothing.
X = np.array([1.])
END = np.zeros(1)



def chain_episode(control: ControlLearner):
    a = control.initialize(S0)
    a = control.step(S0, a, S1, 0., 1.)
    control.step(S1, a, TERMINAL, 1., 0.)



def bandit_episode(control: ControlLearner):
    a = control.initialize(X)
    control.step(X, a, END, float(a.id == 1), 0.)



class TestSarsaControl(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(2)
        self.tsa = BlockStateAction(IdentityProjector(2), self.actions)


    def make_control(self, epsilon=0.1) -> SarsaControl:
        sarsa = Sarsa(0.1, 0.9, 0., Trace(self.tsa.dimension()))
        acting = EpsilonGreedy(sarsa, self.actions, epsilon, random_state=0)
        return SarsaControl(acting, self.tsa, sarsa)


    def test_not_initialized(self):
        control = self.make_control()
        with self.assertRaises(NotInitializedError):
            control.step(S0, self.actions[0], S1, 0., 1.)
        chain_episode(control)
        control.reset()
        with self.assertRaises(NotInitializedError):
            control.step(S0, self.actions[0], S1, 0., 1.)


    def test_initialize_caches_features(self):
        control = self.make_control()
        a = control.initialize(S0)
        self.assertTrue(np.array_equal(control.xa_t, self.tsa.state_actions(S0)[a]))


    def test_two_state_chain(self):
        control = self.make_control(epsilon=0.)
        values = []
        for _ in range(300):
            chain_episode(control)
            values.append(control.compute_value_function(S0))
        self.assertTrue(all(b >= a - 1e-12 for a, b in zip(values, values[1:])))
        self.assertLess(values[9], values[-1])
        self.assertAlmostEqual(control.compute_value_function(S1), 1., delta=0.05)
        self.assertAlmostEqual(values[-1], 0.9, delta=0.02)


    def test_reset(self):
        control = self.make_control()
        chain_episode(control)
        control.reset()
        self.assertFalse(control.sarsa.v.any())
        self.assertFalse(control.xa_t.any())
        self.assertEqual(control.compute_value_function(S1), 0.)


    def test_persist_resurrect(self):
        control = self.make_control()
        for _ in range(20):
            chain_episode(control)
        fresh = self.make_control()
        with tempfile.TemporaryDirectory() as d:
            name = os.path.join(d, 'sarsa')
            control.persist(name)
            self.assertTrue(os.path.isfile(name))
            fresh.resurrect(name)
        for x in (S0, S1):
            self.assertEqual(fresh.compute_value_function(x), control.compute_value_function(x))
            self.assertEqual(fresh.propose_action(x), control.propose_action(x))



class TestExpectedSarsaControl(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(3)
        self.tsa = BlockStateAction(IdentityProjector(1), self.actions)
        self.sarsa = Sarsa(0.1, 0.9, 0., Trace(self.tsa.dimension()))
        self.sarsa.v[:] = (1., 3., 2.)


    def test_expectation(self):
        acting = EpsilonGreedy(self.sarsa, self.actions, 0.3, random_state=0)
        control = ExpectedSarsaControl(acting, self.tsa, self.sarsa, self.actions)
        reps = self.tsa.state_actions([2.])
        acting.update(reps)
        phi_bar = control.next_features(reps, self.actions[0])
        expected = sum(acting.pi(a) * reps[a] for a in self.actions)
        self.assertTrue(np.allclose(phi_bar, expected))
        self.assertTrue(np.allclose(phi_bar, [0.2, 1.6, 0.2]))


    def test_zero_probability_actions_skipped(self):
        acting = Greedy(self.sarsa, self.actions)
        control = ExpectedSarsaControl(acting, self.tsa, self.sarsa, self.actions)
        reps = self.tsa.state_actions([1.])
        acting.update(reps)
        phi_bar = control.next_features(reps, self.actions[1])
        self.assertTrue(np.array_equal(phi_bar, reps[self.actions[1]]))
        with self.assertRaises(PolicyInvariantError):
            control.next_features(reps, self.actions[0])


    def test_step(self):
        acting = EpsilonGreedy(self.sarsa, self.actions, 0.3, random_state=0)
        control = ExpectedSarsaControl(acting, self.tsa, self.sarsa, self.actions)
        a_t = control.initialize([1.])
        q_t = self.sarsa.predict(self.tsa.state_actions([1.])[a_t])
        control.step([1.], a_t, [1.], 0., 1.)
        # V(1) = 0.1 * 1 + 0.8 * 3 + 0.1 * 2 before the update
        delta = 0.9 * 2.7 - q_t
        self.assertAlmostEqual(self.sarsa.v[a_t.id], q_t + 0.1 * delta)


    def test_persist_resurrect(self):
        acting = EpsilonGreedy(self.sarsa, self.actions, 0.3, random_state=0)
        control = ExpectedSarsaControl(acting, self.tsa, self.sarsa, self.actions)
        a = control.initialize([1.])
        a = control.step([1.], a, [2.], 1., 1.)
        control.step([2.], a, [1.], 0., 0.)
        fresh_sarsa = Sarsa(0.1, 0.9, 0., Trace(self.tsa.dimension()))
        fresh = ExpectedSarsaControl(EpsilonGreedy(fresh_sarsa, self.actions, 0.3, random_state=0),\
                                     self.tsa, fresh_sarsa, self.actions)
        with tempfile.TemporaryDirectory() as d:
            name = os.path.join(d, 'expected_sarsa')
            control.persist(name)
            self.assertTrue(os.path.isfile(name))
            fresh.resurrect(name)
        self.assertTrue(np.array_equal(fresh_sarsa.v, self.sarsa.v))
        for x in ([1.], [2.]):
            self.assertEqual(fresh.compute_value_function(x), control.compute_value_function(x))
            self.assertEqual(fresh.propose_action(x), control.propose_action(x))



class TestGreedyGQ(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(3)
        self.tsa = BlockStateAction(IdentityProjector(1), self.actions)


    def make_gq(self) -> GQ:
        gq = GQ(0.1, 0.01, 0.9, 0., Trace(self.tsa.dimension()))
        gq.v[:] = (1., 3., 2.)
        return gq


    def test_rho(self):
        for a, rho in zip(self.actions, (0., 3., 0.)):
            gq = self.make_gq()
            control = GreedyGQ(Greedy(gq, self.actions), Uniform(self.actions, 0),\
                               self.actions, self.tsa, gq)
            control.initialize([1.])
            control.step([1.], a, [1.], 0., 1.)
            self.assertAlmostEqual(control.rho_t, rho)


    def test_rho_unbounded(self):
        gq = self.make_gq()
        behavior = Greedy(gq, self.actions)
        control = GreedyGQ(Uniform(self.actions, 0), behavior, self.actions, self.tsa, gq)
        control.initialize([1.])
        v = gq.v.copy()
        with self.assertLogs('rlcontrol', level='ERROR'):
            with self.assertRaises(BoundednessError):
                control.step([1.], self.actions[0], [1.], 0., 1.)
        self.assertTrue(np.array_equal(gq.v, v))


    def test_bound(self):
        gq = self.make_gq()
        control = GreedyGQ(Greedy(gq, self.actions), Uniform(self.actions, 0),\
                           self.actions, self.tsa, gq, bound=2.)
        control.initialize([1.])
        with self.assertLogs('rlcontrol', level='ERROR'):
            with self.assertRaises(BoundednessError):
                control.step([1.], self.actions[1], [1.], 0., 1.)


    def test_delta_bound(self):
        gq = self.make_gq()
        control = GreedyGQ(Greedy(gq, self.actions), Uniform(self.actions, 0),\
                           self.actions, self.tsa, gq, bound=5.)
        control.initialize([1.])
        v = gq.v.copy()
        for reward in (10., np.inf, np.nan):
            with self.assertLogs('rlcontrol', level='ERROR'):
                with self.assertRaises(BoundednessError):
                    control.step([1.], self.actions[1], [1.], reward, 0.)
            self.assertTrue(np.array_equal(gq.v, v))
            self.assertFalse(gq.w.any())
            self.assertFalse(gq.e.vect.any())
        control.step([1.], self.actions[1], [1.], 4., 0.)
        self.assertEqual(control.delta_t, 1.)
        self.assertNotEqual(gq.v[1], v[1])


    def test_on_policy_rho(self):
        gq = self.make_gq()
        acting = EpsilonGreedy(gq, self.actions, 0.1, random_state=0)
        control = GQOnPolicyControl(acting, self.actions, self.tsa, gq)
        for a in self.actions:
            self.assertEqual(control.compute_rho(a), 1.)
        a = control.initialize([1.])
        control.step([1.], a, [1.], 0., 1.)
        self.assertEqual(control.rho_t, 1.)


    def test_on_policy_persist_resurrect(self):
        gq = self.make_gq()
        control = GQOnPolicyControl(EpsilonGreedy(gq, self.actions, 0.1, random_state=0),\
                                    self.actions, self.tsa, gq)
        a = control.initialize([1.])
        control.step([1.], a, [2.], 1., 1.)
        fresh_gq = GQ(0.1, 0.01, 0.9, 0., Trace(self.tsa.dimension()))
        fresh = GQOnPolicyControl(EpsilonGreedy(fresh_gq, self.actions, 0.1, random_state=0),\
                                  self.actions, self.tsa, fresh_gq)
        with tempfile.TemporaryDirectory() as d:
            name = os.path.join(d, 'gq_on_policy')
            control.persist(name)
            self.assertTrue(os.path.isfile(name))
            fresh.resurrect(name)
        self.assertTrue(np.array_equal(fresh_gq.v, gq.v))
        self.assertTrue(np.array_equal(fresh_gq.w, gq.w))
        for x in ([1.], [2.]):
            self.assertEqual(fresh.compute_value_function(x), control.compute_value_function(x))
            self.assertEqual(fresh.propose_action(x), control.propose_action(x))


    def test_not_initialized(self):
        gq = self.make_gq()
        control = GreedyGQ(Greedy(gq, self.actions), Uniform(self.actions, 0),\
                           self.actions, self.tsa, gq)
        with self.assertRaises(NotInitializedError):
            control.step([1.], self.actions[1], [1.], 0., 1.)


    def test_two_state_chain(self):
        actions = ActionList(2)
        tsa = BlockStateAction(IdentityProjector(2), actions)
        gq = GQ(0.1, 0.001, 0.9, 0., Trace(tsa.dimension()))
        control = GreedyGQ(Greedy(gq, actions), Uniform(actions, 0), actions, tsa, gq)
        for _ in range(300):
            chain_episode(control)
        self.assertAlmostEqual(control.compute_value_function(S1), 1., delta=0.05)
        self.assertAlmostEqual(control.compute_value_function(S0), 0.9, delta=0.1)


    def test_persist_resurrect(self):
        gq = self.make_gq()
        control = GreedyGQ(Greedy(gq, self.actions), Uniform(self.actions, 0),\
                           self.actions, self.tsa, gq)
        a = control.initialize([1.])
        control.step([1.], a, [2.], 1., 1.)
        fresh_gq = GQ(0.1, 0.01, 0.9, 0., Trace(self.tsa.dimension()))
        fresh = GreedyGQ(Greedy(fresh_gq, self.actions), Uniform(self.actions, 0),\
                         self.actions, self.tsa, fresh_gq)
        with tempfile.TemporaryDirectory() as d:
            name = os.path.join(d, 'greedygq')
            control.persist(name)
            fresh.resurrect(name)
        self.assertTrue(np.array_equal(fresh_gq.w, gq.w))
        self.assertEqual(fresh.compute_value_function([1.]), control.compute_value_function([1.]))
        self.assertEqual(fresh.propose_action([1.]), control.propose_action([1.]))



class TestActors(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(3)
        self.tsa = BlockStateAction(IdentityProjector(2), self.actions)
        self.reps = self.tsa.state_actions([1., 2.])
        self.policy = BoltzmannDistribution(self.actions, self.tsa.dimension(), 0)


    def grad_log(self, a) -> np.ndarray:
        return self.policy.compute_grad_log(self.reps, a)[0].copy()


    def test_actor(self):
        actor = Actor(0.5, self.policy)
        self.assertIs(actor.u, self.policy.parameters())
        with self.assertRaises(NotInitializedError):
            actor.update(self.reps, self.actions[2], 1.)
        actor.initialize()
        g = self.grad_log(self.actions[2])
        actor.update(self.reps, self.actions[2], 2.)
        self.assertTrue(np.allclose(actor.u[0], g))
        self.assertEqual(actor.propose_action(self.reps), self.actions[2])
        actor.reset()
        self.assertFalse(self.policy.parameters()[0].any())


    def test_scheduled_step_size(self):
        actor = Actor(LinearSchedule(1., 0., 3), self.policy)
        actor.initialize()
        actor.initialize()
        self.assertEqual(actor.alpha_u, 0.5)
        actor.reset()
        self.assertEqual(actor.alpha_u, 1.)


    def test_actor_lambda_traces(self):
        actor = ActorLambda(0.1, 0.9, 0.5, self.policy, Traces.like(self.policy.parameters()))
        actor.initialize()
        self.assertFalse(actor.e.at(0).vect.any())
        g1 = self.grad_log(self.actions[0])
        actor.update(self.reps, self.actions[0], 1.)
        self.assertTrue(np.allclose(actor.e.at(0).vect, g1))
        e = actor.e.at(0).vect.copy()
        u = actor.u[0].copy()
        g2 = self.grad_log(self.actions[1])
        actor.update(self.reps, self.actions[1], -1.)
        self.assertTrue(np.allclose(actor.e.at(0).vect, 0.45 * e + g2))
        self.assertTrue(np.allclose(actor.u[0], u - 0.1 * actor.e.at(0).vect))
        actor.reset()
        self.assertFalse(actor.e.at(0).vect.any())
        self.assertFalse(actor.u[0].any())


    def test_trace_dimension_mismatch(self):
        dimension = self.tsa.dimension()
        with self.assertRaises(DimensionMismatchError):
            ActorLambda(0.1, 0.9, 0.5, self.policy, Traces((dimension + 1,)))
        with self.assertRaises(DimensionMismatchError):
            ActorLambda(0.1, 0.9, 0.5, self.policy, Traces((dimension, dimension)))
        with self.assertRaises(DimensionMismatchError):
            ActorLambdaOffPolicy(0.1, 0.5, self.policy, Traces((2,)))


    def test_actor_natural(self):
        actor = ActorNatural(0.1, 0.5, self.policy)
        actor.initialize()
        g1 = self.grad_log(self.actions[0])
        actor.update(self.reps, self.actions[0], 2.)
        self.assertEqual(actor.advantage, 0.)
        self.assertTrue(np.allclose(actor.w[0], g1))
        self.assertTrue(np.allclose(actor.u[0], 0.1 * g1))
        u = actor.u[0].copy()
        w = actor.w[0].copy()
        g2 = self.grad_log(self.actions[1])
        actor.update(self.reps, self.actions[1], 1.)
        advantage = g2.dot(w)
        self.assertAlmostEqual(actor.advantage, advantage)
        w_new = w + 0.5 * (1. - advantage) * g2
        self.assertTrue(np.allclose(actor.w[0], w_new))
        self.assertTrue(np.allclose(actor.u[0], u + 0.1 * w_new))
        actor.reset()
        self.assertFalse(actor.w[0].any())


    def test_actor_off_policy_traces(self):
        actor = ActorLambdaOffPolicy(0.1, 0.5, self.policy, Traces.like(self.policy.parameters()))
        with self.assertRaises(NotInitializedError):
            actor.update(self.reps, self.actions[0], 2., 0.9, 1.)
        actor.initialize()
        g1 = self.grad_log(self.actions[0])
        actor.update(self.reps, self.actions[0], 2., 0.9, 1.)
        self.assertTrue(np.allclose(actor.e.at(0).vect, 2. * g1))
        self.assertTrue(np.allclose(actor.u[0], 0.2 * g1))
        e = actor.e.at(0).vect.copy()
        g2 = self.grad_log(self.actions[2])
        actor.update(self.reps, self.actions[2], 0.5, 0.9, 1.)
        self.assertTrue(np.allclose(actor.e.at(0).vect, 0.5 * (0.45 * e + g2)))
        self.policy.update(self.reps)
        self.assertEqual(actor.pi(self.actions[1]), self.policy.pi(self.actions[1]))
        actor.reset()
        self.assertFalse(actor.e.at(0).vect.any())
        self.assertFalse(actor.u[0].any())



class TestActorCritic(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(2)
        self.projector = IdentityProjector(1)
        self.tsa = BlockStateAction(self.projector, self.actions)


    def make_control(self) -> ActorCritic:
        critic = TD(0.1, 0.9, self.projector.dimension())
        policy = BoltzmannDistribution(self.actions, self.tsa.dimension(), 0)
        return ActorCritic(critic, Actor(0.5, policy), self.projector, self.tsa)


    def test_not_initialized(self):
        control = self.make_control()
        with self.assertRaises(NotInitializedError):
            control.step(X, self.actions[0], END, 0., 0.)


    def test_td_critic_update(self):
        critic = TD(0.5, 0.9, 1)
        critic.initialize()
        update = TDCriticUpdate(critic, self.projector)
        delta = update(X, self.actions[0], X, 1., 1.)
        self.assertEqual(delta, 1.)
        self.assertTrue(np.array_equal(update.phi_t, X))
        self.assertEqual(critic.predict(X), 0.5)


    def test_bandit(self):
        control = self.make_control()
        for _ in range(300):
            bandit_episode(control)
        control.policy().update(self.tsa.state_actions(X))
        self.assertGreater(control.policy().pi(self.actions[1]), 0.7)
        self.assertEqual(control.propose_action(X), self.actions[1])
        self.assertGreater(control.compute_value_function(X), 0.5)


    def test_reset(self):
        control = self.make_control()
        for _ in range(10):
            bandit_episode(control)
        control.reset()
        self.assertEqual(control.compute_value_function(X), 0.)
        self.assertFalse(control.actor.u[0].any())


    def test_persist_resurrect(self):
        control = self.make_control()
        for _ in range(50):
            bandit_episode(control)
        fresh = self.make_control()
        with tempfile.TemporaryDirectory() as d:
            name = os.path.join(d, 'ac')
            control.persist(name)
            self.assertTrue(os.path.isfile(name + CRITIC))
            self.assertTrue(os.path.isfile(name + ACTOR))
            fresh.resurrect(name)
        self.assertEqual(fresh.compute_value_function(X), control.compute_value_function(X))
        self.assertEqual(fresh.propose_action(X), control.propose_action(X))
        self.assertTrue(np.array_equal(fresh.actor.u[0], control.actor.u[0]))



class TestAverageRewardActorCritic(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(2)
        self.projector = IdentityProjector(1)
        self.tsa = BlockStateAction(self.projector, self.actions)
        self.critic = TD(0.5, 1., 1)
        policy = BoltzmannDistribution(self.actions, self.tsa.dimension(), 0)
        self.control = AverageRewardActorCritic(self.critic, Actor(0.1, policy),\
                                                self.projector, self.tsa, 0.1)


    def test_baseline(self):
        a = self.control.initialize(X)
        self.assertEqual(self.control.average_reward, 0.)
        a = self.control.step(X, a, X, 1., 1.)
        self.assertAlmostEqual(self.control.average_reward, 0.1)
        a = self.control.step(X, a, X, 1., 1.)
        self.assertAlmostEqual(self.control.average_reward, 0.19)
        for _ in range(200):
            a = self.control.step(X, a, X, 1., 1.)
        self.assertAlmostEqual(self.control.average_reward, 1., places=4)
        # the critic only learns the reward in excess of the baseline
        self.assertAlmostEqual(self.critic.predict(X), 5., places=4)


    def test_persist_resurrect(self):
        a = self.control.initialize(X)
        for _ in range(20):
            a = self.control.step(X, a, X, float(a.id == 1), 1.)
        critic = TD(0.5, 1., 1)
        policy = BoltzmannDistribution(self.actions, self.tsa.dimension(), 0)
        fresh = AverageRewardActorCritic(critic, Actor(0.1, policy), self.projector,\
                                         self.tsa, 0.1)
        with tempfile.TemporaryDirectory() as d:
            name = os.path.join(d, 'average_reward')
            self.control.persist(name)
            self.assertTrue(os.path.isfile(name + CRITIC))
            self.assertTrue(os.path.isfile(name + ACTOR))
            fresh.resurrect(name)
        self.assertEqual(fresh.compute_value_function(X), self.control.compute_value_function(X))
        self.assertTrue(np.array_equal(fresh.actor.u[0], self.control.actor.u[0]))
        self.assertEqual(fresh.propose_action(X), self.control.propose_action(X))
        # the running average is not part of the saved state
        self.assertEqual(fresh.average_reward, 0.)



class TestOffPAC(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(2)
        self.projector = IdentityProjector(1)
        self.tsa = BlockStateAction(self.projector, self.actions)


    def make_control(self, behavior=None, bound=np.inf) -> OffPAC:
        behavior = Uniform(self.actions, 0) if behavior is None else behavior
        critic = GTDLambda(0.1, 0.01, 0., Trace(self.projector.dimension()))
        policy = BoltzmannDistribution(self.actions, self.tsa.dimension(), 0)
        actor = ActorLambdaOffPolicy(0.5, 0., policy, Traces.like(policy.parameters()))
        return OffPAC(behavior, critic, actor, self.tsa, self.projector, 0.9, bound)


    def test_not_initialized(self):
        control = self.make_control()
        with self.assertRaises(NotInitializedError):
            control.step(X, self.actions[0], END, 0., 0.)


    def test_rho(self):
        control = self.make_control()
        control.initialize(X)
        control.step(X, self.actions[1], END, 1., 0.)
        self.assertEqual(control.rho_t, 1.)
        self.assertEqual(control.delta_t, 1.)
        control.actor.policy().update(self.tsa.state_actions(X))
        pi = control.actor.pi(self.actions[0])
        control.step(X, self.actions[0], END, 0., 0.)
        self.assertAlmostEqual(control.rho_t, pi / 0.5)


    def test_rho_unbounded(self):
        greedy = Greedy(TD(0.1, 0.9, self.tsa.dimension()), self.actions)
        control = self.make_control(behavior=greedy)
        control.initialize(X)
        with self.assertLogs('rlcontrol', level='ERROR'):
            with self.assertRaises(BoundednessError):
                control.step(X, self.actions[1], END, 1., 0.)
        self.assertFalse(control.actor.u[0].any())
        self.assertFalse(control.critic.v.any())


    def test_delta_bound(self):
        control = self.make_control(bound=5.)
        control.initialize(X)
        with self.assertLogs('rlcontrol', level='ERROR'):
            with self.assertRaises(BoundednessError):
                control.step(X, self.actions[1], END, 10., 0.)
        self.assertFalse(control.actor.u[0].any())
        self.assertFalse(control.critic.v.any())
        self.assertFalse(control.critic.w.any())
        self.assertFalse(control.critic.e.vect.any())
        for reward in (np.inf, np.nan):
            with self.assertLogs('rlcontrol', level='ERROR'):
                with self.assertRaises(BoundednessError):
                    control.step(X, self.actions[1], END, reward, 0.)
            self.assertFalse(control.critic.v.any())
            self.assertFalse(control.critic.e.vect.any())


    def test_bandit(self):
        control = self.make_control()
        for _ in range(300):
            bandit_episode(control)
        control.actor.policy().update(self.tsa.state_actions(X))
        self.assertGreater(control.actor.pi(self.actions[1]), 0.7)
        self.assertEqual(control.propose_action(X), self.actions[1])


    def test_persist_resurrect(self):
        control = self.make_control()
        for _ in range(50):
            bandit_episode(control)
        fresh = self.make_control()
        with tempfile.TemporaryDirectory() as d:
            name = os.path.join(d, 'offpac')
            control.persist(name)
            self.assertTrue(os.path.isfile(name + CRITIC))
            self.assertTrue(os.path.isfile(name + ACTOR))
            fresh.resurrect(name)
        self.assertEqual(fresh.compute_value_function(X), control.compute_value_function(X))
        self.assertEqual(fresh.propose_action(X), control.propose_action(X))
        self.assertTrue(np.array_equal(fresh.critic.w, control.critic.w))



if __name__ == '__main__':
    unittest.main(verbosity=0)
