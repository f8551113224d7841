import unittest

import numpy as np

from . import *
from ..actions import ActionList
from ..approximation import BlockStateAction, IdentityProjector, TD
from ..errors import NotInitializedError



class TestPolicies(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(3)
        self.tsa = BlockStateAction(IdentityProjector(1), self.actions)
        self.predictor = TD(0.1, 0.9, self.tsa.dimension())
        self.predictor.v[:] = (1., 3., 2.)
        self.reps = self.tsa.state_actions([1.])


    def test_not_updated(self):
        policy = Uniform(self.actions)
        with self.assertRaises(NotInitializedError):
            policy.pi(self.actions[0])
        with self.assertRaises(NotInitializedError):
            policy.sample_action()


    def test_uniform(self):
        policy = make_policy(UNIFORM, self.actions)
        policy.update(self.reps)
        self.assertTrue(np.allclose(policy.distribution(), 1. / 3))
        self.assertAlmostEqual(policy.pi(self.actions[2]), 1. / 3)


    def test_greedy(self):
        policy = Greedy(self.predictor, self.actions)
        policy.update(self.reps)
        self.assertEqual(policy.pi(self.actions[1]), 1.)
        self.assertEqual(policy.pi(self.actions[0]), 0.)
        self.assertEqual(policy.sample_action(), self.actions[1])
        # ties go to the lowest id
        self.predictor.v[:] = (2., 2., 2.)
        self.assertEqual(sample_best_action(policy, self.reps), self.actions[0])


    def test_epsilon_greedy(self):
        policy = make_policy(GREEDY, self.actions, self.predictor, epsilon=0.3)
        self.assertIsInstance(policy, EpsilonGreedy)
        policy.update(self.reps)
        self.assertTrue(np.allclose(policy.distribution(), [0.1, 0.8, 0.1]))
        self.assertEqual(policy.sample_best_action(), self.actions[1])
        with self.assertRaises(ValueError):
            EpsilonGreedy(self.predictor, self.actions, 1.5)


    def test_softmax(self):
        policy = make_policy(SOFTMAX, self.actions, self.predictor, temperature=0.5)
        policy.update(self.reps)
        probs = policy.distribution()
        self.assertAlmostEqual(probs.sum(), 1.)
        self.assertTrue(probs[1] > probs[2] > probs[0])
        hot = SoftMax(self.predictor, self.actions, temperature=100.)
        hot.update(self.reps)
        self.assertLess(hot.pi(self.actions[1]), policy.pi(self.actions[1]))
        with self.assertRaises(ValueError):
            SoftMax(self.predictor, self.actions, temperature=0.)


    def test_make_policy_errors(self):
        with self.assertRaises(ValueError):
            make_policy(GREEDY, self.actions)
        with self.assertRaises(ValueError):
            make_policy('boltzmann', self.actions, self.predictor)


    def test_seeded_sampling(self):
        p1 = Uniform(self.actions, random_state=7)
        p2 = Uniform(self.actions, random_state=np.random.RandomState(7))
        s1 = [sample_action(p1, self.reps) for _ in range(20)]
        s2 = [sample_action(p2, self.reps) for _ in range(20)]
        self.assertEqual(s1, s2)
        self.assertTrue(all(a in self.actions for a in s1))


    def test_zero_probability_never_sampled(self):
        policy = EpsilonGreedy(self.predictor, self.actions, 0., random_state=0)
        samples = {sample_action(policy, self.reps) for _ in range(50)}
        self.assertEqual(samples, {self.actions[1]})



class TestBoltzmannDistribution(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(3)
        self.tsa = BlockStateAction(IdentityProjector(2), self.actions)
        self.policy = BoltzmannDistribution(self.actions, self.tsa.dimension(), random_state=0)
        self.reps = self.tsa.state_actions([1., 2.])


    def test_uniform_at_zero(self):
        self.policy.update(self.reps)
        self.assertTrue(np.allclose(self.policy.distribution(), 1. / 3))


    def test_parameters_shared(self):
        u = self.policy.parameters()
        self.assertEqual(u.dimension(), 1)
        u[0][2:4] = 1.
        self.policy.update(self.reps)
        self.assertEqual(self.policy.sample_best_action(), self.actions[1])


    def test_grad_log(self):
        self.policy.parameters()[0][:2] = 0.5
        grad = self.policy.compute_grad_log(self.reps, self.actions[0])
        probs = self.policy.compute_probabilities(self.reps)
        expected = self.reps[self.actions[0]] - probs.dot(self.reps.features)
        self.assertEqual(grad.dimension(), 1)
        self.assertTrue(np.allclose(grad[0], expected))
        # the expected gradient under the policy is zero
        total = sum(probs[a.id] * self.policy.compute_grad_log(self.reps, a)[0].copy() \
                    for a in self.actions)
        self.assertTrue(np.allclose(total, 0.))



if __name__ == '__main__':
    unittest.main(verbosity=0)
