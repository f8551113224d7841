import os
import tempfile
import unittest

import gym
import numpy as np

from . import *
from ..actions import ActionList
from ..errors import BoundednessError, DimensionMismatchError, NotInitializedError
from ..helpers import spaces, LinearSchedule
from ..helpers.boundedness import check_value



class TestVectors(unittest.TestCase):


    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, 'weights')


    def tearDown(self):
        self.tmp.cleanup()


    def test_construction(self):
        v = Vectors((2, 3))
        self.assertEqual(v.dimension(), 2)
        self.assertEqual(v.at(1).shape, (3,))
        block = np.ones(4)
        v = Vectors((block,))
        self.assertIs(v[0], block)
        w = Vectors.like(v)
        self.assertEqual(w[0].shape, (4,))
        self.assertFalse(w[0].any())


    def test_clear_in_place(self):
        v = Vectors((np.ones(3),))
        ref = v[0]
        v.clear()
        self.assertIs(v[0], ref)
        self.assertFalse(ref.any())


    def test_persist_resurrect(self):
        v = Vectors((2, 3))
        v[0][:] = (1., 2.)
        v[1][:] = (3., 4., 5.)
        v.persist(self.path)
        self.assertTrue(os.path.isfile(self.path))
        u = Vectors((2, 3))
        ref = u[1]
        u.resurrect(self.path)
        self.assertIs(u[1], ref)
        self.assertTrue(np.array_equal(u[0], v[0]))
        self.assertTrue(np.array_equal(u[1], v[1]))


    def test_resurrect_mismatch(self):
        Vectors((2,)).persist(self.path)
        with self.assertRaises(DimensionMismatchError):
            Vectors((3,)).resurrect(self.path)
        with self.assertRaises(DimensionMismatchError):
            Vectors((2, 2)).resurrect(self.path)



class TestTraces(unittest.TestCase):


    def test_trace(self):
        e = Trace(2)
        self.assertEqual(e.dimension(), 2)
        e.update(0.5, np.array([1., 0.]))
        e.update(0.5, np.array([0., 1.]))
        self.assertTrue(np.allclose(e.vect, [0.5, 1.]))
        e.multiply(2.)
        self.assertTrue(np.allclose(e.vect, [1., 2.]))
        e.clear()
        self.assertFalse(e.vect.any())


    def test_traces(self):
        params = Vectors((2, 5))
        traces = Traces.like(params)
        self.assertEqual(traces.dimension(), 2)
        self.assertEqual(traces.at(1).dimension(), 5)
        traces.at(0).update(1., np.ones(2))
        traces.clear()
        self.assertFalse(traces.at(0).vect.any())



class TestProjectors(unittest.TestCase):


    def test_identity(self):
        p = IdentityProjector(2, bias=True)
        self.assertEqual(p.dimension(), 3)
        self.assertTrue(np.array_equal(p([3, 4]), [3., 4., 1.]))
        x = np.array([1., 2.])
        phi = IdentityProjector(2).project(x)
        phi[0] = 0.
        self.assertEqual(x[0], 1.)


    def test_tabular(self):
        p = TabularProjector((2, 3), low=(0, 0), high=(1, 1))
        self.assertEqual(p.dimension(), 6)
        self.assertEqual(p.discretize((0.6, 0.1)), (1, 0))
        phi = p.project((0.6, 0.1))
        self.assertEqual(phi.sum(), 1.)
        self.assertEqual(phi[3], 1.)
        # out of bounds values fall in the edge bins
        self.assertEqual(p.discretize((5, -5)), (1, 0))
        self.assertEqual(p.discretize((0, 0.99)), (0, 2))


    def test_tabular_from_space(self):
        space = gym.spaces.Tuple((gym.spaces.Discrete(3),
                                  gym.spaces.Box(low=0., high=1., shape=(1,), dtype=float)))
        p = TabularProjector.from_space(space, resolution=4)
        self.assertEqual(p.dimension(), 12)
        x = spaces.to_tuple(space, (2, np.array([0.3])))
        self.assertEqual(p.discretize(x), (2, 1))
        self.assertEqual(np.argmax(p.project(x)), 9)
        unbounded = gym.spaces.Box(low=-np.inf, high=np.inf, shape=(1,), dtype=float)
        with self.assertRaises(ValueError):
            TabularProjector.from_space(unbounded)


    def test_polynomial(self):
        p = PolynomialProjector(2, 2)
        self.assertEqual(p.dimension(), 6)
        self.assertTrue(np.allclose(p.project([2., 3.]), [1., 2., 3., 4., 6., 9.]))
        p = PolynomialProjector(1, 3, bias=False)
        self.assertEqual(p.dimension(), 3)



class TestStateAction(unittest.TestCase):


    def setUp(self):
        self.actions = ActionList(3)
        self.tsa = BlockStateAction(IdentityProjector(2), self.actions)


    def test_block_state_action(self):
        self.assertEqual(self.tsa.dimension(), 6)
        self.assertIs(self.tsa.action_list(), self.actions)
        reps = self.tsa.state_actions([3., 4.])
        self.assertEqual(len(reps), 3)
        self.assertEqual(reps.dimension(), 6)
        self.assertTrue(np.array_equal(reps[self.actions[1]], [0., 0., 3., 4., 0., 0.]))
        self.assertTrue(np.array_equal(reps.at(self.actions[0]), [3., 4., 0., 0., 0., 0.]))
        self.assertEqual(list(reps), list(self.actions))


    def test_fresh_representations(self):
        r1 = self.tsa.state_actions([1., 1.])
        r2 = self.tsa.state_actions([2., 2.])
        self.assertIsNot(r1.features, r2.features)
        self.assertEqual(r1[self.actions[0]][0], 1.)



class TestPredictors(unittest.TestCase):


    def setUp(self):
        self.phi_a = np.array([1., 0.])
        self.phi_b = np.array([0., 1.])


    def test_not_initialized(self):
        td = TD(0.5, 0.9, 2)
        with self.assertRaises(NotInitializedError):
            td.update(self.phi_a, self.phi_b, 1.)
        td.initialize()
        td.update(self.phi_a, self.phi_b, 1.)
        td.reset()
        with self.assertRaises(NotInitializedError):
            td.update(self.phi_a, self.phi_b, 1.)


    def test_td(self):
        td = TD(0.5, 0.9, 2)
        td.initialize()
        self.assertEqual(td(self.phi_a, self.phi_b, 1.), 1.)
        self.assertTrue(np.allclose(td.v, [0.5, 0.]))
        delta = td.update(self.phi_b, self.phi_a, 0.)
        self.assertAlmostEqual(delta, 0.45)
        self.assertTrue(np.allclose(td.v, [0.5, 0.225]))
        self.assertAlmostEqual(td[self.phi_b], 0.225)
        self.assertIsInstance(td.predict(self.phi_a), float)


    def test_td_lambda(self):
        td = TDLambda(0.5, 0.9, 0.5, Trace(2))
        td.initialize()
        td.update(self.phi_a, self.phi_b, 1.)
        self.assertTrue(np.allclose(td.e.vect, [1., 0.]))
        delta = td.update(self.phi_b, self.phi_a, 0.)
        self.assertAlmostEqual(delta, 0.45)
        self.assertTrue(np.allclose(td.e.vect, [0.45, 1.]))
        self.assertTrue(np.allclose(td.v, [0.60125, 0.225]))
        # a new episode clears traces but keeps weights
        td.initialize()
        self.assertFalse(td.e.vect.any())
        self.assertTrue(td.v.any())
        td.reset()
        self.assertFalse(td.v.any())


    def test_sarsa(self):
        sarsa = Sarsa(0.25, 0.9, 0., Trace(2))
        self.assertEqual(sarsa.alpha_v, 0.25)
        sarsa.initialize()
        sarsa.update(self.phi_a, self.phi_b, 2.)
        self.assertTrue(np.allclose(sarsa.v, [0.5, 0.]))


    def test_scheduled_step_size(self):
        td = TD(LinearSchedule(1., 0., 3), 0.9, 2)
        self.assertEqual(td.alpha_v, 1.)
        td.initialize()
        self.assertEqual(td.alpha_v, 1.)
        td.initialize()
        self.assertEqual(td.alpha_v, 0.5)
        td.reset()
        self.assertEqual(td.alpha_v, 1.)


    def test_gq(self):
        gq = GQ(0.5, 0.25, 0.9, 0.5, Trace(2))
        gq.initialize()
        delta = gq.update(self.phi_a, self.phi_b, 2., 1., 1.)
        self.assertEqual(delta, 1.)
        self.assertTrue(np.allclose(gq.v, [0.5, 0.]))
        self.assertTrue(np.allclose(gq.w, [0.25, 0.]))
        delta = gq.update(self.phi_a, self.phi_b, 2., 1., 1.)
        self.assertAlmostEqual(delta, 0.5)
        self.assertTrue(np.allclose(gq.e.vect, [1.9, 0.]))
        self.assertTrue(np.allclose(gq.v, [0.975, -0.106875]))
        self.assertTrue(np.allclose(gq.w, [0.425, 0.]))


    def test_gq_termination(self):
        gq = GQ(0.5, 0.25, 0.9, 0.5, Trace(2))
        gq.initialize()
        gq.v[:] = (1., 10.)
        delta = gq.update(self.phi_a, self.phi_b, 1., 2., 0.)
        self.assertEqual(delta, 1.)


    def test_gtd_lambda(self):
        gtd = GTDLambda(0.5, 0.25, 0.5, Trace(2))
        gtd.initialize()
        delta = gtd.update(self.phi_a, self.phi_b, 2., 0.9, 1., 1.)
        self.assertEqual(delta, 1.)
        self.assertTrue(np.allclose(gtd.e.vect, [2., 0.]))
        self.assertTrue(np.allclose(gtd.v, [1., 0.]))
        self.assertTrue(np.allclose(gtd.w, [0.5, 0.]))
        gtd.v[:] = (0., 10.)
        delta = gtd.update(self.phi_a, self.phi_b, 1., 0.9, 1., 0.)
        self.assertEqual(delta, 1.)


    def test_weights_updated_in_place(self):
        predictors = (
            (TD(0.5, 0.9, 2), (self.phi_a, self.phi_b, 1.)),
            (TDLambda(0.5, 0.9, 0.5, Trace(2)), (self.phi_a, self.phi_b, 1.)),
            (Sarsa(0.5, 0.9, 0.5, Trace(2)), (self.phi_a, self.phi_b, 1.)),
            (GQ(0.5, 0.25, 0.9, 0.5, Trace(2)), (self.phi_a, self.phi_b, 1., 1., 1.)),
            (GTDLambda(0.5, 0.25, 0.5, Trace(2)), (self.phi_a, self.phi_b, 1., 0.9, 1., 1.)),
        )
        for predictor, args in predictors:
            v = predictor.v
            predictor.initialize()
            predictor.update(*args)
            self.assertIs(predictor.v, v)
            self.assertIs(predictor.weights[0], v)
            self.assertTrue(v.any())


    def test_rejected_delta(self):
        check = lambda delta: check_value(delta, 5., 'delta_t')
        gq = GQ(0.5, 0.25, 0.9, 0.5, Trace(2))
        gtd = GTDLambda(0.5, 0.25, 0.5, Trace(2))
        for predictor, head in ((gq, (self.phi_a, self.phi_b, 1.)),
                                (gtd, (self.phi_a, self.phi_b, 1., 0.9))):
            predictor.initialize()
            for reward in (10., np.inf, np.nan):
                with self.assertLogs('rlcontrol', level='ERROR'):
                    with self.assertRaises(BoundednessError):
                        predictor.update(*head, reward, 0., check=check)
                self.assertFalse(predictor.v.any())
                self.assertFalse(predictor.w.any())
                self.assertFalse(predictor.e.vect.any())
            # an accepted error is applied as usual
            self.assertEqual(predictor.update(*head, 1., 0., check=check), 1.)
            self.assertTrue(predictor.v.any())


    def test_persist_resurrect(self):
        gq = GQ(0.5, 0.25, 0.9, 0.5, Trace(2))
        gq.initialize()
        gq.update(self.phi_a, self.phi_b, 1., 1., 1.)
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, 'gq')
            gq.persist(path)
            fresh = GQ(0.5, 0.25, 0.9, 0.5, Trace(2))
            fresh.resurrect(path)
        self.assertTrue(np.array_equal(fresh.v, gq.v))
        self.assertTrue(np.array_equal(fresh.w, gq.w))
        self.assertEqual(fresh[self.phi_a], gq[self.phi_a])



if __name__ == '__main__':
    unittest.main(verbosity=0)
