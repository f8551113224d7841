import logging
import unittest

import gym
import numpy as np

from . import spaces
from .parameters import *
from .boundedness import check_value, check_ratio
from ..actions import Action, ActionList
from ..errors import BoundednessError
from ..logging import get_logger, set_log_level



class TestSpaces(unittest.TestCase):


    def setUp(self):
        self.boxspace = gym.spaces.Box(low=0, high=4, shape=(2,), dtype=int)
        self.boxcont = gym.spaces.Box(low=0, high=4, shape=(2,), dtype=float)
        self.discspace = gym.spaces.Discrete(3)
        self.binspace = gym.spaces.MultiBinary(2)
        self.multispace = gym.spaces.MultiDiscrete([3, 2])

        self.tuplespace = gym.spaces.Tuple((self.multispace, self.binspace, self.discspace))
        self.tuplecont = gym.spaces.Tuple((self.boxcont, self.binspace, self.discspace))


    def test_enumerate_discrete_space_atomic(self):
        # multibinary
        b = spaces.enumerate_discrete_space(self.binspace)
        self.assertEqual(len(b), 4)
        self.assertEqual(len(b[0]), 2)
        # multidiscrete
        m = spaces.enumerate_discrete_space(self.multispace)
        self.assertEqual(len(m), 6)
        self.assertEqual(len(m[0]), 2)
        self.assertTrue(np.issubdtype(type(m[0][0]), np.integer))
        # integer box
        b = spaces.enumerate_discrete_space(self.boxspace)
        self.assertEqual(len(b), 5**2)
        self.assertEqual(len(b[0]), 2)
        # discrete with offset
        d = spaces.enumerate_discrete_space(gym.spaces.Discrete(3, start=-1))
        self.assertEqual(d, [(-1,), (0,), (1,)])


    def test_enumerate_discrete_space_composite(self):
        t = spaces.enumerate_discrete_space(self.tuplespace)
        self.assertEqual(len(t), 72)
        self.assertEqual(len(t[0]), 5)
        doubletuplespace = gym.spaces.Tuple((self.tuplespace, self.tuplespace))
        t2 = spaces.enumerate_discrete_space(doubletuplespace)
        self.assertEqual(len(t2), 72*72)
        self.assertEqual(len(t2[0]), 10)
        # per-variable enumeration
        v = spaces.enumerate_discrete_space(self.binspace, prod=False)
        self.assertEqual(v, [(0, 1), (0, 1)])


    def test_enumerate_continuous_space(self):
        with self.assertRaises(ValueError):
            spaces.enumerate_discrete_space(self.boxcont)
        with self.assertRaises(ValueError):
            spaces.enumerate_discrete_space(self.tuplecont)


    def test_bounds(self):
        b = spaces.bounds(self.tuplespace)
        self.assertEqual(b, ((0, 2), (0, 1), (0, 1), (0, 1), (0, 2)))
        unbounded = gym.spaces.Box(low=-np.inf, high=1., shape=(1,), dtype=float)
        self.assertEqual(spaces.bounds(unbounded), ((None, 1.),))


    def test_is_continuous(self):
        self.assertEqual(spaces.is_continuous(self.tuplecont),\
                        (True, True, False, False, False))
        self.assertEqual(spaces.is_continuous(self.boxspace), (False, False))


    def test_to_tuple(self):
        sample = self.tuplespace.sample()
        t = spaces.to_tuple(self.tuplespace, sample)
        self.assertEqual(len(t), 5)
        self.assertIsInstance(t, tuple)


    def test_to_space(self):
        sample = (1, 1, 1, 1, 1)
        space = spaces.to_space(self.tuplespace, sample)
        self.assertIsInstance(space, tuple)
        self.assertEqual(len(space), 3)
        self.assertIsInstance(space[0], tuple)
        self.assertIsInstance(space[1], tuple)
        self.assertTrue(np.issubdtype(type(space[2]), np.integer))
        sample = (1, 1, 1, 1, 1, 1, 1, 1)
        space = spaces.to_space(self.tuplecont, sample)
        self.assertIsInstance(space, tuple)
        self.assertEqual(len(space), 3)
        self.assertEqual(space[0].shape, (2,))
        self.assertTrue(np.issubdtype(type(space[2]), np.integer))



class TestActionList(unittest.TestCase):


    def test_from_count(self):
        actions = ActionList(3)
        self.assertEqual(len(actions), 3)
        self.assertEqual([a.id for a in actions], [0, 1, 2])
        self.assertEqual(actions[2], Action(2, 2))


    def test_from_values(self):
        actions = ActionList(['left', 'right'])
        self.assertEqual(actions[1].id, 1)
        self.assertEqual(actions[1].value, 'right')


    def test_from_space(self):
        actions = ActionList.from_space(gym.spaces.Discrete(3))
        self.assertEqual([a.value for a in actions], [0, 1, 2])
        actions = ActionList.from_space(gym.spaces.MultiBinary(2))
        self.assertEqual(len(actions), 4)
        self.assertEqual(actions[3].value, (1, 1))
        self.assertTrue(gym.spaces.MultiBinary(2).contains(np.asarray(actions[3].value)))



class TestParameters(unittest.TestCase):


    def schedule_tester(self, schedule: Schedule):
        # test ascending
        s = schedule(1, 4, 5)
        vals = [s(i) for i in range(-1, 6)]
        self.assertEqual(1, vals[0])
        self.assertEqual(1, vals[1])
        self.assertEqual(4, vals[-1])
        self.assertEqual(4, vals[-2])
        # test ascending with implicit `at` parameter
        s = schedule(1, 4, 5)
        vals = [s() for _ in range(6)]
        self.assertEqual(1, vals[0])
        self.assertEqual(4, vals[-1])
        self.assertEqual(4, vals[-2])
        # test descending
        s = schedule(4, 1, 5)
        vals = [s(i) for i in range(-1, 6)]
        self.assertEqual(1, vals[-1])
        self.assertEqual(1, vals[-2])
        self.assertEqual(4, vals[0])
        self.assertEqual(4, vals[1])
        # test descending with implicit `at` parameter
        s = schedule(4, 1, 5)
        vals = [s() for _ in range(6)]
        self.assertEqual(1, vals[-1])
        self.assertEqual(1, vals[-2])
        self.assertEqual(4, vals[0])


    def test_linear_schedule(self):
        self.schedule_tester(LinearSchedule)


    def test_logarithmic_schedule(self):
        self.schedule_tester(LogarithmicSchedule)


    def test_exponential_schedule(self):
        self.schedule_tester(ExponentialSchedule)


    def test_episode_counter(self):
        linear = LinearSchedule(1, 4, 5)
        linear(10)
        self.assertEqual(linear.at, 11)
        for schedule in (LogarithmicSchedule(1, 4, 5), ExponentialSchedule(1, 4, 5)):
            self.assertEqual(schedule(10), 4)
            self.assertEqual(schedule.at, 5)
            self.assertEqual(schedule(), 4)


    def test_evaluate_schedule_kwargs(self):
        kwargs = {'log': LogarithmicSchedule(0, 4, 5),
                'lin': LinearSchedule(0, 4, 5),
                'extra': 5,
                'blah': 'blah'}
        for i in range(10):
            res = evaluate_schedule_kwargs(i, **kwargs)
            self.assertEqual(len(res), len(kwargs))
            self.assertEqual(res['lin'], kwargs['lin'](i))
            self.assertEqual(res['log'], kwargs['log'](i))


    def test_scheduled_parameters(self):
        class Stepped(ScheduledParameters):
            pass

        s = Stepped()
        s.schedule(alpha=LinearSchedule(1, 0, 3), beta=0.5)
        self.assertEqual(s.alpha, 1.)
        self.assertEqual(s.beta, 0.5)
        values = []
        for _ in range(4):
            s.advance_schedules()
            values.append(s.alpha)
        self.assertEqual(values, [1., 0.5, 0., 0.])
        self.assertEqual(s.beta, 0.5)
        self.assertEqual(s.episodes, 4)
        s.restart_schedules()
        self.assertEqual(s.alpha, 1.)
        self.assertEqual(s.episodes, 0)



class TestBoundedness(unittest.TestCase):


    def test_check_value(self):
        self.assertEqual(check_value(-2.5), -2.5)
        self.assertEqual(check_value(0.5, 1.), 0.5)
        with self.assertLogs('rlcontrol', level='ERROR'):
            with self.assertRaises(BoundednessError):
                check_value(2., 1.)
        with self.assertLogs('rlcontrol', level='ERROR'):
            with self.assertRaises(BoundednessError):
                check_value(np.nan)


    def test_check_ratio(self):
        self.assertEqual(check_ratio(0.), 0.)
        self.assertEqual(check_ratio(3., 5.), 3.)
        for bad in (np.nan, np.inf, -0.1):
            with self.assertLogs('rlcontrol', level='ERROR'):
                with self.assertRaises(BoundednessError) as ctx:
                    check_ratio(bad, name='rho_t')
            self.assertEqual(ctx.exception.name, 'rho_t')
        with self.assertLogs('rlcontrol', level='ERROR'):
            with self.assertRaises(ArithmeticError):
                check_ratio(6., 5.)



class TestLogging(unittest.TestCase):


    def test_get_logger(self):
        self.assertEqual(get_logger('demo').name, 'rlcontrol.demo')
        self.assertEqual(get_logger('rlcontrol.helpers').name, 'rlcontrol.helpers')
        self.assertIs(get_logger('demo'), get_logger('demo'))
        self.assertEqual(get_logger().name, 'rlcontrol')


    def test_set_log_level(self):
        root = get_logger()
        previous = root.level
        try:
            set_log_level('debug')
            self.assertEqual(root.level, logging.DEBUG)
            self.assertTrue(get_logger('demo').isEnabledFor(logging.DEBUG))
            set_log_level(logging.ERROR)
            self.assertEqual(root.level, logging.ERROR)
        finally:
            set_log_level(previous)



if __name__ == '__main__':
    unittest.main(verbosity=0)
