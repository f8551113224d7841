"""
Implements the base Predictor class: a linear value function learned by
temporal differences.
"""

import numpy as np

from ..errors import NotInitializedError
from ..helpers.parameters import ScheduledParameters
from ..logging import get_logger
from .vectors import Vectors, Traces

logger = get_logger(__name__)



class Predictor(ScheduledParameters):
    """
    A linear predictor `V(phi) = v . phi`. The first weight block is `v`;
    further blocks hold auxiliary weights (e.g. gradient-TD corrections).
    Indexing a predictor predicts, calling it updates.

    Args:
    * weights: The weight blocks, persisted together.
    * traces: Eligibility traces cleared at every episode start. Optional.
    * step_sizes: Step-size parameters, numbers or `Schedule`s, set as
    attributes of the same name.
    """

    def __init__(self, weights: Vectors, traces: Traces=None, **step_sizes):
        self.weights = weights
        self.traces = Traces() if traces is None else traces
        self.initialized = False
        self.schedule(**step_sizes)


    def __str__(self):
        return self.__class__.__name__


    @property
    def v(self) -> np.ndarray:
        return self.weights[0]


    def initialize(self):
        """
        Starts an episode: clears traces and evaluates step-size schedules.
        """
        self.advance_schedules()
        self.traces.clear()
        self.initialized = True


    def reset(self):
        """
        Forgets everything learned. `initialize()` must be called before the
        next update.
        """
        self.weights.clear()
        self.traces.clear()
        self.restart_schedules()
        self.initialized = False


    def check_initialized(self):
        if not self.initialized:
            raise NotInitializedError('{} updated before initialize().'.format(self))


    def predict(self, phi: np.ndarray) -> float:
        return float(self.v.dot(phi))


    def update(self, *args, **kwargs) -> float:
        raise NotImplementedError


    def persist(self, path: str):
        self.weights.persist(path)


    def resurrect(self, path: str):
        self.weights.resurrect(path)


    def __getitem__(self, phi: np.ndarray) -> float:
        return self.predict(phi)


    def __call__(self, *args, **kwargs) -> float:
        return self.update(*args, **kwargs)
