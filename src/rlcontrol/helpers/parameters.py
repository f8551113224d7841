"""
Step-size schedules. A `Schedule` is called once per episode and returns the
step size for that episode: `init` at episode 0, moving to `final` by episode
`steps - 1` and staying there. Calling without an episode continues from the
last call.

Predictors and actors accept either a number or a `Schedule` for each of their
step sizes. `ScheduledParameters` evaluates those at every episode start, i.e.
at every call to `initialize()`.
"""

import numpy as np



class Schedule:
    """
    A step size that never changes.
    """

    def __init__(self, init: float, *args, **kwargs):
        self.init = init
        self.final = init
        self.steps = np.inf


    def __call__(self, at: int=None):
        return self.init



class RampSchedule(Schedule):
    """
    Base for schedules moving from `init` to `final` over `steps` episodes.
    Subclasses implement `value(at)`, which is clipped to the range spanned by
    `init` and `final`. With `clip_episode`, episodes outside `[0, steps)` are
    clamped before evaluation.

    Args:
    * init: Step size at episode 0.
    * final: Step size from episode `steps - 1` on.
    * steps: Number of episodes the change is spread over.
    """

    clip_episode = False

    def __init__(self, init: float, final: float, steps: int):
        self.init = init
        self.final = final
        self.steps = steps
        self.low, self.high = min(init, final), max(init, final)
        self.at = 0


    def position(self, at: int=None) -> int:
        """
        Resolves the episode to evaluate at and advances the implicit counter.
        """
        at = self.at if at is None else at
        if self.clip_episode:
            at = np.clip(at, 0, self.steps - 1)
        self.at = at + 1
        return at


    def value(self, at: int) -> float:
        raise NotImplementedError


    def __call__(self, at: int=None):
        return np.clip(self.value(self.position(at)), self.low, self.high)



class LinearSchedule(RampSchedule):
    """
    Changes the step size by the same amount every episode.
    """

    def __init__(self, init: float, final: float, steps: int):
        super().__init__(init, final, steps)
        self.slope = (final - init) / (steps - 1)


    def value(self, at: int) -> float:
        return self.init + self.slope * at



class LogarithmicSchedule(RampSchedule):
    """
    Changes the step size fastest in the first episodes.
    """

    clip_episode = True

    def __init__(self, init: float, final: float, steps: int):
        super().__init__(init, final, steps)
        self.logbase = np.log(steps) / abs(final - init)


    def value(self, at: int) -> float:
        if self.final > self.init:
            return self.init + np.log(at + 1) / self.logbase
        return self.final + np.log(self.steps - at) / self.logbase



class ExponentialSchedule(RampSchedule):
    """
    Changes the step size fastest in the last episodes.
    """

    clip_episode = True

    def __init__(self, init: float, final: float, steps: int):
        super().__init__(init, final, steps)
        self.multiplier = (self.high - self.low + 1) / np.exp(steps - 1)


    def value(self, at: int) -> float:
        if self.final > self.init:
            return self.init + (np.exp(at) - 1) * self.multiplier
        return self.final + (np.exp(self.steps - 1 - at) - 1) * self.multiplier



def evaluate_schedule_kwargs(at: int, **kwargs):
    """
    Evaluates every `Schedule` among keyword arguments at episode `at`. Other
    values are passed through.
    """
    return {k: v(at) if isinstance(v, Schedule) else v for k, v in kwargs.items()}



class ScheduledParameters:
    """
    Mixin for components with step sizes that may change between episodes.
    Each scheduled parameter is exposed as a plain float attribute holding its
    value for the current episode.
    """

    def schedule(self, **parameters):
        """
        Registers step-size parameters and sets them to their initial values.

        Args:
        * parameters: Names mapped to a number or a `Schedule`.
        """
        self.schedules = {k: v if isinstance(v, Schedule) else Schedule(v) \
                            for k, v in parameters.items()}
        self.episodes = 0
        self._evaluate_schedules(0)


    def advance_schedules(self):
        """
        Sets parameters to their values for the episode about to begin.
        """
        self._evaluate_schedules(self.episodes)
        self.episodes += 1


    def restart_schedules(self):
        self.episodes = 0
        self._evaluate_schedules(0)


    def _evaluate_schedules(self, at: int):
        for name, value in evaluate_schedule_kwargs(at, **self.schedules).items():
            setattr(self, name, float(value))
