"""
Helper functions and classes:

* `spaces`: enumerate and flatten `gym.spaces`,
* `parameters`: step-size `Schedule`s,
* `boundedness`: validity checks for importance ratios and TD errors.
"""

from . import spaces, boundedness
from .parameters import Schedule, RampSchedule, LinearSchedule
from .parameters import LogarithmicSchedule, ExponentialSchedule
from .parameters import ScheduledParameters, evaluate_schedule_kwargs
from .boundedness import check_value, check_ratio
