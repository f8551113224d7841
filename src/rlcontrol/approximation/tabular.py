"""
Tabular feature projection.
"""

from typing import Iterable, Tuple, Union

import numpy as np
from gym.spaces import Space

from ..helpers import spaces
from .projector import Projector



class TabularProjector(Projector):
    """
    Projects observations onto a one-hot vector with one feature per cell of a
    grid. Each observation variable is split into `dims[i]` equal bins between
    `low[i]` and `high[i]`. Values outside the limits fall into the edge bins.
    A linear function over these features is a lookup table.

    Args:
    * dims: The tuple containing the number of bins for each variable.
    * low: The lowest limits for each variable. Defaults 0. Inclusive.
    * high: The highest limits for each variable. Defaults to `dims`.
    """

    def __init__(self, dims: Tuple[int], low: Tuple[float]=(), high: Tuple[float]=()):
        self.shape = np.asarray(dims)
        self.low = np.asarray(low, dtype=float) if len(low) else np.zeros((len(dims),))
        self.high = np.asarray(high, dtype=float) if len(high) else self.shape.astype(float)
        self.range = self.high - self.low


    @classmethod
    def from_space(cls, space: Space, resolution: int=10) -> 'TabularProjector':
        """
        Creates a projector over a bounded `gym` space. Discrete variables get
        one bin per value, continuous ones `resolution` bins.

        Raises:
        * ValueError if a variable is unbounded.
        """
        bds = spaces.bounds(space)
        if any(l is None or h is None for l, h in bds):
            raise ValueError('Space {} is unbounded.'.format(space))
        cont = spaces.is_continuous(space)
        dims, low, high = [], [], []
        for (l, h), c in zip(bds, cont):
            if c:
                dims.append(resolution)
                low.append(l)
                high.append(h)
            else:
                # integer bins centred on each value
                dims.append(int(h - l + 1))
                low.append(l - 0.5)
                high.append(h + 0.5)
        return cls(dims, low, high)


    def discretize(self, x: Iterable[Union[float, int]]) -> Tuple[int]:
        """
        Converts an observation into grid indices.

        Args:
        * x: The observation variables.

        Returns:
        * The index of the corresponding cell for each variable.
        """
        key = (np.asarray(x, dtype=float).ravel() - self.low) * self.shape / self.range
        key = np.clip(key, 0, self.shape - 1)
        return tuple(key.astype(int))


    def dimension(self) -> int:
        return int(np.prod(self.shape))


    def project(self, x) -> np.ndarray:
        phi = np.zeros(self.dimension())
        phi[np.ravel_multi_index(self.discretize(x), tuple(self.shape))] = 1.
        return phi
