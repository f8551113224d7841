"""
Defines containers for weight and trace vectors. Vectors are 1D `np.ndarray`s
of floats. Containers hand out references to their arrays and only ever modify
them in place, so a policy and its actor can share parameter blocks.
"""

from typing import Iterable

import numpy as np

from ..errors import DimensionMismatchError
from ..logging import get_logger

logger = get_logger(__name__)



class Vectors(list):
    """
    An ordered collection of parameter blocks, each a 1D array.

    Args:
    * blocks: Block sizes (ints) or existing arrays. Arrays are used as-is,
    not copied.
    """

    def __init__(self, blocks: Iterable=()):
        super().__init__(np.zeros(b) if isinstance(b, (int, np.integer)) else b\
                        for b in blocks)


    @classmethod
    def like(cls, other: 'Vectors') -> 'Vectors':
        """
        Creates zeroed blocks with the same sizes as `other`.
        """
        return cls(np.zeros_like(v) for v in other)


    def dimension(self) -> int:
        return len(self)


    def at(self, i: int) -> np.ndarray:
        return self[i]


    def clear(self):
        for v in self:
            v.fill(0.)


    def persist(self, path: str):
        """
        Saves all blocks to a single file at exactly `path`.
        """
        with open(path, 'wb') as f:
            np.savez(f, *self)
        logger.debug('Persisted %d blocks to %s', len(self), path)


    def resurrect(self, path: str):
        """
        Restores all blocks from a file written by `persist`. Values are copied
        into the existing arrays.

        Raises:
        * DimensionMismatchError if the stored blocks do not match in number or
        size.
        """
        with open(path, 'rb') as f, np.load(f) as data:
            stored = [data['arr_{}'.format(i)] for i in range(len(data.files))]
        if len(stored) != len(self):
            raise DimensionMismatchError('{} stores {} blocks, expected {}.'\
                                        .format(path, len(stored), len(self)))
        for v, s in zip(self, stored):
            if v.shape != s.shape:
                raise DimensionMismatchError('{} stores block of shape {}, expected {}.'\
                                            .format(path, s.shape, v.shape))
        for v, s in zip(self, stored):
            np.copyto(v, s)
        logger.debug('Resurrected %d blocks from %s', len(self), path)



class Trace:
    """
    An accumulating eligibility trace: `e = decay * e + x`.

    Args:
    * dimension: Size of the trace vector.
    """

    def __init__(self, dimension: int):
        self.vect = np.zeros(dimension)


    def dimension(self) -> int:
        return self.vect.size


    def update(self, decay: float, x: np.ndarray):
        self.vect *= decay
        self.vect += x


    def multiply(self, factor: float):
        self.vect *= factor


    def clear(self):
        self.vect.fill(0.)



class Traces(list):
    """
    One `Trace` per parameter block.

    Args:
    * dimensions: Sizes of each trace, usually `[v.size for v in parameters]`.
    """

    def __init__(self, dimensions: Iterable[int]=()):
        super().__init__(Trace(d) for d in dimensions)


    @classmethod
    def like(cls, parameters: Vectors) -> 'Traces':
        return cls(v.size for v in parameters)


    def dimension(self) -> int:
        return len(self)


    def at(self, i: int) -> Trace:
        return self[i]


    def clear(self):
        for e in self:
            e.clear()
