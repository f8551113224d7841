"""
Defines functions that enumerate discrete `gym` spaces and convert samples to
and from flat tuples. Used to build `ActionList`s and tabular projectors from
an environment's spaces.
"""

from itertools import product
from typing import List, Tuple, Union

import numpy as np
from gym.spaces import Space
from gym.spaces import Tuple as TupleSpace
from gym.spaces import Box, Discrete, MultiBinary, MultiDiscrete



def enumerate_discrete_space(space: Space, prod: bool = True) -> List[Tuple[int]]:
    """
    Generates space coordinate tuples for a discrete space. I.e. a (2,2)
    `MultiDiscrete` space becomes [(0,0), (0,1), (1,0), (1,1)].

    Args:
    * space: A discrete space instance from `gym.spaces`.
    * prod: Whether to return the product or the individual enumerations of
    variables. For e.g. MultiBinary(2) with product: (0,0), (0,1), (1,0), (1,1)
    and without product: [(0,1), (0,1)].

    Returns:
    * A list of coordinate tuples, or a list of per-variable enumerations.

    Raises:
    * ValueError if the space has a continuous variable.
    """
    if isinstance(space, MultiBinary):
        linspaces = [(0, 1)] * space.n
    elif isinstance(space, Discrete):
        start = int(getattr(space, 'start', 0))
        linspaces = [tuple(range(start, start + int(space.n)))]
    elif isinstance(space, MultiDiscrete):
        linspaces = [tuple(range(int(n))) for n in np.ravel(space.nvec)]
    elif isinstance(space, Box) and np.issubdtype(space.dtype, np.integer):
        linspaces = [tuple(range(int(l), int(h) + 1)) for \
                    l, h in zip(space.low.ravel(), space.high.ravel())]
    elif isinstance(space, TupleSpace):
        linspaces = []
        for subspace in space.spaces:
            linspaces.extend(enumerate_discrete_space(subspace, False))
    else:
        raise ValueError('Cannot enumerate space {}.'.format(space))
    return list(product(*linspaces)) if prod else linspaces



def bounds(space: Space) -> Tuple[Tuple[float, float]]:
    """
    Computes the inclusive bounds for each variable in a tuple representing the
    space. So a TupleSpace(Discrete(2), MultiDiscrete([3, 5])) will have
    bounds of ((0,1), (0,2), (0, 4)). Infinite limits are returned as None.

    Args:
    * space (Space): Space instance describing the sample.

    Returns:
    * A flat tuple of inclusive (low, high) bounds for each variable.
    """
    if isinstance(space, Discrete):
        start = int(getattr(space, 'start', 0))
        return ((start, start + int(space.n) - 1),)
    elif isinstance(space, MultiDiscrete):
        return tuple((0, int(n) - 1) for n in np.ravel(space.nvec))
    elif isinstance(space, MultiBinary):
        return tuple([(0, 1)] * space.n)
    elif isinstance(space, Box):
        bds = zip(space.low.ravel(), space.high.ravel())
        return tuple((None if l == -np.inf else l, None if h == np.inf else h) \
                    for l, h in bds)
    flattened = []
    for subspace in space.spaces:
        flattened.extend(bounds(subspace))
    return tuple(flattened)



def is_continuous(space: Space) -> Tuple[bool]:
    """
    Checks whether each variable in space is continuous or discrete. Only True
    for Box space with float dtype.

    Args:
    * space: The `gym.spaces.Space` instance.

    Returns:
    * A tuple of length equal to variables in space which is True when the
    corresponding variable is continuous.
    """
    if isinstance(space, Discrete):
        return (False,)
    elif isinstance(space, MultiDiscrete):
        return tuple([False] * len(np.ravel(space.nvec)))
    elif isinstance(space, MultiBinary):
        return tuple([False] * space.n)
    elif isinstance(space, Box):
        res = not np.issubdtype(space.dtype, np.integer)
        return tuple([res] * int(np.prod(space.shape)))
    continuous = []
    for subspace in space.spaces:
        continuous.extend(is_continuous(subspace))
    return tuple(continuous)



def to_tuple(space: Space, sample) -> Tuple:
    """
    Converts a sample from one of `gym.spaces` instances into a flat tuple
    of values.

    Args:
    * space (Space): Space instance describing the sample.
    * sample: The sample (`space.sample()` result type) to be flattened.

    Returns:
    * A flat tuple of variables.
    """
    if isinstance(space, Discrete):
        return (sample,)
    elif isinstance(space, (MultiBinary, MultiDiscrete, Box)):
        return tuple(np.asarray(sample).ravel())
    flattened = []
    for subspace, subsample in zip(space.spaces, sample):
        flattened.extend(to_tuple(subspace, subsample))
    return tuple(flattened)



def to_space(space: Space, sample: Tuple) -> Union[int, tuple, np.ndarray]:
    """
    Reconstructs a `gym.spaces` sample from a flat tuple. Reverse of `to_tuple`.

    Args:
    * space (Space): Space instance describing the sample.
    * sample: The flat tuple to be reconstructed into a sample.

    Returns:
    * Any one of int, tuple, np.ndarray depending on space.
    """
    if isinstance(space, Discrete):
        return sample[0]
    elif isinstance(space, (MultiBinary, MultiDiscrete)):
        return tuple(sample)
    elif isinstance(space, Box):
        return np.asarray(sample).reshape(space.shape).astype(space.dtype)
    aggregate = []
    i = 0
    for subspace in space.spaces:
        n = len(is_continuous(subspace))
        aggregate.append(to_space(subspace, sample[i:i+n]))
        i += n
    return tuple(aggregate)
