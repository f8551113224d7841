"""
Defines the discrete action set that learners and policies choose from.
"""

from collections import namedtuple

from gym.spaces import Space

from .helpers import spaces



class Action(namedtuple('Action', ('id', 'value'))):
    """
    A discrete action.

    Attributes:
    * id (int): Index of the action in its `ActionList`. Also used to index
    rows of `Representations` and probability arrays.
    * value: What the environment is sent when the action is executed.
    """
    __slots__ = ()



class ActionList(list):
    """
    An ordered list of `Action`s, ids numbered from 0.

    Args:
    * actions: Either the number of actions, or an iterable of action values.
    """

    def __init__(self, actions):
        if isinstance(actions, int):
            actions = range(actions)
        super().__init__(Action(i, v) for i, v in enumerate(actions))


    @classmethod
    def from_space(cls, space: Space) -> 'ActionList':
        """
        Enumerates a discrete `gym` action space. Action values are samples of
        that space, ready to be passed to `env.step()`.

        Args:
        * space: A discrete space from `gym.spaces`.
        """
        return cls(spaces.to_space(space, t) for t in \
                    spaces.enumerate_discrete_space(space))
