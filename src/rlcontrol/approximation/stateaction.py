"""
Maps an observation to the feature vectors of every action taken from it.
"""

from typing import Iterator

import numpy as np

from ..actions import Action, ActionList
from .projector import Projector



class Representations:
    """
    The state-action feature vectors for one observation: one row per action.
    Rows are indexed by action, i.e. `representations[action]`.

    Args:
    * actions: The actions the rows correspond to.
    * features: A 2D array of shape (len(actions), dimension).
    """

    def __init__(self, actions: ActionList, features: np.ndarray):
        self.actions = actions
        self.features = features


    def at(self, action: Action) -> np.ndarray:
        return self.features[action.id]


    def __getitem__(self, action: Action) -> np.ndarray:
        return self.features[action.id]


    def __len__(self) -> int:
        return len(self.actions)


    def __iter__(self) -> Iterator[Action]:
        return iter(self.actions)


    def dimension(self) -> int:
        return self.features.shape[1]



class StateToStateAction:
    """
    Base class. Sub-classes implement `state_actions`.
    """

    def __init__(self, actions: ActionList):
        self.actions = actions


    def state_actions(self, x) -> Representations:
        raise NotImplementedError


    def dimension(self) -> int:
        raise NotImplementedError


    def action_list(self) -> ActionList:
        return self.actions



class BlockStateAction(StateToStateAction):
    """
    Places the projected observation in a block of the feature vector reserved
    for each action. Other blocks are zero. With a tabular projector this is a
    Q-table; with any other projector each action gets its own linear function
    of the same state features.

    Args:
    * projector: Maps observations to state feature vectors.
    * actions: The list of discrete actions.
    """

    def __init__(self, projector: Projector, actions: ActionList):
        super().__init__(actions)
        self.projector = projector
        self.block = projector.dimension()


    def dimension(self) -> int:
        return self.block * len(self.actions)


    def state_actions(self, x) -> Representations:
        phi = self.projector.project(x)
        features = np.zeros((len(self.actions), self.dimension()))
        for a in self.actions:
            features[a.id, a.id * self.block:(a.id + 1) * self.block] = phi
        return Representations(self.actions, features)
