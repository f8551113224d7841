"""
Linear function approximation. Defines:

* weight and trace containers (`Vectors`, `Trace`, `Traces`),
* `Projector`s mapping observations to feature vectors (`IdentityProjector`,
`TabularProjector`, `PolynomialProjector`),
* `StateToStateAction` mappings producing per-action `Representations`,
* `Predictor`s learning linear value functions by temporal differences
(`TD`, `TDLambda`, `Sarsa`, `GQ`, `GTDLambda`).

All `Predictor`s have the following API:

* Methods:
  * initialize(): starts an episode. Must be called before updates.
  * update(...): learns from one transition and returns the TD error.
  * predict(phi): returns the value of a feature vector.
  * reset(): forgets all learned weights.
  * persist(path) / resurrect(path): saves / restores weights.
"""

from .vectors import Vectors, Trace, Traces
from .projector import Projector, IdentityProjector
from .tabular import TabularProjector
from .polynomial import PolynomialProjector
from .stateaction import Representations, StateToStateAction, BlockStateAction
from .predictor import Predictor
from .td import TD, TDLambda, GTDLambda
from .sarsa import Sarsa
from .gq import GQ
