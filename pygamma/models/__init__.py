from pygamma.models.basemodel import (
    DEFAULT_MAX_ITERATIONS,
    BaseGamma,
    BaseGamma_IncompleteGamma,
    GammaStats,
)
from pygamma.models.gamma import GammaParams, GammaVariate
