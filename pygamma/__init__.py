from pygamma.errors import InvalidParameter, SamplingStalled
from pygamma.models import DEFAULT_MAX_ITERATIONS, GammaParams, GammaStats, GammaVariate
from pygamma.sources import NormalSource, UniformSource
from pygamma.special import IncompleteGamma, ScipyIncompleteGamma, SeriesIncompleteGamma

__version__ = "0.1.0"
