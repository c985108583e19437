from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Type, Union

import numpy as np

from pygamma.sources import (
    IStandardNormalSource,
    IUniformSource,
    NormalSource,
    UniformSource,
    as_generator,
)
from pygamma.special import IIncompleteGamma, ScipyIncompleteGamma

log = logging.getLogger(__name__)

BaseGamma_IncompleteGamma = Optional[Union[IIncompleteGamma, Type[IIncompleteGamma]]]

# Candidates tried per draw before the sampler gives up.
DEFAULT_MAX_ITERATIONS = 10000


class GammaStats(Enum):
    MEAN = 0  # Mean
    VAR = 1  # Variance
    CVAR = 2  # Coefficient of variation
    SKEWNESS = 3  # Skewness
    MODE = 4  # Mode


class BaseGamma():
    rng: np.random.Generator
    normal_source: IStandardNormalSource
    uniform_source: IUniformSource
    incomplete_gamma: Union[IIncompleteGamma, Type[IIncompleteGamma]]
    max_iterations: Optional[int]

    def __init__(
        self,
        rng: Any = None,
        normal_source: Optional[IStandardNormalSource] = None,
        uniform_source: Optional[IUniformSource] = None,
        incomplete_gamma: BaseGamma_IncompleteGamma = None,
        max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS,
    ) -> None:
        self.rng = as_generator(rng)

        if normal_source is None:
            self.normal_source = NormalSource(self.rng)
        elif isinstance(normal_source, IStandardNormalSource):
            self.normal_source = normal_source
        else:
            raise TypeError("normal_source must be a implementation of IStandardNormalSource")

        if uniform_source is None:
            self.uniform_source = UniformSource(self.rng)
        elif isinstance(uniform_source, IUniformSource):
            self.uniform_source = uniform_source
        else:
            raise TypeError("uniform_source must be a implementation of IUniformSource")

        if incomplete_gamma is None:
            self.incomplete_gamma = ScipyIncompleteGamma()
        elif isinstance(incomplete_gamma, IIncompleteGamma):
            # Providers only carry static methods, so classes and instances both work
            self.incomplete_gamma = incomplete_gamma
        else:
            raise TypeError("incomplete_gamma must be a implementation of IIncompleteGamma")

        if max_iterations is not None and (
            isinstance(max_iterations, bool)
            or not isinstance(max_iterations, (int, np.integer))
            or max_iterations < 1
        ):
            raise ValueError(f"max_iterations must be a positive int or None. Got {max_iterations!r}.")
        self.max_iterations = max_iterations

        log.debug(
            "%s ready: normal_source=%s uniform_source=%s incomplete_gamma=%s max_iterations=%s",
            type(self).__name__,
            type(self.normal_source).__name__,
            type(self.uniform_source).__name__,
            getattr(self.incomplete_gamma, "__name__", type(self.incomplete_gamma).__name__),
            self.max_iterations,
        )
