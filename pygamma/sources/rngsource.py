from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, Union, runtime_checkable

import numpy as np

from pygamma.errors import SamplingStalled

log = logging.getLogger(__name__)

RNGLike = Optional[Union[np.random.Generator, np.random.BitGenerator, np.random.SeedSequence, int]]


@runtime_checkable
class IStandardNormalSource(Protocol):
    def draw(self) -> float:
        ...


@runtime_checkable
class IUniformSource(Protocol):
    def draw(self) -> float:
        ...


def as_generator(rng: Any = None) -> np.random.Generator:
    if rng is None:
        return np.random.default_rng()
    elif isinstance(rng, np.random.Generator):
        return rng
    else:
        return np.random.default_rng(rng)


class NormalSource(IStandardNormalSource):
    __slots__ = ("rng",)

    def __init__(self, rng: RNGLike = None) -> None:
        self.rng = as_generator(rng)

    def draw(self) -> float:
        return float(self.rng.standard_normal())


class UniformSource(IUniformSource):
    __slots__ = ("rng",)

    def __init__(self, rng: RNGLike = None) -> None:
        self.rng = as_generator(rng)

    def draw(self) -> float:
        # Generator.random() samples the half-open interval [0, 1)
        return float(self.rng.random())


def uniform_pos(source: IUniformSource, max_draws: Optional[int] = None) -> float:
    """
    Draw a uniform number in the open interval (0, 1).

    Parameters
    ----------
    source : IUniformSource
        Source of uniform draws in [0, 1).
    max_draws : int, None
        Maximum number of draws before giving up. `None` means no limit.

    Returns
    -------
    float
        A strictly positive uniform draw.
    """
    n_draws = 0
    while True:
        u = source.draw()
        if u > 0.0:
            return u
        n_draws += 1
        if max_draws is not None and n_draws >= max_draws:
            log.warning("Uniform source gave up after %d non-positive draws", n_draws)
            raise SamplingStalled(
                f"uniform source returned {n_draws} non-positive draws in a row"
            )
