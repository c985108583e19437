import itertools
from typing import Iterable

import numpy as np
import pytest

from pygamma.models import GammaVariate


class ScriptedSource:
    """
    Random source that replays a fixed list of draws and counts how many were taken.
    """

    def __init__(self, values: Iterable[float], repeat: bool = False) -> None:
        values = list(values)
        self._values = itertools.cycle(values) if repeat else iter(values)
        self.n_draws = 0

    def draw(self) -> float:
        self.n_draws += 1
        try:
            return next(self._values)
        except StopIteration:
            raise AssertionError(f"scripted source exhausted after {self.n_draws - 1} draws") from None


@pytest.fixture
def scripted_source():
    return ScriptedSource


@pytest.fixture
def seeded_model() -> GammaVariate:
    return GammaVariate(rng=np.random.default_rng(20240917))


@pytest.fixture(scope="session")
def shape_scale_grid() -> list[tuple[float, float]]:
    """
    Shape and scale pairs that cover both sampling branches and the exponential case.
    """
    return [
        (a, b)
        for a in (0.5, 1.0, 2.0, 5.0)
        for b in (0.5, 1.0, 2.0)
    ]
