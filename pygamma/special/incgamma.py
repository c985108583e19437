from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

import numba as nb  # type: ignore
import numpy as np
import scipy as sp  # type: ignore

# Minimum iteration budget and tolerances of the series / continued fraction kernels.
# Both expansions need O(sqrt(a)) terms near y = a, so the budget grows with the shape.
MAX_ITERATIONS = 10000
EPS = 1e-15
FPMIN = 1e-300


@runtime_checkable
class IIncompleteGamma(Protocol):
    @staticmethod
    def p(a: float, y: float) -> float:
        ...

    @staticmethod
    def q(a: float, y: float) -> float:
        ...

    @staticmethod
    def lngamma(a: float) -> float:
        ...


class ScipyIncompleteGamma(IIncompleteGamma):
    @staticmethod
    def p(a: float, y: float) -> float:
        return float(sp.special.gammainc(a, y))

    @staticmethod
    def q(a: float, y: float) -> float:
        return float(sp.special.gammaincc(a, y))

    @staticmethod
    def lngamma(a: float) -> float:
        return float(sp.special.gammaln(a))


class SeriesIncompleteGamma(IIncompleteGamma):
    @staticmethod
    def p(a: float, y: float) -> float:
        return _incgamma_p(a, y)

    @staticmethod
    def q(a: float, y: float) -> float:
        return _incgamma_q(a, y)

    @staticmethod
    def lngamma(a: float) -> float:
        return math.lgamma(a)


class IncompleteGamma:
    ScipyIncompleteGamma = ScipyIncompleteGamma
    SeriesIncompleteGamma = SeriesIncompleteGamma


@nb.njit("i8(f8)", cache=True)
def _iteration_budget(a: float) -> int:
    return max(MAX_ITERATIONS, int(100.0 * math.sqrt(a)))


@nb.njit("f8(f8, f8)", cache=True)
def _incgamma_series(a: float, y: float) -> float:
    """
    ### This is an internal function. Use `SeriesIncompleteGamma.p()` instead.

    Lower regularized incomplete gamma function P(a, y) by its series expansion.
    Converges quickly for y < a + 1.

    Parameters
    ----------
    a : float
        Shape, a > 0.
    y : float
        Upper limit of integration, y >= 0.

    Returns
    -------
    P(a, y): float
        `nan` if the series did not converge.
    """
    if y <= 0.0:
        return 0.0

    ap = a
    term = 1.0 / a
    total = term
    for _ in range(_iteration_budget(a)):
        ap += 1.0
        term *= y / ap
        total += term
        if abs(term) < abs(total) * EPS:
            return total * math.exp(-y + a * math.log(y) - math.lgamma(a))
    return np.nan


@nb.njit("f8(f8, f8)", cache=True)
def _incgamma_continued_fraction(a: float, y: float) -> float:
    """
    ### This is an internal function. Use `SeriesIncompleteGamma.q()` instead.

    Upper regularized incomplete gamma function Q(a, y) by its continued fraction,
    evaluated with the modified Lentz method. Converges quickly for y >= a + 1.

    Parameters
    ----------
    a : float
        Shape, a > 0.
    y : float
        Lower limit of integration, y > 0.

    Returns
    -------
    Q(a, y): float
        `nan` if the continued fraction did not converge.
    """
    b = y + 1.0 - a
    c = 1.0 / FPMIN
    d = 1.0 / b
    h = d
    for i in range(1, _iteration_budget(a) + 1):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < FPMIN:
            d = FPMIN
        c = b + an / c
        if abs(c) < FPMIN:
            c = FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < EPS:
            return math.exp(-y + a * math.log(y) - math.lgamma(a)) * h
    return np.nan


@nb.njit("f8(f8, f8)", cache=True)
def _incgamma_p(a: float, y: float) -> float:
    if y <= 0.0:
        return 0.0
    if np.isinf(y):
        return 1.0
    if y < a + 1.0:
        return _incgamma_series(a, y)
    return 1.0 - _incgamma_continued_fraction(a, y)


@nb.njit("f8(f8, f8)", cache=True)
def _incgamma_q(a: float, y: float) -> float:
    if y <= 0.0:
        return 1.0
    if np.isinf(y):
        return 0.0
    if y < a + 1.0:
        return 1.0 - _incgamma_series(a, y)
    return _incgamma_continued_fraction(a, y)
