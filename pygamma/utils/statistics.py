from __future__ import annotations

import numpy as np
import numpy.typing as npt
import pandas as pd  # type: ignore
import scipy as sp  # type: ignore

from pygamma.models import GammaStats, GammaVariate

SAMPLE_STATS = [GammaStats.MEAN, GammaStats.VAR, GammaStats.CVAR, GammaStats.SKEWNESS]


def sample_stats(samples: npt.ArrayLike) -> pd.Series:
    """
    Calculate the statistical properties of a set of variates.

    Parameters
    ----------
    samples : npt.ArrayLike
        1D array of variates.

    Returns
    -------
    pd.Series
        Mean, unbiased variance, coefficient of variation and bias-corrected skewness,
        indexed by `GammaStats`.
    """
    samples = np.asarray(samples, dtype=np.float64)
    if samples.ndim != 1:
        raise ValueError("samples must be a 1D array")
    if samples.size < 3:
        raise ValueError(f"samples must have at least 3 elements. Got {samples.size}.")

    mean = samples.mean()
    var = samples.var(ddof=1)
    stats = [
        mean,
        var,
        np.sqrt(var) / mean,
        sp.stats.skew(samples, bias=False),
    ]
    return pd.Series(stats, index=SAMPLE_STATS, dtype=np.float64)


def compare_moments(model: GammaVariate, a: float, b: float, n: int) -> pd.DataFrame:
    """
    Draw `n` variates from `model` and put their statistics next to the closed forms.

    Returns
    -------
    pd.DataFrame
        Indexed by `GammaStats` with the columns `theoretical`, `sample` and `rel_error`.
    """
    samples = model.sample_n(a, b, n)

    theoretical = pd.Series(
        [model.get_stats(stat, a, b) for stat in SAMPLE_STATS],
        index=SAMPLE_STATS,
        dtype=np.float64,
    )
    observed = sample_stats(samples)

    compare_df = pd.DataFrame({"theoretical": theoretical, "sample": observed})
    compare_df["rel_error"] = (
        compare_df["sample"] - compare_df["theoretical"]
    ).abs() / compare_df["theoretical"].abs()
    compare_df.index.name = "stat"

    return compare_df
