from pygamma.special.incgamma import (
    IIncompleteGamma,
    IncompleteGamma,
    ScipyIncompleteGamma,
    SeriesIncompleteGamma,
)

__all__ = [
    "IIncompleteGamma",
    "IncompleteGamma",
    "ScipyIncompleteGamma",
    "SeriesIncompleteGamma",
]
