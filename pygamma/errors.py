from __future__ import annotations


class InvalidParameter(ValueError):
    """Shape or scale is not a finite positive number."""


class SamplingStalled(RuntimeError):
    """The rejection loop ran past its iteration cap.

    This points at a broken random source rather than at the parameters, since
    the acceptance rate of the sampler is bounded away from zero.
    """
