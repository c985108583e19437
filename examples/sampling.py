from pygamma.models import GammaParams, GammaStats, GammaVariate
from pygamma.special import IncompleteGamma
from pygamma.utils.statistics import compare_moments
import numpy as np

## Experiment configuration
sample_size = 100000
rng = np.random.default_rng(100)

model = GammaVariate(rng=rng, incomplete_gamma=IncompleteGamma.SeriesIncompleteGamma)

params = [GammaParams(0.5, 2.0), GammaParams(1.0, 1.0), GammaParams(9.0, 0.5)]

print(model.get_stats_dataframe([GammaStats.MEAN, GammaStats.VAR, GammaStats.SKEWNESS], params))

for param in params:
    a, b = param.unpack()
    print(f"Gamma(a={a}, b={b})")
    print(compare_moments(model, a, b, sample_size))
    print(f"pdf(mean) = {model.pdf(a * b, a, b)}, cdf(mean) = {model.cdf(a * b, a, b)}")

# Each call to the sampler is an independent draw
draw = model.sampler(2.0, 3.0)
print([draw() for _ in range(5)])
