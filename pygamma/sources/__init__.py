from pygamma.sources.rngsource import (
    IStandardNormalSource,
    IUniformSource,
    NormalSource,
    UniformSource,
    as_generator,
    uniform_pos,
)

__all__ = [
    "IStandardNormalSource",
    "IUniformSource",
    "NormalSource",
    "UniformSource",
    "as_generator",
    "uniform_pos",
]
