from __future__ import annotations

from ndrand.builder import BuilderError, InvalidDimension, build
from ndrand.containers import ContainerError, Matrix, NDContainer, Vector
from ndrand.sampling import UniformSource, default_source, standard_normal
from ndrand.schema import TensorRequest
from ndrand.stats import SampleSummary, StatsError, flatten, summarize
from ndrand.tensor import randn, randn_from

__all__ = [
    "BuilderError",
    "ContainerError",
    "InvalidDimension",
    "Matrix",
    "NDContainer",
    "SampleSummary",
    "StatsError",
    "TensorRequest",
    "UniformSource",
    "Vector",
    "build",
    "default_source",
    "flatten",
    "randn",
    "randn_from",
    "standard_normal",
    "summarize",
]
