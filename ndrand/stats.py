from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence

import numpy as np

from ndrand.containers import Matrix, Vector


class StatsError(RuntimeError):
    pass


@dataclass(frozen=True)
class SampleSummary:
    n: int
    mean: float
    variance: float
    std: float


def flatten(value: Any) -> List[Any]:
    """
    Leaves of a container in row-major order. A bare scalar flattens to [value].
    """
    if not isinstance(value, (Vector, Matrix)):
        return [value]
    out: List[Any] = []
    stack: List[Any] = [value]
    while stack:
        node = stack.pop()
        if isinstance(node, Vector):
            out.extend(node)
        else:
            stack.extend(reversed(node))
    return out


def _finite_1d(x: Sequence[float], name: str) -> np.ndarray:
    a = np.asarray(list(x), dtype=float).reshape(-1)
    if not np.all(np.isfinite(a)):
        raise StatsError(f"{name} contains non-finite values.")
    return a


def summarize(values: Sequence[float]) -> SampleSummary:
    """
    Population mean/variance of a sample. Empty input summarizes to zeros.
    """
    a = _finite_1d(values, "values")
    if a.size == 0:
        return SampleSummary(n=0, mean=0.0, variance=0.0, std=0.0)
    var = float(np.var(a))
    return SampleSummary(n=int(a.size), mean=float(np.mean(a)), variance=var, std=float(np.sqrt(var)))
