from __future__ import annotations

import math
import threading
from typing import Optional, Protocol

import numpy as np


class UniformSource(Protocol):
    """
    Anything exposing ``random() -> float`` in [0, 1).
    ``numpy.random.Generator`` and ``random.Random`` both qualify.
    """

    def random(self) -> float: ...


_local = threading.local()


def default_source() -> np.random.Generator:
    """
    Per-thread generator used when no source is injected.
    Threads never share an instance.
    """
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _local.rng = rng
    return rng


def standard_normal(source: Optional[UniformSource] = None) -> float:
    """
    One N(0, 1) sample via Box-Muller (cosine branch).

    The sine branch is discarded, so every call draws fresh uniforms and keeps
    no state between calls. Zero draws are rejected to keep log() finite;
    u is settled before v is drawn.
    """
    src = default_source() if source is None else source

    u = 0.0
    while u == 0.0:
        u = float(src.random())
    v = 0.0
    while v == 0.0:
        v = float(src.random())

    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
