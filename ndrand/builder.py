from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any, Callable, List, Tuple

import numpy as np

from ndrand.containers import Matrix, NDContainer, Vector

logger = logging.getLogger(__name__)


class BuilderError(RuntimeError):
    pass


class InvalidDimension(BuilderError):
    pass


def _dim(x: Any, depth: int) -> int:
    # bool is an int subclass but never a valid size
    if isinstance(x, bool):
        raise InvalidDimension(f"dimension {depth} must be an integer, got bool.")
    if isinstance(x, (float, np.floating)):
        f = float(x)
        if not math.isfinite(f) or not f.is_integer():
            raise InvalidDimension(f"dimension {depth} must be integral, got {f!r}.")
        x = f
    elif not isinstance(x, (int, np.integer)):
        raise InvalidDimension(
            f"dimension {depth} must be an integer, got {type(x).__name__}."
        )
    n = int(x)
    if n < 0:
        raise InvalidDimension(f"dimension {depth} must be non-negative, got {n}.")
    return n


def validate_dims(dims: Sequence[Any]) -> Tuple[int, ...]:
    if isinstance(dims, np.ndarray):
        dims = dims.tolist()
    if isinstance(dims, (str, bytes)) or not isinstance(dims, Sequence):
        raise InvalidDimension("dims must be a sequence of integers.")
    if len(dims) == 0:
        raise InvalidDimension("dims must be non-empty.")
    return tuple(_dim(x, i) for i, x in enumerate(dims))


def _prod(xs: Sequence[int]) -> int:
    out = 1
    for n in xs:
        out *= n
    return out


def build(dims: Sequence[int], fill: Callable[[], Any]) -> NDContainer:
    """
    Build a nested container shaped by ``dims``.

    The innermost dimension is a Vector whose leaves each come from one
    ``fill()`` call; outer dimensions are Matrices of identically built
    children. Leaves are produced in row-major order (index 0 first at every
    level). All sizes are validated before ``fill`` is first called.

    Construction is bottom-up without recursion: all leaves are drawn first,
    then grouped one level at a time, so nesting depth is not bounded by the
    interpreter's recursion limit. Empty levels keep the sizes below them in
    their shape.
    """
    lengths = validate_dims(dims)
    last = len(lengths) - 1
    logger.debug("build: dims=%s leaves=%d", lengths, _prod(lengths))

    n = lengths[last]
    count = _prod(lengths[:last])
    leaves = [fill() for _ in range(count * n)]
    level: List[NDContainer] = [Vector(leaves[i * n:(i + 1) * n]) for i in range(count)]

    for depth in range(last - 1, -1, -1):
        n = lengths[depth]
        count = _prod(lengths[:depth])
        inner = lengths[depth + 1:]
        level = [
            Matrix(level[i * n:(i + 1) * n], inner_shape=inner) for i in range(count)
        ]

    return level[0]
