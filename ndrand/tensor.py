from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from ndrand.builder import build
from ndrand.containers import NDContainer
from ndrand.sampling import UniformSource, standard_normal
from ndrand.schema import TensorRequest


def randn(*dims: int, source: Optional[UniformSource] = None) -> Union[float, NDContainer]:
    """
    Standard-normal samples shaped by ``dims``.

    With no dims this returns a bare float, not a 0-d container.
    """
    if not dims:
        return standard_normal(source)
    return build(dims, lambda: standard_normal(source))


def randn_from(
    request: Union[TensorRequest, Mapping[str, Any]],
    *,
    source: Optional[UniformSource] = None,
) -> Union[float, NDContainer]:
    req = request if isinstance(request, TensorRequest) else TensorRequest.parse(request)
    return randn(*req.dims, source=source)
