from __future__ import annotations

from typing import Annotated, Any, List, Mapping

from pydantic import BaseModel, Field, StrictInt, ValidationError

from ndrand.builder import InvalidDimension

DimSize = Annotated[StrictInt, Field(ge=0)]


class TensorRequest(BaseModel):
    """
    Validated shape request, e.g. loaded from a JSON config.
    An empty ``dims`` asks for a single scalar.
    """

    model_config = {"extra": "forbid", "frozen": True}

    dims: List[DimSize] = Field(default_factory=list)

    @classmethod
    def parse(cls, payload: Mapping[str, Any]) -> "TensorRequest":
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise InvalidDimension(f"invalid tensor request: {e}") from e
