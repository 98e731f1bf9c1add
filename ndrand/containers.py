from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterable, List, Tuple, Union

import numpy as np


class ContainerError(RuntimeError):
    pass


class Vector(Sequence):
    """
    Fixed-length, immutable sequence of leaf values (innermost dimension).
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: Tuple[Any, ...] = tuple(items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return Vector(self._items[i])
        return self._items[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash((Vector, self._items))

    def __repr__(self) -> str:
        return f"Vector({list(self._items)!r})"

    @property
    def shape(self) -> Tuple[int, ...]:
        return (len(self._items),)

    @property
    def ndim(self) -> int:
        return 1

    @property
    def size(self) -> int:
        return len(self._items)

    def tolist(self) -> List[Any]:
        return list(self._items)

    def to_numpy(self) -> np.ndarray:
        return np.asarray(self.tolist(), dtype=float)


class Matrix(Sequence):
    """
    Fixed-length, immutable sequence of Vectors or nested Matrices.

    Sibling shapes are not checked here; ``shape`` is read from the first child
    when there is one and from ``inner_shape`` when the matrix is empty.
    Shape and size are computed once at construction.
    """

    __slots__ = ("_children", "_shape", "_size")

    def __init__(
        self,
        children: Iterable["NDContainer"] = (),
        inner_shape: Sequence[int] = (),
    ) -> None:
        kids = tuple(children)
        for k in kids:
            if not isinstance(k, (Vector, Matrix)):
                raise ContainerError(
                    f"Matrix children must be Vector or Matrix, got {type(k).__name__}."
                )
        self._children: Tuple[NDContainer, ...] = kids
        if kids:
            self._shape: Tuple[int, ...] = (len(kids),) + kids[0].shape
        else:
            self._shape = (0,) + tuple(int(n) for n in inner_shape)
        self._size = sum(k.size for k in kids)

    def __len__(self) -> int:
        return len(self._children)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return Matrix(self._children[i], inner_shape=self._shape[1:])
        return self._children[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._shape == other._shape and self._children == other._children

    def __hash__(self) -> int:
        return hash((Matrix, self._shape, self._children))

    def __repr__(self) -> str:
        return f"Matrix({list(self._children)!r})"

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return self._size

    def tolist(self) -> List[Any]:
        return [c.tolist() for c in self._children]

    def to_numpy(self) -> np.ndarray:
        return np.asarray(self.tolist(), dtype=float).reshape(self._shape)


NDContainer = Union[Vector, Matrix]
