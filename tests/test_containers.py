import numpy as np
import pytest

from ndrand.containers import ContainerError, Matrix, Vector


def test_vector_basics():
    v = Vector([1.0, 2.0, 3.0])
    assert len(v) == 3
    assert v[0] == 1.0
    assert v[-1] == 3.0
    assert v.shape == (3,)
    assert v.ndim == 1
    assert v.size == 3
    assert v.tolist() == [1.0, 2.0, 3.0]
    assert isinstance(v[1:], Vector)
    assert v[1:] == Vector([2.0, 3.0])


def test_vector_is_immutable():
    v = Vector([1.0])
    with pytest.raises(TypeError):
        v[0] = 2.0  # type: ignore[index]


def test_matrix_shape_and_access():
    m = Matrix([Vector([1.0, 2.0]), Vector([3.0, 4.0]), Vector([5.0, 6.0])])
    assert len(m) == 3
    assert m.shape == (3, 2)
    assert m.ndim == 2
    assert m.size == 6
    assert m[2][1] == 6.0
    assert isinstance(m[:2], Matrix)
    assert m[:2].shape == (2, 2)
    assert np.allclose(m.to_numpy(), np.array([[1, 2], [3, 4], [5, 6]], dtype=float))


def test_empty_containers():
    assert Vector().shape == (0,)
    assert Matrix().shape == (0,)
    assert Matrix().size == 0
    assert Matrix().tolist() == []


def test_matrix_rejects_scalar_children():
    with pytest.raises(ContainerError):
        Matrix([1.0, 2.0])


def test_equality_is_type_aware():
    assert Vector([1.0]) == Vector([1.0])
    assert Vector([1.0]) != Matrix([Vector([1.0])])
    assert Matrix([Vector([1.0])]) == Matrix([Vector([1.0])])
    assert hash(Vector([1.0, 2.0])) == hash(Vector([1.0, 2.0]))


def test_empty_matrix_inner_shape():
    m = Matrix([], inner_shape=(4, 2))
    assert m.shape == (0, 4, 2)
    assert m.ndim == 3
    assert m.to_numpy().shape == (0, 4, 2)
    assert m != Matrix()
    assert m[:] == m
