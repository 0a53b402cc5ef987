import pytest
import numpy as np
from trajan.core.coordinate import Coordinate, CoordKind, scalar_type

ALL_KINDS = [CoordKind.POSITION, CoordKind.VELOCITY, CoordKind.FORCE]


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_which_coordinate(kind):
    """The tag given at construction is reported by which() and kind."""
    c = Coordinate.build(kind, 1.0, 2.0, 3.0)
    assert c.which() is kind
    assert c.kind is kind


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_access_element(kind):
    """x/y/z and indices 0..2 give the same components for every tag."""
    c = Coordinate.build(kind, 1.0, 2.0, 3.0)
    assert (c.x, c.y, c.z) == (1.0, 2.0, 3.0)
    assert (c[0], c[1], c[2]) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_access_element_mut(kind):
    c = Coordinate.build(kind, 1.0, 2.0, 3.0)
    c.x += 100.0
    c[1] += 100.0
    c.z = 103.0
    assert (c[0], c[1], c[2]) == (101.0, 102.0, 103.0)
    assert c.which() is kind


@pytest.mark.parametrize("idx", [3, -1, 1.0, "0", True])
def test_access_out_of_range(idx):
    c = Coordinate.build(CoordKind.POSITION, 1.0, 2.0, 3.0)
    with pytest.raises(IndexError):
        c[idx]
    with pytest.raises(IndexError):
        c[idx] = 0.0


def test_kind_is_read_only():
    c = Coordinate.build(CoordKind.POSITION, 1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        c.kind = CoordKind.FORCE


def test_to_vector_drops_tag_and_copies():
    c = Coordinate.build(CoordKind.FORCE, 1.0, 2.0, 3.0)
    vec = c.to_vector()
    np.testing.assert_array_equal(vec, np.array([1.0, 2.0, 3.0]))
    vec[0] = 42.0
    assert c.x == 1.0
    np.testing.assert_array_equal(np.asarray(c), np.array([1.0, 2.0, 3.0]))


def test_dtype_is_preserved():
    c = Coordinate.build(CoordKind.POSITION, 1.1, 2.2, 3.3, dtype=np.float32)
    assert c.dtype == np.float32
    assert c.to_vector().dtype == np.float32
    assert c.x == np.float32(1.1)


def test_equality():
    a = Coordinate.build(CoordKind.POSITION, 1.0, 2.0, 3.0)
    assert a == Coordinate.build(CoordKind.POSITION, 1.0, 2.0, 3.0)
    assert a != Coordinate.build(CoordKind.VELOCITY, 1.0, 2.0, 3.0)
    assert a != Coordinate.build(CoordKind.POSITION, 1.0, 2.0, 4.0)


def test_wrong_number_of_components():
    with pytest.raises(ValueError, match="exactly 3 components"):
        Coordinate(CoordKind.POSITION, [1.0, 2.0])


@pytest.mark.parametrize("value, expected", [
    ("position", CoordKind.POSITION),
    ("Velocity", CoordKind.VELOCITY),
    (" FORCE ", CoordKind.FORCE),
    (CoordKind.FORCE, CoordKind.FORCE),
])
def test_coord_kind_from_value(value, expected):
    assert CoordKind.from_value(value) is expected


@pytest.mark.parametrize("value", ["pos", "acceleration", None, 1])
def test_coord_kind_from_value_invalid(value):
    with pytest.raises(ValueError, match="Unknown coordinate kind"):
        CoordKind.from_value(value)


@pytest.mark.parametrize("dtype, expected", [
    (np.float32, np.float32),
    ("float64", np.float64),
    ("f4", np.float32),
])
def test_scalar_type(dtype, expected):
    assert scalar_type(dtype) is expected


@pytest.mark.parametrize("dtype", [np.int64, "int32", "U10", "not-a-type"])
def test_scalar_type_rejects_non_float(dtype):
    with pytest.raises(ValueError):
        scalar_type(dtype)
