"""
Tagged 3-component vectors.

Which physical quantity a vector in a trajectory file represents generally
cannot be deduced from the file format alone, so every Coordinate carries a
CoordKind tag that is fixed at construction. Components are accessible as
x/y/z or by index 0..2 regardless of the tag.

    p = Coordinate.build(CoordKind.POSITION, 1.0, 2.0, 3.0)
    print(p.x, p.y, p.z)
    print(p[0], p[1], p[2])
    v = p.to_vector()  # plain np.ndarray, tag dropped
"""
from enum import Enum
from typing import Iterator, Union

import numpy as np

DTypeLike = Union[str, type, np.dtype]


class CoordKind(Enum):
    POSITION = "position"
    VELOCITY = "velocity"
    FORCE = "force"

    @classmethod
    def from_value(cls, value: Union['CoordKind', str]) -> 'CoordKind':
        """
        Resolve a CoordKind from an enum member or its name.

        Raises:
            ValueError: If value does not name one of the kinds
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = [k.value for k in cls]
        raise ValueError(f"Unknown coordinate kind {value!r}. Must be one of: {valid}")


def scalar_type(dtype: DTypeLike) -> type:
    """
    Resolve a dtype specification to a numpy floating scalar type.

    Args:
        dtype: Anything np.dtype accepts, e.g. np.float32, 'float64' or 'f4'

    Returns:
        The numpy scalar type (np.float32, np.float64, ...)

    Raises:
        ValueError: If dtype is not a floating-point type
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValueError(f"Invalid scalar type {dtype!r}: {e}") from e
    if resolved.kind != 'f':
        raise ValueError(f"Scalar type must be floating point, got {resolved.name}")
    return resolved.type


class Coordinate:
    """A 3-vector tagged as a position, velocity or force."""

    __slots__ = ('_kind', '_values')

    def __init__(self, kind: CoordKind, values, dtype: DTypeLike = np.float64):
        values = np.array(values, dtype=scalar_type(dtype))
        if values.shape != (3,):
            raise ValueError(f"Coordinate needs exactly 3 components, got shape {values.shape}")
        self._kind = CoordKind.from_value(kind)
        self._values = values

    @classmethod
    def build(cls, kind: CoordKind, x, y, z, dtype: DTypeLike = np.float64) -> 'Coordinate':
        return cls(kind, (x, y, z), dtype=dtype)

    @property
    def kind(self) -> CoordKind:
        return self._kind

    def which(self) -> CoordKind:
        return self._kind

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    @property
    def x(self):
        return self._values[0]

    @x.setter
    def x(self, value) -> None:
        self._values[0] = value

    @property
    def y(self):
        return self._values[1]

    @y.setter
    def y(self, value) -> None:
        self._values[1] = value

    @property
    def z(self):
        return self._values[2]

    @z.setter
    def z(self, value) -> None:
        self._values[2] = value

    @staticmethod
    def _check_index(idx) -> int:
        if isinstance(idx, (bool, np.bool_)) or not isinstance(idx, (int, np.integer)) or not 0 <= idx <= 2:
            raise IndexError(f"Coordinate: index {idx!r} out of range")
        return int(idx)

    def __getitem__(self, idx):
        return self._values[self._check_index(idx)]

    def __setitem__(self, idx, value) -> None:
        self._values[self._check_index(idx)] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator:
        return iter(self._values.copy())

    def to_vector(self) -> np.ndarray:
        """Untagged copy of the components as an array of shape (3,)."""
        return self._values.copy()

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._values.copy()
        return self._values.astype(dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._kind is other._kind and bool(np.array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self) -> str:
        x, y, z = (float(v) for v in self._values)
        return f"Coordinate({self._kind.name}, x={x}, y={y}, z={z}, dtype={self._values.dtype.name})"
