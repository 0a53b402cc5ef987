"""
Format-specific particle attributes.

A file can carry values of any type next to the coordinates (atom names,
charges, residue ids, ...). Their types cannot be known statically, so
they are returned as an Attribute: a closed union of integer, float, string
and 3-vector values.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np


class AttributeKind(Enum):
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    VECTOR = "vector"


@dataclass(frozen=True, eq=False)
class Attribute:
    kind: AttributeKind
    value: Union[int, float, str, np.ndarray]

    @classmethod
    def from_int(cls, value) -> 'Attribute':
        return cls(AttributeKind.INTEGER, int(value))

    @classmethod
    def from_float(cls, value) -> 'Attribute':
        return cls(AttributeKind.FLOAT, float(value))

    @classmethod
    def from_str(cls, value) -> 'Attribute':
        return cls(AttributeKind.STRING, str(value))

    @classmethod
    def from_vector(cls, value) -> 'Attribute':
        arr = np.array(value)
        if arr.shape != (3,):
            raise ValueError(f"Vector attribute must have 3 components, got shape {arr.shape}")
        return cls(AttributeKind.VECTOR, arr)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is AttributeKind.VECTOR:
            return bool(np.array_equal(self.value, other.value))
        return self.value == other.value
