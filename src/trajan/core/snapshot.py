"""
A uniform interface to snapshots of any file format.

A Snapshot is an indexable sequence of Particle objects. Concrete types
only provide __len__ and __getitem__; the aggregate accessors collect one
quantity over every particle. They are all-or-nothing: if any particle
lacks the quantity the result is None, never a partial array.
"""
from abc import abstractmethod
from collections.abc import Sequence
from typing import Callable, List, Optional

import numpy as np

from .attribute import Attribute
from .particle import Particle


class Snapshot(Sequence):
    """Indexable collection of particles with all-or-nothing aggregate accessors."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def __getitem__(self, idx):
        ...

    def _collect(self, accessor: Callable[[Particle], object]) -> Optional[list]:
        values = []
        for particle in self:
            value = accessor(particle)
            if value is None:
                return None
            values.append(value)
        return values

    def masses(self) -> Optional[np.ndarray]:
        values = self._collect(lambda p: p.mass())
        if values is None:
            return None
        return np.asarray(values)

    def positions(self) -> Optional[np.ndarray]:
        return _stack_vectors(self._collect(lambda p: p.pos()))

    def velocities(self) -> Optional[np.ndarray]:
        return _stack_vectors(self._collect(lambda p: p.vel()))

    def forces(self) -> Optional[np.ndarray]:
        return _stack_vectors(self._collect(lambda p: p.force()))

    def attributes(self, name: str) -> Optional[List[Attribute]]:
        return self._collect(lambda p: p.attribute(name))


def _stack_vectors(values: Optional[list]) -> Optional[np.ndarray]:
    if values is None:
        return None
    if not values:
        return np.empty((0, 3))
    return np.stack(values)
