"""
A uniform interface to particles of any file format.

Different formats store different quantities. Implementing the same
operations for every format is not realistic, and neither is converting
every format into one container able to hold any kind of data. Instead,
every concrete particle type implements Particle, returning None for the
quantities its format does not carry.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .attribute import Attribute


class Particle(ABC):
    """Accessors every particle type provides. Calls have no side effects."""

    @abstractmethod
    def mass(self) -> Optional[float]:
        ...

    @abstractmethod
    def pos(self) -> Optional[np.ndarray]:
        ...

    @abstractmethod
    def vel(self) -> Optional[np.ndarray]:
        ...

    @abstractmethod
    def force(self) -> Optional[np.ndarray]:
        ...

    @abstractmethod
    def attribute(self, name: str) -> Optional[Attribute]:
        """Format-specific value called name, or None if the format has no such attribute."""
        ...
