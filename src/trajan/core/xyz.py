"""
Particle, snapshot and trajectory records of the XYZ format.

One particle line is a name followed by three numbers, separated by any
run of whitespace:

    H    1.0  2.0  3.0

Which quantity the three numbers represent is not stored in the file; it
is supplied by the caller as a CoordKind.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import numpy as np

from .attribute import Attribute
from .coordinate import Coordinate, CoordKind, DTypeLike, scalar_type
from .errors import InvalidFormatError, ParseError
from .particle import Particle
from .snapshot import Snapshot
from .trajectory import Trajectory

TOKENS_PER_LINE = 4


def parse_particle_line(line: str, kind: CoordKind, dtype: DTypeLike = np.float64) -> 'XYZParticle':
    """
    Parse one particle line.

    Args:
        line: Text of the line, with or without its trailing newline
        kind: Quantity the three numbers represent
        dtype: Floating scalar type of the components

    Returns:
        The parsed XYZParticle

    Raises:
        InvalidFormatError: If the line does not split into exactly 4 tokens
        ParseError: If one of the numeric tokens cannot be parsed
    """
    text = line.rstrip('\r\n')
    tokens = text.split()
    if len(tokens) != TOKENS_PER_LINE:
        raise InvalidFormatError(
            f"expected {TOKENS_PER_LINE} whitespace-separated fields, found {len(tokens)}", line=text)

    scalar = scalar_type(dtype)
    values = []
    for token in tokens[1:]:
        try:
            # float() accepts digit separators, XYZ numbers never carry them
            if '_' in token:
                raise ValueError(f"could not convert string to float: {token!r}")
            values.append(scalar(token))
        except ValueError as e:
            raise ParseError.from_value_error(e, token, line=text) from e
    return XYZParticle(tokens[0], Coordinate(kind, values, dtype=scalar))


class XYZParticle(Particle):
    """
    A named particle carrying one tagged coordinate.

    Particles are immutable and hashable: the coordinate is copied on the
    way in and on the way out, so mutating either copy leaves the particle
    untouched.
    """

    __slots__ = ('_name', '_coord')

    def __init__(self, name: str, coord: Coordinate):
        self._name = name
        self._coord = Coordinate(coord.which(), coord.to_vector(), dtype=coord.dtype)

    @property
    def name(self) -> str:
        return self._name

    @property
    def coord(self) -> Coordinate:
        return Coordinate(self._coord.which(), self._coord.to_vector(), dtype=self._coord.dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, XYZParticle):
            return NotImplemented
        return self._name == other._name and self._coord == other._coord

    def __hash__(self) -> int:
        return hash((self._name, self._coord.which(), tuple(float(v) for v in self._coord)))

    def __repr__(self) -> str:
        return f"XYZParticle(name={self._name!r}, coord={self._coord!r})"

    @classmethod
    def from_line(cls, line: str, kind: CoordKind, dtype: DTypeLike = np.float64) -> 'XYZParticle':
        return parse_particle_line(line, kind, dtype)

    def _vector_if(self, kind: CoordKind) -> Optional[np.ndarray]:
        if self._coord.which() is kind:
            return self._coord.to_vector()
        return None

    def mass(self) -> Optional[float]:
        return None

    def pos(self) -> Optional[np.ndarray]:
        return self._vector_if(CoordKind.POSITION)

    def vel(self) -> Optional[np.ndarray]:
        return self._vector_if(CoordKind.VELOCITY)

    def force(self) -> Optional[np.ndarray]:
        return self._vector_if(CoordKind.FORCE)

    def attribute(self, name: str) -> Optional[Attribute]:
        if name == "name":
            return Attribute.from_str(self.name)
        return None


@dataclass
class XYZSnapshot(Snapshot):
    """One XYZ frame: the comment line and its particles, in file order."""

    comment: str = ""
    particles: List[XYZParticle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.particles)

    def __getitem__(self, idx):
        return self.particles[idx]

    def __iter__(self) -> Iterator[XYZParticle]:
        return iter(self.particles)

    def which(self) -> Optional[CoordKind]:
        """Tag of the first particle, or None when the snapshot is empty."""
        if not self.particles:
            return None
        return self.particles[0].coord.which()


@dataclass
class XYZTrajectory(Trajectory):
    snapshots: List[XYZSnapshot] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.snapshots)

    def __getitem__(self, idx):
        return self.snapshots[idx]

    def __iter__(self) -> Iterator[XYZSnapshot]:
        return iter(self.snapshots)

    def append(self, snapshot: XYZSnapshot) -> None:
        self.snapshots.append(snapshot)
