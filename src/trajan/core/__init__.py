"""
Core module for trajan.

This module contains the coordinate and attribute types, the capability
interfaces shared by all formats, and the XYZ records.
"""

from .coordinate import Coordinate, CoordKind, scalar_type
from .attribute import Attribute, AttributeKind
from .particle import Particle
from .snapshot import Snapshot
from .trajectory import Trajectory
from .errors import ErrorKind, TrajanError, IoError, ParseError, InvalidFormatError
from .xyz import XYZParticle, XYZSnapshot, XYZTrajectory, parse_particle_line

__all__ = [
    'Coordinate', 'CoordKind', 'scalar_type',
    'Attribute', 'AttributeKind',
    'Particle', 'Snapshot', 'Trajectory',
    'ErrorKind', 'TrajanError', 'IoError', 'ParseError', 'InvalidFormatError',
    'XYZParticle', 'XYZSnapshot', 'XYZTrajectory', 'parse_particle_line',
]
