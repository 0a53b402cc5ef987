"""
trajan: molecular dynamics trajectory access

Uniform particle/snapshot/trajectory interfaces over trajectory file formats,
with a streaming reader and writer for the XYZ format.
"""

__version__ = "0.1.0"

# Core components
from .core.coordinate import Coordinate, CoordKind, scalar_type
from .core.attribute import Attribute, AttributeKind
from .core.particle import Particle
from .core.snapshot import Snapshot
from .core.trajectory import Trajectory
from .core.errors import ErrorKind, TrajanError, IoError, ParseError, InvalidFormatError
from .core.xyz import XYZParticle, XYZSnapshot, XYZTrajectory, parse_particle_line

# IO components
from .io.loader import XYZReader, ReaderState, read_xyz_snapshot, load_xyz_trajectory
from .io.writer import XYZWriter

# Utility components
from .utils.config_manager import ConfigManager

__all__ = [
    # Core
    'Coordinate',
    'CoordKind',
    'scalar_type',
    'Attribute',
    'AttributeKind',
    'Particle',
    'Snapshot',
    'Trajectory',
    'ErrorKind',
    'TrajanError',
    'IoError',
    'ParseError',
    'InvalidFormatError',
    'XYZParticle',
    'XYZSnapshot',
    'XYZTrajectory',
    'parse_particle_line',
    # IO
    'XYZReader',
    'ReaderState',
    'read_xyz_snapshot',
    'load_xyz_trajectory',
    'XYZWriter',
    # Utils
    'ConfigManager',
]
