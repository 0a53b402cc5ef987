"""
Input/Output module for trajan.

This module provides streaming reading and writing of XYZ trajectories.
"""

from .loader import XYZReader, ReaderState, read_xyz_snapshot, load_xyz_trajectory
from .writer import XYZWriter

__all__ = ['XYZReader', 'ReaderState', 'read_xyz_snapshot', 'load_xyz_trajectory', 'XYZWriter']
