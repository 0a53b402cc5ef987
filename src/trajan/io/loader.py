"""
Streaming XYZ trajectory reader.

Each frame of an XYZ file is

    <number of particles N>
    <comment>
    <name> <x> <y> <z>     (N lines)

XYZReader reads one frame per read_snapshot() call and can be iterated to
pull frames until the stream is exhausted.
"""
import io
import logging
import re
from enum import Enum
from pathlib import Path
from typing import IO, Optional, Union

import numpy as np

from ..core.coordinate import CoordKind, DTypeLike, scalar_type
from ..core.errors import InvalidFormatError, IoError, TrajanError
from ..core.xyz import XYZSnapshot, XYZTrajectory, parse_particle_line

logger = logging.getLogger(__name__)


class ReaderState(Enum):
    READY = "ready"
    HEADER_READ = "header read"
    COMMENT_READ = "comment read"
    PARTICLES_READ = "particles read"
    EXHAUSTED = "exhausted"


class XYZReader:
    """
    Forward-only reader of XYZ frames.

    The reader owns its stream and closes it on close() or when used as a
    context manager. Iteration stops at the first frame that cannot be read,
    whether the stream ended cleanly or the frame was malformed; the error
    that stopped it is kept in last_error. With strict=True a malformed frame
    raises instead of ending the iteration.
    """

    def __init__(self, stream: IO, kind: Union[CoordKind, str], dtype: DTypeLike = np.float64,
                 strict: bool = False):
        """
        Initialize the reader.

        Args:
            stream: Readable text or binary stream; binary streams are decoded as UTF-8
            kind: Quantity stored in the file (position, velocity or force)
            dtype: Floating scalar type of the components (np.float32 or np.float64)
            strict: Raise on malformed frames during iteration instead of stopping
        """
        self.kind = CoordKind.from_value(kind)
        self.dtype = scalar_type(dtype)
        self.strict = strict
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            stream = io.TextIOWrapper(stream, encoding='utf-8')
        self._stream = stream
        self.state = ReaderState.READY
        self.line_number = 0
        self.frames_read = 0
        self.last_error: Optional[TrajanError] = None

    @classmethod
    def open(cls, filename: Union[str, Path], kind: Union[CoordKind, str], dtype: DTypeLike = np.float64,
             strict: bool = False) -> 'XYZReader':
        """
        Open an XYZ file for reading.

        Raises:
            IoError: If the file cannot be opened
        """
        filepath = Path(filename)
        kind = CoordKind.from_value(kind)
        dtype = scalar_type(dtype)
        try:
            stream = open(filepath, 'r', encoding='utf-8')
        except OSError as e:
            raise IoError.from_os_error(e, action=f"Opening {filepath}") from e
        logger.debug(f"Opened {filepath} for reading ({kind.value}).")
        return cls(stream, kind, dtype=dtype, strict=strict)

    def _read_line(self, what: str, frame_start: bool = False) -> str:
        if self._stream is None:
            raise IoError("cannot read from a closed reader", line_number=self.line_number + 1)
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise IoError(f"reading {what} failed: {e}", line_number=self.line_number + 1) from e
        if line == "":
            raise IoError(f"unexpected end of stream while reading {what}",
                          line_number=self.line_number + 1, clean_eof=frame_start)
        self.line_number += 1
        return line

    def _parse_count(self, line: str) -> int:
        text = line.strip()
        try:
            if not re.fullmatch(r"\+?[0-9]+", text):
                raise ValueError(f"invalid literal {text!r}")
            return int(text)
        except ValueError as e:
            raise InvalidFormatError("particle count must be a non-negative integer",
                                     line=line.rstrip('\r\n'), line_number=self.line_number) from e

    def read_snapshot(self) -> XYZSnapshot:
        """
        Read the next frame.

        Returns:
            The frame as an XYZSnapshot whose particles carry the reader's kind

        Raises:
            IoError: If the stream fails or ends before the frame is complete
            InvalidFormatError: If the header or a particle line is malformed
            ParseError: If a coordinate is not a number
        """
        n_particles = self._parse_count(self._read_line("particle count", frame_start=True))
        self.state = ReaderState.HEADER_READ

        comment = self._read_line("comment").rstrip('\r\n')
        self.state = ReaderState.COMMENT_READ

        particles = []
        for i in range(n_particles):
            line = self._read_line(f"particle {i + 1} of {n_particles}")
            try:
                particles.append(parse_particle_line(line, self.kind, self.dtype))
            except TrajanError as e:
                e.line_number = self.line_number
                raise
        self.state = ReaderState.PARTICLES_READ

        self.frames_read += 1
        logger.debug(f"Read frame {self.frames_read} with {n_particles} particles.")
        self.state = ReaderState.READY
        return XYZSnapshot(comment=comment, particles=particles)

    def __iter__(self) -> 'XYZReader':
        return self

    def __next__(self) -> XYZSnapshot:
        if self.state is ReaderState.EXHAUSTED:
            raise StopIteration
        try:
            return self.read_snapshot()
        except TrajanError as e:
            self.last_error = e
            self.state = ReaderState.EXHAUSTED
            clean_end = isinstance(e, IoError) and e.clean_eof
            if not clean_end:
                if self.strict:
                    raise
                logger.warning(f"Stopped reading after {self.frames_read} frames: {e}")
        raise StopIteration

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        self.state = ReaderState.EXHAUSTED

    @property
    def closed(self) -> bool:
        return self._stream is None

    def __enter__(self) -> 'XYZReader':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def read_xyz_snapshot(filename: Union[str, Path], kind: Union[CoordKind, str],
                      dtype: DTypeLike = np.float64) -> XYZSnapshot:
    """Read the first frame of an XYZ file."""
    with XYZReader.open(filename, kind, dtype=dtype) as reader:
        return reader.read_snapshot()


def load_xyz_trajectory(filename: Union[str, Path], kind: Union[CoordKind, str], dtype: DTypeLike = np.float64,
                        strict: bool = False) -> XYZTrajectory:
    """
    Read every frame of an XYZ file into memory.

    Args:
        filename: Path to the XYZ file
        kind: Quantity stored in the file
        dtype: Floating scalar type of the components
        strict: Raise on a malformed frame instead of keeping the frames read so far

    Returns:
        XYZTrajectory holding all frames read
    """
    with XYZReader.open(filename, kind, dtype=dtype, strict=strict) as reader:
        traj = XYZTrajectory(list(reader))
    logger.info(f"Loaded {traj.n_frames} frames from {Path(filename).name}.")
    return traj
