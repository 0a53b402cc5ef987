"""
XYZ trajectory writer.

Frames are written with fixed column widths so that a given snapshot always
produces the same bytes:

    3
    water
    O              0.000000000000       0.000000000000       0.117300000000
    ...
"""
import io
import logging
from pathlib import Path
from typing import IO, Iterable, Tuple, Union

import numpy as np

from ..core.attribute import AttributeKind
from ..core.errors import InvalidFormatError, IoError
from ..core.particle import Particle
from ..core.snapshot import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_NAME_WIDTH = 8
DEFAULT_PRECISION = 12
UNKNOWN_NAME = "X"


class XYZWriter:
    """Writes snapshots to a stream in XYZ format, one frame per call."""

    def __init__(self, stream: IO, name_width: int = DEFAULT_NAME_WIDTH, precision: int = DEFAULT_PRECISION):
        """
        Initialize the writer.

        Args:
            stream: Writable text or binary stream; binary streams are encoded as UTF-8
            name_width: Width the particle name is padded or truncated to
            precision: Number of decimals written for each component
        """
        if name_width < 1:
            raise ValueError("name_width must be positive.")
        if precision < 0:
            raise ValueError("precision must be non-negative.")
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            stream = io.TextIOWrapper(stream, encoding='utf-8', newline='\n')
        self._stream = stream
        self.name_width = name_width
        self.precision = precision
        self.frames_written = 0

    @classmethod
    def open(cls, filename: Union[str, Path], name_width: int = DEFAULT_NAME_WIDTH,
             precision: int = DEFAULT_PRECISION) -> 'XYZWriter':
        """
        Open (and truncate) an XYZ file for writing.

        Raises:
            IoError: If the file cannot be opened
        """
        filepath = Path(filename)
        try:
            stream = open(filepath, 'w', encoding='utf-8', newline='\n')
        except OSError as e:
            raise IoError.from_os_error(e, action=f"Opening {filepath}") from e
        logger.info(f"Writing XYZ frames to {filepath}")
        return cls(stream, name_width=name_width, precision=precision)

    def _particle_record(self, particle: Particle) -> Tuple[str, np.ndarray]:
        name_attr = particle.attribute("name")
        if name_attr is not None and name_attr.kind is AttributeKind.STRING:
            name = name_attr.value
        else:
            name = UNKNOWN_NAME
        for vector in (particle.pos(), particle.vel(), particle.force()):
            if vector is not None:
                return name, vector
        raise InvalidFormatError(f"particle {name!r} has no position, velocity or force to write")

    def format_particle(self, particle: Particle) -> str:
        """Fixed-width line for one particle, without the newline."""
        name, vector = self._particle_record(particle)
        width = self.precision + 8
        fields = [f"{name[:self.name_width]:<{self.name_width}}"]
        fields.extend(f"{float(c):>{width}.{self.precision}f}" for c in vector)
        return " ".join(fields)

    def write_snapshot(self, snapshot: Snapshot) -> None:
        """
        Write one frame: particle count, comment, then one line per particle.

        Raises:
            IoError: If writing to the stream fails
            InvalidFormatError: If a particle carries no vector to write
        """
        if self._stream is None:
            raise IoError("cannot write to a closed writer")
        comment = getattr(snapshot, "comment", "")
        lines = [str(len(snapshot)), comment]
        lines.extend(self.format_particle(p) for p in snapshot)
        try:
            self._stream.write("\n".join(lines) + "\n")
        except OSError as e:
            raise IoError.from_os_error(e, action="Writing frame") from e
        self.frames_written += 1
        logger.debug(f"Wrote frame {self.frames_written} with {len(snapshot)} particles.")

    def write_trajectory(self, snapshots: Iterable[Snapshot]) -> int:
        """Write every snapshot in order and return how many were written."""
        count = 0
        for snapshot in snapshots:
            self.write_snapshot(snapshot)
            count += 1
        return count

    def flush(self) -> None:
        if self._stream is None:
            raise IoError("cannot write to a closed writer")
        try:
            self._stream.flush()
        except OSError as e:
            raise IoError.from_os_error(e, action="Flushing") from e

    def close(self) -> None:
        if self._stream is not None:
            try:
                self._stream.close()
            except OSError as e:
                raise IoError.from_os_error(e, action="Closing") from e
            finally:
                self._stream = None
            logger.debug(f"Closed XYZ writer after {self.frames_written} frames.")

    @property
    def closed(self) -> bool:
        return self._stream is None

    def __enter__(self) -> 'XYZWriter':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
