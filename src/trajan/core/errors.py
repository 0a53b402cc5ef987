"""
Error types for trajectory reading and writing.

Every failure raised while opening, parsing or writing a trajectory is a
TrajanError carrying one of three kinds: IO, PARSE or INVALID_FORMAT.
"""
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    IO = "IO error"
    PARSE = "Parse error"
    INVALID_FORMAT = "Invalid format"


class TrajanError(Exception):
    """Base class for all trajan errors."""

    kind: ErrorKind = ErrorKind.IO

    def __init__(self, message: str, line: Optional[str] = None, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.line_number = line_number

    def __str__(self) -> str:
        text = f"{self.kind.value}: {self.message}"
        if self.line_number is not None:
            text += f" (line {self.line_number})"
        if self.line is not None:
            text += f": {self.line!r}"
        return text


class IoError(TrajanError):
    """Opening, reading or writing the underlying stream failed."""

    kind = ErrorKind.IO

    def __init__(self, message: str, line: Optional[str] = None, line_number: Optional[int] = None,
                 clean_eof: bool = False):
        super().__init__(message, line=line, line_number=line_number)
        # True only when the stream ended exactly at a frame boundary.
        self.clean_eof = clean_eof

    @classmethod
    def from_os_error(cls, error: OSError, action: str = "I/O", line_number: Optional[int] = None) -> 'IoError':
        return cls(f"{action} failed: {error}", line_number=line_number)


class ParseError(TrajanError, ValueError):
    """A numeric token could not be parsed as the configured scalar type."""

    kind = ErrorKind.PARSE

    def __init__(self, message: str, token: Optional[str] = None, line: Optional[str] = None,
                 line_number: Optional[int] = None):
        super().__init__(message, line=line, line_number=line_number)
        self.token = token

    @classmethod
    def from_value_error(cls, error: ValueError, token: str, line: Optional[str] = None) -> 'ParseError':
        return cls(f"cannot parse {token!r} as a number ({error})", token=token, line=line)


class InvalidFormatError(TrajanError, ValueError):
    """A line did not have the expected shape (token count or particle count header)."""

    kind = ErrorKind.INVALID_FORMAT
