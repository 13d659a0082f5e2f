"""Failure classifications for reading flight recording files."""

from __future__ import annotations

from enum import Enum


class FormatErrorKind(str, Enum):
    """Closed set of reasons a flight recording could not be loaded."""

    COULD_NOT_OPEN_FILE = "could_not_open_file"
    FILE_FORMAT_NOT_RECOGNIZED = "file_format_not_recognized"
    DECOMPRESSION_FAILED = "decompression_failed"


class FlygFormatError(Exception):
    """Base error for all failures while processing a flight recording file."""

    kind: FormatErrorKind
    message: str = "Flight recording could not be loaded"

    def __init__(self) -> None:
        super().__init__(self.message)


class CouldNotOpenFileError(FlygFormatError):
    """Raised when the supplied file could not be opened."""

    kind = FormatErrorKind.COULD_NOT_OPEN_FILE
    message = "Could not open supplied file"


class FileFormatNotRecognizedError(FlygFormatError):
    """Raised when the file content does not decode into a flight recording."""

    kind = FormatErrorKind.FILE_FORMAT_NOT_RECOGNIZED
    message = "Content of supplied file is not recognized"


class DecompressionFailedError(FlygFormatError):
    """Raised when a compressed file is not a readable gzip stream."""

    kind = FormatErrorKind.DECOMPRESSION_FAILED
    message = "Decompression of supplied file failed"
