"""Typed loader for recorded flight-log (``.flyg``) files."""

from .errors import (
    CouldNotOpenFileError,
    DecompressionFailedError,
    FileFormatNotRecognizedError,
    FlygFormatError,
    FormatErrorKind,
)
from .loader import COMPRESSED_EXTENSION, load_flight_information_from_file
from .models import FlightRecording, FuelRecord, PlaneInformation, Times

__all__ = [
    "COMPRESSED_EXTENSION",
    "CouldNotOpenFileError",
    "DecompressionFailedError",
    "FileFormatNotRecognizedError",
    "FlightRecording",
    "FlygFormatError",
    "FormatErrorKind",
    "FuelRecord",
    "PlaneInformation",
    "Times",
    "load_flight_information_from_file",
]
