"""Read flight recording files from disk.

Files ending in ``.flygz`` (any letter casing) are treated as gzip streams
and only their first member is decoded; every other file is decoded as a plain
JSON document. The choice is made from the file name only, the content is
never sniffed: a gzip file saved under another extension is reported as an
unrecognized format.
"""

from __future__ import annotations

import io
import logging
import os
import zlib
from pathlib import Path

from pydantic import ValidationError

from flyg_format.config import settings
from flyg_format.errors import CouldNotOpenFileError, DecompressionFailedError, FileFormatNotRecognizedError
from flyg_format.models import FlightRecording

COMPRESSED_EXTENSION = "flygz"

logger = logging.getLogger("flyg_format.loader")


def is_compressed_path(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` carries the reserved compressed extension."""
    return Path(path).suffix[1:].lower() == COMPRESSED_EXTENSION


def load_flight_information_from_file(
    path: str | os.PathLike[str],
    *,
    compression_enabled: bool | None = None,
) -> FlightRecording:
    """Load a flight recording from ``path``.

    ``compression_enabled`` overrides ``settings.compression_enabled``. When
    compression is disabled, files with the compressed extension are decoded
    as plain documents.

    Raises:
        CouldNotOpenFileError: the file could not be opened.
        DecompressionFailedError: the gzip stream could not be read.
        FileFormatNotRecognizedError: the content is not a valid recording.
    """
    if compression_enabled is None:
        compression_enabled = settings.compression_enabled
    compressed = compression_enabled and is_compressed_path(path)

    try:
        handle = open(path, "rb")
    except OSError as exc:
        logger.debug("flight_file_rejected", extra={"path": str(path), "reason": repr(exc)})
        raise CouldNotOpenFileError() from None

    with handle:
        payload = _read_compressed(handle, path) if compressed else _read_plain(handle, path)

    try:
        recording = FlightRecording.model_validate_json(payload)
    except ValidationError as exc:
        logger.debug(
            "flight_file_rejected",
            extra={"path": str(path), "reason": "validation", "error_count": exc.error_count()},
        )
        raise FileFormatNotRecognizedError() from None

    logger.debug(
        "flight_file_loaded",
        extra={"path": str(path), "compressed": compressed, "fuel_records": len(recording.fuel_records)},
    )
    return recording


def _read_plain(handle: io.BufferedReader, path: str | os.PathLike[str]) -> bytes:
    try:
        return handle.read()
    except OSError as exc:
        logger.debug("flight_file_rejected", extra={"path": str(path), "reason": repr(exc)})
        raise FileFormatNotRecognizedError() from None


def _read_compressed(handle: io.BufferedReader, path: str | os.PathLike[str]) -> bytes:
    # wbits=31 expects a gzip header and trailer; bytes past the first member are left in unused_data.
    decompressor = zlib.decompressobj(wbits=31)
    try:
        payload = decompressor.decompress(handle.read())
        if not decompressor.eof:
            raise EOFError("gzip stream ended before the end of its first member")
    except (OSError, EOFError, zlib.error) as exc:
        logger.debug("flight_file_rejected", extra={"path": str(path), "reason": repr(exc)})
        raise DecompressionFailedError() from None
    return payload
