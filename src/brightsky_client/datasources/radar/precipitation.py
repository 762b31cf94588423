"""
Radar precipitation grid decoding.

The ``precipitation_5`` field of a ``/radar`` record arrives in one of three
encodings, chosen by the ``format`` query parameter but not tagged in the
payload itself:

- ``compressed``: base64 string of zlib-deflated little-endian uint16 samples
- ``bytes``:      base64 string of raw little-endian uint16 samples
- ``plain``:      nested JSON arrays, one inner array per grid row

``decode_precipitation`` tells them apart by shape (array vs. string) and,
for strings, by whether the decoded bytes inflate as a zlib stream.  If
inflation fails the bytes are read as raw samples instead; that fallback is
the only recovery path and is never reported as an error.

Each sample is 0.01 mm of precipitation per 5 minutes over one 1 km² pixel.
Binary grids are flat: the row width is the bounding box width the caller
asked for and is not part of the payload.

Example::

    grid = decode_precipitation(record["precipitation_5"])
    rows = grid.to_rows(width=query.bbox_width())
"""

from __future__ import annotations

import base64
import binascii
import logging
import struct
import zlib
from dataclasses import dataclass
from typing import Any

from brightsky_client.errors import InvalidBase64Error, InvalidRowError, UnexpectedShapeError

logger = logging.getLogger(__name__)

MAX_SAMPLE = 0xFFFF

# One sample unit in millimeters
SAMPLE_RESOLUTION_MM = 0.01

Rows = tuple[tuple[int, ...], ...]


# =============================================================================
# Data Model
# =============================================================================


class _Grid:
    values: tuple[int, ...]

    @property
    def peak_mm(self) -> float:
        """Highest sample in the grid, in mm per 5 minutes."""
        return max(self.values, default=0) * SAMPLE_RESOLUTION_MM


@dataclass(frozen=True)
class _FlatPrecipitation(_Grid):
    values: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.values)

    def to_rows(self, width: int | None = None) -> Rows:
        """
        Reshape the flat samples into rows of ``width`` pixels.

        Args:
            width: Row width in pixels, i.e. ``right - left`` of the requested bbox.

        Raises:
            ValueError: No width given, or it does not divide the sample count.
        """
        if width is None or width <= 0 or len(self.values) % width:
            msg = f"Cannot reshape {len(self.values)} samples into rows of {width}"
            raise ValueError(msg)
        return tuple(self.values[i : i + width] for i in range(0, len(self.values), width))


@dataclass(frozen=True)
class CompressedPrecipitation(_FlatPrecipitation):
    """Flat samples recovered from a zlib-compressed payload."""


@dataclass(frozen=True)
class BytesPrecipitation(_FlatPrecipitation):
    """Flat samples recovered from an uncompressed binary payload."""


@dataclass(frozen=True)
class PlainPrecipitation(_Grid):
    """Rows of samples recovered from nested JSON arrays."""

    rows: Rows

    def __len__(self) -> int:
        return sum(len(row) for row in self.rows)

    @property
    def values(self) -> tuple[int, ...]:
        """All samples, row after row."""
        return tuple(sample for row in self.rows for sample in row)

    def to_rows(self, width: int | None = None) -> Rows:  # noqa: ARG002
        """Rows as received; ``width`` is accepted for symmetry and ignored."""
        return self.rows


PrecipitationGrid = CompressedPrecipitation | BytesPrecipitation | PlainPrecipitation


# =============================================================================
# Decoding
# =============================================================================


def unpack_samples(data: bytes) -> tuple[int, ...]:
    """Read little-endian uint16 samples; an odd trailing byte is dropped."""
    count = len(data) // 2
    return struct.unpack(f"<{count}H", data[: count * 2])


def _parse_row(row: Any) -> tuple[int, ...]:
    if not isinstance(row, list | tuple):
        raise InvalidRowError(f"Expected nested array, got {type(row).__name__}")
    for sample in row:
        # bool is an int subclass but never a valid sample
        if isinstance(sample, bool) or not isinstance(sample, int) or not 0 <= sample <= MAX_SAMPLE:
            raise InvalidRowError(f"Invalid array element {sample!r}, expected integer 0-{MAX_SAMPLE}")
    return tuple(row)


def _decode_base64(value: str) -> bytes:
    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidBase64Error(f"Base64 decode error: {e}") from e
    # Non-canonical input (stray bits after the last byte, e.g. "QR==") is rejected
    if base64.b64encode(raw) != value.encode("ascii"):
        raise InvalidBase64Error(f"Base64 decode error: non-canonical encoding {value[-4:]!r}")
    return raw


def _inflate(raw: bytes) -> bytes:
    """Inflate a zlib stream, keeping whatever a truncated stream yields."""
    d = zlib.decompressobj()
    return d.decompress(raw) + d.flush()


def decode_precipitation(value: Any) -> PrecipitationGrid:
    """
    Decode one ``precipitation_5`` JSON value into a precipitation grid.

    Args:
        value: The parsed JSON value (list of lists, or base64 string).

    Returns:
        ``PlainPrecipitation`` for nested arrays, ``CompressedPrecipitation``
        for base64 strings holding a zlib stream, ``BytesPrecipitation`` for
        any other base64 string.

    Raises:
        InvalidRowError: An array row is not an array or holds a non-uint16 value.
        InvalidBase64Error: A string is not valid base64.
        UnexpectedShapeError: The value is neither an array nor a string.
    """
    if isinstance(value, list | tuple):
        return PlainPrecipitation(rows=tuple(_parse_row(row) for row in value))

    if isinstance(value, str):
        raw = _decode_base64(value)
        try:
            inflated = _inflate(raw)
        except zlib.error as e:
            logger.debug("Precipitation payload is not zlib data (%s), reading %d raw bytes", e, len(raw))
            return BytesPrecipitation(values=unpack_samples(raw))
        return CompressedPrecipitation(values=unpack_samples(inflated))

    raise UnexpectedShapeError(f"Expected string or array, got {type(value).__name__}")
