"""
Exception hierarchy for query validation and response decoding.

Query errors are raised from ``build()`` before any request is sent.
Precipitation decode errors are raised while a radar response is parsed;
they subclass ``ValueError`` so pydantic reports them as a validation
failure of the whole response.
"""

from __future__ import annotations


class BrightSkyError(Exception):
    """Base class for all errors raised by this library."""


# =============================================================================
# Query validation
# =============================================================================


class QueryError(BrightSkyError, ValueError):
    """A query builder parameter is missing or out of range."""


class DateNotSetError(QueryError):
    """The ``/weather`` endpoint requires a start date."""

    def __init__(self) -> None:
        super().__init__("Date is required, but not set")


class _RangeError(QueryError):
    template = "{value}"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(self.template.format(value=value))


class InvalidLatitudeError(_RangeError):
    template = "Latitude must be between -90 and 90, got {value}"


class InvalidLongitudeError(_RangeError):
    template = "Longitude must be between -180 and 180, got {value}"


class InvalidMaxDistanceError(_RangeError):
    template = "Max distance must be between 0 and 500000, got {value}"


class InvalidDistanceError(_RangeError):
    template = "Distance must be a non-negative number of meters, got {value}"


class InvalidBboxError(_RangeError):
    template = "Bounding box must be four pixel values (top, left, bottom, right), got {value}"


# =============================================================================
# Radar precipitation decoding
# =============================================================================


class PrecipitationDecodeError(BrightSkyError, ValueError):
    """The ``precipitation_5`` field of a radar record could not be decoded."""


class UnexpectedShapeError(PrecipitationDecodeError):
    """The value is neither a JSON array nor a string."""


class InvalidRowError(PrecipitationDecodeError):
    """A plain grid row is not an array, or holds a value outside 0..65535."""


class InvalidBase64Error(PrecipitationDecodeError):
    """A binary grid string is not valid base64."""
