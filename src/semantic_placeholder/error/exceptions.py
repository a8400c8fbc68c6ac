import math
from enum import Enum


class SemanticPlaceholderException(Exception):
    """base class for all custom exceptions in semantic_placeholder package."""


class PlaceholderUserException(SemanticPlaceholderException):
    """an exception raised by user behavior or intention."""


class DimensionError(PlaceholderUserException, ValueError):
    """requested dimensions could not be turned into a valid width/height pair."""


class ParseError(DimensionError):
    """literal dimension text did not match the accepted grammar."""


class RangeReason(Enum):
    NOT_FINITE = "is not a finite number"
    NOT_INTEGER = "is not an integer"
    NOT_POSITIVE = "must be > 0"
    EXCEEDS_MAXIMUM = "exceeds the maximum"


class RangeError(DimensionError):
    """a dimension value failed the positivity/integrality/maximum check."""

    def __init__(self, dimension: str, value, reason: RangeReason, max_dimension: int | None = None):
        self.dimension = dimension
        self.value = value
        self.reason = reason
        self.max_dimension = max_dimension
        message = f"{dimension} {_describe(value)} {reason.value}"
        if reason is RangeReason.EXCEEDS_MAXIMUM and max_dimension is not None:
            message += f" of {max_dimension}"
        super().__init__(message)


def _describe(value) -> str:
    # repr() of an int past a few thousand digits raises ValueError
    if isinstance(value, int) and not isinstance(value, bool) and value.bit_length() > 256:
        digits = int(value.bit_length() * math.log10(2)) + 1
        return f"(a {digits}-digit number)"
    return repr(value)


class InvalidRatioError(DimensionError):
    """aspect ratio has a zero component."""


class InsertionError(SemanticPlaceholderException):
    """error occurred while attempting to write the placeholder into the document."""


class PreferencesError(SemanticPlaceholderException):
    """error occurred while attempting to persist preferences."""
