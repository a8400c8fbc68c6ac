import math
import numbers
import re
from dataclasses import dataclass

from semantic_placeholder.cli.defaults import defaults
from semantic_placeholder.error.exceptions import InvalidRatioError, ParseError, RangeError, RangeReason
from semantic_placeholder.utils.aspect_ratio import AspectRatio, Orientation, ResolutionMode

# Four digits at most since the default maximum is 8192
LITERAL_DIMENSIONS_PATTERN = re.compile(r"^([0-9]{1,4})\s*[x\s]\s*([0-9]{1,4})$")
MULTIPLICATION_SIGN = "×"
# What a number prompt accepts: ASCII digits, optional sign, fraction and exponent
SINGLE_DIMENSION_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int

    def __str__(self):
        return f"{self.width}x{self.height}"

    @property
    def label(self) -> str:
        return f"{self.width}{MULTIPLICATION_SIGN}{self.height}"


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest integer, halves going up.

    Pure integer arithmetic, so arbitrarily large ratios never overflow a float.
    """
    return (2 * numerator + denominator) // (2 * denominator)


class DimensionResolver:
    def __init__(self, max_dimension: int = defaults.MAX_DIMENSION):
        if max_dimension < 1:
            raise ValueError(f"max_dimension must be >= 1, got {max_dimension}")
        self.max_dimension = max_dimension

    def check_bounds(self, width, height) -> Dimensions:
        return Dimensions(
            width=self._check_value("width", width),
            height=self._check_value("height", height),
        )

    def parse_literal(self, text: str) -> Dimensions:
        cleaned = text.strip().lower().replace(MULTIPLICATION_SIGN, "x")
        match = LITERAL_DIMENSIONS_PATTERN.match(cleaned)
        if not match:
            raise ParseError(f"Invalid dimensions: '{text}'. {self.expected_format}")

        try:
            return self.check_bounds(int(match.group(1)), int(match.group(2)))
        except RangeError as e:
            raise ParseError(f"Invalid dimensions: '{text}'. {self.expected_format}") from e

    def parse_single_dimension(self, text: str, name: str = "size") -> int:
        stripped = text.strip()
        if not SINGLE_DIMENSION_PATTERN.match(stripped):
            raise RangeError(name, text, RangeReason.NOT_FINITE)
        if not INTEGER_PATTERN.match(stripped):
            return self._check_value(name, float(stripped))
        try:
            value = int(stripped)
        except ValueError:
            # more digits than int() will convert
            reason = RangeReason.NOT_POSITIVE if stripped.startswith("-") else RangeReason.EXCEEDS_MAXIMUM
            raise RangeError(name, f"{stripped[:12]}...", reason, max_dimension=self.max_dimension) from None
        return self._check_value(name, value)

    def validate_single_dimension(self, text: str) -> str | None:
        try:
            self.parse_single_dimension(text)
        except RangeError as e:
            if e.reason is RangeReason.NOT_POSITIVE:
                return "Must be > 0"
            if e.reason is RangeReason.EXCEEDS_MAXIMUM:
                return f"Max is {self.max_dimension}"
            return "Enter an integer (e.g. 1200)"
        return None

    def resolve_from_ratio(
        self,
        ratio: AspectRatio,
        orientation: Orientation,
        mode: ResolutionMode,
        base_value: int,
    ) -> Dimensions:
        if ratio.a == 0 or ratio.b == 0:
            raise InvalidRatioError(f"Invalid ratio configuration: {ratio}")
        base_value = self._check_value(mode.free_dimension, base_value)

        # Square ratios take the base value directly, orientation and mode do not apply
        if ratio.is_square:
            return self.check_bounds(base_value, base_value)

        oriented = ratio.oriented(orientation)
        if mode is ResolutionMode.WIDTH_TO_HEIGHT:
            width = base_value
            height = round_half_up(width * oriented.b, oriented.a)
        else:
            height = base_value
            width = round_half_up(height * oriented.a, oriented.b)

        return self.check_bounds(width, height)

    @property
    def expected_format(self) -> str:
        return f"Expected format: 1200x600 (max {self.max_dimension}{MULTIPLICATION_SIGN}{self.max_dimension})"

    def _check_value(self, name: str, value) -> int:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise RangeError(name, value, RangeReason.NOT_FINITE)
        if not isinstance(value, numbers.Integral):
            if not math.isfinite(value):
                raise RangeError(name, value, RangeReason.NOT_FINITE)
            if value != int(value):
                raise RangeError(name, value, RangeReason.NOT_INTEGER)
        if value <= 0:
            raise RangeError(name, value, RangeReason.NOT_POSITIVE)
        if value > self.max_dimension:
            raise RangeError(name, value, RangeReason.EXCEEDS_MAXIMUM, max_dimension=self.max_dimension)
        return int(value)
