import math

import pytest

from semantic_placeholder.error.exceptions import ParseError, RangeError, RangeReason
from semantic_placeholder.utils.dimension_resolver import DimensionResolver, Dimensions

EDGE_VALUES = [1, 9, 10, 99, 100, 999, 1000, 1200, 8191, 8192]


@pytest.fixture
def resolver() -> DimensionResolver:
    return DimensionResolver()


class TestParseLiteral:
    @pytest.mark.fast
    @pytest.mark.parametrize("width", EDGE_VALUES)
    @pytest.mark.parametrize("height", EDGE_VALUES)
    def test_accepts_every_valid_pair(self, resolver, width, height):
        assert resolver.parse_literal(f"{width}x{height}") == Dimensions(width, height)

    @pytest.mark.fast
    @pytest.mark.parametrize("text", ["1200 600", "1200x600", "1200×600", "  1200 X 600  ", "1200 x 600", "1200  600"])
    def test_separator_forms_are_equivalent(self, resolver, text):
        assert resolver.parse_literal(text) == Dimensions(1200, 600)

    @pytest.mark.fast
    @pytest.mark.parametrize(
        "text",
        [
            "1200",
            "1200x",
            "x600",
            "axb",
            "1200x600x3",
            "1200.5x600",
            "-1x600",
            "12000x600",
            "1200*600",
            "１２００x600",
            "",
        ],
    )
    def test_rejects_text_outside_grammar(self, resolver, text):
        with pytest.raises(ParseError, match="Expected format: 1200x600"):
            resolver.parse_literal(text)

    @pytest.mark.fast
    def test_zero_is_rejected_by_bounds(self, resolver):
        with pytest.raises(ParseError) as exc_info:
            resolver.parse_literal("0x600")

        assert isinstance(exc_info.value.__cause__, RangeError)
        assert exc_info.value.__cause__.reason is RangeReason.NOT_POSITIVE

    @pytest.mark.fast
    def test_above_maximum_is_rejected_by_bounds(self, resolver):
        with pytest.raises(ParseError) as exc_info:
            resolver.parse_literal("1200x8193")

        assert exc_info.value.__cause__.dimension == "height"
        assert exc_info.value.__cause__.reason is RangeReason.EXCEEDS_MAXIMUM

    @pytest.mark.fast
    def test_five_digits_never_reach_bounds_check(self, resolver):
        with pytest.raises(ParseError) as exc_info:
            resolver.parse_literal("10000x10")

        assert exc_info.value.__cause__ is None

    @pytest.mark.fast
    def test_maximum_is_injected(self):
        resolver = DimensionResolver(max_dimension=100)

        assert resolver.parse_literal("100x100") == Dimensions(100, 100)
        with pytest.raises(ParseError, match=r"max 100×100"):
            resolver.parse_literal("101x50")

    @pytest.mark.fast
    def test_invalid_maximum_raises(self):
        with pytest.raises(ValueError, match="max_dimension must be >= 1"):
            DimensionResolver(max_dimension=0)


class TestCheckBounds:
    @pytest.mark.fast
    def test_float_integers_are_normalized(self, resolver):
        dims = resolver.check_bounds(1200.0, 600.0)

        assert dims == Dimensions(1200, 600)
        assert type(dims.width) is int
        assert type(dims.height) is int

    @pytest.mark.fast
    @pytest.mark.parametrize(
        ("width", "height", "dimension", "reason"),
        [
            (1.5, 10, "width", RangeReason.NOT_INTEGER),
            (10, 99.9, "height", RangeReason.NOT_INTEGER),
            (math.nan, 10, "width", RangeReason.NOT_FINITE),
            (10, math.inf, "height", RangeReason.NOT_FINITE),
            (-math.inf, 10, "width", RangeReason.NOT_FINITE),
            (0, 5, "width", RangeReason.NOT_POSITIVE),
            (5, -3, "height", RangeReason.NOT_POSITIVE),
            (8193, 1, "width", RangeReason.EXCEEDS_MAXIMUM),
            (1, 10_000, "height", RangeReason.EXCEEDS_MAXIMUM),
            ("12", 5, "width", RangeReason.NOT_FINITE),
            (True, 5, "width", RangeReason.NOT_FINITE),
        ],
    )
    def test_violations_are_classified(self, resolver, width, height, dimension, reason):
        with pytest.raises(RangeError) as exc_info:
            resolver.check_bounds(width, height)

        assert exc_info.value.dimension == dimension
        assert exc_info.value.reason is reason

    @pytest.mark.fast
    def test_exceeding_message_names_the_maximum(self, resolver):
        with pytest.raises(RangeError, match="width 9000 exceeds the maximum of 8192"):
            resolver.check_bounds(9000, 10)

    @pytest.mark.fast
    def test_range_error_is_a_value_error(self, resolver):
        with pytest.raises(ValueError):
            resolver.check_bounds(0, 0)


class TestSingleDimension:
    @pytest.mark.fast
    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("1200", None),
            (" 42 ", None),
            ("8192", None),
            ("1e3", None),
            ("1.5", "Enter an integer (e.g. 1200)"),
            ("abc", "Enter an integer (e.g. 1200)"),
            ("nan", "Enter an integer (e.g. 1200)"),
            ("0", "Must be > 0"),
            ("-5", "Must be > 0"),
            ("8193", "Max is 8192"),
            ("+640", None),
            ("640.", None),
            ("1_000", "Enter an integer (e.g. 1200)"),
            ("\u0661\u0662", "Enter an integer (e.g. 1200)"),
            ("\uff11\uff12", "Enter an integer (e.g. 1200)"),
            ("inf", "Enter an integer (e.g. 1200)"),
            ("1e999", "Enter an integer (e.g. 1200)"),
            ("9" * 5000, "Max is 8192"),
            ("-" + "9" * 5000, "Must be > 0"),
        ],
    )
    def test_validation_messages(self, resolver, text, message):
        assert resolver.validate_single_dimension(text) == message

    @pytest.mark.fast
    def test_parse_single_dimension(self, resolver):
        assert resolver.parse_single_dimension(" 640 ") == 640
        assert resolver.parse_single_dimension("1e3") == 1000

        with pytest.raises(RangeError):
            resolver.parse_single_dimension("640px")

    @pytest.mark.fast
    def test_digit_separators_are_rejected(self, resolver):
        with pytest.raises(RangeError) as exc_info:
            resolver.parse_single_dimension("1_000")

        assert exc_info.value.reason is RangeReason.NOT_FINITE


class TestDimensions:
    @pytest.mark.fast
    def test_string_forms(self):
        dims = Dimensions(1200, 600)

        assert str(dims) == "1200x600"
        assert dims.label == "1200×600"
