import pytest

from semantic_placeholder.error.exceptions import InsertionError
from semantic_placeholder.insertion.selection import Position, Selection, parse_selection
from semantic_placeholder.insertion.text_edit import apply_insertions


def _range(start: tuple[int, int], end: tuple[int, int]) -> Selection:
    return Selection(anchor=Position(*start), active=Position(*end))


class TestApplyInsertions:
    @pytest.mark.fast
    def test_insert_at_cursor(self):
        assert apply_insertions("hello world", [Selection.cursor(0, 5)], "X") == "helloX world"

    @pytest.mark.fast
    def test_multiple_cursors_on_several_lines(self):
        text = "ab\ncd\n"
        selections = [Selection.cursor(1, 2), Selection.cursor(0, 1)]

        assert apply_insertions(text, selections, "X") == "aXb\ncdX\n"

    @pytest.mark.fast
    def test_selection_is_replaced(self):
        assert apply_insertions("hello world", [_range((0, 0), (0, 5))], "X") == "X world"

    @pytest.mark.fast
    def test_backwards_selection_is_replaced(self):
        assert apply_insertions("hello world", [_range((0, 11), (0, 6))], "X") == "hello X"

    @pytest.mark.fast
    def test_selection_across_lines(self):
        assert apply_insertions("one\ntwo\nthree", [_range((0, 1), (2, 2))], "X") == "oXree"

    @pytest.mark.fast
    def test_positions_are_clamped(self):
        assert apply_insertions("ab\ncd", [Selection.cursor(0, 99)], "X") == "abX\ncd"
        assert apply_insertions("ab\ncd", [Selection.cursor(5, 0)], "X") == "ab\ncdX"
        assert apply_insertions("ab\r\ncd", [Selection.cursor(0, 99)], "X") == "abX\r\ncd"

    @pytest.mark.fast
    @pytest.mark.parametrize("separator", ["\x0c", "\x0b", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_only_cr_and_lf_break_lines(self, separator):
        text = f"a{separator}b\nc"

        assert apply_insertions(text, [Selection.cursor(1, 0)], "X") == f"a{separator}b\nXc"
        assert apply_insertions(text, [Selection.cursor(0, 99)], "X") == f"a{separator}bX\nc"

    @pytest.mark.fast
    def test_lone_carriage_return_breaks_lines(self):
        assert apply_insertions("ab\rcd", [Selection.cursor(1, 1)], "X") == "ab\rcXd"

    @pytest.mark.fast
    def test_empty_document(self):
        assert apply_insertions("", [Selection.cursor(0, 0)], "X") == "X"

    @pytest.mark.fast
    def test_identical_cursors_are_merged(self):
        assert apply_insertions("ab", [Selection.cursor(0, 1), Selection.cursor(0, 1)], "X") == "aXb"

    @pytest.mark.fast
    def test_touching_selections_are_allowed(self):
        selections = [_range((0, 0), (0, 2)), _range((0, 2), (0, 4))]

        assert apply_insertions("abcdef", selections, "X") == "XXef"

    @pytest.mark.fast
    def test_overlapping_selections_fail(self):
        with pytest.raises(InsertionError, match="Overlapping"):
            apply_insertions("hello world", [_range((0, 0), (0, 5)), Selection.cursor(0, 2)], "X")

        with pytest.raises(InsertionError, match="Overlapping"):
            apply_insertions("hello world", [_range((0, 0), (0, 5)), _range((0, 3), (0, 8))], "X")

    @pytest.mark.fast
    def test_no_selections_fail(self):
        with pytest.raises(InsertionError, match="No active editor"):
            apply_insertions("text", [], "X")


class TestSelection:
    @pytest.mark.fast
    def test_parse_cursor(self):
        selection = parse_selection("3:10")

        assert selection.is_empty
        assert selection.active == Position(2, 9)

    @pytest.mark.fast
    def test_parse_range(self):
        selection = parse_selection("2:5-1:1")

        assert not selection.is_empty
        assert selection.anchor == Position(1, 4)
        assert selection.start == Position(0, 0)
        assert selection.end == Position(1, 4)

    @pytest.mark.fast
    @pytest.mark.parametrize("text", ["3", "0:1", "1:0", "a:b", "1:1-2", "-1:2", "1:1 - 2:2"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError, match="Invalid selection"):
            parse_selection(text)

    @pytest.mark.fast
    def test_negative_position(self):
        with pytest.raises(ValueError, match="must not be negative"):
            Position(-1, 0)
