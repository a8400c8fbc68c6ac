import logging
import re

from semantic_placeholder.error.exceptions import InsertionError
from semantic_placeholder.insertion.selection import Position, Selection

logger = logging.getLogger(__name__)

# Editors break lines only here; "\f", "\v", U+2028 and friends stay inside a line
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def apply_insertions(text: str, selections: list[Selection], payload: str) -> str:
    if not selections:
        raise InsertionError("No active editor")

    lines = split_lines(text)
    ranges = sorted({(_to_offset(lines, s.start), _to_offset(lines, s.end)) for s in selections})

    for (_, previous_end), (start, _) in zip(ranges, ranges[1:]):
        if start < previous_end:
            raise InsertionError("Overlapping ranges are not allowed")

    # Back to front, so offsets of the remaining edits stay valid
    for start, end in reversed(ranges):
        action = "insert" if start == end else "replace"
        logger.debug(f"Text edit: {action} at offset {start}..{end}")
        text = text[:start] + payload + text[end:]
    return text


def split_lines(text: str) -> list[tuple[str, str]]:
    """Split into ``(content, line_break)`` pairs; the last line has an empty break."""
    lines = []
    start = 0
    for match in LINE_BREAK.finditer(text):
        lines.append((text[start : match.start()], match.group()))
        start = match.end()
    if start < len(text):
        lines.append((text[start:], ""))
    return lines


def _to_offset(lines: list[tuple[str, str]], position: Position) -> int:
    if position.line >= len(lines):
        # Past the last line clamps to the end of the document
        return sum(len(content) + len(line_break) for content, line_break in lines)

    offset = sum(len(content) + len(line_break) for content, line_break in lines[: position.line])
    content = lines[position.line][0]
    return offset + min(position.character, len(content))
