import re
from dataclasses import dataclass

# 1-based "LINE:COL" or "LINE:COL-LINE:COL"
SELECTION_PATTERN = re.compile(r"^([0-9]+):([0-9]+)(?:-([0-9]+):([0-9]+))?$")


@dataclass(frozen=True, order=True)
class Position:
    line: int
    character: int

    def __post_init__(self):
        if self.line < 0 or self.character < 0:
            raise ValueError(f"Position must not be negative: {self.line}:{self.character}")


@dataclass(frozen=True)
class Selection:
    anchor: Position
    active: Position

    @staticmethod
    def cursor(line: int, character: int) -> "Selection":
        position = Position(line, character)
        return Selection(anchor=position, active=position)

    @property
    def start(self) -> Position:
        return min(self.anchor, self.active)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.active)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active


def parse_selection(text: str) -> Selection:
    match = SELECTION_PATTERN.match(text.strip())
    if not match:
        raise ValueError(f"Invalid selection: '{text}'. Expected 'LINE:COL' or 'LINE:COL-LINE:COL' (1-based)")

    numbers = [int(group) for group in match.groups() if group is not None]
    if any(number < 1 for number in numbers):
        raise ValueError(f"Invalid selection: '{text}'. Lines and columns start at 1")

    anchor = Position(numbers[0] - 1, numbers[1] - 1)
    if len(numbers) == 2:
        return Selection(anchor=anchor, active=anchor)
    return Selection(anchor=anchor, active=Position(numbers[2] - 1, numbers[3] - 1))
