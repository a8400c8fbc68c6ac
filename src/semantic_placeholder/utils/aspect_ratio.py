import re
from dataclasses import dataclass
from enum import Enum

# Regex pattern for ratios such as "16:9"
ASPECT_RATIO_PATTERN = re.compile(r"^([0-9]+)\s*:\s*([0-9]+)$")


class Orientation(Enum):
    LANDSCAPE = "Landscape"
    PORTRAIT = "Portrait"

    @staticmethod
    def parse(text: str) -> "Orientation":
        for orientation in Orientation:
            if text.strip().lower() == orientation.value.lower():
                return orientation
        raise ValueError(f"Invalid orientation: '{text}'. Expected one of: {', '.join(o.value for o in Orientation)}")


class ResolutionMode(Enum):
    WIDTH_TO_HEIGHT = "Width → Height"
    HEIGHT_TO_WIDTH = "Height → Width"

    @property
    def free_dimension(self) -> str:
        return "width" if self is ResolutionMode.WIDTH_TO_HEIGHT else "height"

    @staticmethod
    def parse(text: str) -> "ResolutionMode":
        # Accept both the stored label ("Width → Height") and the free dimension ("width")
        cleaned = text.strip().lower()
        for mode in ResolutionMode:
            if cleaned in (mode.value.lower(), mode.free_dimension):
                return mode
        raise ValueError(f"Invalid mode: '{text}'. Expected 'width' or 'height'")


@dataclass(frozen=True)
class AspectRatio:
    a: int
    b: int

    def __str__(self):
        return f"{self.a}:{self.b}"

    @property
    def is_square(self) -> bool:
        return self.a == self.b

    def oriented(self, orientation: Orientation) -> "AspectRatio":
        if orientation is Orientation.PORTRAIT:
            return AspectRatio(a=self.b, b=self.a)
        return self

    @staticmethod
    def parse(text: str) -> "AspectRatio":
        match = ASPECT_RATIO_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Invalid aspect ratio format: '{text}'. Expected format: '4:3', '16:9', etc.")
        return AspectRatio(a=int(match.group(1)), b=int(match.group(2)))


ASPECT_RATIOS = {
    "1:1":  AspectRatio(1, 1),
    "4:3":  AspectRatio(4, 3),
    "4:5":  AspectRatio(4, 5),
    "16:9": AspectRatio(16, 9),
}  # fmt: off
