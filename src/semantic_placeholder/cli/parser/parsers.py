import argparse
from pathlib import Path

from semantic_placeholder.cli.defaults import defaults
from semantic_placeholder.error.exceptions import ParseError, RangeError
from semantic_placeholder.insertion.selection import parse_selection
from semantic_placeholder.utils.aspect_ratio import ASPECT_RATIOS, AspectRatio, Orientation, ResolutionMode
from semantic_placeholder.utils.dimension_resolver import DimensionResolver


def positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid integer")
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"'{value}' must be > 0")
    return parsed


def aspect_ratio(value: str) -> AspectRatio:
    if value in ASPECT_RATIOS:
        return ASPECT_RATIOS[value]
    try:
        return AspectRatio.parse(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"'{value}' is not a valid ratio. Choose from {', '.join(ASPECT_RATIOS)} or give a custom one like '3:2'"
        )


def orientation(value: str) -> Orientation:
    try:
        return Orientation.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def resolution_mode(value: str) -> ResolutionMode:
    try:
        return ResolutionMode.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def selection(value: str):
    try:
        return parse_selection(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


# fmt: off
class CommandLineParser(argparse.ArgumentParser):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.supports_insertion = False
        self.supports_literal_dimensions = False
        self.supports_ratio = False

    def add_general_arguments(self) -> None:
        self.add_argument("--max-dimension", type=positive_int, default=defaults.MAX_DIMENSION, help=f"Largest accepted width or height in pixels. Default: {defaults.MAX_DIMENSION}")
        self.add_argument("--preferences-file", type=Path, default=defaults.PREFERENCES_FILE, help=f"Where last used dimensions and ratios are remembered. Default: {defaults.PREFERENCES_FILE}")
        self.add_argument("--no-input", action="store_true", help="Never prompt; fail when a required value is missing.")
        self.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr.")

    def add_insertion_arguments(self) -> None:
        self.supports_insertion = True
        insertion_group = self.add_argument_group("Insertion target")
        insertion_group.add_argument("--at", type=selection, action="append", dest="selections", default=None, help="Cursor 'LINE:COL' or selection 'LINE:COL-LINE:COL' (1-based). Repeat for multiple cursors. Without --at the data URI is printed.")
        insertion_group.add_argument("--document", type=Path, default=None, help="Edit this file in place. Without --document the text is read from stdin and written to stdout.")

    def add_literal_arguments(self) -> None:
        self.supports_literal_dimensions = True
        self.add_argument("dims", type=str, nargs="?", default=None, help=f"Placeholder dimensions, e.g. 1200x600, '1200 600' or 1200×600 (prompted when omitted, default {defaults.DEFAULT_DIMS})")

    def add_ratio_arguments(self) -> None:
        self.supports_ratio = True
        ratio_group = self.add_argument_group("Aspect ratio")
        ratio_group.add_argument("--aspect", "-r", type=aspect_ratio, default=None, help=f"Aspect ratio ({', '.join(defaults.ASPECT_RATIO_CHOICES)} or a custom 'A:B')")
        ratio_group.add_argument("--orientation", "-o", type=orientation, default=None, help="Landscape keeps the ratio as given, Portrait swaps it.")
        ratio_group.add_argument("--mode", type=resolution_mode, default=None, help="'width' to give the width and compute the height, 'height' for the opposite.")
        ratio_group.add_argument("--base", "-b", type=str, default=None, help="The given side in pixels (or the size of a square).")

    def add_preset_arguments(self) -> None:
        self.add_argument("preset", type=str, choices=list(defaults.PRESETS.keys()), help="Preset size: " + ", ".join(f"{name} ({w}x{h})" for name, (w, h) in defaults.PRESETS.items()))

    def parse_args(self, args=None, namespace=None) -> argparse.Namespace:  # type: ignore
        namespace = super().parse_args(args, namespace)
        resolver = DimensionResolver(max_dimension=getattr(namespace, "max_dimension", defaults.MAX_DIMENSION))

        if self.supports_insertion and namespace.document is not None and not namespace.selections:
            self.error("--at must be provided when using --document")

        if self.supports_literal_dimensions:
            namespace.dimensions = None
            if namespace.dims is not None:
                try:
                    namespace.dimensions = resolver.parse_literal(namespace.dims)
                except ParseError as e:
                    self.error(str(e))

        if self.supports_ratio and namespace.base is not None:
            try:
                namespace.base = resolver.parse_single_dimension(namespace.base, name="--base")
            except RangeError:
                self.error(f"--base: {resolver.validate_single_dimension(namespace.base)}")

        return namespace
