import sys

from semantic_placeholder.cli.defaults import defaults
from semantic_placeholder.cli.parser.parsers import CommandLineParser
from semantic_placeholder.error.exceptions import InvalidRatioError, RangeError
from semantic_placeholder.preferences.preference_store import LAST_BASE, LAST_MODE, LAST_ORIENT, LAST_RATIO, PreferenceStore
from semantic_placeholder.ui.command_utils import configure_logging, insert_and_remember
from semantic_placeholder.ui.prompt_utils import ask_choice, ask_text
from semantic_placeholder.utils.aspect_ratio import ASPECT_RATIOS, Orientation, ResolutionMode
from semantic_placeholder.utils.dimension_resolver import MULTIPLICATION_SIGN, DimensionResolver


def main(argv: list[str] | None = None) -> int:
    # 0. Parse command line arguments
    parser = CommandLineParser(description="Insert an SVG placeholder sized from an aspect ratio.")
    parser.add_general_arguments()
    parser.add_insertion_arguments()
    parser.add_ratio_arguments()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    resolver = DimensionResolver(max_dimension=args.max_dimension)
    preferences = PreferenceStore(args.preferences_file)

    def missing(flag: str) -> None:
        parser.error(f"{flag} is required with --no-input")

    # 1. Ratio
    ratio = args.aspect
    if ratio is None:
        if args.no_input:
            missing("--aspect")
        label = ask_choice("Choose a ratio", list(ASPECT_RATIOS.keys()), default=preferences.get(LAST_RATIO))
        if label is None:
            return 0
        ratio = ASPECT_RATIOS[label]

    # 2. Orientation and mode, only meaningful when the ratio is not square
    orientation, mode = Orientation.LANDSCAPE, ResolutionMode.WIDTH_TO_HEIGHT
    if not ratio.is_square:
        orientation = args.orientation
        if orientation is None:
            if args.no_input:
                missing("--orientation")
            picked = ask_choice("Orientation", [o.value for o in Orientation], default=preferences.get(LAST_ORIENT))
            if picked is None:
                return 0
            orientation = Orientation(picked)

        mode = args.mode
        if mode is None:
            if args.no_input:
                missing("--mode")
            picked = ask_choice("Compute using…", [m.value for m in ResolutionMode], default=preferences.get(LAST_MODE))
            if picked is None:
                return 0
            mode = ResolutionMode(picked)

    # 3. Base value
    base = args.base
    if base is None:
        if args.no_input:
            missing("--base")
        if ratio.is_square:
            prompt = f"Enter size (px) for {ratio}"
        else:
            prompt = f"Enter {mode.free_dimension} (px) for {ratio.oriented(orientation)}"
        answer = ask_text(prompt, default=preferences.get(LAST_BASE, str(defaults.DEFAULT_BASE)), validate=resolver.validate_single_dimension)
        if answer is None:
            return 0
        base = resolver.parse_single_dimension(answer)

    # 4. Resolve
    try:
        dimensions = resolver.resolve_from_ratio(ratio, orientation, mode, base)
    except InvalidRatioError as e:
        print(e, file=sys.stderr)
        return 1
    except RangeError as e:
        limit = f"{resolver.max_dimension}{MULTIPLICATION_SIGN}{resolver.max_dimension}"
        print(f"Invalid dimensions: {e}. Max is {limit}.", file=sys.stderr)
        return 1

    # 5. Insert and remember
    remember = {LAST_RATIO: str(ratio), LAST_BASE: str(base)}
    if not ratio.is_square:
        remember.update({LAST_ORIENT: orientation.value, LAST_MODE: mode.value})
    return insert_and_remember(args, dimensions, preferences, **remember)


if __name__ == "__main__":
    sys.exit(main())
