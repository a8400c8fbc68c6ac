import sys

from semantic_placeholder.cli.defaults import defaults
from semantic_placeholder.cli.parser.parsers import CommandLineParser
from semantic_placeholder.error.exceptions import RangeError
from semantic_placeholder.markup.data_uri_cache import DataUriCache
from semantic_placeholder.preferences.preference_store import PreferenceStore
from semantic_placeholder.ui.command_utils import configure_logging, insert_and_remember
from semantic_placeholder.utils.dimension_resolver import DimensionResolver

# Presets are rendered once per process
PRESET_CACHE = DataUriCache(max_items=defaults.CACHE_MAX_ITEMS)


def main(argv: list[str] | None = None) -> int:
    parser = CommandLineParser(description="Insert a preset SVG placeholder.")
    parser.add_general_arguments()
    parser.add_insertion_arguments()
    parser.add_preset_arguments()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    width, height = defaults.PRESETS[args.preset]
    try:
        dimensions = DimensionResolver(max_dimension=args.max_dimension).check_bounds(width, height)
    except RangeError as e:
        print(f"Invalid dimensions ({width}×{height}): {e}", file=sys.stderr)
        return 1

    return insert_and_remember(args, dimensions, PreferenceStore(args.preferences_file), cache=PRESET_CACHE)


if __name__ == "__main__":
    sys.exit(main())
