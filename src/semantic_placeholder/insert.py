import sys

from semantic_placeholder.cli.defaults import defaults
from semantic_placeholder.cli.parser.parsers import CommandLineParser
from semantic_placeholder.error.exceptions import ParseError
from semantic_placeholder.preferences.preference_store import LAST_DIMS, PreferenceStore
from semantic_placeholder.ui.command_utils import configure_logging, insert_and_remember
from semantic_placeholder.ui.prompt_utils import ask_text
from semantic_placeholder.utils.dimension_resolver import DimensionResolver


def main(argv: list[str] | None = None) -> int:
    # 0. Parse command line arguments
    parser = CommandLineParser(description="Insert an SVG placeholder of the given dimensions.")
    parser.add_general_arguments()
    parser.add_insertion_arguments()
    parser.add_literal_arguments()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    resolver = DimensionResolver(max_dimension=args.max_dimension)
    preferences = PreferenceStore(args.preferences_file)

    # 1. Resolve dimensions, prompting when they were not given
    dimensions = args.dimensions
    if dimensions is None:
        if args.no_input:
            parser.error("dimensions are required with --no-input")
        answer = ask_text(
            prompt="Placeholder dimensions",
            default=preferences.get(LAST_DIMS, defaults.DEFAULT_DIMS),
            validate=lambda v: _literal_error(resolver, v),
        )
        if answer is None:
            return 0
        try:
            dimensions = resolver.parse_literal(answer)
        except ParseError:
            print("Invalid dimensions. Expected format: 1200x600", file=sys.stderr)
            return 1

    # 2. Insert and remember
    return insert_and_remember(args, dimensions, preferences)


def _literal_error(resolver: DimensionResolver, value: str) -> str | None:
    try:
        resolver.parse_literal(value)
    except ParseError:
        return resolver.expected_format
    return None


if __name__ == "__main__":
    sys.exit(main())
