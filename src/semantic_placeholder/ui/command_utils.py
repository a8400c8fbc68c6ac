import logging
import sys
from argparse import Namespace

from semantic_placeholder.error.exceptions import PreferencesError
from semantic_placeholder.insertion.placeholder_inserter import PlaceholderInserter
from semantic_placeholder.insertion.targets import FileDocumentTarget, InsertionTarget, StdoutTarget, StreamDocumentTarget
from semantic_placeholder.markup.data_uri_cache import DataUriCache
from semantic_placeholder.preferences.preference_store import PreferenceStore
from semantic_placeholder.utils.dimension_resolver import Dimensions

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    root = logging.getLogger("semantic_placeholder")
    root.setLevel(logging.DEBUG)
    if root.handlers:
        return
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root.addHandler(console_handler)


def build_target(args: Namespace) -> InsertionTarget:
    if not args.selections:
        return StdoutTarget()
    if args.document is not None:
        return FileDocumentTarget(path=args.document, selections=args.selections)
    return StreamDocumentTarget(selections=args.selections)


def insert_and_remember(
    args: Namespace,
    dimensions: Dimensions,
    preferences: PreferenceStore,
    cache: DataUriCache | None = None,
    **remember: str,
) -> int:
    inserter = PlaceholderInserter(target=build_target(args), cache=cache)
    if not inserter.insert(dimensions):
        return 1

    # Only a successful insertion becomes the new default
    try:
        preferences.update(last_dims=str(dimensions), **remember)
    except PreferencesError as e:
        print(f"⚠️  {e}", file=sys.stderr)
    return 0
