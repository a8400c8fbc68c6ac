import logging
import sys

from semantic_placeholder.error.exceptions import InsertionError
from semantic_placeholder.insertion.targets import InsertionTarget
from semantic_placeholder.markup.data_uri_cache import DataUriCache
from semantic_placeholder.utils.dimension_resolver import Dimensions

logger = logging.getLogger(__name__)


class PlaceholderInserter:
    def __init__(self, target: InsertionTarget, cache: DataUriCache | None = None):
        self.target = target
        self.cache = cache if cache is not None else DataUriCache()

    def insert(self, dimensions: Dimensions) -> bool:
        hits_before = self.cache.hits
        uri = self.cache.get_or_render(dimensions.width, dimensions.height)
        logger.debug(f"Data URI for {dimensions}: {'cache hit' if self.cache.hits > hits_before else 'rendered'}")

        try:
            self.target.insert(uri)
        except InsertionError as e:
            print(f"Failed to insert placeholder: {e}", file=sys.stderr)
            return False

        print(f"Placeholder inserted: {dimensions.label}", file=sys.stderr)
        return True
