# Export main classes for convenient import
from semantic_placeholder.error.exceptions import InvalidRatioError, ParseError, RangeError
from semantic_placeholder.markup.data_uri_cache import DataUriCache
from semantic_placeholder.markup.svg_markup import render_to_uri
from semantic_placeholder.utils.aspect_ratio import ASPECT_RATIOS, AspectRatio, Orientation, ResolutionMode
from semantic_placeholder.utils.dimension_resolver import DimensionResolver, Dimensions

__all__ = [
    "ASPECT_RATIOS",
    "AspectRatio",
    "DataUriCache",
    "DimensionResolver",
    "Dimensions",
    "InvalidRatioError",
    "Orientation",
    "ParseError",
    "RangeError",
    "ResolutionMode",
    "render_to_uri",
]
