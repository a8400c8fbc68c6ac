import logging
import os
from pathlib import Path

import platformdirs

logger = logging.getLogger(__name__)

APP_NAME = "semantic-placeholder"
ASPECT_RATIO_CHOICES = ["1:1", "4:3", "4:5", "16:9"]
CACHE_MAX_ITEMS = 10
DEFAULT_BASE = 1200
DEFAULT_DIMS = "1200x600"
DEFAULT_MAX_DIMENSION = 8192
PRESETS = {
    "hero": (1440, 720),
    "card": (400, 300),
    "avatar": (128, 128),
}


def _max_dimension_from_env() -> int:
    raw = os.environ.get("SEMANTIC_PLACEHOLDER_MAX_DIMENSION")
    if not raw:
        return DEFAULT_MAX_DIMENSION
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        logger.warning(f"Ignoring SEMANTIC_PLACEHOLDER_MAX_DIMENSION={raw!r}: expected a positive integer, using {DEFAULT_MAX_DIMENSION}")
        return DEFAULT_MAX_DIMENSION
    return value


MAX_DIMENSION = _max_dimension_from_env()

if os.environ.get("SEMANTIC_PLACEHOLDER_CONFIG_DIR"):
    # User specified config directory (e.g. a dotfiles checkout)
    PLACEHOLDER_CONFIG_DIR = Path(os.environ["SEMANTIC_PLACEHOLDER_CONFIG_DIR"]).resolve()
else:
    PLACEHOLDER_CONFIG_DIR = Path(platformdirs.user_config_dir(appname=APP_NAME))

PREFERENCES_FILE = PLACEHOLDER_CONFIG_DIR / "preferences.json"
