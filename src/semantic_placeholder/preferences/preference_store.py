import json
import logging
import os
import tempfile
from pathlib import Path

from semantic_placeholder.cli.defaults import defaults
from semantic_placeholder.error.exceptions import PreferencesError

logger = logging.getLogger(__name__)

LAST_DIMS = "last_dims"  # e.g. "1200x600"
LAST_RATIO = "last_ratio"  # "1:1" | "4:3" | ...
LAST_ORIENT = "last_orient"  # "Landscape" | "Portrait"
LAST_MODE = "last_mode"  # "Width → Height" | "Height → Width"
LAST_BASE = "last_base"  # number as string, e.g. "1200"

KNOWN_KEYS = frozenset({LAST_DIMS, LAST_RATIO, LAST_ORIENT, LAST_MODE, LAST_BASE})


class PreferenceStore:
    def __init__(self, path: Path | str = defaults.PREFERENCES_FILE):
        self.path = Path(path)

    def get(self, key: str, default: str | None = None) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else default

    def all(self) -> dict[str, str]:
        return {k: v for k, v in self._load().items() if isinstance(v, str)}

    def update(self, **values: str) -> None:
        unknown = set(values) - KNOWN_KEYS
        if unknown:
            raise ValueError(f"Unknown preference key(s): {', '.join(sorted(unknown))}")

        current = self._load()
        current.update({key: str(value) for key, value in values.items()})
        self._write(current)
        logger.debug(f"Updated preferences {sorted(values)} in {self.path}")

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "rt", encoding="utf-8") as f:
                data = json.load(f)
        except (IOError, OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.path}: expected a JSON object")
            return {}
        return data

    def _write(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # atomic replace
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".preferences-", suffix=".json")
        except (IOError, OSError) as e:
            raise PreferencesError(f"Error writing preferences '{self.path}': {e}")
        try:
            with os.fdopen(fd, "wt", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except (IOError, OSError) as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise PreferencesError(f"Error writing preferences '{self.path}': {e}")
