import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import TextIO

from semantic_placeholder.error.exceptions import InsertionError
from semantic_placeholder.insertion.selection import Selection
from semantic_placeholder.insertion.text_edit import apply_insertions

logger = logging.getLogger(__name__)


class InsertionTarget:
    def insert(self, payload: str) -> None:
        raise NotImplementedError


class StdoutTarget(InsertionTarget):
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def insert(self, payload: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(payload + "\n")
        stream.flush()


class StreamDocumentTarget(InsertionTarget):
    def __init__(self, selections: list[Selection], source: TextIO | None = None, sink: TextIO | None = None):
        self.selections = selections
        self.source = source
        self.sink = sink

    def insert(self, payload: str) -> None:
        text = (self.source or sys.stdin).read()
        edited = apply_insertions(text, self.selections, payload)
        sink = self.sink or sys.stdout
        sink.write(edited)
        sink.flush()


class FileDocumentTarget(InsertionTarget):
    def __init__(self, path: Path, selections: list[Selection]):
        self.path = Path(path)
        self.selections = selections

    def insert(self, payload: str) -> None:
        try:
            # newline="" keeps "\r\n" documents byte-for-byte intact
            with open(self.path, "rt", encoding="utf-8", newline="") as f:
                text = f.read()
        except (IOError, OSError, UnicodeDecodeError) as e:
            raise InsertionError(f"Error reading document '{self.path}': {e}")

        edited = apply_insertions(text, self.selections, payload)

        # atomic replace through a sibling temp file
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}-", suffix=".tmp")
        except (IOError, OSError) as e:
            raise InsertionError(f"Error writing document '{self.path}': {e}")
        try:
            with os.fdopen(fd, "wt", encoding="utf-8", newline="") as f:
                f.write(edited)
            shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except (IOError, OSError) as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise InsertionError(f"Error writing document '{self.path}': {e}")
        logger.debug(f"Wrote {len(self.selections)} selection(s) to {self.path}")
