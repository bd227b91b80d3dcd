"""A JSON array stored in one file, shared by the JSON repositories."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self.path = file_path
        self._ensure_file()

    def load(self) -> list[dict]:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def dump(self, records: list[dict]) -> None:
        """Replace the file contents in one step.

        The records are written to a temporary file next to the target
        and moved over it, so readers see either the old or the new
        collection, never a truncated one.
        """
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(records, indent=2) + "\n")
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
