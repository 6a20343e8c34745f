"""JSON file persistence for snapshot documents."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from profile_sync.core import DecodeError, ProfileStore


class JsonProfileStore(ProfileStore):
    """Store snapshots as pretty-printed UTF-8 JSON files."""
    
    def __init__(self, indent: int = 2) -> None:
        self.indent = indent
    
    def read_if_exists(self, path: Path) -> Optional[Any]:
        """Return the parsed document, or None when the file does not exist."""
        if not path.exists():
            return None
        
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        
        if not text.strip():
            return None
        
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"{path}: invalid JSON ({e})")
    
    def write_exclusive(self, path: Path, document: Any) -> None:
        """Write a new document; raises FileExistsError if the file exists."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "x", encoding="utf-8") as f:
            f.write(self._dumps(document))
    
    def overwrite(self, path: Path, document: Any) -> None:
        """Replace the document atomically via a temporary file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(self._dumps(document))
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    
    def _dumps(self, document: Any) -> str:
        return json.dumps(document, indent=self.indent, ensure_ascii=False) + "\n"
