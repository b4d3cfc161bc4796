import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from src.shared.logging_utils import info as log_info, error as log_error


class JsonRecordStore:
    """One JSON document on disk.

    ``load`` and ``save`` never raise: a missing, unreadable or corrupt file
    loads as ``None`` and a failed write returns ``False``. The cause is
    logged with the file path either way.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        # Serialises read-modify-write sequences against this file
        self.lock = threading.RLock()

    def load(self) -> Optional[Dict[str, Any]]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log_info("store:missing", path=str(self.path))
            return None
        except OSError as exc:
            log_error("store:read_failed", path=str(self.path), error=str(exc))
            return None
        try:
            data = json.loads(raw)
        except ValueError as exc:
            log_error("store:parse_failed", path=str(self.path), error=str(exc))
            return None
        if not isinstance(data, dict):
            log_error("store:not_an_object", path=str(self.path), type=type(data).__name__)
            return None
        return data

    def save(self, document: Dict[str, Any]) -> bool:
        tmp_name = None
        try:
            body = json.dumps(document, indent=2, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(body)
            os.replace(tmp_name, self.path)
            tmp_name = None
            return True
        except (OSError, TypeError, ValueError) as exc:
            log_error("store:write_failed", path=str(self.path), error=str(exc))
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

    def ensure(self, empty_document: Dict[str, Any]) -> bool:
        """Create the file with ``empty_document`` if it does not exist yet."""
        with self.lock:
            if self.path.exists():
                return True
            log_info("store:initialized", path=str(self.path))
            return self.save(empty_document)
