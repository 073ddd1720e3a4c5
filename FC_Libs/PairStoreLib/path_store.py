"""
Durable string-list storage for Film Camera.

A path store persists named lists of strings. The image pair store keeps
two of them, one for original paths and one for filtered paths.

Classes:
    PathStore: Interface every path store implements
    InMemoryPathStore: Process-local store used by tests and throwaway sessions
    JsonPathStore: Store backed by a single JSON document on disk
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from FC_Libs.errors import PersistError

logger = logging.getLogger(__name__)


class PathStore:
    """Abstract base class for path stores."""

    def get_string_list(self, key: str) -> List[str]:
        """Return the list stored under key, or an empty list."""
        raise NotImplementedError("get_string_list must be implemented by subclasses")

    def set_string_list(self, key: str, values: Sequence[str]) -> None:
        """Store values under key.

        Raises:
            PersistError: If the values cannot be written durably
        """
        raise NotImplementedError("set_string_list must be implemented by subclasses")


class InMemoryPathStore(PathStore):
    def __init__(self, initial: Optional[Dict[str, Sequence[str]]] = None) -> None:
        self._lists: Dict[str, List[str]] = {
            key: [str(value) for value in values]
            for key, values in (initial or {}).items()
        }

    def get_string_list(self, key: str) -> List[str]:
        return list(self._lists.get(key, []))

    def set_string_list(self, key: str, values: Sequence[str]) -> None:
        self._lists[key] = [str(value) for value in values]


class JsonPathStore(PathStore):
    """
    Path store persisted as one JSON object mapping keys to string lists.

    Writes go to a temporary file in the same directory which then replaces
    the document, so readers only ever see a complete document. A missing,
    unreadable or malformed document reads as empty.
    """

    def __init__(self, store_path: Path) -> None:
        self.store_path = Path(store_path)

    def _read_payload(self) -> Dict[str, List[str]]:
        try:
            payload = json.loads(self.store_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable path store {self.store_path}: {e}")
            return {}

        if not isinstance(payload, dict):
            logger.warning(f"Ignoring malformed path store {self.store_path}")
            return {}

        normalized: Dict[str, List[str]] = {}
        for key, values in payload.items():
            if isinstance(values, list):
                normalized[str(key)] = [value if isinstance(value, str) else "" for value in values]
        return normalized

    def get_string_list(self, key: str) -> List[str]:
        return list(self._read_payload().get(key, []))

    def set_string_list(self, key: str, values: Sequence[str]) -> None:
        payload = self._read_payload()
        payload[key] = [str(value) for value in values]

        try:
            self.store_path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{self.store_path.name}.", dir=str(self.store_path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(payload, handle, indent=2)
                os.replace(temp_name, self.store_path)
            except BaseException:
                if os.path.exists(temp_name):
                    os.unlink(temp_name)
                raise
        except OSError as e:
            raise PersistError(f"Cannot write path store {self.store_path}: {e}") from e

        logger.debug(f"Stored {len(payload[key])} entries under '{key}' in {self.store_path}")
