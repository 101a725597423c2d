from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

from pairs.errors import CorruptSaveError

logger = logging.getLogger(__name__)


class PrefsStore:
    """Durable key-value string store backed by one JSON file.

    Every write rewrites the whole file; values are opaque strings.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def has(self, key: str) -> bool:
        return key in self._read()

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        entries = self._read_for_write()
        entries[key] = value
        self._write(entries)

    def delete(self, key: str) -> bool:
        entries = self._read_for_write()
        if key not in entries:
            return False
        del entries[key]
        self._write(entries)
        return True

    def _read(self) -> Dict[str, str]:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            raise CorruptSaveError(f"Preferences file {self._path} is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise CorruptSaveError(f"Preferences file {self._path} must hold a JSON object")
        return payload

    def _read_for_write(self) -> Dict[str, str]:
        try:
            return self._read()
        except CorruptSaveError:
            logger.warning("Discarding unreadable preferences file %s", self._path)
            return {}

    def _write(self, entries: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            json.dump(entries, handle, indent=2, sort_keys=True)
