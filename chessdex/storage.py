"""Local key-value storage backing the favourites list.

Two implementations share the :class:`KeyValueStore` protocol:

* :class:`JsonFileStore` keeps every slot inside a single JSON object on disk.
* :class:`MemoryStore` keeps slots in a dict for tests and throwaway sessions.

Values are opaque strings; callers own their encoding.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process store; contents vanish with the instance."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.slots: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.slots.get(key)

    async def set(self, key: str, value: str) -> None:
        self.slots[key] = value


class JsonFileStore:
    """Persist slots as a JSON object in ``path``.

    The file is read on every :meth:`get` so that separate processes see each
    other's writes. Writes go through a lock and replace the file atomically,
    which makes the last issued write the one that survives.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        slots = await asyncio.to_thread(self._read_slots)
        value = slots.get(key)
        if value is None or isinstance(value, str):
            return value
        logger.warning("Ignoring non-string value stored under %r in %s", key, self._path)
        return None

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            await asyncio.to_thread(self._write_slot, key, value)

    def _read_slots(self) -> dict[str, object]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Unable to read %s: %s", self._path, exc)
            return {}

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Storage file %s is not valid JSON; treating it as empty", self._path)
            return {}

        if not isinstance(payload, dict):
            logger.warning("Storage file %s does not hold a JSON object", self._path)
            return {}
        return payload

    def _write_slot(self, key: str, value: str) -> None:
        slots = self._read_slots()
        slots[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(slots, indent=2), encoding="utf-8")
        tmp_path.replace(self._path)


__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore"]
