"""String-keyed storage slots. Failed reads return None, failed writes return False."""
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class MemoryStorage:
    def __init__(self, items: dict[str, str] | None = None):
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> bool:
        self.items[key] = value
        return True

    def remove_item(self, key: str) -> bool:
        self.items.pop(key, None)
        return True


class JsonFileStorage:
    """All slots live in one JSON object file: {"<key>": "<string value>"}."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str] | None:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"Could not read storage file {self.path}: {e}")
            return None
        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} is not a JSON object, ignoring it")
            return None
        return data

    def _write_all(self, data: dict[str, str]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, sort_keys=True), encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not write storage file {self.path}: {e}")
            return False
        return True

    def get_item(self, key: str) -> str | None:
        data = self._read_all()
        if not data:
            return None
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            logger.warning(f"Storage slot '{key}' holds a non-string value, ignoring it")
            return None
        return value

    def set_item(self, key: str, value: str) -> bool:
        # A corrupt file is replaced rather than preserved.
        data = self._read_all() or {}
        data[key] = value
        return self._write_all(data)

    def remove_item(self, key: str) -> bool:
        data = self._read_all()
        if not data or key not in data:
            return True
        del data[key]
        return self._write_all(data)
