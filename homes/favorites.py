import json
import logging

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


def parse_favorites(raw: str | None) -> set[int]:
    """Parse a persisted JSON array of ints. Anything else is an empty set."""
    if not raw:
        return set()
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Ignoring malformed favorites value: {e}")
        return set()
    if not isinstance(data, list):
        logger.warning(f"Ignoring favorites value of type {type(data).__name__}")
        return set()
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in data):
        logger.warning("Ignoring favorites value with non-integer ids")
        return set()
    return set(data)


class FavoritesStore:
    """The set of favorited home ids, mirrored to a storage slot."""

    def __init__(self, storage, key: str = FAVORITES_KEY):
        self.storage = storage
        self.key = key
        self._ids: set[int] = set()
        self.load_from_storage()

    @property
    def ids(self) -> frozenset[int]:
        return frozenset(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def is_favorite(self, home_id: int | None) -> bool:
        return home_id is not None and home_id in self._ids

    def toggle(self, home_id: int) -> bool:
        """Flip membership of home_id and persist. Returns the new membership."""
        if home_id in self._ids:
            self._ids.discard(home_id)
        else:
            self._ids.add(home_id)
        self.persist()
        return home_id in self._ids

    def load_from_storage(self) -> None:
        self._ids = parse_favorites(self.storage.get_item(self.key))
        logger.info(f"Loaded {len(self._ids)} favorites")

    def persist(self) -> bool:
        # On failure the in-memory set stays authoritative until restart.
        ok = self.storage.set_item(self.key, json.dumps(sorted(self._ids)))
        if not ok:
            logger.error(f"Failed to persist {len(self._ids)} favorites, keeping them in memory only")
        return ok

    def clear(self) -> None:
        self._ids.clear()
        if not self.storage.remove_item(self.key):
            logger.error("Failed to clear persisted favorites")
