"""Observable values: a ``Cell`` holds state, a ``Computed`` derives from cells."""
from typing import Any, Callable

Listener = Callable[[Any], None]

_UNSET = object()


class _Observable:
    def __init__(self):
        self._listeners: list[Listener] = []
        self._version = 0

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener(value); returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, value) -> None:
        for listener in list(self._listeners):
            listener(value)

    def __call__(self):
        return self.get()

    @property
    def version(self) -> int:
        return self._version

    def get(self):
        raise NotImplementedError


class Cell(_Observable):
    def __init__(self, value=None):
        super().__init__()
        self._value = value

    def get(self):
        return self._value

    def set(self, value) -> None:
        if value == self._value:
            return
        self._value = value
        self._version += 1
        self._notify(value)

    def update(self, fn: Callable[[Any], Any]) -> None:
        self.set(fn(self._value))

    def __repr__(self) -> str:
        return f"Cell({self._value!r})"


class Computed(_Observable):
    def __init__(self, compute: Callable[[], Any], *sources: _Observable):
        super().__init__()
        self._compute = compute
        self._sources = sources
        self._value = _UNSET
        self._seen = None
        self._notified = _UNSET
        for source in sources:
            source.subscribe(self._invalidate)

    @property
    def version(self) -> int:
        self.get()
        return self._version

    def get(self):
        # Compare source versions on every read so a value is never stale,
        # even while sibling cells are still being notified.
        seen = tuple(source.version for source in self._sources)
        if seen != self._seen:
            self._value = self._compute()
            self._seen = seen
            self._version += 1
        return self._value

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        if not self._listeners:
            self._notified = self.get()
        return super().subscribe(listener)

    def _invalidate(self, _value=None) -> None:
        # Compared against the last value subscribers saw, not the cached
        # value, which a read during notification may already have refreshed.
        if not self._listeners:
            return
        current = self.get()
        if current != self._notified:
            self._notified = current
            self._notify(current)

    def __repr__(self) -> str:
        return f"Computed({self._value!r})"
