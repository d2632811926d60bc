from dataclasses import dataclass, field


def _coerce_id(raw) -> int | None:
    if raw is None:
        return None
    # json-server emits ids as strings
    if isinstance(raw, str) and raw.isdigit():
        return int(raw)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"Invalid home id: {raw!r}")
    return raw


def _count(payload: dict, name: str) -> int:
    value = payload.get(name, 0)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Invalid '{name}': {value!r}")
    return value


def _flag(payload: dict, name: str) -> bool:
    value = payload.get(name, False)
    if not isinstance(value, bool):
        raise ValueError(f"Invalid '{name}': {value!r}")
    return value


@dataclass(frozen=True)
class Home:
    title: str
    description: str
    city: str
    rooms: int
    bathrooms: int
    has_pool: bool
    picture: str
    id: int | None = None
    favorited: bool = False

    @classmethod
    def from_api(cls, data: dict) -> "Home":
        """Build a record from the wire shape. Any favorite flag sent by the server is dropped."""
        return cls(
            id=_coerce_id(data.get("id")),
            title=str(data["title"]),
            description=str(data.get("description", "")),
            city=str(data.get("city", "")),
            rooms=_count(data, "rooms"),
            bathrooms=_count(data, "bathrooms"),
            has_pool=_flag(data, "hasPool"),
            picture=str(data.get("picture", "")),
        )


@dataclass(frozen=True)
class Page:
    homes: list[Home] = field(default_factory=list)
    items: int = 0
    pages: int = 0

    @classmethod
    def from_api(cls, payload) -> "Page":
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        data = payload.get("data")
        if not isinstance(data, list):
            raise ValueError("Page payload has no 'data' list")
        if not all(isinstance(item, dict) for item in data):
            raise ValueError("Page payload contains non-object records")
        return cls(
            homes=[Home.from_api(item) for item in data],
            items=_count(payload, "items"),
            pages=_count(payload, "pages"),
        )
