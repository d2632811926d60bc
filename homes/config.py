import os

API_CONFIG = {
    "api_url": os.environ.get("HOMES_API_URL", "http://localhost:3000/homes"),
    "page_param": os.environ.get("HOMES_PAGE_PARAM", "_page"),
    "size_param": os.environ.get("HOMES_SIZE_PARAM", "_per_page"),
    "page_size": int(os.environ.get("HOMES_PAGE_SIZE", "6")),
    "timeout": float(os.environ.get("HOMES_TIMEOUT", "30")),
    "discard_stale": os.environ.get("HOMES_DISCARD_STALE", "false").lower() in ("1", "true", "yes"),
}

STORAGE_CONFIG = {
    "path": os.environ.get("HOMES_STORAGE_PATH", "favorites.json"),
    "key": os.environ.get("HOMES_FAVORITES_KEY", "favorites"),
}
