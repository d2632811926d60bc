import os

os.environ.setdefault("HOMES_API_URL", "http://localhost:3000/homes")
os.environ.setdefault("HOMES_PAGE_PARAM", "_page")
os.environ.setdefault("HOMES_SIZE_PARAM", "_per_page")
os.environ.setdefault("HOMES_PAGE_SIZE", "6")
os.environ.setdefault("HOMES_TIMEOUT", "5")
os.environ.setdefault("HOMES_DISCARD_STALE", "false")
os.environ.setdefault("HOMES_FAVORITES_KEY", "favorites")
