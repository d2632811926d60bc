import logging
from homes.client import HomesClient
from homes.config import API_CONFIG, STORAGE_CONFIG
from homes.favorites import FavoritesStore
from homes.service import HomeService
from homes.storage import JsonFileStorage

logger = logging.getLogger(__name__)


def build_service(api_config: dict = API_CONFIG, storage_config: dict = STORAGE_CONFIG) -> HomeService:
    """Wire up one HomeService from config. Callers own the instance and pass it around."""
    client = HomesClient(
        base_url=api_config["api_url"],
        page_param=api_config["page_param"],
        size_param=api_config["size_param"],
        timeout=api_config["timeout"],
    )
    storage = JsonFileStorage(storage_config["path"])
    favorites = FavoritesStore(storage, key=storage_config["key"])
    logger.info(f"Homes service using {api_config['api_url']}, favorites in {storage_config['path']}")
    return HomeService(
        client,
        favorites,
        page_size=api_config["page_size"],
        discard_stale=api_config["discard_stale"],
    )
