import logging
import requests
from homes.config import API_CONFIG
from homes.models import Home, Page

logger = logging.getLogger(__name__)


class HomesApiError(Exception):
    """Raised when the homes endpoint cannot be reached or returns an unusable payload."""


class HomesClient:
    def __init__(
        self,
        base_url: str = API_CONFIG["api_url"],
        page_param: str = API_CONFIG["page_param"],
        size_param: str = API_CONFIG["size_param"],
        timeout: float = API_CONFIG["timeout"],
    ):
        self.base_url = base_url
        self.page_param = page_param
        self.size_param = size_param
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {"Accept": "application/json", "User-Agent": "HomesCache/1.0"}
        )

    def _get_json(self, params: dict | None = None):
        try:
            resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            raise HomesApiError(f"Request to {self.base_url} failed: {e}") from e

    def get_page(self, page: int, per_page: int) -> Page:
        params = {self.page_param: page, self.size_param: per_page}
        logger.info(f"Fetching {self.base_url} params={params}")
        payload = self._get_json(params)
        try:
            result = Page.from_api(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise HomesApiError(f"Malformed page payload: {e}") from e
        logger.info(f"Got {len(result.homes)} homes (items={result.items}, pages={result.pages})")
        return result

    def get_all(self) -> list[Home]:
        """Read the whole collection without pagination."""
        logger.info(f"Fetching {self.base_url}")
        payload = self._get_json()
        if not isinstance(payload, list):
            raise HomesApiError(f"Expected a JSON array, got {type(payload).__name__}")
        try:
            return [Home.from_api(item) for item in payload]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise HomesApiError(f"Malformed home record: {e}") from e
