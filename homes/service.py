"""Listing cache, fetch coordination and the favorite toggle."""
import asyncio
import logging
from dataclasses import replace
from homes.cells import Cell, Computed
from homes.config import API_CONFIG
from homes.favorites import FavoritesStore
from homes.models import Home, Page

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to load homes. Please try again later."


class HomeService:
    def __init__(
        self,
        client,
        favorites: FavoritesStore,
        page_size: int = API_CONFIG["page_size"],
        discard_stale: bool = API_CONFIG["discard_stale"],
    ):
        self.client = client
        self.favorites = favorites
        self.discard_stale = discard_stale
        self.page_size = page_size
        self.last_page_size = page_size
        self._request_token = 0

        self.page = Cell(Page())
        self.is_loading = Cell(False)
        self.error = Cell(None)
        self.current_page = Cell(1)

        self.records = Computed(lambda: self.page().homes, self.page)
        self.total_homes = Computed(lambda: self.page().items, self.page)
        self.total_pages = Computed(lambda: self.page().pages, self.page)

        self.favorites_subset = Computed(
            lambda: [home for home in self.records() if home.favorited], self.records
        )
        self.valid_page_numbers = Computed(
            lambda: list(range(1, self.total_pages() + 1)), self.total_pages
        )
        self.has_any_records = Computed(lambda: len(self.records()) > 0, self.records)

    # Fetch coordinator

    def fetch(self, page: int = 1, page_size: int | None = None) -> bool:
        """Load one page into the cache. Returns False if the fetch failed."""
        page_size = self._check_bounds(page, page_size)
        token = self._begin(page, page_size)
        try:
            result = self.client.get_page(page, page_size)
            return self._apply(token, page, result)
        except Exception as e:
            self._fail(token, e)
            return False
        finally:
            self._settle(token)

    async def fetch_async(self, page: int = 1, page_size: int | None = None) -> bool:
        """Like fetch, but runs the request in a worker thread so fetches can overlap."""
        page_size = self._check_bounds(page, page_size)
        token = self._begin(page, page_size)
        try:
            result = await asyncio.to_thread(self.client.get_page, page, page_size)
            return self._apply(token, page, result)
        except Exception as e:
            self._fail(token, e)
            return False
        finally:
            self._settle(token)

    def refresh(self) -> bool:
        return self.fetch(self.current_page(), self.last_page_size)

    def _check_bounds(self, page: int, page_size: int | None) -> int:
        if page_size is None:
            page_size = self.page_size
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        return page_size

    def _begin(self, page: int, page_size: int) -> int:
        self._request_token += 1
        self.last_page_size = page_size
        logger.info(f"Fetching homes page {page} (size {page_size}), request {self._request_token}")
        self.is_loading.set(True)
        self.error.set(None)
        return self._request_token

    def _is_stale(self, token: int) -> bool:
        return self.discard_stale and token != self._request_token

    def _apply(self, token: int, page: int, result: Page) -> bool:
        if self._is_stale(token):
            logger.warning(f"Discarding stale response for request {token}")
            return False
        self.page.set(replace(result, homes=self._annotate(result.homes)))
        self.current_page.set(page)
        logger.info(f"Loaded {len(result.homes)} homes on page {page} of {result.pages}")
        return True

    def _fail(self, token: int, exc: Exception) -> None:
        logger.error(f"Error fetching homes (request {token}): {exc}")
        if self._is_stale(token):
            return
        self.error.set(FETCH_ERROR_MESSAGE)

    def _settle(self, token: int) -> None:
        if not self._is_stale(token):
            self.is_loading.set(False)

    def _annotate(self, homes: list[Home]) -> list[Home]:
        return [replace(home, favorited=self.favorites.is_favorite(home.id)) for home in homes]

    # Toggle protocol

    def toggle_favorite(self, home_id: int | None) -> None:
        if home_id is None:
            return
        favorited = self.favorites.toggle(home_id)
        current = self.page()
        homes = [
            replace(home, favorited=favorited) if home.id == home_id else home
            for home in current.homes
        ]
        self.page.set(replace(current, homes=homes))
