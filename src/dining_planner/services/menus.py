"""Menu source backed by the Nutrislice API with caching."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from dining_planner.adapters.nutrislice_client import NutrisliceClient
from dining_planner.services.cache import Cache

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


class MenuFetchError(Exception):
    """Raised when an upstream menu document cannot be retrieved."""


class MenuSource(Protocol):
    """Provider of raw menu documents for a hall, meal and date."""

    def menu_url(self, hall_slug: str, meal_slug: str, date: str) -> str:
        """Return the upstream URL for a menu document."""

    async def fetch(
        self, hall_slug: str, meal_slug: str, date: str
    ) -> dict[str, object]:
        """Return the raw menu document or raise MenuFetchError."""


@dataclass
class MenuService(MenuSource):
    """Fetches raw menu documents with caching and a short retry."""

    client: NutrisliceClient
    cache: Cache
    ttl_seconds: int = 600
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    def menu_url(self, hall_slug: str, meal_slug: str, date: str) -> str:
        """Return the upstream URL for a menu document."""
        return self.client.menu_url(hall_slug, meal_slug, date)

    async def fetch(
        self, hall_slug: str, meal_slug: str, date: str
    ) -> dict[str, object]:
        """Fetch a menu document, serving repeated URLs from the cache."""
        url = self.menu_url(hall_slug, meal_slug, date)
        cached = self.cache.get(url)
        if isinstance(cached, dict):
            return cached

        try:
            payload = await self._call_with_retry(
                lambda: self.client.get_menu(url),
                action=f"{hall_slug}/{meal_slug}/{date}",
            )
        except Exception as exc:
            raise MenuFetchError(_failure_message(exc, url)) from exc

        if not isinstance(payload, dict):
            raise MenuFetchError(f"Unexpected menu payload for {url}")
        self.cache.set(url, payload, ttl_seconds=self.ttl_seconds)
        if self.debug:
            _logger.info("Menu fetched from Nutrislice: url=%s", url)
        return payload

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                if self.debug:
                    _logger.warning(
                        "Menu fetch %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        _status_code_from_exception(exc),
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _failure_message(exc: Exception, url: str) -> str:
    status_code = _status_code_from_exception(exc)
    if status_code != "n/a":
        return f"Request failed ({status_code}) for {url}"
    detail = str(exc) or type(exc).__name__
    return f"Request failed ({detail}) for {url}"
