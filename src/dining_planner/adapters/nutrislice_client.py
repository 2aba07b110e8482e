"""Nutrislice weekly menu API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class NutrisliceClient(Protocol):
    """Interface for Nutrislice menu API interactions."""

    def menu_url(self, hall_slug: str, meal_slug: str, date: str) -> str:
        """Build the weekly menu URL for a hall, meal and YYYY-MM-DD date."""

    async def get_menu(self, url: str) -> dict[str, object]:
        """Fetch a weekly menu document and return raw API data."""


@dataclass
class HttpxNutrisliceClient(NutrisliceClient):
    """HTTPX-backed Nutrislice client."""

    base_url: str
    user_agent: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0

    @classmethod
    def create(
        cls, base_url: str, user_agent: str, timeout_seconds: float = 15.0
    ) -> "HttpxNutrisliceClient":
        """Create a Nutrislice client with a managed httpx session."""
        return cls(
            base_url=base_url,
            user_agent=user_agent,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    def menu_url(self, hall_slug: str, meal_slug: str, date: str) -> str:
        """Build the weekly menu URL for a hall, meal and date."""
        year, month, day = date.split("-")
        base = self.base_url.rstrip("/")
        return (
            f"{base}/{hall_slug}/menu-type/{meal_slug}/{year}/{month}/{day}/"
            "?format=json"
        )

    async def get_menu(self, url: str) -> dict[str, object]:
        """Fetch a weekly menu document."""
        response = await self.http_client.get(
            url,
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
