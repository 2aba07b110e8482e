"""Tests for the cached Nutrislice menu service."""

import asyncio
from datetime import UTC, datetime, timedelta

import httpx
import pytest

from dining_planner.services.cache import InMemoryCache
from dining_planner.services.menus import MenuFetchError, MenuService
from tests.conftest import FakeNutrisliceClient


def _status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://menus.test/busch")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("boom", request=request, response=response)


def test_fetch_uses_cache() -> None:
    client = FakeNutrisliceClient()
    service = MenuService(client=client, cache=InMemoryCache())

    first = asyncio.run(service.fetch("busch-dining-hall", "lunch-test", "2025-02-10"))
    second = asyncio.run(service.fetch("busch-dining-hall", "lunch-test", "2025-02-10"))

    assert first is second
    assert client.calls == 1


def test_fetch_retries_once() -> None:
    client = FakeNutrisliceClient(errors=[_status_error(503)])
    service = MenuService(client=client, cache=InMemoryCache(), retry_delay_seconds=0)

    document = asyncio.run(service.fetch("busch-dining-hall", "dinner", "2025-02-10"))

    assert "days" in document
    assert client.calls == 2


def test_fetch_failure_raises_menu_fetch_error() -> None:
    client = FakeNutrisliceClient(errors=[_status_error(404), _status_error(404)])
    service = MenuService(client=client, cache=InMemoryCache(), retry_delay_seconds=0)

    with pytest.raises(MenuFetchError) as excinfo:
        asyncio.run(service.fetch("busch-dining-hall", "dinner", "2025-02-10"))

    assert str(excinfo.value) == (
        "Request failed (404) for "
        "https://menus.test/busch-dining-hall/dinner/2025-02-10"
    )


def test_transport_failure_message() -> None:
    client = FakeNutrisliceClient(errors=[httpx.ConnectError("refused")])
    service = MenuService(
        client=client, cache=InMemoryCache(), retry_attempts=0, retry_delay_seconds=0
    )

    with pytest.raises(MenuFetchError, match=r"Request failed \(refused\)"):
        asyncio.run(service.fetch("neilson-dining-hall", "breakfast", "2025-02-10"))


def test_cache_entries_expire() -> None:
    now = datetime(2025, 2, 10, 12, 0, tzinfo=UTC)
    current = {"now": now}
    cache = InMemoryCache(clock=lambda: current["now"])

    cache.set("menu", {"days": []}, ttl_seconds=600)
    assert cache.get("menu") == {"days": []}

    current["now"] = now + timedelta(minutes=10)
    assert cache.get("menu") is None
    assert len(cache) == 0


def test_cache_prunes_expired_entries_on_set() -> None:
    now = datetime(2025, 2, 10, 12, 0, tzinfo=UTC)
    current = {"now": now}
    cache = InMemoryCache(clock=lambda: current["now"])

    cache.set("old", 1, ttl_seconds=60)
    current["now"] = now + timedelta(minutes=5)
    cache.set("new", 2, ttl_seconds=60)

    assert len(cache) == 1
    assert cache.get("new") == 2
