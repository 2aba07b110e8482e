"""Tests for container wiring."""

import asyncio

from dining_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.recommendation_service.menu_source is container.menu_service
    assert container.menu_service.retry_delay_seconds == 0.0
    asyncio.run(container.close_resources())
