"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from dining_planner.adapters.nutrislice_client import HttpxNutrisliceClient
from dining_planner.config import Settings
from dining_planner.services.cache import InMemoryCache
from dining_planner.services.menus import MenuService
from dining_planner.services.recommendations import RecommendationService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    menu_service: MenuService
    recommendation_service: RecommendationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    nutrislice_client = HttpxNutrisliceClient.create(
        base_url=resolved_settings.nutrislice_api_base,
        user_agent=resolved_settings.nutrislice_user_agent,
        timeout_seconds=resolved_settings.http_timeout_seconds,
    )
    menu_service = MenuService(
        client=nutrislice_client,
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.menu_cache_ttl_seconds,
        debug=resolved_settings.debug,
        retry_attempts=resolved_settings.menu_retry_attempts,
        retry_delay_seconds=resolved_settings.menu_retry_delay_seconds,
    )
    recommendation_service = RecommendationService(menu_source=menu_service)

    async def close_resources() -> None:
        await nutrislice_client.close()

    return AppContainer(
        settings=resolved_settings,
        menu_service=menu_service,
        recommendation_service=recommendation_service,
        close_resources=close_resources,
    )
