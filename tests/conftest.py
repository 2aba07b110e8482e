"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from dining_planner.config import Settings
from dining_planner.containers import AppContainer
from dining_planner.services.cache import InMemoryCache
from dining_planner.services.menus import MenuFetchError, MenuService, MenuSource
from dining_planner.services.recommendations import RecommendationService

MENU_DATE = "2025-02-10"


def food_entry(  # noqa: PLR0913
    name: str | None,
    calories: object = None,
    protein: object = None,
    carbs: object = None,
    fat: object = None,
    menu_id: int | None = None,
) -> dict[str, object]:
    """Build a raw Nutrislice food entry."""
    food: dict[str, object] | None = None
    if name is not None:
        food = {
            "name": name,
            "rounded_nutrition_info": {
                "calories": calories,
                "g_protein": protein,
                "g_carbs": carbs,
                "g_fat": fat,
            },
        }
    return {
        "menu_id": menu_id,
        "is_section_title": False,
        "is_station_header": False,
        "text": "",
        "food": food,
    }


def header_entry(text: str, menu_id: int | None = None) -> dict[str, object]:
    """Build a raw station header entry."""
    return {
        "menu_id": menu_id,
        "is_section_title": True,
        "is_station_header": False,
        "text": text,
        "food": None,
    }


def week_document(
    entries: list[dict[str, object]],
    date: str = MENU_DATE,
    menu_info: dict[str, object] | None = None,
    other_dates: tuple[str, ...] = ("2025-02-09", "2025-02-11"),
) -> dict[str, object]:
    """Build a raw weekly document holding ``entries`` on ``date``."""
    days = [{"date": other, "menu_items": [], "menu_info": {}} for other in other_dates]
    days.insert(
        1,
        {"date": date, "menu_items": entries, "menu_info": menu_info or {}},
    )
    return {"days": days}


@dataclass
class FakeMenuSource(MenuSource):
    """Menu source serving documents keyed by (hall slug, meal slug)."""

    documents: dict[tuple[str, str], dict[str, object]] = field(default_factory=dict)
    failures: dict[tuple[str, str], str] = field(default_factory=dict)
    calls: list[tuple[str, str, str]] = field(default_factory=list)

    def menu_url(self, hall_slug: str, meal_slug: str, date: str) -> str:
        return f"https://menus.test/{hall_slug}/{meal_slug}/{date}"

    async def fetch(
        self, hall_slug: str, meal_slug: str, date: str
    ) -> dict[str, object]:
        self.calls.append((hall_slug, meal_slug, date))
        key = (hall_slug, meal_slug)
        if key in self.failures:
            raise MenuFetchError(self.failures[key])
        return self.documents.get(key, {"days": []})


@dataclass
class FakeNutrisliceClient:
    """Fake Nutrislice client returning a fixed document or raising."""

    document: dict[str, object] = field(default_factory=lambda: week_document([]))
    errors: list[Exception] = field(default_factory=list)
    calls: int = 0

    def menu_url(self, hall_slug: str, meal_slug: str, date: str) -> str:
        return f"https://menus.test/{hall_slug}/{meal_slug}/{date}"

    async def get_menu(self, url: str) -> dict[str, object]:
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return self.document


@pytest.fixture
def settings() -> Settings:
    return Settings(menu_retry_delay_seconds=0.0, environment="test")


@pytest.fixture
def menu_source() -> FakeMenuSource:
    return FakeMenuSource()


@pytest.fixture
def recommendation_service(menu_source: FakeMenuSource) -> RecommendationService:
    return RecommendationService(menu_source=menu_source)


@pytest.fixture
def container(
    settings: Settings,
    recommendation_service: RecommendationService,
) -> AppContainer:
    menu_service = MenuService(
        client=FakeNutrisliceClient(),
        cache=InMemoryCache(),
        retry_delay_seconds=0.0,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        menu_service=menu_service,
        recommendation_service=recommendation_service,
        close_resources=close_resources,
    )
