"""Pydantic response models for the public API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from dining_planner.domain.menu import ScoringMode


class ApiModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class HallOut(ApiModel):
    """Dining hall catalog entry."""

    id: str
    name: str
    slug: str


class MealOptionOut(ApiModel):
    """Meal catalog entry."""

    id: str
    label: str


class CatalogResponse(ApiModel):
    """Known halls and meals."""

    halls: list[HallOut]
    meals: list[MealOptionOut]


class MenuItemOut(ApiModel):
    """Normalized menu item with derived metrics."""

    name: str
    station: str
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    nutrition: dict[str, Any]
    protein_per_cal: float | None = None
    score: float | None = None
    hall_id: str | None = None
    hall_name: str | None = None
    hall_slug: str | None = None


class PlanOut(ApiModel):
    """Calorie-bounded plan with totals."""

    items: list[MenuItemOut]
    target_calories: float | None
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    diff_calories: float | None
    protein_per_cal: float | None


class GoalsOut(ApiModel):
    """Nutrition goals echoed back to the caller."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class DiagnosticsOut(ApiModel):
    """Menu parsing diagnostics returned in debug mode."""

    target_date: str
    target_found: bool
    available_dates: list[str | None]
    menu_item_count: int | None = None
    menu_info_count: int | None = None
    station_header_count: int | None = None
    parsed_item_count: int | None = None


class ErrorOut(ApiModel):
    """Per-hall or per-hall-and-meal failure."""

    hall: str
    name: str
    message: str
    meal: str | None = None


class MenuResponse(ApiModel):
    """Normalized menu for one hall."""

    hall: str
    date: str
    meal: str
    url: str
    items: list[MenuItemOut]
    debug: DiagnosticsOut | None = None


class HallRecommendationOut(ApiModel):
    """Ranked items and plan for one hall."""

    id: str
    name: str
    slug: str
    source_url: str
    best_score: float | None
    items: list[MenuItemOut]
    plan: PlanOut | None
    debug: DiagnosticsOut | None = None


class RecommendationQueryOut(ApiModel):
    """Normalized recommendation query."""

    date: str
    meal: str
    halls: list[str]
    goals: GoalsOut
    mode: ScoringMode


class RecommendationResponse(ApiModel):
    """Recommendations across halls."""

    query: RecommendationQueryOut
    halls: list[HallRecommendationOut]
    errors: list[ErrorOut]


class MealPlanOut(ApiModel):
    """Plan and ranking for one meal of the day."""

    meal: str
    label: str
    items: list[MenuItemOut]
    item_count: int
    goals: GoalsOut
    plan: PlanOut | None


class DayPlanQueryOut(ApiModel):
    """Normalized day-plan query."""

    date: str
    halls: list[str]
    goals: GoalsOut
    mode: ScoringMode


class DayPlanResponse(ApiModel):
    """Plans for breakfast, lunch and dinner."""

    query: DayPlanQueryOut
    meals: list[MealPlanOut]
    errors: list[ErrorOut]
