"""Domain models for recommendation and day-plan responses."""

from dataclasses import dataclass

from dining_planner.domain.catalog import Hall
from dining_planner.domain.menu import (
    MenuDiagnostics,
    MenuItem,
    NutritionGoals,
    Plan,
    ScoringMode,
)


@dataclass(frozen=True)
class HallMenu:
    """A fetched and normalized menu for one hall and meal."""

    hall: Hall
    meal: str
    url: str
    items: list[MenuItem]
    diagnostics: MenuDiagnostics


@dataclass(frozen=True)
class FetchError:
    """A per-hall (and optionally per-meal) upstream failure."""

    hall: str
    name: str
    message: str
    meal: str | None = None


@dataclass(frozen=True)
class HallRecommendation:
    """Ranked items and a plan for one hall."""

    id: str
    name: str
    slug: str
    source_url: str
    best_score: float | None
    items: list[MenuItem]
    plan: Plan | None
    debug: MenuDiagnostics | None = None


@dataclass(frozen=True)
class RecommendationQuery:
    """Normalized parameters of a single-meal recommendation."""

    date: str
    meal: str
    halls: list[str]
    goals: NutritionGoals
    mode: ScoringMode


@dataclass(frozen=True)
class RecommendationResult:
    """Per-hall recommendations with any per-hall errors."""

    query: RecommendationQuery
    halls: list[HallRecommendation]
    errors: list[FetchError]


@dataclass(frozen=True)
class MealPlanResult:
    """Combined ranking and plan for one meal across halls."""

    meal: str
    label: str
    items: list[MenuItem]
    item_count: int
    goals: NutritionGoals
    plan: Plan | None


@dataclass(frozen=True)
class DayPlanQuery:
    """Normalized parameters of a day-plan request."""

    date: str
    halls: list[str]
    goals: NutritionGoals
    mode: ScoringMode


@dataclass(frozen=True)
class DayPlanResult:
    """Per-meal plans with per-hall-and-meal errors."""

    query: DayPlanQuery
    meals: list[MealPlanResult]
    errors: list[FetchError]
