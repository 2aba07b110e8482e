"""Recommendation and day-plan aggregation across halls and meals."""

import asyncio
import logging
from dataclasses import dataclass, replace

from dining_planner.domain.catalog import DAY_MEALS, Hall, MealOption, get_meal_slug
from dining_planner.domain.menu import MenuItem, NutritionGoals, ScoringMode
from dining_planner.domain.recommendations import (
    DayPlanQuery,
    DayPlanResult,
    FetchError,
    HallMenu,
    HallRecommendation,
    MealPlanResult,
    RecommendationQuery,
    RecommendationResult,
)
from dining_planner.services.menu_parser import parse_menu
from dining_planner.services.menus import MenuSource
from dining_planner.services.nutrition import with_derived_metrics
from dining_planner.services.plans import plan_meal
from dining_planner.services.scoring import rank_items

RECOMMENDATION_DISPLAY_COUNT = 6
DAY_PLAN_DISPLAY_COUNT = 8

_logger = logging.getLogger(__name__)


@dataclass
class RecommendationService:
    """Runs the fetch, normalize, rank and plan pipeline per hall and meal.

    Every hall (or hall and meal pair) is processed independently. A failure
    in one of them becomes a ``FetchError`` entry and never aborts the rest.
    """

    menu_source: MenuSource

    async def load_menu(self, hall: Hall, meal: str | None, date: str) -> HallMenu:
        """Fetch and normalize the menu for one hall, meal and date."""
        meal_slug = get_meal_slug(meal)
        url = self.menu_source.menu_url(hall.slug, meal_slug, date)
        document = await self.menu_source.fetch(hall.slug, meal_slug, date)
        parsed = parse_menu(document, date)
        return HallMenu(
            hall=hall,
            meal=meal_slug,
            url=url,
            items=parsed.items,
            diagnostics=parsed.diagnostics,
        )

    async def recommend(  # noqa: PLR0913
        self,
        *,
        date: str,
        meal: str | None,
        halls: list[Hall],
        goals: NutritionGoals,
        mode: ScoringMode = ScoringMode.CLOSEST,
        debug: bool = False,
    ) -> RecommendationResult:
        """Rank items and build a plan for a single meal at each hall."""
        outcomes = await asyncio.gather(
            *(
                self._recommend_hall(hall, meal, date, goals, mode, debug=debug)
                for hall in halls
            )
        )
        return RecommendationResult(
            query=RecommendationQuery(
                date=date,
                meal=get_meal_slug(meal),
                halls=[hall.id for hall in halls],
                goals=goals,
                mode=mode,
            ),
            halls=[item for item in outcomes if isinstance(item, HallRecommendation)],
            errors=[item for item in outcomes if isinstance(item, FetchError)],
        )

    async def day_plan(
        self,
        *,
        date: str,
        halls: list[Hall],
        goals: NutritionGoals,
        mode: ScoringMode = ScoringMode.CLOSEST,
    ) -> DayPlanResult:
        """Build breakfast, lunch and dinner plans from every requested hall."""
        meal_goals = goals.split(len(DAY_MEALS))
        outcomes = await asyncio.gather(
            *(
                self._plan_meal(meal, halls, date, meal_goals, mode)
                for meal in DAY_MEALS
            )
        )
        errors: list[FetchError] = []
        for _, meal_errors in outcomes:
            errors.extend(meal_errors)
        return DayPlanResult(
            query=DayPlanQuery(
                date=date,
                halls=[hall.id for hall in halls],
                goals=goals,
                mode=mode,
            ),
            meals=[result for result, _ in outcomes],
            errors=errors,
        )

    async def _recommend_hall(  # noqa: PLR0913
        self,
        hall: Hall,
        meal: str | None,
        date: str,
        goals: NutritionGoals,
        mode: ScoringMode,
        *,
        debug: bool,
    ) -> HallRecommendation | FetchError:
        try:
            menu = await self.load_menu(hall, meal, date)
            ranked = rank_items(with_derived_metrics(menu.items), goals, mode)
            top_items = ranked[:RECOMMENDATION_DISPLAY_COUNT]
            best_score = (
                top_items[0].score
                if top_items and _uses_goal_score(goals, mode)
                else None
            )
            return HallRecommendation(
                id=hall.id,
                name=hall.name,
                slug=hall.slug,
                source_url=menu.url,
                best_score=best_score,
                items=top_items,
                plan=plan_meal(ranked, goals.calories),
                debug=menu.diagnostics if debug else None,
            )
        except Exception as exc:
            _logger.warning(
                "Recommendation failed: hall=%s meal=%s date=%s: %s",
                hall.id,
                meal,
                date,
                exc,
            )
            return FetchError(hall=hall.id, name=hall.name, message=str(exc))

    async def _plan_meal(
        self,
        meal: MealOption,
        halls: list[Hall],
        date: str,
        goals: NutritionGoals,
        mode: ScoringMode,
    ) -> tuple[MealPlanResult, list[FetchError]]:
        outcomes = await asyncio.gather(
            *(self._load_tagged_items(hall, meal.id, date) for hall in halls)
        )
        combined: list[MenuItem] = []
        errors: list[FetchError] = []
        for outcome in outcomes:
            if isinstance(outcome, FetchError):
                errors.append(outcome)
            else:
                combined.extend(outcome)

        ranked = rank_items(with_derived_metrics(combined), goals, mode)
        result = MealPlanResult(
            meal=meal.id,
            label=meal.label,
            items=ranked[:DAY_PLAN_DISPLAY_COUNT],
            item_count=len(combined),
            goals=goals,
            plan=plan_meal(ranked, goals.calories),
        )
        return result, errors

    async def _load_tagged_items(
        self, hall: Hall, meal: str, date: str
    ) -> list[MenuItem] | FetchError:
        try:
            menu = await self.load_menu(hall, meal, date)
        except Exception as exc:
            _logger.warning(
                "Menu load failed: hall=%s meal=%s date=%s: %s",
                hall.id,
                meal,
                date,
                exc,
            )
            return FetchError(
                hall=hall.id, name=hall.name, message=str(exc), meal=meal
            )
        return [
            replace(item, hall_id=hall.id, hall_name=hall.name, hall_slug=hall.slug)
            for item in menu.items
        ]


def _uses_goal_score(goals: NutritionGoals, mode: ScoringMode) -> bool:
    """Return true when displayed items carry a goal-match score."""
    return mode != ScoringMode.PROTEIN_DENSITY and goals.has_any()
