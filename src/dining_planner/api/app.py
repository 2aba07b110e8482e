"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from dining_planner.api.models import (
    CatalogResponse,
    DayPlanResponse,
    MenuResponse,
    RecommendationResponse,
)
from dining_planner.app_logging import configure_logging
from dining_planner.config import parse_hall_ids
from dining_planner.containers import AppContainer
from dining_planner.domain.catalog import (
    DEFAULT_MEAL,
    HALLS,
    MEAL_OPTIONS,
    get_hall_by_id,
    resolve_halls,
)
from dining_planner.domain.menu import ScoringMode
from dining_planner.services.queries import normalize_date, parse_goals


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)
    timezone_name = container.settings.menu_timezone

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/halls", response_model=CatalogResponse)
    async def halls() -> CatalogResponse:
        """List known dining halls and meals."""
        return CatalogResponse.model_validate(
            {"halls": list(HALLS), "meals": list(MEAL_OPTIONS)}
        )

    @app.get("/api/menu", response_model=MenuResponse)
    async def menu(
        request: Request,
        hall: str = "busch",
        meal: str = DEFAULT_MEAL,
        date: str | None = None,
        debug: bool = False,
    ) -> MenuResponse:
        """Return the normalized menu for one hall and meal."""
        state_container: AppContainer = request.app.state.container
        resolved_hall = get_hall_by_id(hall)
        if resolved_hall is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown hall."
            )
        menu_date = normalize_date(date, timezone_name)
        try:
            hall_menu = await state_container.recommendation_service.load_menu(
                resolved_hall, meal, menu_date
            )
        except Exception as exc:
            logger.exception(
                "Menu request failed", extra={"hall": hall, "meal": meal}
            )
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return MenuResponse(
            hall=resolved_hall.id,
            date=menu_date,
            meal=hall_menu.meal,
            url=hall_menu.url,
            items=hall_menu.items,
            debug=hall_menu.diagnostics if debug else None,
        )

    @app.get("/api/recommendations", response_model=RecommendationResponse)
    async def recommendations(  # noqa: PLR0913
        request: Request,
        date: str | None = None,
        meal: str = DEFAULT_MEAL,
        halls: str | None = None,
        calories: str | None = None,
        protein: str | None = None,
        carbs: str | None = None,
        fat: str | None = None,
        mode: ScoringMode = ScoringMode.CLOSEST,
        debug: bool = False,
    ) -> RecommendationResponse:
        """Rank menu items against goals for one meal at each hall."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.recommendation_service.recommend(
            date=normalize_date(date, timezone_name),
            meal=meal,
            halls=resolve_halls(parse_hall_ids(halls)),
            goals=parse_goals(calories, protein, carbs, fat),
            mode=mode,
            debug=debug,
        )
        return RecommendationResponse.model_validate(result)

    @app.get("/api/day-plan", response_model=DayPlanResponse)
    async def day_plan(  # noqa: PLR0913
        request: Request,
        date: str | None = None,
        halls: str | None = None,
        calories: str | None = None,
        protein: str | None = None,
        carbs: str | None = None,
        fat: str | None = None,
        mode: ScoringMode = ScoringMode.CLOSEST,
    ) -> DayPlanResponse:
        """Build breakfast, lunch and dinner plans across halls."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.recommendation_service.day_plan(
            date=normalize_date(date, timezone_name),
            halls=resolve_halls(parse_hall_ids(halls)),
            goals=parse_goals(calories, protein, carbs, fat),
            mode=mode,
        )
        return DayPlanResponse.model_validate(result)

    return app
