"""Normalization of incoming query parameters."""

import re
from datetime import datetime
from zoneinfo import ZoneInfo

from dining_planner.domain.menu import NutritionGoals
from dining_planner.services.nutrition import parse_number

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def normalize_date(
    raw: str | None, timezone_name: str, now: datetime | None = None
) -> str:
    """Return ``raw`` when it is a YYYY-MM-DD string, else today's date."""
    if raw and _DATE_PATTERN.match(raw):
        return raw
    current = now or datetime.now(tz=ZoneInfo(timezone_name))
    return current.strftime("%Y-%m-%d")


def parse_goals(
    calories: object = None,
    protein: object = None,
    carbs: object = None,
    fat: object = None,
) -> NutritionGoals:
    """Build nutrition goals from loosely typed query values."""
    return NutritionGoals(
        calories=parse_number(calories),
        protein=parse_number(protein),
        carbs=parse_number(carbs),
        fat=parse_number(fat),
    )
