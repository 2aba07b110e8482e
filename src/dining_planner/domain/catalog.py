"""Dining hall and meal catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Hall:
    """A dining location known to the upstream menu provider."""

    id: str
    name: str
    slug: str


@dataclass(frozen=True)
class MealOption:
    """A named service period offered by the halls."""

    id: str
    label: str


HALLS: tuple[Hall, ...] = (
    Hall(id="busch", name="Busch", slug="busch-dining-hall"),
    Hall(id="neilson", name="Neilson", slug="neilson-dining-hall"),
    Hall(id="livingston", name="Livingston", slug="livingston-dining-commons"),
)

MEAL_SLUGS: dict[str, str] = {
    "breakfast": "breakfast",
    "lunch": "lunch-test",
    "lunch-test": "lunch-test",
    "dinner": "dinner",
    "takeout": "knight-room-takeout",
    "knight-room-takeout": "knight-room-takeout",
}

MEAL_OPTIONS: tuple[MealOption, ...] = (
    MealOption(id="breakfast", label="Breakfast"),
    MealOption(id="lunch", label="Lunch"),
    MealOption(id="dinner", label="Dinner"),
    MealOption(id="knight-room-takeout", label="Knight Room Takeout"),
)

DAY_MEALS: tuple[MealOption, ...] = (
    MealOption(id="breakfast", label="Breakfast"),
    MealOption(id="lunch", label="Lunch"),
    MealOption(id="dinner", label="Dinner"),
)

DEFAULT_MEAL = "lunch"


def get_hall_by_id(hall_id: str) -> Hall | None:
    """Return the hall with the given id, if known."""
    for hall in HALLS:
        if hall.id == hall_id:
            return hall
    return None


def get_meal_slug(meal: str | None) -> str:
    """Map a meal id to the upstream menu-type slug."""
    if not meal:
        return MEAL_SLUGS[DEFAULT_MEAL]
    return MEAL_SLUGS.get(meal, meal)


def resolve_halls(hall_ids: list[str]) -> list[Hall]:
    """Resolve requested hall ids, defaulting to every hall."""
    if not hall_ids:
        return list(HALLS)
    resolved = [get_hall_by_id(hall_id) for hall_id in hall_ids]
    return [hall for hall in resolved if hall is not None]
