"""Menu domain models."""

import math
from dataclasses import dataclass, field
from enum import StrEnum

MACRO_FIELDS: tuple[str, ...] = ("calories", "protein", "carbs", "fat")


class ScoringMode(StrEnum):
    """Ranking policy applied when comparing items to goals."""

    CLOSEST = "closest"
    UNDER = "under"
    OVER = "over"
    PROTEIN_DENSITY = "protein-density"


@dataclass(frozen=True)
class NutritionInfo:
    """Nutrition labels and parsed macros for one food record."""

    nutrition: dict[str, object]
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


@dataclass(frozen=True)
class MenuItem:
    """A single food entry served at a hall for one meal and date."""

    name: str
    station: str
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    nutrition: dict[str, object] = field(default_factory=dict)
    protein_per_cal: float | None = None
    score: float | None = None
    hall_id: str | None = None
    hall_name: str | None = None
    hall_slug: str | None = None


@dataclass(frozen=True)
class NutritionGoals:
    """Optional macro targets supplied by the caller."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None

    def has_any(self) -> bool:
        """Return true when at least one goal dimension is set."""
        return any(is_finite_number(getattr(self, macro)) for macro in MACRO_FIELDS)

    def split(self, parts: int) -> "NutritionGoals":
        """Divide every set goal evenly across the given number of parts."""
        count = max(parts, 1)
        values: dict[str, float | None] = {}
        for macro in MACRO_FIELDS:
            value = getattr(self, macro)
            values[macro] = value / count if is_finite_number(value) else None
        return NutritionGoals(**values)


@dataclass(frozen=True)
class Plan:
    """Calorie-bounded selection of items with aggregate totals."""

    items: list[MenuItem]
    target_calories: float | None
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    diff_calories: float | None
    protein_per_cal: float | None


@dataclass(frozen=True)
class MenuDiagnostics:
    """Observability counters produced while parsing a day record."""

    target_date: str
    target_found: bool
    available_dates: list[str | None]
    menu_item_count: int | None = None
    menu_info_count: int | None = None
    station_header_count: int | None = None
    parsed_item_count: int | None = None


@dataclass(frozen=True)
class ParsedMenu:
    """Normalized items for one day plus parsing diagnostics."""

    items: list[MenuItem]
    diagnostics: MenuDiagnostics


def is_finite_number(value: object) -> bool:
    """Return true for real, finite numbers (booleans excluded).

    Integers too large for a float count as non-finite.
    """
    if not isinstance(value, int | float) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False
