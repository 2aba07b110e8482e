"""Nutrition extraction and derived metrics for menu items."""

import math
import re
from dataclasses import replace

from dining_planner.domain.menu import MenuItem, NutritionInfo, is_finite_number

_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")

_MACRO_KEYS = {
    "calories": "calories",
    "protein": "g_protein",
    "carbs": "g_carbs",
    "fat": "g_fat",
}


def parse_number(value: object) -> float | None:
    """Coerce a raw value to a number, extracting the first decimal if needed."""
    if value is None or isinstance(value, bool):
        return None
    if is_finite_number(value):
        return value  # type: ignore[return-value]
    if isinstance(value, int | float):
        return None
    match = _NUMBER_PATTERN.search(str(value))
    if not match:
        return None
    number = float(match.group(0))
    return number if math.isfinite(number) else None


def extract_nutrition(food: dict[str, object] | None) -> NutritionInfo:
    """Pull nutrition labels and macros out of a raw food record."""
    info = _locate_nutrition(food)
    if info is None:
        return NutritionInfo(nutrition={})

    nutrition = {
        key.replace("_", " "): value for key, value in info.items() if value is not None
    }
    return NutritionInfo(
        nutrition=nutrition,
        calories=parse_number(info.get(_MACRO_KEYS["calories"])),
        protein=parse_number(info.get(_MACRO_KEYS["protein"])),
        carbs=parse_number(info.get(_MACRO_KEYS["carbs"])),
        fat=parse_number(info.get(_MACRO_KEYS["fat"])),
    )


def protein_per_cal(protein: object, calories: object) -> float | None:
    """Return protein grams per calorie, or None when undefined."""
    protein_value = parse_number(protein)
    calories_value = parse_number(calories)
    if protein_value is None or calories_value is None or calories_value <= 0:
        return None
    return protein_value / calories_value


def with_derived_metrics(items: list[MenuItem]) -> list[MenuItem]:
    """Return copies of the items with protein_per_cal populated."""
    return [
        replace(item, protein_per_cal=protein_per_cal(item.protein, item.calories))
        for item in items
    ]


def _locate_nutrition(food: dict[str, object] | None) -> dict[str, object] | None:
    """Find the first nutrition mapping in preference order.

    Candidates that are not mappings are skipped rather than ending the search.
    """
    if not isinstance(food, dict):
        return None
    sizes = food.get("food_sizes")
    first_size = sizes[0] if isinstance(sizes, list) and sizes else None
    if not isinstance(first_size, dict):
        first_size = {}
    candidates = (
        food.get("rounded_nutrition_info"),
        food.get("nutrition_info"),
        first_size.get("nutrition_info"),
        first_size.get("rounded_nutrition_info"),
    )
    for candidate in candidates:
        if isinstance(candidate, dict):
            return candidate
    return None
