"""Goal scoring and ranking of menu items."""

import math
from dataclasses import replace

from dining_planner.domain.menu import (
    MACRO_FIELDS,
    MenuItem,
    NutritionGoals,
    ScoringMode,
    is_finite_number,
)
from dining_planner.services.nutrition import parse_number, protein_per_cal


def score_item(
    item: MenuItem, goals: NutritionGoals, mode: ScoringMode
) -> float | None:
    """Score how well an item matches the goals; lower is better.

    Returns None when no goal dimension can be compared, which marks the
    item as unscorable.
    """
    if mode == ScoringMode.PROTEIN_DENSITY:
        ratio = protein_per_cal(item.protein, item.calories)
        if ratio is None:
            return None
        return -ratio

    total = 0.0
    count = 0
    for macro in MACRO_FIELDS:
        goal = getattr(goals, macro)
        value = getattr(item, macro)
        if not is_finite_number(goal) or not is_finite_number(value):
            continue
        divisor = goal or 1
        if mode == ScoringMode.UNDER:
            total += max(0.0, value - goal) / divisor
        elif mode == ScoringMode.OVER:
            total += max(0.0, goal - value) / divisor
        else:
            total += abs(value - goal) / divisor
        count += 1

    if count == 0:
        return None
    return total / count


def sort_by_protein_density(items: list[MenuItem]) -> list[MenuItem]:
    """Order items by protein per calorie, then protein, then fewer calories."""
    return sorted(items, key=_density_key)


def rank_by_goals(
    items: list[MenuItem], goals: NutritionGoals, mode: ScoringMode
) -> list[MenuItem]:
    """Score items, drop unscorable ones and sort best match first."""
    scored = [replace(item, score=score_item(item, goals, mode)) for item in items]
    return sorted(
        (item for item in scored if item.score is not None),
        key=lambda item: item.score,
    )


def rank_items(
    items: list[MenuItem], goals: NutritionGoals, mode: ScoringMode
) -> list[MenuItem]:
    """Apply the display ranking for a scoring mode.

    Without any goals (and outside protein-density mode) the source order is
    kept unchanged.
    """
    if mode == ScoringMode.PROTEIN_DENSITY:
        return sort_by_protein_density(items)
    if goals.has_any():
        return rank_by_goals(items, goals, mode)
    return list(items)


def _density_key(item: MenuItem) -> tuple[float, float, float]:
    ratio = item.protein_per_cal
    protein = parse_number(item.protein)
    calories = parse_number(item.calories)
    return (
        -ratio if ratio is not None else math.inf,
        -protein if protein is not None else math.inf,
        calories if calories is not None else math.inf,
    )
