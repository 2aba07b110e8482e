"""Calorie-bounded plan construction."""

import math

from dining_planner.domain.menu import MenuItem, Plan, is_finite_number
from dining_planner.services.nutrition import parse_number
from dining_planner.services.scoring import sort_by_protein_density

MIN_TOLERANCE_CALORIES = 60
TOLERANCE_RATIO = 0.08


def calorie_tolerance(target: float) -> float:
    """Return the allowed overshoot above a calorie target."""
    return max(MIN_TOLERANCE_CALORIES, math.floor(target * TOLERANCE_RATIO + 0.5))


def build_calorie_plan(
    items: list[MenuItem],
    target_calories: float | None,
    tolerance: float | None = None,
) -> list[MenuItem] | None:
    """Select items whose calories approach the target without exceeding the ceiling.

    Candidates are walked in protein-density order and added greedily while
    they fit under ``target + tolerance``. Single additions are then repeated
    while they bring the total strictly closer to the target. Returns None
    when there is no positive target or nothing fits.
    """
    if not is_finite_number(target_calories) or target_calories <= 0:
        return None

    candidates = sort_by_protein_density(
        [
            item
            for item in items
            if is_finite_number(item.calories) and item.calories > 0
        ]
    )
    if not candidates:
        return None

    allowed = tolerance if tolerance is not None else calorie_tolerance(target_calories)
    max_calories = target_calories + allowed

    selected: list[int] = []
    used: set[int] = set()
    total = 0.0

    for index, item in enumerate(candidates):
        if total + item.calories <= max_calories:
            selected.append(index)
            used.add(index)
            total += item.calories

    while True:
        best_index: int | None = None
        best_diff = abs(target_calories - total)
        for index, item in enumerate(candidates):
            if index in used:
                continue
            new_total = total + item.calories
            if new_total > max_calories:
                continue
            diff = abs(target_calories - new_total)
            if diff < best_diff:
                best_index = index
                best_diff = diff
        if best_index is None:
            break
        selected.append(best_index)
        used.add(best_index)
        total += candidates[best_index].calories

    if not selected:
        return None
    return [candidates[index] for index in selected]


def summarize_plan(items: list[MenuItem], target_calories: float | None) -> Plan:
    """Sum macros across plan items; missing values count as zero."""
    calories = sum(parse_number(item.calories) or 0 for item in items)
    protein = sum(parse_number(item.protein) or 0 for item in items)
    carbs = sum(parse_number(item.carbs) or 0 for item in items)
    fat = sum(parse_number(item.fat) or 0 for item in items)
    has_target = is_finite_number(target_calories)
    return Plan(
        items=items,
        target_calories=target_calories if has_target else None,
        total_calories=calories,
        total_protein=protein,
        total_carbs=carbs,
        total_fat=fat,
        diff_calories=calories - target_calories if has_target else None,
        protein_per_cal=protein / calories if calories > 0 else None,
    )


def plan_meal(
    items: list[MenuItem],
    target_calories: float | None,
    tolerance: float | None = None,
) -> Plan | None:
    """Build and summarize a plan, or return None when no plan is possible."""
    selected = build_calorie_plan(items, target_calories, tolerance)
    if selected is None:
        return None
    return summarize_plan(selected, target_calories)
