"""Tests for nutrition extraction and derived metrics."""

import math

from dining_planner.domain.menu import MenuItem
from dining_planner.services.nutrition import (
    extract_nutrition,
    parse_number,
    protein_per_cal,
    with_derived_metrics,
)


def test_parse_number_accepts_numbers_and_strings() -> None:
    assert parse_number(12) == 12
    assert parse_number(3.5) == 3.5
    assert parse_number("12g") == 12.0
    assert parse_number("about 4.25 grams") == 4.25
    assert parse_number("n/a") is None
    assert parse_number(None) is None
    assert parse_number(True) is None
    assert parse_number(math.nan) is None


def test_extract_nutrition_prefers_rounded_info() -> None:
    food = {
        "rounded_nutrition_info": {"calories": 200, "g_protein": "10g"},
        "nutrition_info": {"calories": 199.6, "g_protein": 9.8},
    }

    info = extract_nutrition(food)

    assert info.calories == 200
    assert info.protein == 10.0
    assert info.carbs is None


def test_extract_nutrition_falls_back_to_food_sizes() -> None:
    food = {
        "food_sizes": [
            {
                "nutrition_info": {
                    "calories": "350",
                    "g_protein": 22,
                    "g_carbs": 30,
                    "g_fat": 12,
                    "g_saturated_fat": 4,
                    "sodium": None,
                }
            }
        ]
    }

    info = extract_nutrition(food)

    assert info.calories == 350.0
    assert info.protein == 22
    assert info.carbs == 30
    assert info.fat == 12
    assert info.nutrition["g saturated fat"] == 4
    assert "sodium" not in info.nutrition


def test_extract_nutrition_without_info_is_empty() -> None:
    info = extract_nutrition({"name": "Water"})

    assert info.nutrition == {}
    assert info.calories is None
    assert info.protein is None
    assert info.carbs is None
    assert info.fat is None


def test_protein_per_cal_requires_positive_calories() -> None:
    assert protein_per_cal(20, 200) == 0.1
    assert protein_per_cal(20, 0) is None
    assert protein_per_cal(None, 200) is None
    assert protein_per_cal(20, None) is None


def test_with_derived_metrics_returns_new_items() -> None:
    original = MenuItem(name="Chicken", station="Grill", calories=250, protein=40)

    derived = with_derived_metrics([original])

    assert derived[0].protein_per_cal == 40 / 250
    assert original.protein_per_cal is None


def test_parse_number_rejects_values_beyond_float_range() -> None:
    huge_digits = "1" + "0" * 400

    assert parse_number(huge_digits) is None
    assert parse_number(int(huge_digits)) is None
    assert parse_number(math.inf) is None


def test_protein_per_cal_is_none_for_overflowing_calories() -> None:
    assert protein_per_cal(20, "1" + "0" * 400) is None
    assert protein_per_cal(20, int("1" + "0" * 400)) is None


def test_extract_nutrition_skips_non_mapping_candidates() -> None:
    food = {
        "rounded_nutrition_info": "see label",
        "nutrition_info": {"calories": 150},
    }

    assert extract_nutrition(food).calories == 150
