"""Normalization of raw Nutrislice week documents into menu items."""

import re

from dining_planner.domain.menu import MenuDiagnostics, MenuItem, ParsedMenu
from dining_planner.services.nutrition import extract_nutrition

FALLBACK_STATION = "Station"

_WHITESPACE = re.compile(r"\s+")


def clean_text(text: object) -> str:
    """Collapse whitespace runs and trim the ends."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", str(text)).strip()


def parse_menu(document: dict[str, object], date: str) -> ParsedMenu:
    """Normalize the day record matching ``date`` into ordered menu items.

    A missing day is not an error: the result is empty and the diagnostics
    report ``target_found=False`` together with every date in the document.
    """
    days = _dict_entries(document.get("days") if isinstance(document, dict) else None)
    available_dates = [_day_date(day) for day in days]
    target_day = next((day for day in days if day.get("date") == date), None)

    if target_day is None:
        return ParsedMenu(
            items=[],
            diagnostics=MenuDiagnostics(
                target_date=date,
                target_found=False,
                available_dates=available_dates,
            ),
        )

    menu_info = target_day.get("menu_info")
    if not isinstance(menu_info, dict):
        menu_info = {}
    raw_entries = target_day.get("menu_items")
    entries = raw_entries if isinstance(raw_entries, list) else []

    items: list[MenuItem] = []
    current_station = ""
    header_count = 0

    for entry in _dict_entries(entries):
        if entry.get("is_section_title") or entry.get("is_station_header"):
            label = clean_text(entry.get("text")) or _menu_info_name(
                menu_info, entry.get("menu_id")
            )
            if label:
                current_station = label
            header_count += 1
            continue

        food = entry.get("food")
        if not isinstance(food, dict) or not food.get("name"):
            continue

        station = (
            _menu_info_name(menu_info, entry.get("menu_id"))
            or current_station
            or FALLBACK_STATION
        )
        info = extract_nutrition(food)
        items.append(
            MenuItem(
                name=clean_text(food.get("name")),
                station=station,
                calories=info.calories,
                protein=info.protein,
                carbs=info.carbs,
                fat=info.fat,
                nutrition=info.nutrition,
            )
        )

    return ParsedMenu(
        items=items,
        diagnostics=MenuDiagnostics(
            target_date=date,
            target_found=True,
            available_dates=available_dates,
            menu_item_count=len(entries),
            menu_info_count=len(menu_info),
            station_header_count=header_count,
            parsed_item_count=len(items),
        ),
    )


def _dict_entries(value: object) -> list[dict[str, object]]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]


def _menu_info_name(menu_info: dict[str, object], menu_id: object) -> str:
    """Look up a section display name in the per-day menu info table."""
    if menu_id is None:
        return ""
    entry = menu_info.get(str(menu_id))
    if not isinstance(entry, dict):
        return ""
    options = entry.get("section_options")
    if not isinstance(options, dict):
        return ""
    return clean_text(options.get("display_name"))


def _day_date(day: dict[str, object]) -> str | None:
    date = day.get("date")
    return date if isinstance(date, str) else None
