"""
Meal types, menu models and the loader for the weekly mess menu document.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class MealType(Enum):
    """Meals served by the mess, in serving order, with their fixed windows."""

    BREAKFAST = ('breakfast', 'Breakfast', time(8, 0), time(9, 0))
    LUNCH = ('lunch', 'Lunch', time(12, 30), time(14, 0))
    HIGH_TEA = ('high_tea', 'High Tea', time(17, 0), time(18, 0))
    DINNER = ('dinner', 'Dinner', time(19, 30), time(21, 0))

    def __init__(self, json_key: str, display_name: str, start: time, end: time):
        self.json_key = json_key
        self.display_name = display_name
        self.start = start
        self.end = end

    def is_serving(self, current_time: time) -> bool:
        """Serving windows include both ends."""
        return self.start <= current_time <= self.end

    def timing_string(self) -> str:
        return f"{self.start.strftime('%H:%M')} – {self.end.strftime('%H:%M')}"

    @classmethod
    def from_json_key(cls, key: str) -> Optional['MealType']:
        for meal_type in cls:
            if meal_type.json_key == key:
                return meal_type
        return None


MenuTable = Dict[MealType, Dict[str, Tuple[str, ...]]]


@dataclass(frozen=True)
class Meal:
    type: MealType
    menu_items: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MealStatus:
    is_now_serving: bool
    meal: Meal
    day_name: str


@dataclass(frozen=True)
class MenuLoadResult:
    """Outcome of a load. An empty table with ok=True is a valid, empty menu."""

    table: MenuTable = field(default_factory=dict)
    ok: bool = True
    error: Optional[str] = None


class MenuFormatError(ValueError):
    pass


def dishes_for(table: MenuTable, meal_type: MealType, day_name: str) -> Tuple[str, ...]:
    """Dish list for a meal on a day; absent entries are an empty list."""
    return table.get(meal_type, {}).get(day_name, ())


def _parse_day_menus(meal_key: str, value) -> Dict[str, Tuple[str, ...]]:
    if not isinstance(value, dict):
        raise MenuFormatError(f"'{meal_key}' must be an object of day names")
    day_menus = {}
    for day, items in value.items():
        if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
            raise MenuFormatError(f"'{meal_key}.{day}' must be a list of strings")
        day_menus[day] = tuple(items)
    return day_menus


def _parse_document(document) -> MenuTable:
    if isinstance(document, (bytes, bytearray)):
        document = document.decode('utf-8')
    data = json.loads(document)
    if not isinstance(data, dict) or 'meals' not in data:
        raise MenuFormatError("missing 'meals' field")
    meals = data['meals']
    if not isinstance(meals, dict):
        raise MenuFormatError("'meals' must be an object")

    table = {}
    for meal_type in MealType:
        if meal_type.json_key in meals:
            table[meal_type] = _parse_day_menus(meal_type.json_key, meals[meal_type.json_key])
    return table


def load_menu(document) -> MenuLoadResult:
    """Parse a weekly menu document (bytes or str).

    Never raises for bad input: malformed documents come back as an empty
    table with ``ok`` set to False so callers can show an error state.
    """
    try:
        table = _parse_document(document)
    except (ValueError, RecursionError) as e:
        logger.warning("Could not load menu: %s", e)
        return MenuLoadResult(table={}, ok=False, error=str(e))
    logger.info("Loaded menu with %d meal types", len(table))
    return MenuLoadResult(table=table, ok=True)


def load_menu_file(path) -> MenuLoadResult:
    """Read and parse the menu document at ``path``."""
    try:
        with open(path, 'rb') as f:
            document = f.read()
    except OSError as e:
        logger.warning("Could not read menu file %s: %s", path, e)
        return MenuLoadResult(table={}, ok=False, error=f"cannot read {path}: {e.strerror}")
    return load_menu(document)
