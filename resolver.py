"""
Works out which meal to show for a given moment, plus the full weekly view.
"""

from datetime import date, time, timedelta
from typing import List, Optional, Tuple

from menu import Meal, MealStatus, MealType, MenuTable, dishes_for

# English names regardless of the process locale (strftime('%A') is not)
DAYS_OF_WEEK = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')


def day_name(day: date) -> str:
    return DAYS_OF_WEEK[day.weekday()]


def _status(table: MenuTable, meal_type: MealType, day: str, is_now_serving: bool) -> MealStatus:
    return MealStatus(
        is_now_serving=is_now_serving,
        meal=Meal(meal_type, dishes_for(table, meal_type, day)),
        day_name=day,
    )


def resolve_meal_status(table: MenuTable, now_time: time, now_date: date) -> Optional[MealStatus]:
    """Return the meal being served now, or the next one to be served.

    Returns None only when the table is empty (no menu loaded). After the last
    meal of the day the next day's breakfast is returned.
    """
    if not table:
        return None

    today = day_name(now_date)

    for meal_type in MealType:
        if meal_type.is_serving(now_time):
            return _status(table, meal_type, today, True)

    for meal_type in MealType:
        if now_time < meal_type.start:
            return _status(table, meal_type, today, False)

    tomorrow = day_name(now_date + timedelta(days=1))
    return _status(table, MealType.BREAKFAST, tomorrow, False)


def day_menu(table: MenuTable, day: str) -> List[Meal]:
    """All four meals for one day, in serving order."""
    return [Meal(meal_type, dishes_for(table, meal_type, day)) for meal_type in MealType]


def weekly_menu(table: MenuTable) -> List[Tuple[str, List[Meal]]]:
    """Every day Monday to Sunday with its meals, ignoring the current time."""
    return [(day, day_menu(table, day)) for day in DAYS_OF_WEEK]


def normalise_day(text: str, today: date) -> Optional[str]:
    """Turn user input like 'mon', 'MONDAY', 'today' or 'tomorrow' into a day name."""
    key = text.strip().lower()
    if key == 'today':
        return day_name(today)
    if key == 'tomorrow':
        return day_name(today + timedelta(days=1))
    for day in DAYS_OF_WEEK:
        if key == day.lower() or (len(key) == 3 and day.lower().startswith(key)):
            return day
    return None
