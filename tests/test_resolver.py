from datetime import date, datetime, time, timedelta

import pytest

from menu import Meal, MealStatus, MealType, load_menu
from resolver import (
    DAYS_OF_WEEK, day_menu, day_name, normalise_day, resolve_meal_status, weekly_menu,
)

MONDAY = date(2024, 1, 1)
WEDNESDAY = date(2024, 1, 3)
SUNDAY = date(2024, 1, 7)


def test_empty_table_means_no_data():
    assert resolve_meal_status({}, time(13, 0), MONDAY) is None
    assert resolve_meal_status({}, time(23, 59), SUNDAY) is None


def test_failed_load_means_no_data():
    result = load_menu(b'{"not_meals": {}}')
    assert resolve_meal_status(result.table, time(8, 30), MONDAY) is None


def test_lunch_round_trip():
    table = load_menu(b'{"meals": {"lunch": {"Monday": ["Rice", "Dal"]}}}').table
    assert resolve_meal_status(table, time(13, 0), MONDAY) == MealStatus(
        is_now_serving=True,
        meal=Meal(MealType.LUNCH, ("Rice", "Dal")),
        day_name="Monday",
    )


@pytest.mark.parametrize("meal_type", list(MealType))
def test_window_boundaries_are_serving(sample_table, meal_type):
    for instant in (meal_type.start, meal_type.end):
        status = resolve_meal_status(sample_table, instant, MONDAY)
        assert status.is_now_serving
        assert status.meal.type is meal_type


@pytest.mark.parametrize("meal_type", list(MealType))
def test_just_outside_window_is_not_serving(sample_table, meal_type):
    tick = timedelta(microseconds=1)

    before = (datetime.combine(MONDAY, meal_type.start) - tick).time()
    status = resolve_meal_status(sample_table, before, MONDAY)
    assert not status.is_now_serving
    assert status.meal.type is meal_type

    after = (datetime.combine(MONDAY, meal_type.end) + tick).time()
    status = resolve_meal_status(sample_table, after, MONDAY)
    assert not status.is_now_serving
    assert status.meal.type is not meal_type


def test_before_breakfast_shows_todays_breakfast(sample_table):
    status = resolve_meal_status(sample_table, time(7, 0), MONDAY)
    assert status == MealStatus(False, Meal(MealType.BREAKFAST, ("Poha", "Tea")), "Monday")


def test_between_meals_shows_next_meal_today(sample_table):
    status = resolve_meal_status(sample_table, time(15, 0), MONDAY)
    assert status == MealStatus(False, Meal(MealType.HIGH_TEA, ("Samosa", "Tea")), "Monday")


def test_after_dinner_rolls_over_to_next_breakfast(sample_table):
    status = resolve_meal_status(sample_table, time(21, 30), MONDAY)
    assert status == MealStatus(False, Meal(MealType.BREAKFAST, ("Idli", "Sambhar")), "Tuesday")


def test_rollover_wraps_from_sunday_to_monday(sample_table):
    status = resolve_meal_status(sample_table, time(23, 59, 59), SUNDAY)
    assert status.day_name == "Monday"
    assert status.meal == Meal(MealType.BREAKFAST, ("Poha", "Tea"))


def test_rollover_with_missing_breakfast_gives_empty_menu():
    table = load_menu(b'{"meals": {"dinner": {"Monday": ["Roti"]}}}').table
    status = resolve_meal_status(table, time(22, 0), MONDAY)
    assert status == MealStatus(False, Meal(MealType.BREAKFAST, ()), "Tuesday")


def test_missing_entry_while_serving_gives_empty_menu(sample_table):
    status = resolve_meal_status(sample_table, time(13, 0), WEDNESDAY)
    assert status.is_now_serving
    assert status.meal == Meal(MealType.LUNCH, ())
    assert status.day_name == "Wednesday"


def test_midnight_shows_breakfast_of_same_day(sample_table):
    status = resolve_meal_status(sample_table, time(0, 0), date(2024, 1, 2))
    assert status == MealStatus(False, Meal(MealType.BREAKFAST, ("Idli", "Sambhar")), "Tuesday")


class GermanDate(date):
    """A date whose locale-aware formatting is German, as under LC_TIME=de_DE."""

    GERMAN_DAYS = ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag")

    def strftime(self, fmt):
        return fmt.replace("%A", self.GERMAN_DAYS[self.weekday()])

    def __format__(self, fmt):
        return self.strftime(fmt)


def test_day_name_ignores_locale():
    monday = GermanDate(2024, 1, 1)
    assert monday.strftime("%A") == "Montag"
    assert day_name(monday) == "Monday"
    assert day_name(GermanDate(2024, 1, 7)) == "Sunday"


def test_day_name_covers_the_week():
    assert [day_name(date(2024, 1, d)) for d in range(1, 8)] == list(DAYS_OF_WEEK)


def test_weekly_menu_lists_every_day_and_meal(sample_table):
    week = weekly_menu(sample_table)
    assert [day for day, _ in week] == list(DAYS_OF_WEEK)
    for _, meals in week:
        assert [m.type for m in meals] == list(MealType)
    sunday = dict(week)["Sunday"]
    assert sunday[3] == Meal(MealType.DINNER, ("Biryani",))
    assert sunday[0] == Meal(MealType.BREAKFAST, ())


def test_day_menu(sample_table):
    meals = day_menu(sample_table, "Tuesday")
    assert meals[1] == Meal(MealType.LUNCH, ("Rajma", "Rice"))
    assert meals[2].menu_items == ()


@pytest.mark.parametrize("text,expected", [
    ("Monday", "Monday"),
    ("monday", "Monday"),
    ("  SAT ", "Saturday"),
    ("thu", "Thursday"),
    ("today", "Wednesday"),
    ("Tomorrow", "Thursday"),
    ("mo", None),
    ("someday", None),
    ("", None),
])
def test_normalise_day(text, expected):
    assert normalise_day(text, WEDNESDAY) == expected
