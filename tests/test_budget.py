import unittest

from free_time.budget import (
    ScheduleBudget,
    activity_minutes,
    add_activity,
    clear_activities,
    default_budget,
    effective_months,
    free_hours_per_day,
    free_hours_with_activities,
    free_minutes_per_day,
    free_minutes_with_activities,
    ordered_field_names,
    set_every_month,
    set_field,
    set_minutes,
    toggle_month,
    toggle_week_day,
)
from free_time.config import FIXED_FIELD_NAMES, MONTH_NAMES, WEEKDAY_NAMES, BudgetDefaults
from free_time.errors import DuplicateNameError, IndexOutOfRangeError
from free_time.models import DurationField
from free_time.selection import Selection


class TestScheduleBudgetDefaults(unittest.TestCase):
    def test_default_fields(self) -> None:
        budget = default_budget()
        self.assertEqual(
            dict(budget.fields),
            {
                "sleepingTime": 480,
                "actualWorkTime": 480,
                "workTime": 480,
                "lunchTime": 60,
                "wayToJob": 30,
                "wayToHome": 30,
            },
        )
        self.assertEqual(budget.additional_field_order, ())
        self.assertFalse(budget.is_every_month)
        self.assertEqual(budget.week_day_selection, frozenset())
        self.assertEqual(budget.month_selection, frozenset())

    def test_bare_budget_matches_default(self) -> None:
        self.assertEqual(ScheduleBudget().fields, default_budget().fields)

    def test_default_free_time(self) -> None:
        budget = default_budget()
        self.assertEqual(free_minutes_per_day(budget), 360)
        self.assertEqual(free_hours_per_day(budget), 6)

    def test_longer_sleep(self) -> None:
        budget = set_field(default_budget(), "sleepingTime", DurationField.from_minutes(600))
        self.assertEqual(free_minutes_per_day(budget), 240)
        self.assertEqual(free_hours_per_day(budget), 4)

    def test_fractional_hours_are_not_rounded(self) -> None:
        budget = set_minutes(default_budget(), "wayToHome", 0)
        self.assertEqual(free_hours_per_day(budget), 6.5)

    def test_over_committed_day_is_negative(self) -> None:
        budget = set_minutes(default_budget(), "actualWorkTime", 900)
        self.assertEqual(free_minutes_per_day(budget), -60)

    def test_required_work_time_does_not_count(self) -> None:
        budget = set_minutes(default_budget(), "workTime", 1000)
        self.assertEqual(free_minutes_per_day(budget), 360)

    def test_configured_activity_names_are_trimmed(self) -> None:
        budget = default_budget(BudgetDefaults(activities={" gym ": 30}))
        self.assertEqual(budget.additional_field_order, ("gym",))
        self.assertEqual(budget.fields["gym"], 30)
        self.assertNotIn(" gym ", budget.fields)

    def test_configured_activities(self) -> None:
        budget = default_budget(BudgetDefaults(sleeping_time=420, activities={"gym": 60}))
        self.assertEqual(budget.additional_field_order, ("gym",))
        self.assertEqual(budget.fields["gym"], 60)
        self.assertEqual(free_minutes_per_day(budget), 420)


class TestScheduleBudgetFields(unittest.TestCase):
    def test_set_field_keeps_order_for_existing(self) -> None:
        budget = set_field(default_budget(), "lunchTime", DurationField.from_minutes(45))
        self.assertEqual(list(budget.fields), list(FIXED_FIELD_NAMES))
        self.assertEqual(budget.fields["lunchTime"], 45)
        self.assertEqual(budget.additional_field_order, ())

    def test_set_field_appends_new_names(self) -> None:
        budget = set_field(default_budget(), "reading", DurationField.from_minutes(20))
        budget = set_field(budget, "games", DurationField.from_minutes(40))
        self.assertEqual(budget.additional_field_order, ("reading", "games"))
        self.assertEqual(ordered_field_names(budget)[-2:], ["reading", "games"])

    def test_set_field_does_not_mutate_original(self) -> None:
        original = default_budget()
        set_field(original, "sleepingTime", DurationField.from_minutes(1))
        self.assertEqual(original.fields["sleepingTime"], 480)

    def test_derived_budgets_do_not_share_fields(self) -> None:
        original = default_budget()
        derived = [
            toggle_week_day(original, 0),
            toggle_month(original, 0),
            set_every_month(original, True),
        ]
        for budget in derived:
            with self.subTest(budget=budget):
                with self.assertRaises(TypeError):
                    budget.fields["sleepingTime"] = 0  # type: ignore[index]
        self.assertEqual(free_minutes_per_day(original), 360)

    def test_fields_passed_in_are_copied(self) -> None:
        source = dict(default_budget().fields)
        budget = ScheduleBudget(fields=source)
        source["sleepingTime"] = 0
        self.assertEqual(budget.fields["sleepingTime"], 480)

    def test_budget_is_hashable(self) -> None:
        budget = toggle_week_day(default_budget(), 1)
        self.assertEqual(hash(budget), hash(toggle_week_day(default_budget(), 1)))
        self.assertEqual(len({budget, toggle_week_day(default_budget(), 1)}), 1)

    def test_add_activity(self) -> None:
        budget = add_activity(default_budget(), "  football ")
        self.assertEqual(budget.fields["football"], 0)
        self.assertEqual(budget.additional_field_order, ("football",))

    def test_add_activity_rejects_fixed_name(self) -> None:
        with self.assertRaises(DuplicateNameError):
            add_activity(default_budget(), "sleepingTime")

    def test_add_activity_rejects_duplicate(self) -> None:
        budget = add_activity(default_budget(), "youtube")
        with self.assertRaises(DuplicateNameError):
            add_activity(budget, "youtube ")

    def test_add_activity_rejects_blank(self) -> None:
        for name in ("", "   "):
            with self.subTest(name=name):
                with self.assertRaises(DuplicateNameError):
                    add_activity(default_budget(), name)

    def test_activities_only_count_in_alternative_formula(self) -> None:
        budget = add_activity(default_budget(), "instagram")
        budget = set_field(budget, "instagram", DurationField.from_minutes(90))
        self.assertEqual(activity_minutes(budget), 90)
        self.assertEqual(free_minutes_per_day(budget), 360)
        self.assertEqual(free_minutes_with_activities(budget), 270)
        self.assertEqual(free_hours_with_activities(budget), 4.5)

    def test_clear_activities(self) -> None:
        budget = add_activity(add_activity(default_budget(), "a"), "b")
        budget = toggle_week_day(budget, 2)
        cleared = clear_activities(budget)
        self.assertEqual(list(cleared.fields), list(FIXED_FIELD_NAMES))
        self.assertEqual(cleared.additional_field_order, ())
        self.assertEqual(cleared.week_day_selection, frozenset({2}))


class TestScheduleBudgetSelections(unittest.TestCase):
    def test_toggle_week_day_is_its_own_inverse(self) -> None:
        budget = toggle_week_day(default_budget(), 4)
        for index in range(len(WEEKDAY_NAMES)):
            with self.subTest(index=index):
                twice = toggle_week_day(toggle_week_day(budget, index), index)
                self.assertEqual(twice.week_day_selection, budget.week_day_selection)

    def test_toggle_month(self) -> None:
        budget = default_budget()
        once = toggle_month(budget, 0)
        self.assertEqual(once.month_selection, frozenset({0}))
        self.assertEqual(once.months.labels(), ["Jan"])
        twice = toggle_month(once, 0)
        self.assertEqual(twice.month_selection, frozenset())

    def test_toggle_out_of_range(self) -> None:
        budget = default_budget()
        for index in (-1, 7, 100):
            with self.subTest(index=index):
                with self.assertRaises(IndexOutOfRangeError):
                    toggle_week_day(budget, index)
        for index in (-1, 12):
            with self.subTest(index=index):
                with self.assertRaises(IndexOutOfRangeError):
                    toggle_month(budget, index)

    def test_every_month_keeps_selection(self) -> None:
        budget = set_every_month(toggle_month(default_budget(), 5), True)
        self.assertEqual(effective_months(budget), frozenset({5}))
        off = set_every_month(budget, False)
        self.assertFalse(off.is_every_month)
        self.assertEqual(off.month_selection, frozenset({5}))
        self.assertIsNone(effective_months(off))


class TestSelection(unittest.TestCase):
    def test_operations(self) -> None:
        selection = Selection(WEEKDAY_NAMES).add(6).add(0).add(0)
        self.assertIn(0, selection)
        self.assertNotIn(3, selection)
        self.assertEqual(len(selection), 2)
        self.assertEqual(list(selection), [0, 6])
        self.assertEqual(selection.labels(), ["Mon", "Sun"])
        self.assertEqual(list(selection.remove(6)), [0])
        self.assertEqual(list(selection.toggle(3)), [0, 3, 6])

    def test_rejects_non_int(self) -> None:
        with self.assertRaises(IndexOutOfRangeError):
            Selection(MONTH_NAMES).toggle("1")  # type: ignore[arg-type]
        with self.assertRaises(IndexOutOfRangeError):
            Selection(MONTH_NAMES).toggle(True)

    def test_rejects_invalid_initial_indices(self) -> None:
        with self.assertRaises(IndexOutOfRangeError):
            Selection(WEEKDAY_NAMES, frozenset({7}))

    def test_from_labels(self) -> None:
        selection = Selection.from_labels(MONTH_NAMES, ["dec", " Jan"])
        self.assertEqual(list(selection), [0, 11])
        with self.assertRaises(IndexOutOfRangeError):
            Selection.from_labels(MONTH_NAMES, ["Smarch"])

    def test_index_error_compatible(self) -> None:
        with self.assertRaises(IndexError):
            Selection(WEEKDAY_NAMES).toggle(9)


if __name__ == "__main__":
    unittest.main()
