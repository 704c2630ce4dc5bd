import unittest
from datetime import date, timedelta

from shift_logic import (
    PATTERN,
    REFERENCE_DATE,
    Group,
    assign_group,
    day_of_week,
    group_label,
    is_weekend,
    week_index,
)


class TestReferenceWeek(unittest.TestCase):
    def test_reference_date_is_sunday_group_a(self):
        self.assertEqual(day_of_week(REFERENCE_DATE), 0)
        self.assertEqual(assign_group(date(2025, 11, 23)), Group.A)

    def test_week_zero_weekdays(self):
        # Week 0 is A A B B A for Sun..Thu
        self.assertEqual(assign_group(date(2025, 11, 24)), Group.A)
        self.assertEqual(assign_group(date(2025, 11, 25)), Group.B)
        self.assertEqual(assign_group(date(2025, 11, 26)), Group.B)
        self.assertEqual(assign_group(date(2025, 11, 27)), Group.A)

    def test_week_zero_friday_saturday_off(self):
        self.assertIsNone(assign_group(date(2025, 11, 28)))
        self.assertIsNone(assign_group(date(2025, 11, 29)))


class TestLaterWeeks(unittest.TestCase):
    def test_week_one_sunday(self):
        self.assertEqual(week_index(date(2025, 11, 30)), 1)
        self.assertEqual(assign_group(date(2025, 11, 30)), Group.A)

    def test_week_two_sunday(self):
        self.assertEqual(week_index(date(2025, 12, 7)), 2)
        self.assertEqual(assign_group(date(2025, 12, 7)), Group.B)

    def test_week_three(self):
        self.assertEqual(assign_group(date(2025, 12, 14)), Group.B)
        self.assertEqual(assign_group(date(2025, 12, 15)), Group.A)
        self.assertEqual(assign_group(date(2025, 12, 18)), Group.B)

    def test_wraps_back_to_week_zero(self):
        self.assertEqual(week_index(date(2025, 12, 21)), 0)
        self.assertEqual(assign_group(date(2025, 12, 21)), Group.A)


class TestBeforeReference(unittest.TestCase):
    def test_four_weeks_before(self):
        self.assertEqual(week_index(date(2025, 10, 26)), 0)
        self.assertEqual(assign_group(date(2025, 10, 26)), Group.A)

    def test_one_week_before(self):
        self.assertEqual(week_index(date(2025, 11, 16)), 3)
        self.assertEqual(assign_group(date(2025, 11, 16)), Group.B)

    def test_days_just_before_reference_floor_to_previous_week(self):
        # Thursday 3 days before the reference Sunday still belongs to week 3
        self.assertEqual(week_index(date(2025, 11, 20)), 3)
        self.assertEqual(assign_group(date(2025, 11, 20)), Group.B)
        self.assertIsNone(assign_group(date(2025, 11, 22)))

    def test_far_past(self):
        d = REFERENCE_DATE - timedelta(days=28 * 1000)
        self.assertEqual(assign_group(d), Group.A)
        self.assertEqual(assign_group(d - timedelta(days=7)), Group.B)


class TestProperties(unittest.TestCase):
    def setUp(self):
        start = date(2023, 1, 1)
        self.days = [start + timedelta(days=i) for i in range(3 * 365)]

    def test_periodic_every_28_days(self):
        for d in self.days:
            self.assertEqual(assign_group(d), assign_group(d + timedelta(days=28)), d)
            self.assertEqual(assign_group(d), assign_group(d - timedelta(days=28 * 37)), d)

    def test_weekend_invariant(self):
        for d in self.days:
            if d.weekday() in (4, 5):  # Friday, Saturday
                self.assertTrue(is_weekend(d))
                self.assertIsNone(assign_group(d), d)
            else:
                self.assertFalse(is_weekend(d))
                self.assertIn(assign_group(d), (Group.A, Group.B), d)

    def test_week_index_in_range(self):
        for d in self.days:
            self.assertIn(week_index(d), range(4))

    def test_matches_pattern_table(self):
        for d in self.days:
            if not is_weekend(d):
                self.assertIs(assign_group(d), PATTERN[week_index(d)][day_of_week(d)])


class TestPatternTable(unittest.TestCase):
    def test_shape(self):
        self.assertEqual(len(PATTERN), 4)
        for row in PATTERN:
            self.assertEqual(len(row), 5)

    def test_rows(self):
        rows = ["".join(g.value for g in row) for row in PATTERN]
        self.assertEqual(rows, ["AABBA", "ABBAA", "BBAAB", "BAABB"])


class TestLabels(unittest.TestCase):
    def test_group_label(self):
        self.assertEqual(group_label(Group.A), "Group A")
        self.assertEqual(group_label(Group.B), "Group B")
        self.assertEqual(group_label(None), "")

    def test_day_of_week_sunday_first(self):
        self.assertEqual(day_of_week(date(2025, 11, 23)), 0)
        self.assertEqual(day_of_week(date(2025, 11, 28)), 5)
        self.assertEqual(day_of_week(date(2025, 11, 29)), 6)


if __name__ == '__main__':
    unittest.main()
