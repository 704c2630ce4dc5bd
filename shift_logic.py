"""Group rotation rules — which group is on shift for a given date.

No UI dependencies.  The rotation is four weeks long and anchored at
REFERENCE_DATE; Friday and Saturday are off for both groups.
"""

from datetime import date
from enum import Enum


class Group(Enum):
    A = "A"
    B = "B"

    @property
    def label(self) -> str:
        return f"Group {self.value}"


# Sunday of rotation week 0
REFERENCE_DATE = date(2025, 11, 23)

ROTATION_WEEKS = 4

# Rows are rotation weeks, columns are Sun, Mon, Tue, Wed, Thu
PATTERN: tuple[tuple[Group, ...], ...] = (
    (Group.A, Group.A, Group.B, Group.B, Group.A),
    (Group.A, Group.B, Group.B, Group.A, Group.A),
    (Group.B, Group.B, Group.A, Group.A, Group.B),
    (Group.B, Group.A, Group.A, Group.B, Group.B),
)

FRIDAY = 5
SATURDAY = 6


def day_of_week(d: date) -> int:
    """Return the weekday with Sunday as 0 and Saturday as 6."""
    return (d.weekday() + 1) % 7


def is_weekend(d: date) -> bool:
    return day_of_week(d) in (FRIDAY, SATURDAY)


def week_index(d: date) -> int:
    """Return the rotation week (0–3) that *d* falls in.

    Works for dates before the reference date too: both the day→week and
    the week→row steps use floor semantics.
    """
    days = (d - REFERENCE_DATE).days
    weeks = days // 7
    # Keep the result in [0, 3] even for negative week counts
    return ((weeks % ROTATION_WEEKS) + ROTATION_WEEKS) % ROTATION_WEEKS


def assign_group(d: date) -> Group | None:
    """Return the group on shift for *d*, or None on Friday/Saturday."""
    dow = day_of_week(d)
    if dow in (FRIDAY, SATURDAY):
        return None
    return PATTERN[week_index(d)][dow]


def group_label(group: Group | None) -> str:
    """Return "Group A" / "Group B", or an empty string for a day off."""
    return group.label if group is not None else ""
