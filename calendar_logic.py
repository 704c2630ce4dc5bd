"""Pure calendar calculations — no UI dependencies."""

import calendar
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from shift_logic import Group, assign_group, day_of_week, is_weekend

logger = logging.getLogger(__name__)

DAY_ABBR = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# Colours
DEFAULT_BG = "#F9FAFB"
DEFAULT_FG = "#111827"
GROUP_A_BG = "#FEE2E2"
GROUP_A_HOVER = "#FECACA"
GROUP_A_FG = "#7F1D1D"
GROUP_A_BORDER = "#FCA5A5"
GROUP_B_BG = "#DBEAFE"
GROUP_B_HOVER = "#BFDBFE"
GROUP_B_FG = "#1E3A8A"
GROUP_B_BORDER = "#93C5FD"
WEEKEND_BG = "#E5E7EB"
WEEKEND_FG = "#6B7280"
WEEKEND_BORDER = "#9CA3AF"
TODAY_RING = "#111827"


@dataclass(frozen=True)
class CellStyle:
    bg: str
    hover_bg: str
    fg: str
    border: str


DEFAULT_STYLE = CellStyle(DEFAULT_BG, DEFAULT_BG, DEFAULT_FG, DEFAULT_BG)
GROUP_STYLES = {
    Group.A: CellStyle(GROUP_A_BG, GROUP_A_HOVER, GROUP_A_FG, GROUP_A_BORDER),
    Group.B: CellStyle(GROUP_B_BG, GROUP_B_HOVER, GROUP_B_FG, GROUP_B_BORDER),
}
WEEKEND_STYLE = CellStyle(WEEKEND_BG, WEEKEND_BG, WEEKEND_FG, WEEKEND_BORDER)


@dataclass(frozen=True)
class Cell:
    """One painted day of the month grid."""

    date: date
    group: Group | None
    is_weekend: bool
    is_today: bool
    style: CellStyle

    @property
    def day(self) -> int:
        return self.date.day


def cell_style(group: Group | None, weekend: bool) -> CellStyle:
    """Pick the base colours for a cell.

    Weekend wins over the group colour.  "Today" is drawn as a ring by the
    view and never changes the base colours.
    """
    if weekend:
        return WEEKEND_STYLE
    if group is not None:
        return GROUP_STYLES[group]
    return DEFAULT_STYLE


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def starting_day_of_week(year: int, month: int) -> int:
    """Return the Sunday-first weekday (0–6) of the 1st of the month."""
    return day_of_week(date(year, month, 1))


def build_month_grid(year: int, month: int,
                     today: date | None = None) -> list[Cell | None]:
    """Return the cells for one month, Sunday-first.

    Leading None placeholders align day 1 under its weekday column; one
    Cell follows per day of the month.  *today* defaults to the current
    date at call time.
    """
    if today is None:
        today = date.today()

    cells: list[Cell | None] = [None] * starting_day_of_week(year, month)
    for day in range(1, days_in_month(year, month) + 1):
        d = date(year, month, day)
        group = assign_group(d)
        weekend = is_weekend(d)
        cells.append(Cell(
            date=d,
            group=group,
            is_weekend=weekend,
            is_today=d == today,
            style=cell_style(group, weekend),
        ))
    return cells


def month_rows(cells: list[Cell | None]) -> list[list[Cell | None]]:
    """Split a flat month grid into rows of 7, padding the last row."""
    rows: list[list[Cell | None]] = []
    for start in range(0, len(cells), 7):
        row = cells[start:start + 7]
        row.extend([None] * (7 - len(row)))
        rows.append(row)
    return rows


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


class MonthState:
    """The month currently shown by the calendar window.

    Only changed through previous(), next() and go_today().  Only the
    (year, month) pair is kept, so the day is always clamped to 1.
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today
        d = today()
        self.year = d.year
        self.month = d.month

    @classmethod
    def from_date(cls, d: date,
                  today: Callable[[], date] = date.today) -> "MonthState":
        state = cls(today)
        state.year = d.year
        state.month = d.month
        return state

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def title(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    def previous(self) -> None:
        self.year, self.month = prev_month(self.year, self.month)
        logger.debug("Showing %s", self.title)

    def next(self) -> None:
        self.year, self.month = next_month(self.year, self.month)
        logger.debug("Showing %s", self.title)

    def go_today(self) -> None:
        d = self._today()
        self.year = d.year
        self.month = d.month
        logger.debug("Showing %s (today)", self.title)

    def grid(self) -> list[Cell | None]:
        return build_month_grid(self.year, self.month, self._today())
