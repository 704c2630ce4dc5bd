"""Month calendar window (tkinter) showing the Group A / Group B rotation."""

import logging
from datetime import date
from tkinter import font as tkfont
from typing import Callable
import tkinter as tk

from calendar_logic import (
    DAY_ABBR,
    GROUP_A_BG,
    GROUP_A_BORDER,
    GROUP_B_BG,
    GROUP_B_BORDER,
    TODAY_RING,
    WEEKEND_BG,
    WEEKEND_BORDER,
    Cell,
    MonthState,
    month_rows,
)
from settings import load_settings, save_settings
from shift_logic import REFERENCE_DATE, ROTATION_WEEKS, group_label, week_index

logger = logging.getLogger(__name__)

# Colours
PAGE_BG = "#F3F4F6"
CARD_BG = "white"
TITLE_FG = "#111827"
MUTED_FG = "#4B5563"
NAV_FG = "#374151"
NAV_BTN_BG = "#F3F4F6"
FOOTER_FG = "#6B7280"

CELL_W = 84
CELL_H = 64
GRID_ROWS = 6


class _ToolTip:
    """Lightweight shared tooltip for day cells."""

    __slots__ = ("_root", "_tw")

    def __init__(self, root: tk.Tk) -> None:
        self._root = root
        self._tw: tk.Toplevel | None = None

    def show(self, widget: tk.Widget, text: str) -> None:
        self.hide()
        tw = tk.Toplevel(self._root)
        tw.wm_overrideredirect(True)
        tw.wm_attributes("-topmost", True)
        lbl = tk.Label(
            tw, text=text, bg="#FFFFE0", fg="black",
            relief="solid", borderwidth=1, padx=6, pady=3, justify="left",
        )
        lbl.pack()
        x = widget.winfo_rootx() + widget.winfo_width() // 2
        y = widget.winfo_rooty() + widget.winfo_height() + 2
        tw.wm_geometry(f"+{x}+{y}")
        self._tw = tw

    def hide(self) -> None:
        if self._tw:
            self._tw.destroy()
            self._tw = None


def tooltip_text(cell: Cell) -> str:
    text = cell.date.strftime("%A, %d %B %Y")
    if cell.group is None:
        return f"{text}\nWeekend (ignored)"
    return f"{text}\n{group_label(cell.group)}  ·  rotation week {week_index(cell.date) + 1} of {ROTATION_WEEKS}"


def footer_text() -> str:
    ref = f"{REFERENCE_DATE.strftime('%B')} {REFERENCE_DATE.day}, {REFERENCE_DATE.year}"
    return f"Reference date: {ref} • Pattern repeats every {ROTATION_WEEKS} weeks"


class CalendarWindow:
    """One-month calendar coloured by the group on shift each day."""

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self.root = tk.Tk()
        self.root.title("Group Shift Calendar")
        self.root.resizable(False, False)
        self.root.configure(bg=PAGE_BG)

        self._setup_fonts()

        settings = load_settings()
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]

        self.state = MonthState(today)

        # Canvas id -> painted cell (filled during _render)
        self._widget_dates: dict[int, Cell] = {}
        self._day_cells: list[list[tk.Canvas]] = []

        self._tooltip = _ToolTip(self.root)
        self._build_shell()
        self._render()

        self.root.bind("<Left>", lambda _e: self.previous_month())
        self.root.bind("<Right>", lambda _e: self.next_month())
        self.root.bind("<Home>", lambda _e: self.go_to_today())
        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_title = tkfont.Font(family=base, size=20, weight="bold")
        self.font_subtitle = tkfont.Font(family=base, size=10)
        self.font_month = tkfont.Font(family=base, size=15, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_day = tkfont.Font(family=base, size=10, weight="bold")
        self.font_group = tkfont.Font(family=base, size=8, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=8)

    # ------------------------------------------------------------------
    # Build shell (once) — header, nav bar, grid, legend, footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=PAGE_BG)
        outer.pack(padx=16, pady=12)

        tk.Label(
            outer, text="Group Shift Calendar", font=self.font_title,
            bg=PAGE_BG, fg=TITLE_FG,
        ).pack()
        tk.Label(
            outer, text="Schedule for Group A and Group B", font=self.font_subtitle,
            bg=PAGE_BG, fg=MUTED_FG,
        ).pack(pady=(0, 8))

        card = tk.Frame(outer, bg=CARD_BG, padx=14, pady=12)
        card.pack()

        # Navigation row: ◀  <Month Year>  Today  ▶
        nav = tk.Frame(card, bg=CARD_BG)
        nav.pack(fill="x", pady=(0, 10))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=CARD_BG, fg=NAV_FG, cursor="hand2",
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self.previous_month())

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=CARD_BG, fg=NAV_FG, cursor="hand2",
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self.next_month())

        center = tk.Frame(nav, bg=CARD_BG)
        center.pack(side="top")
        self.month_label = tk.Label(
            center, font=self.font_month, bg=CARD_BG, fg=TITLE_FG,
        )
        self.month_label.pack(side="left", padx=(0, 10))
        btn_today = tk.Label(
            center, text="Today", font=self.font_bold, bg=NAV_BTN_BG, fg=NAV_FG,
            padx=10, pady=3, cursor="hand2",
        )
        btn_today.pack(side="left")
        btn_today.bind("<Button-1>", lambda _e: self.go_to_today())

        # Day headers + 6×7 cell pool
        grid = tk.Frame(card, bg=CARD_BG)
        grid.pack()
        for col, abbr in enumerate(DAY_ABBR):
            tk.Label(
                grid, text=abbr, font=self.font_bold, bg=CARD_BG, fg=MUTED_FG,
            ).grid(row=0, column=col, pady=(0, 4))

        for r in range(GRID_ROWS):
            row_cells: list[tk.Canvas] = []
            for c in range(7):
                cell = tk.Canvas(
                    grid, width=CELL_W, height=CELL_H,
                    bg=CARD_BG, highlightthickness=0, borderwidth=0,
                )
                cell.grid(row=r + 1, column=c, padx=3, pady=3)
                cell.bind("<Enter>", self._on_cell_enter)
                cell.bind("<Leave>", self._on_cell_leave)
                row_cells.append(cell)
            self._day_cells.append(row_cells)

        self._build_legend(card)

    def _build_legend(self, parent: tk.Frame) -> None:
        tk.Frame(parent, bg="#E5E7EB", height=1).pack(fill="x", pady=(12, 8))
        legend = tk.Frame(parent, bg=CARD_BG)
        legend.pack()
        for text, fill, border in (
            ("Group A", GROUP_A_BG, GROUP_A_BORDER),
            ("Group B", GROUP_B_BG, GROUP_B_BORDER),
            ("Weekend (ignored)", WEEKEND_BG, WEEKEND_BORDER),
        ):
            swatch = tk.Canvas(legend, width=18, height=18, bg=CARD_BG,
                               highlightthickness=0, borderwidth=0)
            swatch.create_rectangle(1, 1, 17, 17, fill=fill, outline=border, width=2)
            swatch.pack(side="left", padx=(12, 4))
            tk.Label(
                legend, text=text, font=self.font_bold, bg=CARD_BG, fg=NAV_FG,
            ).pack(side="left", padx=(0, 12))

        tk.Label(
            parent, text=footer_text(), font=self.font_footer,
            bg=CARD_BG, fg=FOOTER_FG,
        ).pack(pady=(8, 0))

    # ------------------------------------------------------------------
    # Paint the displayed month into the cell pool
    # ------------------------------------------------------------------
    def _render(self) -> None:
        self._tooltip.hide()
        self._widget_dates.clear()
        self.month_label.configure(text=self.state.title)

        rows = month_rows(self.state.grid())
        for r in range(GRID_ROWS):
            row_cells = rows[r] if r < len(rows) else [None] * 7
            for c, cell in enumerate(row_cells):
                canvas = self._day_cells[r][c]
                if cell is None:
                    canvas.delete("all")
                else:
                    self._draw_cell(canvas, cell)
                    self._widget_dates[id(canvas)] = cell

    def _draw_cell(self, canvas: tk.Canvas, cell: Cell, hover: bool = False) -> None:
        canvas.delete("all")
        style = cell.style
        bg = style.hover_bg if hover else style.bg
        canvas.create_rectangle(1, 1, CELL_W - 1, CELL_H - 1, fill=bg, outline=bg)
        if cell.is_today:
            canvas.create_rectangle(2, 2, CELL_W - 2, CELL_H - 2,
                                    outline=TODAY_RING, width=2)
        canvas.create_text(9, 7, text=str(cell.day), anchor="nw",
                           fill=style.fg, font=self.font_day)
        if cell.group is not None:
            canvas.create_text(9, 28, text=group_label(cell.group), anchor="nw",
                               fill=style.fg, font=self.font_group)

    # ------------------------------------------------------------------
    # Hover highlight + tooltip
    # ------------------------------------------------------------------
    def _on_cell_enter(self, event: tk.Event) -> None:
        cell = self._widget_dates.get(id(event.widget))
        if cell is None:
            return
        if cell.style.hover_bg != cell.style.bg:
            self._draw_cell(event.widget, cell, hover=True)
        self._tooltip.show(event.widget, tooltip_text(cell))

    def _on_cell_leave(self, event: tk.Event) -> None:
        cell = self._widget_dates.get(id(event.widget))
        if cell is not None:
            self._draw_cell(event.widget, cell)
        self._tooltip.hide()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def previous_month(self) -> None:
        self.state.previous()
        self._render()

    def next_month(self) -> None:
        self.state.next()
        self._render()

    def go_to_today(self) -> None:
        self.state.go_today()
        self._render()

    # ------------------------------------------------------------------
    # Persist window size
    # ------------------------------------------------------------------
    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        save_settings(settings)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        # Repaint so the "today" ring follows the real date
        self._render()
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()
        logger.debug("Calendar shown (%s)", self.state.title)

    def hide(self) -> None:
        self._tooltip.hide()
        if self.root.state() != "withdrawn":
            self._saved_width = self.root.winfo_width()
            self._saved_height = self.root.winfo_height()
            self._persist_size()
        self.root.withdraw()
        logger.debug("Calendar hidden")

    def close(self) -> None:
        """Persist the window size and destroy the Tk root."""
        self.hide()
        self.root.destroy()

    # ------------------------------------------------------------------
    # Centre on screen
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = max(self._saved_width or 0, self.root.winfo_reqwidth())
        win_h = max(self._saved_height or 0, self.root.winfo_reqheight())
        x = max(0, (self.root.winfo_screenwidth() - win_w) // 2)
        y = max(0, (self.root.winfo_screenheight() - win_h) // 2)
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")
