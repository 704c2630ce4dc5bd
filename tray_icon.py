"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from shift_logic import assign_group


def tray_title(day: date | None = None) -> str:
    group = assign_group(day or date.today())
    on_shift = group.label if group is not None else "Day off"
    return f"Shift Calendar – Today: {on_shift}"


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    menu = Menu(
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
        Menu.SEPARATOR,
        MenuItem("Exit", lambda _icon, _item: on_exit()),
    )
    return pystray.Icon("shift-calendar", icon_image, tray_title(), menu)
