"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import threading

from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from log_setup import install_excepthook, setup_logging
from settings import load_settings
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    log_file = setup_logging(settings["log_level"])
    logger.info("Shift calendar starting (log file: %s)", log_file)

    # DPI awareness so fonts are crisp on Hi-DPI Windows monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except Exception:
        pass

    cal_win = CalendarWindow()
    install_excepthook(cal_win.root)

    tray = None
    if settings["show_tray"]:
        # Callbacks marshalled onto the tkinter main thread
        def on_show() -> None:
            cal_win.root.after(0, cal_win.toggle)

        def on_exit() -> None:
            def _quit() -> None:
                tray.stop()
                cal_win.close()
            cal_win.root.after(0, _quit)

        tray = create_tray(create_icon_image(), on_show, on_exit)

        # Run pystray in a daemon thread so it doesn't block tkinter
        tray_thread = threading.Thread(target=tray.run, daemon=True)
        tray_thread.start()
    else:
        # Without a tray there is no way back from a hidden window
        cal_win.root.protocol("WM_DELETE_WINDOW", cal_win.close)
        cal_win.root.bind("<Escape>", lambda _e: cal_win.close())

    if settings["start_hidden"] and tray is not None:
        cal_win.root.withdraw()
    else:
        cal_win.show()

    # tkinter main loop on the main thread
    cal_win.root.mainloop()
    logger.info("Shift calendar stopped")


if __name__ == "__main__":
    main()
