"""Logging setup and the global crash handler."""

import datetime
import logging
import os
import sys
import traceback
import tkinter as tk
from tkinter import messagebox

LOG_DIR = os.path.join(os.path.expanduser("~"), ".shift-calendar", "logs")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

# Tk root used as the parent of the crash dialog (set by install_excepthook)
_root: tk.Misc | None = None


def setup_logging(level: str = "INFO", log_dir: str = LOG_DIR) -> str | None:
    """Log to a dated file under *log_dir*; fall back to stderr.

    Returns the log file path, or None when only stderr is used.
    """
    numeric = getattr(logging, level.upper(), logging.INFO)
    try:
        os.makedirs(log_dir, exist_ok=True)
        log_filename = os.path.join(log_dir, f"shift_calendar_{datetime.date.today()}.log")
        logging.basicConfig(filename=log_filename, level=numeric, format=LOG_FORMAT)
    except OSError as e:
        logging.basicConfig(stream=sys.stderr, level=numeric, format=LOG_FORMAT)
        logger.warning("Cannot write log files to %s: %s", log_dir, e)
        return None
    return log_filename


def handle_exception(exc_type, exc_value, exc_traceback) -> None:
    """Log an uncaught exception and report it in an error dialog."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    print(f"CRITICAL ERROR: {exc_value}", file=sys.stderr)
    print(error_msg, file=sys.stderr)

    if _root is None:
        return
    try:
        messagebox.showerror(
            "Shift Calendar",
            "An unexpected error occurred.\n"
            "Details were written to the log file.\n\n"
            f"{exc_value}",
            parent=_root,
        )
    except tk.TclError:
        # Root already destroyed
        pass


def install_excepthook(root: tk.Misc | None = None) -> None:
    """Route uncaught errors, including Tk callback errors, to handle_exception."""
    global _root
    _root = root
    sys.excepthook = handle_exception
    if root is not None:
        root.report_callback_exception = handle_exception
