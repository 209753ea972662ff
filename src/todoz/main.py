# Rev 0.1.0

# src/todoz/main.py  (Rev 0.1.0)
import logging
import sys
from PySide6.QtGui import QGuiApplication
from PySide6.QtCore import Qt, QCoreApplication
from PySide6.QtWidgets import QApplication, QMessageBox

from todoz.repositories.task_file_store import TaskFileStore
from todoz.ui.main_window import MainWindow
from todoz.utils.config import load_settings, save_settings, tasks_file_path
from todoz.utils.logging_setup import setup_logging


def main():
    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv)
    QCoreApplication.setApplicationName("todoZ")

    logfile = setup_logging("todoZ")
    settings = load_settings()
    tasks_file = tasks_file_path(settings)
    logging.getLogger(__name__).info("Task file: %s (log: %s)", tasks_file, logfile)

    # --- DI wiring ---
    store = TaskFileStore(tasks_file)

    win = MainWindow(store, settings)
    win.show()
    if store.last_error is not None:
        QMessageBox.warning(win, "Load failed", f"Tasks could not be loaded.\n\n{store.last_error}")
    rc = app.exec()

    settings["main_window"] = {"width": win.width(), "height": win.height()}
    settings.setdefault("ui", {})["hide_done"] = win.hide_done()
    try:
        save_settings(settings)
    except OSError as e:
        logging.getLogger(__name__).warning("Could not save settings: %s", e)
    return rc

if __name__ == "__main__":
    sys.exit(main())
