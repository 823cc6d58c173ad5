from __future__ import annotations

from PySide6.QtWidgets import QApplication

from markboard.settings import WINDOW_SIZE
from markboard.ui.main_window import NotesBoardWindow
from markboard.logging_setup import install_global_exception_hooks, setup_logging, SESSION_ID


def main() -> int:
    log = setup_logging()
    install_global_exception_hooks()
    app = QApplication([])
    win = NotesBoardWindow()
    win.resize(*WINDOW_SIZE)
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
