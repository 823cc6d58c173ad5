from __future__ import annotations

from PySide6.QtCore import QObject, QRunnable, Signal

from markboard.sources.loader import load_all


class NotesLoadSignals(QObject):
    finished = Signal(int, object)
    failed = Signal(int, object)


class NotesLoadWorker(QRunnable):
    def __init__(self, *, req_id: int, payload: dict):
        super().__init__()
        self.req_id = req_id
        self.payload = payload
        self.signals = NotesLoadSignals()

    def run(self):
        try:
            notes = load_all(**self.payload)
            self.signals.finished.emit(self.req_id, list(notes))
        except Exception as e:
            self.signals.failed.emit(self.req_id, e)
