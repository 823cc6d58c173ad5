from __future__ import annotations

from functools import partial
from typing import Callable, Sequence

from PySide6.QtCore import QThreadPool, QTimer, QUrl, Slot
from PySide6.QtWebEngineCore import QWebEnginePage
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from markboard import settings
from markboard.core.board import NoteBoard
from markboard.core.models import sources_from
from markboard.core.parsing import parse_note
from markboard.core.render import BoardRenderer, PageControl
from markboard.core.trusted_html import TrustedHtml
from markboard.loading.worker import NotesLoadWorker
from markboard.logging_setup import get_logger, log_web_console
from markboard.services.markdown_renderer import MarkdownRenderer, wrap_html_page
from markboard.sources.fetch import NoteFetcher

PAGE_BUTTON_QSS = """
QPushButton#page-btn { min-width: 32px; padding: 4px 10px; border: 1px solid #ccc;
                       border-radius: 6px; background: #fff; }
QPushButton#page-btn:checked { background: #007bff; color: #fff; border-color: #007bff; }
"""

log = get_logger("ui")

SMOOTH_SCROLL_JS = "window.scrollTo({ top: 0, behavior: 'smooth' });"


class _ConsoleLoggingPage(QWebEnginePage):
    """Route the web view's console into the app log."""

    def javaScriptConsoleMessage(self, level, message, line, source_id):  # type: ignore[override]
        log_web_console(level, message, line, source_id)


class NotesBoardWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(settings.APP_NAME)

        self.board = NoteBoard(page_size=settings.NOTES_PER_PAGE)
        self.renderer = BoardRenderer(self.board, self)
        self.markdown = MarkdownRenderer(sanitize_html=settings.SANITIZE_NOTE_HTML)
        self.fetcher = NoteFetcher(settings.NOTES_ROOT, timeout=settings.FETCH_TIMEOUT_S)

        self._pool = QThreadPool.globalInstance()
        self._load_req_id = 0
        self._scroll_pending = False

        # UI
        self.cards = QWebEngineView()
        self.cards.setPage(_ConsoleLoggingPage(self.cards))
        self.cards.loadFinished.connect(self._on_cards_loaded)

        self.pagination = QWidget()
        self.pagination.setStyleSheet(PAGE_BUTTON_QSS)
        self._pagination_layout = QHBoxLayout(self.pagination)
        self._pagination_layout.setContentsMargins(8, 4, 8, 8)

        root = QWidget()
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.addWidget(self.cards, 1)
        root_layout.addWidget(self.pagination)
        self.setCentralWidget(root)

        # Start loading once the event loop is running.
        QTimer.singleShot(0, self.load_notes)

    def closeEvent(self, event):  # type: ignore[override]
        self.fetcher.close()
        super().closeEvent(event)

    # ---- surface ----

    def show_cards(self, html: TrustedHtml) -> None:
        base = QUrl.fromLocalFile(str(settings.NOTES_ROOT) + "/")
        self.cards.setHtml(wrap_html_page(html), base)

    def show_page_controls(
        self, controls: Sequence[PageControl], on_select: Callable[[int], None]
    ) -> None:
        while self._pagination_layout.count():
            item = self._pagination_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.pagination.setVisible(bool(controls))
        if not controls:
            return

        self._pagination_layout.addStretch(1)
        for control in controls:
            button = QPushButton(str(control.number))
            button.setObjectName("page-btn")
            button.setCheckable(True)
            button.setChecked(control.active)
            button.clicked.connect(partial(self._on_page_clicked, on_select, control.number))
            self._pagination_layout.addWidget(button)
        self._pagination_layout.addStretch(1)

    def scroll_to_top(self) -> None:
        # setHtml() loads asynchronously; scroll once the new page is in.
        self._scroll_pending = True

    # ---- loading ----

    def load_notes(self) -> None:
        self._load_req_id += 1
        req_id = self._load_req_id

        self.renderer.show_loading()

        payload = {
            "sources": sources_from(settings.NOTE_FILES),
            "fetch": self.fetcher,
            "parse": partial(parse_note, renderer=self.markdown),
            "max_workers": settings.FETCH_MAX_WORKERS,
            "sort_by_time": settings.SORT_BY_TIME,
        }
        log.info("Load requested: req_id=%d root=%s", req_id, settings.NOTES_ROOT)

        worker = NotesLoadWorker(req_id=req_id, payload=payload)
        worker.signals.finished.connect(self._on_notes_loaded)
        worker.signals.failed.connect(self._on_notes_failed)
        self._pool.start(worker)

    @Slot(int, object)
    def _on_notes_loaded(self, req_id: int, notes: object):
        if req_id != self._load_req_id:
            return
        self.board.replace_notes(notes)
        log.info("Board ready: notes=%d pages=%d", len(self.board.notes), self.board.total_pages)
        self.renderer.render_current()

    @Slot(int, object)
    def _on_notes_failed(self, req_id: int, error: object):
        if req_id != self._load_req_id:
            return
        log.error("Failed to load notes: %s", error, exc_info=error if isinstance(error, BaseException) else None)
        self.renderer.show_error(error)

    # ---- events ----

    def _on_page_clicked(self, on_select: Callable[[int], None], number: int, _checked: bool = False):
        on_select(number)

    def _on_cards_loaded(self, ok: bool):
        if not ok:
            log.warning("Cards view failed to load content")
        if self._scroll_pending:
            self._scroll_pending = False
            self.cards.page().runJavaScript(SMOOTH_SCROLL_JS)
