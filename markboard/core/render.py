from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from markboard.core.board import NoteBoard
from markboard.core.models import Note
from markboard.core.trusted_html import TrustedHtml, escape_text, join, trust
from markboard.logging_setup import get_logger
from markboard.settings import EMPTY_MESSAGE, ERROR_MESSAGE, LOADING_MESSAGE

logger = get_logger("render")


@dataclass(frozen=True)
class PageControl:
    number: int
    active: bool


class BoardSurface(Protocol):
    """Where the board is drawn. Every call replaces what was shown before."""

    def show_cards(self, html: TrustedHtml) -> None: ...

    def show_page_controls(
        self, controls: Sequence[PageControl], on_select: Callable[[int], None]
    ) -> None: ...

    def scroll_to_top(self) -> None: ...


def note_card(note: Note) -> TrustedHtml:
    return join([
        trust('<div class="note-block">\n  <div class="note-title">'),
        escape_text(note.title),
        trust('</div>\n  <span class="note-time">'),
        escape_text(note.time),
        trust('</span>\n  <div class="note-content">'),
        note.content_html,
        trust("</div>\n</div>\n"),
    ])


def message(text: str, *, css_class: str = "board-message") -> TrustedHtml:
    return trust(f'<p class="{css_class}">') + escape_text(text) + trust("</p>")


class BoardRenderer:
    def __init__(self, board: NoteBoard, surface: BoardSurface):
        self.board = board
        self.surface = surface

    def render_page(self, page_number: int) -> None:
        notes = self.board.notes_on(page_number)

        if not notes and page_number == 1:
            self.surface.show_cards(message(EMPTY_MESSAGE))
            self.surface.show_page_controls([], self.select_page)
            return

        self.surface.show_cards(join(note_card(n) for n in notes))
        self.surface.show_page_controls(self.page_controls(), self.select_page)

    def render_current(self) -> None:
        self.render_page(self.board.current_page)

    def page_controls(self) -> list[PageControl]:
        if not self.board.has_page_selector:
            return []
        return [
            PageControl(number=i, active=(i == self.board.current_page))
            for i in range(1, self.board.total_pages + 1)
        ]

    def select_page(self, page_number: int) -> None:
        logger.debug("Page selected: %d", page_number)
        self.board.select_page(page_number)
        self.render_page(page_number)
        self.surface.scroll_to_top()

    def show_loading(self) -> None:
        self.surface.show_cards(message(LOADING_MESSAGE))
        self.surface.show_page_controls([], self.select_page)

    def show_error(self, error: BaseException | str) -> None:
        body = (
            trust('<p class="board-error">')
            + escape_text(ERROR_MESSAGE)
            + trust("<br>")
            + escape_text(f"Error: {error}")
            + trust("</p>")
        )
        self.surface.show_cards(body)
        self.surface.show_page_controls([], self.select_page)
