from __future__ import annotations

from typing import Iterable

from markboard.core.models import Note
from markboard.core.pagination import page_slice, total_pages


class NoteBoard:
    """Loaded notes plus the selected page (1-based)."""

    def __init__(self, notes: Iterable[Note] = (), *, page_size: int):
        self.page_size = page_size
        self.notes: tuple[Note, ...] = tuple(notes)
        self.current_page = 1

    def replace_notes(self, notes: Iterable[Note]) -> None:
        self.notes = tuple(notes)
        self.current_page = 1

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.notes), self.page_size)

    @property
    def has_page_selector(self) -> bool:
        return self.total_pages > 1

    def notes_on(self, page_number: int) -> list[Note]:
        return page_slice(self.notes, page_number, self.page_size)

    def visible_notes(self) -> list[Note]:
        return self.notes_on(self.current_page)

    def select_page(self, page_number: int) -> None:
        if not 1 <= page_number <= self.total_pages:
            raise ValueError(f"page {page_number} out of range 1..{self.total_pages}")
        self.current_page = page_number
