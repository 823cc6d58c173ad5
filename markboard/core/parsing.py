from __future__ import annotations

import re

from markboard.core.models import Note
from markboard.settings import UNKNOWN_TIME, UNTITLED_TITLE

_LEADING_MARKUP_RE = re.compile(r"^[#\s]+")


def strip_line_markup(line: str) -> str:
    """`## Title ` -> `Title`"""
    return _LEADING_MARKUP_RE.sub("", line).strip()


def split_note_lines(raw_text: str) -> list[str]:
    return [line for line in raw_text.strip().splitlines() if line.strip()]


def parse_note(raw_text: str, *, renderer) -> Note:
    """
    Note layout:
      line 1 -> title
      line 2 -> time label
      rest   -> markdown body
    Blank lines are dropped before the split, so missing lines fall back to placeholders.
    """
    lines = split_note_lines(raw_text)

    title = strip_line_markup(lines[0]) if lines else UNTITLED_TITLE
    time = strip_line_markup(lines[1]) if len(lines) > 1 else UNKNOWN_TIME
    body = "\n".join(lines[2:])

    return Note(title=title, time=time, content_html=renderer.render(body))


def is_titled(note: Note) -> bool:
    """A markup-only first line (`#`) counts as no title."""
    return bool(note.title) and note.title != UNTITLED_TITLE
