import sys
import os
from functools import partial

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from markboard.core.board import NoteBoard
from markboard.core.models import Note, sources_from
from markboard.core.parsing import parse_note
from markboard.core.render import BoardRenderer, PageControl
from markboard.core.trusted_html import trust
from markboard.services.markdown_renderer import MarkdownRenderer
from markboard.settings import EMPTY_MESSAGE, ERROR_MESSAGE
from markboard.sources.fetch import FetchError, NoteFetcher
from markboard.sources.loader import load_all

parse = partial(parse_note, renderer=MarkdownRenderer())


class FakeSurface:
    def __init__(self):
        self.cards = None
        self.controls = None
        self.on_select = None
        self.scrolls = 0

    def show_cards(self, html):
        self.cards = html.html

    def show_page_controls(self, controls, on_select):
        self.controls = list(controls)
        self.on_select = on_select

    def scroll_to_top(self):
        self.scrolls += 1


def make_notes(n):
    return [Note(title=f"Note {i}", time=f"day {i}", content_html=trust(f"<p>body {i}</p>")) for i in range(1, n + 1)]


def make_renderer(notes):
    surface = FakeSurface()
    board = NoteBoard(notes, page_size=5)
    return BoardRenderer(board, surface), surface


def test_six_notes_two_pages(tmp_path):
    (tmp_path / "MARK").mkdir()
    names = []
    for i in range(1, 7):
        (tmp_path / "MARK" / f"{i}.md").write_text(f"# Doc {i}\n2024-01-0{i}\ntext {i}", encoding="utf-8")
        names.append(f"MARK/{i}.md")

    notes = load_all(sources_from(names), fetch=NoteFetcher(tmp_path), parse=parse)
    renderer, surface = make_renderer(notes)
    renderer.render_current()

    for i in range(1, 6):
        assert f"Doc {i}<" in surface.cards
    assert "Doc 6" not in surface.cards
    assert surface.controls == [PageControl(1, True), PageControl(2, False)]

    surface.on_select(2)
    assert "Doc 6" in surface.cards
    assert "Doc 1<" not in surface.cards
    assert surface.controls == [PageControl(1, False), PageControl(2, True)]
    assert renderer.board.current_page == 2
    assert surface.scrolls == 1


def test_fetch_404_shows_only_error():
    class Response:
        status_code = 404
        ok = False
        text = ""
        encoding = None

    class Session:
        def get(self, url, timeout=None):
            if url.endswith("2.md"):
                return Response()
            resp = Response()
            resp.status_code, resp.ok, resp.text = 200, True, "T\nt\nbody"
            return resp

    fetcher = NoteFetcher(".", session=Session())
    renderer, surface = make_renderer([])
    renderer.show_loading()
    assert "Loading" in surface.cards

    sources = sources_from([f"https://example.org/MARK/{i}.md" for i in (1, 2, 3)])
    with pytest.raises(FetchError) as ei:
        load_all(sources, fetch=fetcher, parse=parse)
    renderer.show_error(ei.value)

    assert ERROR_MESSAGE in surface.cards
    assert "404" in surface.cards
    assert "note-block" not in surface.cards
    assert surface.controls == []


def test_blank_document_excluded():
    texts = {"a": "A\nnow\nbody", "blank": "   \n"}
    notes = load_all(sources_from(texts), fetch=lambda s: texts[s.location], parse=parse)
    renderer, surface = make_renderer(notes)
    renderer.render_page(1)

    assert surface.cards.count('class="note-block"') == 1
    assert surface.controls == []


def test_empty_board_message():
    renderer, surface = make_renderer([])
    renderer.render_page(1)
    assert EMPTY_MESSAGE in surface.cards
    assert surface.controls == []


def test_single_page_has_no_controls():
    renderer, surface = make_renderer(make_notes(5))
    renderer.render_page(1)
    assert surface.controls == []


def test_render_is_idempotent():
    renderer, surface = make_renderer(make_notes(12))
    renderer.board.select_page(3)
    renderer.render_page(3)
    first = (surface.cards, surface.controls)
    renderer.render_page(3)
    assert (surface.cards, surface.controls) == first


def test_title_is_escaped_body_is_not():
    note = Note(title="<b>T</b>", time="1 & 2", content_html=trust("<em>raw</em>"))
    renderer, surface = make_renderer([note])
    renderer.render_page(1)
    assert "&lt;b&gt;T&lt;/b&gt;" in surface.cards
    assert "1 &amp; 2" in surface.cards
    assert "<em>raw</em>" in surface.cards


def test_select_page_out_of_range():
    board = NoteBoard(make_notes(6), page_size=5)
    with pytest.raises(ValueError):
        board.select_page(3)
    with pytest.raises(ValueError):
        board.select_page(0)
    assert board.current_page == 1


def test_replace_notes_resets_page():
    board = NoteBoard(make_notes(6), page_size=5)
    board.select_page(2)
    board.replace_notes(make_notes(2))
    assert board.current_page == 1
    assert board.total_pages == 1
