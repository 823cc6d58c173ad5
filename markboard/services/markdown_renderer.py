from __future__ import annotations

from markdown_it import MarkdownIt

from markboard.core.trusted_html import TrustedHtml, sanitize, trust


def build_markdown() -> MarkdownIt:
    """
    GitHub-style markdown: tables, ~~strike~~, bare links, raw HTML,
    and a single newline is a line break.
    Lists, tables and fences may start right after a paragraph line.
    """
    return (
        MarkdownIt("commonmark", {"html": True, "linkify": True, "breaks": True})
        .enable("table")
        .enable("strikethrough")
        .enable("linkify")
    )

BOARD_CSS = """
    body { font-family: sans-serif; background: #f0f2f5; margin: 0; padding: 24px; line-height: 1.6; }
    .note-block { background: #fff; border-radius: 12px; padding: 20px 24px; margin: 0 auto 20px;
                  max-width: 760px; box-shadow: 0 2px 8px rgba(0, 0, 0, 0.08); }
    .note-title { font-size: 1.3em; font-weight: bold; color: #222; }
    .note-time { display: block; font-size: 0.85em; color: #999; margin: 4px 0 12px; }
    .note-content { color: #333; overflow-wrap: anywhere; }
    .board-message { text-align: center; color: #666; }
    .board-error { text-align: center; color: red; }
    code, pre { background: #f5f5f5; }
    pre { padding: 12px; overflow-x: auto; }
    table { border-collapse: collapse; }
    th, td { border: 1px solid #ddd; padding: 4px 8px; }
"""


class MarkdownRenderer:
    def __init__(self, *, sanitize_html: bool = False):
        self.sanitize_html = sanitize_html
        self._md = build_markdown()

    def render(self, text: str) -> TrustedHtml:
        rendered = self._md.render(text)
        if self.sanitize_html:
            return sanitize(rendered)
        return trust(rendered)


def wrap_html_page(body: TrustedHtml, *, css: str = BOARD_CSS) -> str:
    return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <style>{css}</style>
</head>
<body>{body.html}</body>
</html>
"""
