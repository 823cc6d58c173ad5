from __future__ import annotations

import html
from dataclasses import dataclass

import bleach

ALLOWED_TAGS = [
    "a", "p", "br", "hr",
    "strong", "em", "s", "del", "code", "pre", "blockquote",
    "ul", "ol", "li",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "table", "thead", "tbody", "tr", "th", "td",
    "img",
]
ALLOWED_ATTRS = {
    "a": ["href", "title"],
    "img": ["src", "alt", "title"],
    "th": ["align"], "td": ["align"],
    "code": ["class"],
}
ALLOWED_PROTOCOLS = ["http", "https", "mailto"]


@dataclass(frozen=True)
class TrustedHtml:
    """HTML that may be inserted into the board without escaping."""

    html: str

    def __str__(self) -> str:
        return self.html

    def __add__(self, other: "TrustedHtml") -> "TrustedHtml":
        if not isinstance(other, TrustedHtml):
            return NotImplemented
        return TrustedHtml(self.html + other.html)


def trust(rendered_html: str) -> TrustedHtml:
    """Accept HTML unchanged; the note source is the trust boundary."""
    return TrustedHtml(rendered_html)


def sanitize(rendered_html: str) -> TrustedHtml:
    return TrustedHtml(
        bleach.clean(
            rendered_html,
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRS,
            protocols=ALLOWED_PROTOCOLS,
            strip=True,
        )
    )


def escape_text(text: str) -> TrustedHtml:
    return TrustedHtml(html.escape(text))


def join(parts) -> TrustedHtml:
    return TrustedHtml("".join(p.html for p in parts))
