from __future__ import annotations

from dataclasses import dataclass

from markboard.core.trusted_html import TrustedHtml


@dataclass(frozen=True)
class NoteSource:
    location: str

    @property
    def is_remote(self) -> bool:
        return self.location.lower().startswith(("http://", "https://"))

    def __str__(self) -> str:
        return self.location


@dataclass(frozen=True)
class Note:
    title: str
    time: str
    content_html: TrustedHtml


def sources_from(locations) -> list[NoteSource]:
    return [NoteSource(str(loc)) for loc in locations]
