from __future__ import annotations

import re
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Iterable

from markboard.core.models import Note, NoteSource
from markboard.core.parsing import is_titled
from markboard.logging_setup import get_logger

logger = get_logger("loader")

_DATE_RE = re.compile(
    r"(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})(?:[ T](\d{1,2}):(\d{2})(?::(\d{2}))?)?"
)


def load_all(
    sources: Iterable[NoteSource],
    *,
    fetch: Callable[[NoteSource], str],
    parse: Callable[[str], Note],
    max_workers: int | None = None,
    sort_by_time: bool = False,
) -> tuple[Note, ...]:
    """
    Fetch every source in parallel, then parse.
    Any failed fetch fails the whole batch (the first error in source order is raised).
    """
    sources = list(sources)
    if not sources:
        return ()

    t0 = time.perf_counter()
    logger.info("Loading notes: sources=%d", len(sources))

    with ThreadPoolExecutor(max_workers=max_workers or len(sources)) as pool:
        futures = [pool.submit(fetch, src) for src in sources]
        texts = [f.result() for f in futures]

    notes = [n for n in map(parse, texts) if is_titled(n)]
    if sort_by_time:
        notes = sort_notes_by_time(notes)

    logger.info(
        "Notes loaded: fetched=%d kept=%d time_ms=%.1f",
        len(texts), len(notes), (time.perf_counter() - t0) * 1000.0,
    )
    return tuple(notes)


def parse_time_label(label: str) -> datetime | None:
    m = _DATE_RE.search(label)
    if not m:
        return None
    parts = [int(g) if g else 0 for g in m.groups()]
    try:
        return datetime(*parts)
    except ValueError:
        return None


def sort_notes_by_time(notes: Iterable[Note]) -> list[Note]:
    """Newest first; notes without a readable date keep their order at the end."""
    notes = list(notes)
    dated = [(parse_time_label(n.time), n) for n in notes]
    with_date = sorted((p for p in dated if p[0] is not None), key=lambda p: p[0], reverse=True)
    without_date = [n for d, n in dated if d is None]
    return [n for _, n in with_date] + without_date
