from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def total_pages(count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(max(0, count) / page_size)


def page_slice(items: Sequence[T], page_number: int, page_size: int) -> list[T]:
    """Items of 1-based `page_number`; an empty list when the page does not exist."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if page_number < 1:
        return []
    start = (page_number - 1) * page_size
    return list(items[start:start + page_size])
