import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from markboard.core.pagination import page_slice, total_pages


def test_total_pages():
    assert total_pages(0, 5) == 0
    assert total_pages(1, 5) == 1
    assert total_pages(5, 5) == 1
    assert total_pages(6, 5) == 2
    assert total_pages(11, 5) == 3


def test_page_slice():
    items = list(range(12))
    assert page_slice(items, 1, 5) == [0, 1, 2, 3, 4]
    assert page_slice(items, 2, 5) == [5, 6, 7, 8, 9]
    assert page_slice(items, 3, 5) == [10, 11]


def test_out_of_range_is_empty():
    items = list(range(6))
    assert page_slice(items, 3, 5) == []
    assert page_slice(items, 0, 5) == []
    assert page_slice(items, -1, 5) == []
    assert page_slice([], 1, 5) == []


def test_never_more_than_page_size():
    items = list(range(23))
    for p in range(-2, 8):
        assert len(page_slice(items, p, 5)) <= 5


def test_bad_page_size():
    with pytest.raises(ValueError):
        total_pages(3, 0)
