"""Tests for spread grouping and swipe mapping."""

from __future__ import annotations

import pytest

from folio.reader.gestures import SwipeDirection, swipe_step
from folio.reader.layout import group_of, spread_groups, visible_columns
from folio.reader.models import LayoutFlags, ReadingMode

SINGLE = LayoutFlags()
BOOK = LayoutFlags("dual", True, False)
BOOK_RTL = LayoutFlags("dual", True, True)
TWO_UP = LayoutFlags("dual", False, False)


class TestSpreadGroups:
    def test_empty(self):
        assert spread_groups(0, BOOK) == []

    def test_single(self):
        assert spread_groups(3, SINGLE) == [[0], [1], [2]]

    def test_book_cover_alone(self):
        assert spread_groups(5, BOOK) == [[0], [1, 2], [3, 4]]

    def test_book_trailing_page(self):
        assert spread_groups(4, BOOK) == [[0], [1, 2], [3]]

    def test_two_up_without_cover(self):
        assert spread_groups(5, TWO_UP) == [[0, 1], [2, 3], [4]]

    def test_group_of(self):
        groups = spread_groups(6, BOOK)
        assert group_of(0, groups) == 0
        assert group_of(2, groups) == 1
        assert group_of(5, groups) == 3


class TestVisibleColumns:
    def test_ltr_keeps_order(self):
        assert visible_columns([1, 2], BOOK) == [1, 2]

    def test_native_rtl_reverses(self):
        assert visible_columns([1, 2], BOOK_RTL) == [2, 1]


class TestSwipeStep:
    @pytest.mark.parametrize(
        "mode", [ReadingMode.SINGLE_PAGE, ReadingMode.TWO_PAGE_LTR]
    )
    def test_left_to_right_modes(self, mode):
        assert swipe_step(SwipeDirection.LEFT, mode) == 1
        assert swipe_step(SwipeDirection.RIGHT, mode) == -1

    def test_right_to_left_mode(self):
        assert swipe_step(SwipeDirection.LEFT, ReadingMode.TWO_PAGE_RTL) == -1
        assert swipe_step(SwipeDirection.RIGHT, ReadingMode.TWO_PAGE_RTL) == 1
