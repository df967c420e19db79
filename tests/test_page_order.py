"""Tests for the RTL page ordering transform."""

from __future__ import annotations

from collections import Counter

import pytest

from folio.reader.page_order import inverse_order, reorder, rtl_order


class TestReorder:
    @pytest.mark.parametrize(
        "pages, expected",
        [
            ([], []),
            (["A"], ["A"]),
            (["A", "B"], ["A", "B"]),
            (["A", "B", "C"], ["A", "C", "B"]),
            (["A", "B", "C", "D"], ["A", "C", "B", "D"]),
            (["A", "B", "C", "D", "E"], ["A", "C", "B", "E", "D"]),
        ],
    )
    def test_known_orders(self, pages, expected):
        assert reorder(pages) == expected

    @pytest.mark.parametrize("n", range(0, 12))
    def test_permutation_of_input(self, n):
        pages = [f"p{i}" for i in range(n)]
        out = reorder(pages)
        assert len(out) == n
        assert Counter(out) == Counter(pages)

    def test_cover_always_first(self):
        pages = list(range(9))
        assert reorder(pages)[0] == 0

    def test_input_not_mutated(self):
        pages = ["A", "B", "C", "D"]
        reorder(pages)
        assert pages == ["A", "B", "C", "D"]

    def test_output_elements_are_copies(self):
        pages = [{"n": 1}, {"n": 2}, {"n": 3}]
        out = reorder(pages)
        out[1]["n"] = 99
        assert pages[2]["n"] == 3
        assert all(o is not p for o in out for p in pages)

    def test_custom_copy(self):
        out = reorder([1, 2, 3], copy=lambda p: p * 10)
        assert out == [10, 30, 20]

    @pytest.mark.parametrize("n", range(0, 12))
    def test_applying_twice_restores_order(self, n):
        pages = [f"p{i}" for i in range(n)]
        assert reorder(reorder(pages)) == pages

    def test_applying_twice_five_pages(self):
        once = reorder(["A", "B", "C", "D", "E"])
        assert once == ["A", "C", "B", "E", "D"]
        assert reorder(once) == ["A", "B", "C", "D", "E"]

    def test_deterministic(self):
        pages = list("ABCDEFG")
        assert reorder(pages) == reorder(pages)


class TestOrderIndices:
    def test_rtl_order(self):
        assert rtl_order(0) == []
        assert rtl_order(1) == [0]
        assert rtl_order(6) == [0, 2, 1, 4, 3, 5]

    @pytest.mark.parametrize("n", range(0, 10))
    def test_inverse_round_trip(self, n):
        order = rtl_order(n)
        positions = inverse_order(order)
        for source in range(n):
            assert order[positions[source]] == source

    def test_inverse_of_identity(self):
        assert inverse_order([0, 1, 2]) == [0, 1, 2]
