"""Tests for bucketing merged cells into rows."""

from __future__ import annotations

import pytest

from pdf_table_extractor.rows import group_into_rows, row_bucket
from pdf_table_extractor.structures import MergedCell


def cell(text: str, x: float, y: float, width: float = 10.0) -> MergedCell:
    return MergedCell(text=text, x=x, y=y, width=width)


@pytest.mark.smoke
def test_cells_on_distinct_baselines_become_separate_rows():
    rows = group_into_rows([cell("Feb", 0, 90), cell("Jan", 0, 100)])

    assert [r.texts for r in rows] == [["Jan"], ["Feb"]]


def test_row_y_is_the_bucket_key():
    rows = group_into_rows([cell("Jan", 0, 100), cell("Feb", 0, 90)])

    assert [r.y for r in rows] == [104, 88]


def test_cells_in_one_bucket_are_ordered_left_to_right():
    rows = group_into_rows([cell("c", 80, 101), cell("a", 0, 100), cell("b", 40, 102)])

    assert len(rows) == 1
    assert rows[0].texts == ["a", "b", "c"]


@pytest.mark.parametrize(
    ("y", "expected"),
    [(0, 0), (3.9, 0), (4, 8), (-4, 0), (-4.1, -8), (100, 104), (99, 96)],
)
def test_row_bucket_rounds_half_up(y, expected):
    assert row_bucket(y, 8) == expected


def test_close_baselines_can_straddle_a_bucket_boundary():
    # limitación conocida de las cubetas fijas
    rows = group_into_rows([cell("left", 0, 99.9), cell("right", 40, 100.1)])

    assert [r.texts for r in rows] == [["right"], ["left"]]


def test_rows_and_cells_satisfy_ordering_invariants():
    cells = [cell(str(i), (i * 37) % 200, (i * 53) % 400) for i in range(40)]

    rows = group_into_rows(cells, y_threshold=8)

    assert all(a.y >= b.y for a, b in zip(rows, rows[1:]))
    for row in rows:
        assert all(a.x <= b.x for a, b in zip(row.cells, row.cells[1:]))
        assert all(abs(c.y - row.y) <= 4 for c in row.cells)
    assert sum(len(r.cells) for r in rows) == len(cells)


def test_empty_input_returns_no_rows():
    assert group_into_rows([]) == []


def test_non_positive_threshold_is_rejected():
    with pytest.raises(ValueError):
        group_into_rows([cell("a", 0, 0)], y_threshold=0)
