"""Tests for comparing an extracted CSV against a reference."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pdf_table_extractor import eval_cli
from pdf_table_extractor.evaluation import evaluate_tables, write_report
from pdf_table_extractor.exporters import write_csv


@pytest.fixture
def csv_pair(tmp_path: Path):
    reference = tmp_path / "reference.csv"
    predicted = tmp_path / "predicted.csv"
    write_csv([["Name", "Qty"], ["Apple", "3"]], reference)
    write_csv([["Name", "Qty"], ["Apple", "8"]], predicted)
    return str(reference), str(predicted)


def test_text_accuracy_and_per_column(csv_pair):
    evaluation = evaluate_tables(*csv_pair)

    assert evaluation.total_cells == 4
    assert evaluation.matched_cells == 3
    assert evaluation.text_accuracy == pytest.approx(0.75)
    assert [(m.column, m.accuracy) for m in evaluation.per_column] == [(0, 1.0), (1, 0.5)]


def test_missing_rows_are_penalised(tmp_path: Path):
    reference = tmp_path / "reference.csv"
    predicted = tmp_path / "predicted.csv"
    write_csv([["a", "b"], ["c", "d"]], reference)
    write_csv([["a", "b"]], predicted)

    evaluation = evaluate_tables(str(reference), str(predicted))

    assert evaluation.text_accuracy == pytest.approx(0.5)
    assert (evaluation.row_count_reference, evaluation.row_count_predicted) == (2, 1)


def test_ragged_rows_and_whitespace(tmp_path: Path):
    reference = tmp_path / "reference.csv"
    predicted = tmp_path / "predicted.csv"
    write_csv([["--- Page 1 ---"], ["x", "y", "z"]], reference)
    write_csv([["--- Page 1 ---"], [" x", "y ", "z", "extra"]], predicted)

    evaluation = evaluate_tables(str(reference), str(predicted))

    assert evaluation.text_accuracy == pytest.approx(1.0)


def test_report_and_json(csv_pair, tmp_path: Path):
    report = tmp_path / "reports" / "metrics.csv"
    out_json = tmp_path / "reports" / "metrics.json"

    write_report(evaluate_tables(*csv_pair), str(report))
    assert report.read_text(encoding="utf-8").splitlines()[1].startswith("text_accuracy,-,0.7500")

    eval_cli.main(["--reference", csv_pair[0], "--predicted", csv_pair[1], "--json", str(out_json)])
    payload = json.loads(out_json.read_text(encoding="utf-8"))
    assert payload["matched_cells"] == 3
    assert payload["per_column"][1]["accuracy"] == 0.5
