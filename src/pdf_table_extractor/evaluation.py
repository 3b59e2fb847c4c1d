from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd

from .exporters import grid_to_dataframe, read_csv


@dataclass
class ColumnAccuracy:
    column: int
    accuracy: float
    matched: int
    n: int


@dataclass
class TableEvaluation:
    per_column: List[ColumnAccuracy]
    text_accuracy: float
    total_cells: int
    matched_cells: int
    row_count_reference: int
    row_count_predicted: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "per_column": [metric.__dict__ for metric in self.per_column],
            "text_accuracy": self.text_accuracy,
            "total_cells": self.total_cells,
            "matched_cells": self.matched_cells,
            "row_count_reference": self.row_count_reference,
            "row_count_predicted": self.row_count_predicted,
        }


def _load(path: str) -> pd.DataFrame:
    df = grid_to_dataframe(read_csv(path))
    # normalizar espacios
    return df.map(lambda x: (x or "").strip())


def _align(df_ref: pd.DataFrame, df_pred: pd.DataFrame) -> Tuple[np.ndarray, np.ndarray]:
    rows = max(df_ref.shape[0], df_pred.shape[0])
    cols = max(df_ref.shape[1], df_pred.shape[1])
    index, columns = range(rows), range(cols)
    ref = df_ref.reindex(index=index, columns=columns, fill_value="").fillna("")
    pred = df_pred.reindex(index=index, columns=columns, fill_value="").fillna("")
    return ref.to_numpy(dtype=object), pred.to_numpy(dtype=object)


def evaluate_tables(reference_csv: str, predicted_csv: str) -> TableEvaluation:
    """Cell-level text accuracy of a predicted CSV against a reference.

    Only non-empty reference cells count towards the denominator, so
    missing predicted cells are penalised and extra blank padding is not.
    """
    df_ref = _load(reference_csv)
    df_pred = _load(predicted_csv)
    ref, pred = _align(df_ref, df_pred)

    mask = ref != ""
    hits = (ref == pred) & mask

    total_cells = int(mask.sum())
    matches = int(hits.sum())
    text_accuracy = matches / total_cells if total_cells else 0.0

    per_column: List[ColumnAccuracy] = []
    for idx in range(ref.shape[1]):
        n = int(mask[:, idx].sum())
        if not n:
            continue
        matched = int(hits[:, idx].sum())
        per_column.append(ColumnAccuracy(column=idx, accuracy=matched / n, matched=matched, n=n))

    return TableEvaluation(
        per_column=per_column,
        text_accuracy=text_accuracy,
        total_cells=total_cells,
        matched_cells=matches,
        row_count_reference=int(df_ref.shape[0]),
        row_count_predicted=int(df_pred.shape[0]),
    )


def write_report(evaluation: TableEvaluation, output_path: str) -> None:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(["Metric", "Column", "Value", "N"])
        writer.writerow(["text_accuracy", "-", f"{evaluation.text_accuracy:.4f}", evaluation.total_cells])
        writer.writerow(["rows_reference", "-", evaluation.row_count_reference, "-"])
        writer.writerow(["rows_predicted", "-", evaluation.row_count_predicted, "-"])
        for metric in evaluation.per_column:
            writer.writerow(["column_accuracy", metric.column, f"{metric.accuracy:.4f}", metric.n])
