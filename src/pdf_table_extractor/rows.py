# src/pdf_table_extractor/rows.py
from __future__ import annotations
import logging
import math
from typing import Dict, Iterable, List

from .config import DEFAULT_Y_THRESHOLD
from .structures import MergedCell, TableRow

log = logging.getLogger(__name__)

def row_bucket(y: float, y_threshold: float = DEFAULT_Y_THRESHOLD) -> float:
    """Cuantiza `y` al múltiplo más cercano de `y_threshold` (mitades hacia arriba)."""
    return math.floor(y / y_threshold + 0.5) * y_threshold

def group_into_rows(cells: Iterable[MergedCell],
                    y_threshold: float = DEFAULT_Y_THRESHOLD
                    ) -> List[TableRow]:
    """Agrupa celdas en filas por cubeta de `y`.

    La `y` de cada fila es la clave de la cubeta, no un promedio. Las celdas
    se ordenan por `x` y las filas de arriba a abajo (clave descendente).

    Limitación conocida: con cubetas fijas, dos celdas a poco más de media
    cubeta de distancia pueden quedar en filas distintas aunque a la vista
    compartan renglón, y dos celdas a casi una cubeta pueden colisionar.
    """
    if y_threshold <= 0:
        raise ValueError(f"y_threshold debe ser > 0, recibido {y_threshold!r}")

    buckets: Dict[float, List[MergedCell]] = {}
    for cell in cells:
        buckets.setdefault(row_bucket(cell.y, y_threshold), []).append(cell)

    rows: List[TableRow] = []
    for key in sorted(buckets, reverse=True):
        ordered = sorted(buckets[key], key=lambda c: c.x)
        rows.append(TableRow(y=key, cells=tuple(ordered)))

    log.debug("%d filas construidas.", len(rows))
    return rows
