# src/pdf_table_extractor/exporters.py
from __future__ import annotations
from pathlib import Path
from typing import List, Sequence, Union
import codecs
import csv
import io
import logging

import pandas as pd

from .cleaners import clean_cell_text
from .structures import ExtractedPage, TabularGrid

log = logging.getLogger(__name__)

ROW_SEPARATOR = "\r\n"

def page_marker(page_number: int) -> str:
    return f"--- Page {page_number} ---"

def to_tabular_grid(pages: Sequence[ExtractedPage]) -> TabularGrid:
    """
    Proyecta las páginas en una rejilla de textos.
    Con más de una página, cada página va precedida por una fila separadora.
    """
    grid: TabularGrid = []
    with_markers = len(pages) > 1
    for page in pages:
        if with_markers:
            grid.append([page_marker(page.page_number)])
        for row in page.rows:
            grid.append([clean_cell_text(c.text) for c in row.cells])
    return grid

# a mano: csv.writer citaría "" en una fila de una sola celda vacía y añadiría CRLF al final
def _escape_cell(cell: str, delimiter: str) -> str:
    if delimiter in cell or '"' in cell or "\n" in cell or "\r" in cell:
        return '"' + cell.replace('"', '""') + '"'
    return cell

def encode_delimited_text(grid: TabularGrid, delimiter: str = ",") -> bytes:
    """
    Codifica la rejilla estilo RFC 4180: comillas solo cuando hacen falta,
    filas unidas por CRLF, UTF-8 con BOM (Excel/Numbers lo usan para detectar la codificación).
    """
    if len(delimiter) != 1 or delimiter in '"\r\n':
        raise ValueError(f"Delimitador inválido: {delimiter!r}")
    text = ROW_SEPARATOR.join(
        delimiter.join(_escape_cell(cell, delimiter) for cell in row)
        for row in grid
    )
    return codecs.BOM_UTF8 + text.encode("utf-8")

def decode_delimited_text(data: Union[bytes, str], delimiter: str = ",") -> TabularGrid:
    """
    Inverso de `encode_delimited_text`. Un registro vacío intermedio se lee como `[""]`;
    una última fila vacía (`[""]` o `[]`) no deja rastro en el texto y se pierde.
    """
    text = data.decode("utf-8-sig") if isinstance(data, (bytes, bytearray)) else data.lstrip("\ufeff")
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    return [row if row else [""] for row in reader]

def write_csv(grid: TabularGrid, csv_path: Union[str, Path]) -> None:
    path = Path(csv_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_delimited_text(grid))
    log.info("CSV escrito en %s (%d filas).", path, len(grid))

def read_csv(csv_path: Union[str, Path]) -> TabularGrid:
    return decode_delimited_text(Path(csv_path).read_bytes())

def grid_to_dataframe(grid: TabularGrid) -> pd.DataFrame:
    """Rejilla rectangular: las filas cortas se rellenan con ''."""
    width = max((len(r) for r in grid), default=0)
    padded: List[List[str]] = [list(r) + [""] * (width - len(r)) for r in grid]
    return pd.DataFrame(padded, columns=range(width), dtype=str)
