from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .config import ExtractionConfig
from .document import DocumentHandle
from .errors import EmptyDocumentError, ExtractionCancelledError, PageExtractionError
from .exporters import to_tabular_grid, write_csv
from .lines import merge_adjacent_fragments
from .parser import HocrDocument
from .pdf_reader import PdfDocument
from .rows import group_into_rows
from .structures import ExtractedPage, TabularGrid

log = logging.getLogger(__name__)


def _read_page(document: DocumentHandle, page_number: int):
    try:
        fragments = list(document.fragments(page_number))
        width, height = document.page_size(page_number)
    except Exception as exc:
        raise PageExtractionError(page_number, str(exc)) from exc
    return fragments, width, height


def extract_page(
    document: DocumentHandle,
    page_number: int,
    config: Optional[ExtractionConfig] = None,
) -> ExtractedPage:
    """Fragmentos → celdas fusionadas → filas, para una sola página."""
    config = config or ExtractionConfig()
    fragments, width, height = _read_page(document, page_number)

    cells = merge_adjacent_fragments(
        fragments,
        x_threshold=config.x_threshold,
        same_row_tolerance=config.same_row_tolerance,
    )
    rows = group_into_rows(cells, y_threshold=config.y_threshold)
    log.debug(
        "Página %d: %d fragmentos, %d celdas, %d filas.",
        page_number, len(fragments), len(cells), len(rows),
    )
    return ExtractedPage(page_number=page_number, width=width, height=height, rows=tuple(rows))


def extract_pages(
    document: DocumentHandle,
    config: Optional[ExtractionConfig] = None,
    *,
    cancel_event: Optional[threading.Event] = None,
) -> List[ExtractedPage]:
    """
    Extrae todas las páginas en orden. Si una página falla, falla todo
    con `PageExtractionError`; nunca se devuelve una tabla parcial.
    """
    config = config or ExtractionConfig()
    total = document.page_count()
    if total <= 0:
        raise EmptyDocumentError("El documento no tiene páginas.")

    log.info("Extrayendo %d páginas (workers=%d).", total, config.workers)
    done = 0
    progress_lock = threading.Lock()

    def _run(page_number: int) -> ExtractedPage:
        nonlocal done
        if cancel_event is not None and cancel_event.is_set():
            raise ExtractionCancelledError(page_number)
        page = extract_page(document, page_number, config)
        if config.progress_callback is not None:
            with progress_lock:
                done += 1
                config.progress_callback(done, total)
        return page

    page_numbers = range(1, total + 1)
    if config.workers == 1:
        return [_run(n) for n in page_numbers]

    with ThreadPoolExecutor(max_workers=config.workers) as pool:
        futures = [pool.submit(_run, n) for n in page_numbers]
        try:
            # en orden de página: se reporta la primera página que falló
            return [f.result() for f in futures]
        except BaseException:
            for f in futures:
                f.cancel()
            raise


def _write_grid(document: DocumentHandle, csv_path: str, config: Optional[ExtractionConfig]) -> TabularGrid:
    try:
        pages = extract_pages(document, config)
    except EmptyDocumentError:
        log.warning("El documento no tiene páginas. Se generará un CSV vacío.")
        pages = []
    grid = to_tabular_grid(pages)
    write_csv(grid, csv_path)
    return grid


def pdf_to_csv(
    pdf_path: Union[str, Path],
    csv_path: str,
    config: Optional[ExtractionConfig] = None,
) -> TabularGrid:
    """Lee la capa de texto de un PDF y escribe la tabla reconstruida como CSV."""
    log.info("Leyendo PDF desde: %s", pdf_path)
    with PdfDocument(pdf_path) as document:
        return _write_grid(document, csv_path, config)


def hocr_to_csv(
    hocr_path: str,
    csv_path: str,
    config: Optional[ExtractionConfig] = None,
    table_bbox: Optional[Tuple[int, int, int, int]] = None,
) -> TabularGrid:
    log.info("Parseando HOCR desde: %s", hocr_path)
    document = HocrDocument(hocr_path, table_bbox=table_bbox)
    return _write_grid(document, csv_path, config)
