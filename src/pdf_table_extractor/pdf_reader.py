from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import pymupdf  # type: ignore

from .cleaners import is_blank
from .errors import DocumentOpenError
from .structures import PositionedFragment

log = logging.getLogger(__name__)


class PdfDocument:
    """Document handle backed by a PDF text layer read with PyMuPDF.

    Each non-blank span becomes one fragment. PyMuPDF reports the span
    origin (baseline) with a top-left origin, so `y` is flipped to the
    bottom-left convention used by the rest of the pipeline.
    """

    def __init__(self, source: Union[str, Path, bytes]) -> None:
        if isinstance(source, (bytes, bytearray)):
            self.name = "<bytes>"
        else:
            path = Path(source)
            if not path.exists():
                raise FileNotFoundError(str(path))
            self.name = str(path)
        try:
            if isinstance(source, (bytes, bytearray)):
                self._doc = pymupdf.open(stream=bytes(source), filetype="pdf")
            else:
                self._doc = pymupdf.open(self.name, filetype="pdf")
        except Exception as exc:
            raise DocumentOpenError(f"No se pudo abrir el PDF {self.name}: {exc}") from exc
        # un Document de PyMuPDF no admite acceso concurrente
        self._lock = threading.Lock()
        log.debug("PDF abierto: %s (%d páginas)", self.name, self._doc.page_count)

    def __enter__(self) -> "PdfDocument":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self._doc.close()

    def page_count(self) -> int:
        return self._doc.page_count

    def page_size(self, page_index: int) -> Tuple[float, float]:
        with self._lock:
            rect = self._doc.load_page(page_index - 1).rect
        return float(rect.width), float(rect.height)

    def fragments(self, page_index: int) -> Sequence[PositionedFragment]:
        with self._lock:
            page = self._doc.load_page(page_index - 1)
            height = float(page.rect.height)
            blocks = page.get_text("dict", flags=pymupdf.TEXTFLAGS_TEXT)["blocks"]

        result: List[PositionedFragment] = []
        for span in (s for b in blocks for l in b.get("lines", []) for s in l["spans"]):
            text = span["text"]
            if is_blank(text):
                continue
            x0, y0, x1, y1 = span["bbox"]
            ox, oy = span["origin"]
            result.append(
                PositionedFragment(
                    text=text,
                    x=float(ox),
                    y=height - float(oy),
                    width=float(x1 - x0),
                    height=float(y1 - y0),
                )
            )
        log.debug("Página %d: %d fragmentos.", page_index, len(result))
        return result

