# src/pdf_table_extractor/parser.py
from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple
from bs4 import BeautifulSoup
from .structures import PositionedFragment, parse_bbox, within_bbox

log = logging.getLogger(__name__)

def _load_soup(text: str) -> BeautifulSoup:
    """
    Intenta XML (lxml-xml) y, si no hay nodos HOCR, fallback a HTML (lxml).
    """
    soup_xml = BeautifulSoup(text, "lxml-xml")
    if soup_xml.find(class_=lambda c: c and "ocr_page" in c):
        return soup_xml
    return BeautifulSoup(text, "lxml")

def _page_fragments(page, page_height: int,
                    table_bbox: Optional[Tuple[int,int,int,int]] = None
                    ) -> List[PositionedFragment]:
    """
    Convierte las `ocrx_word` de una página en fragmentos.
    HOCR usa origen arriba-izquierda; la línea base se aproxima con y2.
    """
    fragments: List[PositionedFragment] = []
    for w in page.find_all(class_=lambda c: c and "ocrx_word" in c):
        bb = parse_bbox(w.get("title", ""))
        if not bb:
            continue
        x1, y1, x2, y2 = bb
        if table_bbox and not within_bbox(table_bbox, x1, y1, x2, y2):
            continue

        text = (w.get_text() or "").strip()
        if not text:
            continue

        fragments.append(PositionedFragment(
            text=text,
            x=float(x1),
            y=float(page_height - y2),
            width=float(x2 - x1),
            height=float(y2 - y1),
        ))
    return fragments

class HocrDocument:
    """Document handle sobre un archivo HOCR (una `ocr_page` por página)."""

    def __init__(self, hocr_path: str,
                 table_bbox: Optional[Tuple[int,int,int,int]] = None) -> None:
        with open(hocr_path, "r", encoding="utf-8") as f:
            raw = f.read()
        soup = _load_soup(raw)
        self.table_bbox = table_bbox
        self._pages = soup.find_all(class_=lambda c: c and "ocr_page" in c)
        log.debug("HOCR %s: %d páginas.", hocr_path, len(self._pages))

    def _page(self, page_index: int):
        if not 1 <= page_index <= len(self._pages):
            raise IndexError(f"página fuera de rango: {page_index}")
        return self._pages[page_index - 1]

    def page_count(self) -> int:
        return len(self._pages)

    def page_size(self, page_index: int) -> Tuple[float, float]:
        bb = parse_bbox(self._page(page_index).get("title", ""))
        if not bb:
            raise ValueError(f"ocr_page {page_index} sin bbox")
        x1, y1, x2, y2 = bb
        return float(x2 - x1), float(y2 - y1)

    def fragments(self, page_index: int) -> Sequence[PositionedFragment]:
        _, height = self.page_size(page_index)
        return _page_fragments(self._page(page_index), int(height), self.table_bbox)
