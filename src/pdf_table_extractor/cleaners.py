# src/pdf_table_extractor/cleaners.py
from __future__ import annotations
import logging
from typing import Iterable, List

from .structures import PositionedFragment

log = logging.getLogger(__name__)

def is_blank(text: str) -> bool:
    return not (text or "").strip()

def accept_fragments(fragments: Iterable[PositionedFragment]) -> List[PositionedFragment]:
    """Descarta los fragmentos vacíos o que solo contienen espacios."""
    accepted: List[PositionedFragment] = []
    skipped = 0
    for frag in fragments:
        if is_blank(frag.text):
            skipped += 1
            continue
        accepted.append(frag)
    if skipped:
        log.debug("Se descartaron %d fragmentos en blanco.", skipped)
    return accepted

def clean_cell_text(text: str) -> str:
    """Limpia el texto de una celda individual."""
    return text.strip()
