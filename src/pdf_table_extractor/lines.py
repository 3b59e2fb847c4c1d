from __future__ import annotations
import logging
from functools import cmp_to_key
from typing import Iterable, List, Optional

from .cleaners import accept_fragments
from .config import DEFAULT_SAME_ROW_TOLERANCE, DEFAULT_X_THRESHOLD
from .structures import MergedCell, PositionedFragment

log = logging.getLogger(__name__)

def _canonical_key(frag: PositionedFragment):
    return (-frag.y, frag.x, frag.text, frag.width, frag.height)

def sort_fragments(fragments: Iterable[PositionedFragment],
                   same_row_tolerance: float = DEFAULT_SAME_ROW_TOLERANCE
                   ) -> List[PositionedFragment]:
    """Orden de lectura: de arriba a abajo y, dentro de la tolerancia, de izquierda a derecha.

    La comparación con tolerancia no es transitiva, así que primero se fija un
    orden canónico total; el resultado no depende del orden de emisión.
    """
    def _compare(a: PositionedFragment, b: PositionedFragment) -> int:
        dy = b.y - a.y
        if abs(dy) > same_row_tolerance:
            return 1 if dy > 0 else -1
        dx = a.x - b.x
        if dx:
            return 1 if dx > 0 else -1
        return 0

    canonical = sorted(fragments, key=_canonical_key)
    return sorted(canonical, key=cmp_to_key(_compare))

def merge_adjacent_fragments(fragments: Iterable[PositionedFragment],
                             x_threshold: float = DEFAULT_X_THRESHOLD,
                             same_row_tolerance: float = DEFAULT_SAME_ROW_TOLERANCE
                             ) -> List[MergedCell]:
    """Merge horizontally adjacent fragments on the same baseline into cells.

    A fragment joins the current cell when its baseline is within
    `same_row_tolerance` of the cell and the gap from the cell's right edge
    is strictly below `x_threshold`. Text is concatenated as-is.
    """
    ordered = sort_fragments(accept_fragments(fragments), same_row_tolerance)
    if not ordered:
        return []

    merged: List[MergedCell] = []
    current: Optional[MergedCell] = None

    for frag in ordered:
        if current is None:
            current = MergedCell.from_fragment(frag)
            continue

        same_row = abs(current.y - frag.y) < same_row_tolerance
        adjacent = frag.x - current.right < x_threshold

        if same_row and adjacent:
            current = current.extend(frag)
        else:
            merged.append(current)
            current = MergedCell.from_fragment(frag)

    if current is not None:
        merged.append(current)

    log.debug("%d fragmentos fusionados en %d celdas.", len(ordered), len(merged))
    return merged
