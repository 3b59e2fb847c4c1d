"""Contrato del documento que consume el ensamblador de páginas."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from .structures import PositionedFragment


class DocumentHandle(Protocol):
    """Anything that can report pages of positioned text fragments.

    Page indices are 1-based.
    """

    def page_count(self) -> int: ...

    def fragments(self, page_index: int) -> Sequence[PositionedFragment]: ...

    def page_size(self, page_index: int) -> Tuple[float, float]: ...


class InMemoryDocument:
    """Document handle over fragments that were already extracted."""

    def __init__(
        self,
        pages: Sequence[Sequence[PositionedFragment]],
        sizes: Optional[Sequence[Tuple[float, float]]] = None,
    ) -> None:
        if sizes is not None and len(sizes) != len(pages):
            raise ValueError("sizes debe tener una entrada por página")
        self._pages = [tuple(p) for p in pages]
        self._sizes = list(sizes) if sizes is not None else [(0.0, 0.0)] * len(pages)

    def _check(self, page_index: int) -> int:
        if not 1 <= page_index <= len(self._pages):
            raise IndexError(f"página fuera de rango: {page_index}")
        return page_index - 1

    def page_count(self) -> int:
        return len(self._pages)

    def fragments(self, page_index: int) -> Sequence[PositionedFragment]:
        return self._pages[self._check(page_index)]

    def page_size(self, page_index: int) -> Tuple[float, float]:
        return self._sizes[self._check(page_index)]

