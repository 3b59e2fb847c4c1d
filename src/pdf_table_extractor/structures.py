from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import re

BBOX_RE = re.compile(r"bbox (\d+)\s+(\d+)\s+(\d+)\s+(\d+)")

# Filas de celdas de texto listas para serializar.
TabularGrid = List[List[str]]

def parse_bbox(title_attr: str) -> Optional[Tuple[int, int, int, int]]:
    if not title_attr:
        return None
    m = BBOX_RE.search(title_attr)
    if not m:
        return None
    x1, y1, x2, y2 = map(int, m.groups())
    return x1, y1, x2, y2

def within_bbox(bbox: Tuple[int,int,int,int], x1:int,y1:int,x2:int,y2:int) -> bool:
    X1, Y1, X2, Y2 = bbox
    return (x1 >= X1 and y1 >= Y1 and x2 <= X2 and y2 <= Y2)

@dataclass(frozen=True)
class PositionedFragment:
    """Un run de texto tal como lo reporta la capa de texto del documento.

    Coordenadas locales a la página con origen abajo-izquierda: `y` crece
    hacia arriba y es la línea base del run.
    """
    text: str
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

@dataclass(frozen=True)
class MergedCell:
    """Uno o más fragmentos fusionados en una celda lógica."""
    text: str
    x: float
    y: float
    width: float

    @classmethod
    def from_fragment(cls, fragment: PositionedFragment) -> "MergedCell":
        return cls(text=fragment.text, x=fragment.x, y=fragment.y, width=fragment.width)

    @property
    def right(self) -> float:
        return self.x + self.width

    def extend(self, fragment: PositionedFragment) -> "MergedCell":
        """Devuelve una celda nueva que llega hasta el borde derecho de `fragment`.

        El ancho es el borde derecho del fragmento menos `x`, no la suma de
        anchos, para cubrir los huecos internos y los solapes.
        """
        return MergedCell(
            text=self.text + fragment.text,
            x=self.x,
            y=self.y,
            width=fragment.right - self.x,
        )

@dataclass(frozen=True)
class TableRow:
    y: float
    cells: Tuple[MergedCell, ...]

    @property
    def texts(self) -> List[str]:
        return [c.text for c in self.cells]

@dataclass(frozen=True)
class ExtractedPage:
    page_number: int
    width: float
    height: float
    rows: Tuple[TableRow, ...]
