"""Umbrales ajustables de la reconstrucción de la tabla."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

DEFAULT_X_THRESHOLD = 12.0
DEFAULT_SAME_ROW_TOLERANCE = 5.0
DEFAULT_Y_THRESHOLD = 8.0


@dataclass
class ExtractionConfig:
    """Runtime configuration for page extraction.

    Attributes:
        x_threshold: Maximum horizontal gap (exclusive) between the right
            edge of a cell and the next fragment for them to be merged.
        same_row_tolerance: Vertical distance under which two fragments
            are considered to share a baseline while merging.
        y_threshold: Bucket size used to group merged cells into rows.
        workers: Number of threads used to process pages. 1 keeps the
            extraction sequential.
        progress_callback: Optional callable receiving
            (pages_done, total_pages) after each page.
    """

    x_threshold: float = DEFAULT_X_THRESHOLD
    same_row_tolerance: float = DEFAULT_SAME_ROW_TOLERANCE
    y_threshold: float = DEFAULT_Y_THRESHOLD
    workers: int = 1
    progress_callback: Optional[Callable[[int, int], None]] = field(
        default=None, compare=False
    )

    def __post_init__(self) -> None:
        if self.x_threshold < 0:
            raise ValueError(f"x_threshold debe ser >= 0, recibido {self.x_threshold!r}")
        if self.same_row_tolerance < 0:
            raise ValueError(
                f"same_row_tolerance debe ser >= 0, recibido {self.same_row_tolerance!r}"
            )
        if self.y_threshold <= 0:
            raise ValueError(f"y_threshold debe ser > 0, recibido {self.y_threshold!r}")
        if self.workers < 1:
            raise ValueError(f"workers debe ser >= 1, recibido {self.workers!r}")

