"""AI strategy interface and shared view helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from seabattle.core.models import CellView, Coord, ShotResult


class AIStrategy(ABC):
    """Targeting strategy contract.

    ``view`` is the opponent board as the attacker sees it: a square
    ``CellView`` grid that never contains ``OCCUPIED``.
    """

    @abstractmethod
    def choose_shot(self, view: np.ndarray) -> Coord | None:
        """Return next coordinate to fire, or None when nothing is left."""

    @abstractmethod
    def notify_result(self, coord: Coord, result: ShotResult) -> None:
        """Update strategy state with shot result."""


def is_unknown(view: np.ndarray, coord: Coord) -> bool:
    """Return whether the coordinate is on the board and not yet shot."""
    rows, cols = view.shape
    if not (0 <= coord.row < rows and 0 <= coord.col < cols):
        return False
    return int(view[coord.row, coord.col]) == int(CellView.UNKNOWN)


def unknown_cells(view: np.ndarray) -> list[Coord]:
    """All unshot cells in row-major order."""
    rows, cols = np.nonzero(view == int(CellView.UNKNOWN))
    return [Coord(int(row), int(col)) for row, col in zip(rows, cols)]
