"""Directional-probe AI: finish known hits, otherwise shoot at random."""

from __future__ import annotations

import random

import numpy as np

from seabattle.ai.strategy import AIStrategy, is_unknown, unknown_cells
from seabattle.core.models import CellView, Coord, ShotResult

# Right, left, down, up.
PROBE_STEPS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


class DirectionalProbeAI(AIStrategy):
    """Stateless prober that re-reads the view every turn."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def choose_shot(self, view: np.ndarray) -> Coord | None:
        rows, cols = np.nonzero(view == int(CellView.HIT))
        for row, col in zip(rows, cols):
            for dr, dc in PROBE_STEPS:
                cell = Coord(int(row) + dr, int(col) + dc)
                if is_unknown(view, cell):
                    return cell

        available = unknown_cells(view)
        if not available:
            return None
        return self._rng.choice(available)

    def notify_result(self, coord: Coord, result: ShotResult) -> None:
        _ = coord, result
