"""Adjacency hunt/target AI with parity-biased random search."""

from __future__ import annotations

import logging
import random
from enum import StrEnum

import numpy as np

from seabattle.ai.strategy import AIStrategy, is_unknown, unknown_cells
from seabattle.core.models import BOARD_SIZE, Coord, ShotResult, orthogonal_neighbors

logger = logging.getLogger(__name__)


class HuntMode(StrEnum):
    """Targeting memory mode."""

    RANDOM = "RANDOM"
    TARGETING = "TARGETING"


class HuntTargetAI(AIStrategy):
    """Hunt/target AI.

    Every hit queues its orthogonal neighbours; the queue is drained
    newest-first before any random probing. Random probing is restricted to
    the ``(row + col) % 2 == 0`` checkerboard while such cells remain, since
    every ship of length two or more covers at least one of them.
    """

    def __init__(self, rng: random.Random, size: int = BOARD_SIZE) -> None:
        self._rng = rng
        self._size = size
        self.mode = HuntMode.RANDOM
        self.pending: list[Coord] = []
        self.last_hit: Coord | None = None

    def choose_shot(self, view: np.ndarray) -> Coord | None:
        while self.pending:
            coord = self.pending.pop()
            if is_unknown(view, coord):
                return coord

        if self.mode is HuntMode.TARGETING and self.last_hit is not None:
            for cell in orthogonal_neighbors(self.last_hit, self._size):
                if is_unknown(view, cell):
                    return cell
            logger.debug("targeting_exhausted row=%d col=%d", self.last_hit.row, self.last_hit.col)
            self.mode = HuntMode.RANDOM

        candidates = self.random_candidates(view)
        if not candidates:
            return None
        return self._rng.choice(candidates)

    def notify_result(self, coord: Coord, result: ShotResult) -> None:
        if result is ShotResult.HIT:
            self.mode = HuntMode.TARGETING
            self.last_hit = coord
            self.pending.extend(orthogonal_neighbors(coord, self._size))
        elif result is ShotResult.SUNK:
            self.mode = HuntMode.RANDOM
            self.pending.clear()
            self.last_hit = None

    @staticmethod
    def random_candidates(view: np.ndarray) -> list[Coord]:
        """Unknown cells eligible for a random probe, parity cells first."""
        available = unknown_cells(view)
        parity = [cell for cell in available if (cell.row + cell.col) % 2 == 0]
        return parity or available
