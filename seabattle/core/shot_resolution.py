"""Shot outcome evaluation (miss/hit/sunk/invalid)."""

from __future__ import annotations

import logging

from seabattle.core.board import BoardState
from seabattle.core.fleet import Fleet
from seabattle.core.models import CellState, Coord, ShotResult

logger = logging.getLogger(__name__)


def attack(board: BoardState, fleet: Fleet, target: Coord) -> ShotResult:
    """Resolve a shot against a board and its fleet.

    This is the only place battle state changes: the cell grid and the ship
    hit counters are updated together. Rejected shots return ``INVALID`` and
    touch nothing.
    """
    if not board.in_bounds(target) or board.was_shot(target):
        return ShotResult.INVALID
    state = board.state_at(target)

    if state is CellState.EMPTY:
        board.set_state(target, CellState.MISS)
        logger.debug("shot row=%d col=%d result=miss", target.row, target.col)
        return ShotResult.MISS

    owner = board.owner_at(target)
    if owner is None:
        raise RuntimeError(f"Occupied cell ({target.row}, {target.col}) has no owning ship.")
    ship = fleet.ships[owner]
    board.set_state(target, CellState.HIT)
    if not ship.record_hit():
        logger.debug("shot row=%d col=%d result=hit ship=%d", target.row, target.col, owner)
        return ShotResult.HIT

    for cell in ship.cells:
        board.set_state(cell, CellState.SUNK)
    logger.debug("shot row=%d col=%d result=sunk ship=%d", target.row, target.col, owner)
    return ShotResult.SUNK
