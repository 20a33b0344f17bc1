"""Placement legality checks and the placement writer."""

from __future__ import annotations

from seabattle.core.board import BoardState
from seabattle.core.errors import InvalidPlacement
from seabattle.core.fleet import Fleet, Ship
from seabattle.core.models import (
    CellState,
    Coord,
    Orientation,
    ShipPlacement,
    cells_for_placement,
    moore_neighborhood,
)


def can_place(board: BoardState, origin: Coord, length: int, orientation: Orientation) -> bool:
    """Return whether a ship fits in bounds without touching another ship.

    Touching includes diagonal contact: the whole 8-neighbourhood of the
    footprint must be free of ``OCCUPIED`` cells.
    """
    if length < 1 or length > board.size:
        return False
    cells = cells_for_placement(ShipPlacement(length, origin, orientation))
    if not all(board.in_bounds(cell) for cell in cells):
        return False
    for cell in moore_neighborhood(cells, board.size):
        if board.state_at(cell) is CellState.OCCUPIED:
            return False
    return True


def place(
    board: BoardState,
    fleet: Fleet,
    origin: Coord,
    length: int,
    orientation: Orientation,
    name: str = "",
) -> Ship:
    """Place a ship on the board and register it with the fleet."""
    if not can_place(board, origin, length, orientation):
        raise InvalidPlacement(
            f"Cannot place a {length}-cell ship at ({origin.row}, {origin.col}) {orientation.value.lower()}."
        )
    cells = cells_for_placement(ShipPlacement(length, origin, orientation))
    ship = Ship(length=length, cells=tuple(cells), name=name)
    index = fleet.add(ship)
    for cell in cells:
        board.set_state(cell, CellState.OCCUPIED)
        board.set_owner(cell, index)
    return ship
