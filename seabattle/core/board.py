"""Board state representation and mutation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from seabattle.core.models import BOARD_SIZE, CellState, CellView, Coord

NO_SHIP = -1

_SHOT_STATES = (int(CellState.HIT), int(CellState.MISS), int(CellState.SUNK))


def _blank_cells(size: int) -> np.ndarray:
    return np.full((size, size), int(CellState.EMPTY), dtype=np.int8)


def _blank_owners(size: int) -> np.ndarray:
    return np.full((size, size), NO_SHIP, dtype=np.int16)


@dataclass(slots=True)
class BoardState:
    """Numpy-backed board state.

    ``cells`` holds a ``CellState`` per cell. ``owners`` holds the fleet
    index of the ship covering the cell, or ``NO_SHIP``.
    """

    size: int = BOARD_SIZE
    cells: np.ndarray = field(default_factory=lambda: _blank_cells(BOARD_SIZE))
    owners: np.ndarray = field(default_factory=lambda: _blank_owners(BOARD_SIZE))

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Board size must be positive.")
        if self.cells.shape != (self.size, self.size):
            self.cells = _blank_cells(self.size)
        if self.owners.shape != (self.size, self.size):
            self.owners = _blank_owners(self.size)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def state_at(self, coord: Coord) -> CellState:
        """Return the cell state; raises IndexError when out of bounds."""
        if not self.in_bounds(coord):
            raise IndexError(f"Cell ({coord.row}, {coord.col}) is outside the board.")
        return CellState(int(self.cells[coord.row, coord.col]))

    def owner_at(self, coord: Coord) -> int | None:
        """Return the fleet index of the ship on this cell, if any."""
        if not self.in_bounds(coord):
            raise IndexError(f"Cell ({coord.row}, {coord.col}) is outside the board.")
        owner = int(self.owners[coord.row, coord.col])
        return None if owner == NO_SHIP else owner

    def was_shot(self, coord: Coord) -> bool:
        """Return whether this cell was previously targeted."""
        return int(self.cells[coord.row, coord.col]) in _SHOT_STATES

    def set_state(self, coord: Coord, state: CellState) -> None:
        self.cells[coord.row, coord.col] = int(state)

    def set_owner(self, coord: Coord, ship_index: int) -> None:
        self.owners[coord.row, coord.col] = ship_index

    def occupied_count(self) -> int:
        """Number of cells that still hold an untouched ship segment."""
        return int(np.count_nonzero(self.cells == int(CellState.OCCUPIED)))

    def snapshot(self, *, reveal_ships: bool) -> np.ndarray:
        """Return a ``CellView`` grid copy for rendering or AI input.

        Unshot cells read as ``UNKNOWN``; ship segments read as ``OCCUPIED``
        only when ``reveal_ships`` is set (the owner's own view).
        """
        view = np.full((self.size, self.size), int(CellView.UNKNOWN), dtype=np.int8)
        view[self.cells == int(CellState.HIT)] = int(CellView.HIT)
        view[self.cells == int(CellState.MISS)] = int(CellView.MISS)
        view[self.cells == int(CellState.SUNK)] = int(CellView.SUNK)
        if reveal_ships:
            view[self.cells == int(CellState.OCCUPIED)] = int(CellView.OCCUPIED)
        return view
